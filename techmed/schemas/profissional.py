from pydantic import EmailStr, Field
from typing import Optional

from .base import SchemaBase, EnderecoBase, EnderecoResponse


class ProfissionalBase(SchemaBase):
    nome: str = Field(..., min_length=1, max_length=100)
    sobrenome: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    cpf: str = Field(..., min_length=1, max_length=14)
    crm: Optional[str] = None
    celular: Optional[str] = None


class ProfissionalCreate(ProfissionalBase):
    login: Optional[str] = None
    senha: str = Field(..., min_length=1)
    endereco: Optional[EnderecoBase] = None


class ProfissionalResponse(ProfissionalBase):
    id: int
    login: str
    ativo: bool
    endereco: Optional[EnderecoResponse] = None
