from pydantic import EmailStr, Field
from datetime import date
from typing import Optional

from .base import SchemaBase, EnderecoBase, EnderecoResponse


class ClienteBase(SchemaBase):
    nome: str = Field(..., min_length=1, max_length=100)
    sobrenome: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    cpf: str = Field(..., min_length=1, max_length=14)
    celular: Optional[str] = None
    data_nascimento: Optional[date] = None


class ClienteCreate(ClienteBase):
    # Falls back to the email when omitted
    login: Optional[str] = None
    senha: str = Field(..., min_length=1)
    endereco: EnderecoBase


class ClienteUpdate(ClienteCreate):
    pass


class ClienteResponse(ClienteBase):
    id: int
    login: str
    idade: Optional[int] = None
    endereco: Optional[EnderecoResponse] = None
