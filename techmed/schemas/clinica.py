from pydantic import Field
from typing import Optional

from .base import SchemaBase


class ClinicaCreate(SchemaBase):
    nome: str = Field(..., min_length=1, max_length=150)
    cnpj: str = Field(..., min_length=1, max_length=18)
    telefone: Optional[str] = None


class ClinicaResponse(ClinicaCreate):
    id: int
    ativo: bool
