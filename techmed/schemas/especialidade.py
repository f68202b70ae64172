from pydantic import Field
from typing import Optional

from .base import SchemaBase


class EspecialidadeCreate(SchemaBase):
    nome: str = Field(..., min_length=1, max_length=100)


class EspecialidadeResponse(EspecialidadeCreate):
    id: int


class EspecialidadeProfissionalCreate(SchemaBase):
    profissional_id: int
    especialidade_id: int


class EspecialidadeProfissionalResponse(EspecialidadeProfissionalCreate):
    id: int
    nome_especialidade: Optional[str] = None
