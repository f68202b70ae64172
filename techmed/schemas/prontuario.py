from pydantic import Field
from datetime import date
from typing import List, Optional

from .base import SchemaBase


class ExameClienteResponse(SchemaBase):
    id: int
    prontuario_medico_id: int
    exame: str


class ProntuarioCreate(SchemaBase):
    cliente_id: int
    profissional_id: int
    data: date
    descricao: Optional[str] = None
    exames: List[str] = Field(default_factory=list)


class ProntuarioResponse(SchemaBase):
    id: int
    cliente_id: int
    profissional_id: int
    data: date
    descricao: Optional[str] = None
    exames: List[ExameClienteResponse] = Field(default_factory=list)
