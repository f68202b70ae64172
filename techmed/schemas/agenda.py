from datetime import date, time
from typing import Optional

from .base import SchemaBase
from ..models.agenda import StatusAgenda


class AgendaCreate(SchemaBase):
    profissional_id: int
    clinica_id: int
    especialidade_id: Optional[int] = None
    cliente_id: Optional[int] = None
    data: date
    hora: time
    status_agenda: Optional[StatusAgenda] = None


class AgendaResponse(SchemaBase):
    id: int
    profissional_id: int
    clinica_id: int
    especialidade_id: Optional[int] = None
    cliente_id: Optional[int] = None
    data: date
    hora: time
    status_agenda: StatusAgenda


class AgendaDetalhada(SchemaBase):
    id: int
    data: date
    hora: time
    status_agenda: StatusAgenda
    profissional_id: int
    nome_profissional: str
    clinica_id: int
    nome_clinica: str
    especialidade_id: Optional[int] = None
    nome_especialidade: Optional[str] = None
    cliente_id: Optional[int] = None
    nome_cliente: Optional[str] = None
