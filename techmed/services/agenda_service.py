from datetime import date, time
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..core.database import transaction
from ..core.exceptions import NaoEncontradoError
from ..models.agenda import StatusAgenda
from ..repositories.agenda_repository import AgendaRepository
from ..repositories.cliente_repository import ClienteRepository
from ..repositories.clinica_repository import ClinicaRepository
from ..repositories.profissional_repository import EspecialidadeRepository, ProfissionalRepository
from ..schemas.agenda import AgendaCreate, AgendaDetalhada, AgendaResponse
from .mappers import agenda_detalhada_from_row, agenda_from_schema

logger = logging.getLogger(__name__)


class AgendaService:
    def __init__(self, db: Session):
        self.db = db
        self.agendas = AgendaRepository(db)
        self.profissionais = ProfissionalRepository(db)
        self.clinicas = ClinicaRepository(db)
        self.especialidades = EspecialidadeRepository(db)
        self.clientes = ClienteRepository(db)

    def cadastrar_agenda(self, dados: AgendaCreate) -> AgendaResponse:
        """Open a schedule slot. Referenced records must already exist."""
        if not self.profissionais.get_by_id(dados.profissional_id):
            raise NaoEncontradoError(
                f"Profissional não encontrado com o ID: {dados.profissional_id}"
            )
        if not self.clinicas.get_by_id(dados.clinica_id):
            raise NaoEncontradoError(f"Clínica não encontrada com o ID: {dados.clinica_id}")
        if dados.especialidade_id is not None and not self.especialidades.get_by_id(dados.especialidade_id):
            raise NaoEncontradoError(
                f"Especialidade não encontrada com o ID: {dados.especialidade_id}"
            )
        if dados.cliente_id is not None and not self.clientes.get_by_id(dados.cliente_id):
            raise NaoEncontradoError(f"Cliente não encontrado com o ID: {dados.cliente_id}")

        with transaction(self.db):
            agenda = self.agendas.save(agenda_from_schema(dados))

        logger.info(f"Agenda {agenda.id} criada na clínica {dados.clinica_id}")
        return AgendaResponse.model_validate(agenda)

    def buscar_agenda_detalhada(
        self,
        clinica_id: int,
        profissional_id: Optional[int] = None,
        status_agenda: Optional[StatusAgenda] = None,
        data: Optional[date] = None,
        hora: Optional[time] = None,
        nome_profissional: Optional[str] = None,
        nome_especialidade: Optional[str] = None,
    ) -> List[AgendaDetalhada]:
        """Schedule of a clinic narrowed by the optional filters (AND), in id order."""
        rows = self.agendas.search_detalhada(
            clinica_id,
            profissional_id=profissional_id,
            status_agenda=status_agenda,
            data=data,
            hora=hora,
            nome_profissional=nome_profissional,
            nome_especialidade=nome_especialidade,
        )
        return [agenda_detalhada_from_row(row) for row in rows]
