from datetime import date, time
from typing import List, Optional

from .base import BaseRepository
from ..models.agenda import Agenda, StatusAgenda
from ..models.cliente import Cliente
from ..models.clinica import Clinica
from ..models.profissional import Profissional, Especialidade


class AgendaRepository(BaseRepository[Agenda]):
    model = Agenda

    def search_detalhada(
        self,
        clinica_id: int,
        profissional_id: Optional[int] = None,
        status_agenda: Optional[StatusAgenda] = None,
        data: Optional[date] = None,
        hora: Optional[time] = None,
        nome_profissional: Optional[str] = None,
        nome_especialidade: Optional[str] = None,
    ) -> List[tuple]:
        """Schedule rows of one clinic joined with their names.

        Every filter left as None is ignored. Rows come back in insertion
        (id) order as ``(Agenda, Profissional, Clinica, Especialidade | None,
        Cliente | None)`` tuples.
        """
        query = (
            self.db.query(Agenda, Profissional, Clinica, Especialidade, Cliente)
            .join(Profissional, Agenda.profissional_id == Profissional.id)
            .join(Clinica, Agenda.clinica_id == Clinica.id)
            .outerjoin(Especialidade, Agenda.especialidade_id == Especialidade.id)
            .outerjoin(Cliente, Agenda.cliente_id == Cliente.id)
            .filter(Agenda.clinica_id == clinica_id)
        )

        if profissional_id is not None:
            query = query.filter(Agenda.profissional_id == profissional_id)
        if status_agenda is not None:
            query = query.filter(Agenda.status_agenda == status_agenda)
        if data is not None:
            query = query.filter(Agenda.data == data)
        if hora is not None:
            query = query.filter(Agenda.hora == hora)
        if nome_profissional:
            nome_completo = Profissional.nome + " " + Profissional.sobrenome
            query = query.filter(nome_completo.icontains(nome_profissional, autoescape=True))
        if nome_especialidade:
            query = query.filter(Especialidade.nome.icontains(nome_especialidade, autoescape=True))

        return query.order_by(Agenda.id).all()
