from typing import List

from .base import BaseRepository
from ..models.prontuario import ProntuarioMedico, ExameCliente


class ProntuarioRepository(BaseRepository[ProntuarioMedico]):
    model = ProntuarioMedico

    def list_by_cliente_id(self, cliente_id: int) -> List[ProntuarioMedico]:
        return (
            self.db.query(ProntuarioMedico)
            .filter(ProntuarioMedico.cliente_id == cliente_id)
            .order_by(ProntuarioMedico.data, ProntuarioMedico.id)
            .all()
        )


class ExameClienteRepository(BaseRepository[ExameCliente]):
    model = ExameCliente

    def list_by_prontuario_id(self, prontuario_id: int) -> List[ExameCliente]:
        return (
            self.db.query(ExameCliente)
            .filter(ExameCliente.prontuario_medico_id == prontuario_id)
            .order_by(ExameCliente.id)
            .all()
        )
