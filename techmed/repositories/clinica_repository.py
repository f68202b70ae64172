from typing import List, Optional

from .base import BaseRepository
from ..models.clinica import Clinica


class ClinicaRepository(BaseRepository[Clinica]):
    model = Clinica

    def get_by_cnpj(self, cnpj: str) -> Optional[Clinica]:
        return self.db.query(Clinica).filter(Clinica.cnpj == cnpj).first()

    def list_by_ativo(self, ativo: bool = True) -> List[Clinica]:
        return (
            self.db.query(Clinica)
            .filter(Clinica.ativo == ativo)
            .order_by(Clinica.id)
            .all()
        )
