from typing import List, Optional

from .base import BaseRepository
from ..models.profissional import Profissional, Especialidade, EspecialidadeProfissional


class ProfissionalRepository(BaseRepository[Profissional]):
    model = Profissional

    def get_by_login(self, login: str) -> Optional[Profissional]:
        return self.db.query(Profissional).filter(Profissional.login == login).first()

    def get_by_cpf(self, cpf: str) -> Optional[Profissional]:
        return self.db.query(Profissional).filter(Profissional.cpf == cpf).first()

    def list_by_ativo(self, ativo: bool = True) -> List[Profissional]:
        return (
            self.db.query(Profissional)
            .filter(Profissional.ativo == ativo)
            .order_by(Profissional.id)
            .all()
        )


class EspecialidadeRepository(BaseRepository[Especialidade]):
    model = Especialidade

    def get_by_nome(self, nome: str) -> Optional[Especialidade]:
        return self.db.query(Especialidade).filter(Especialidade.nome == nome).first()


class EspecialidadeProfissionalRepository(BaseRepository[EspecialidadeProfissional]):
    model = EspecialidadeProfissional

    def list_by_profissional_id(self, profissional_id: int) -> List[EspecialidadeProfissional]:
        return (
            self.db.query(EspecialidadeProfissional)
            .filter(EspecialidadeProfissional.profissional_id == profissional_id)
            .order_by(EspecialidadeProfissional.id)
            .all()
        )

    def get_by_profissional_and_especialidade(
        self, profissional_id: int, especialidade_id: int
    ) -> Optional[EspecialidadeProfissional]:
        return (
            self.db.query(EspecialidadeProfissional)
            .filter_by(profissional_id=profissional_id, especialidade_id=especialidade_id)
            .first()
        )
