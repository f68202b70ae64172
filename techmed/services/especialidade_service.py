from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.database import transaction
from ..core.exceptions import NaoEncontradoError, ValidacaoError
from ..models.profissional import Especialidade, EspecialidadeProfissional
from ..repositories.profissional_repository import (
    EspecialidadeProfissionalRepository, EspecialidadeRepository, ProfissionalRepository
)
from ..schemas.especialidade import (
    EspecialidadeCreate, EspecialidadeProfissionalCreate,
    EspecialidadeProfissionalResponse, EspecialidadeResponse
)

logger = logging.getLogger(__name__)


class EspecialidadeService:
    def __init__(self, db: Session):
        self.db = db
        self.especialidades = EspecialidadeRepository(db)

    def cadastrar_especialidade(self, dados: EspecialidadeCreate) -> EspecialidadeResponse:
        if self.especialidades.get_by_nome(dados.nome):
            raise ValidacaoError(f"Especialidade já cadastrada: {dados.nome}")

        with transaction(self.db):
            especialidade = self.especialidades.save(Especialidade(nome=dados.nome))

        return EspecialidadeResponse.model_validate(especialidade)

    def listar_especialidades(self) -> List[EspecialidadeResponse]:
        return [EspecialidadeResponse.model_validate(e) for e in self.especialidades.get_all()]


class EspecialidadeProfissionalService:
    def __init__(self, db: Session):
        self.db = db
        self.profissionais = ProfissionalRepository(db)
        self.especialidades = EspecialidadeRepository(db)
        self.vinculos = EspecialidadeProfissionalRepository(db)

    def buscar_especialidades_por_profissional_id(
        self, profissional_id: int
    ) -> List[EspecialidadeProfissionalResponse]:
        """Specialties of a professional; an empty list when there are none."""
        return [
            EspecialidadeProfissionalResponse.model_validate(vinculo)
            for vinculo in self.vinculos.list_by_profissional_id(profissional_id)
        ]

    def vincular_especialidade(
        self, dados: EspecialidadeProfissionalCreate
    ) -> EspecialidadeProfissionalResponse:
        if not self.profissionais.get_by_id(dados.profissional_id):
            raise NaoEncontradoError(
                f"Profissional não encontrado com o ID: {dados.profissional_id}"
            )
        if not self.especialidades.get_by_id(dados.especialidade_id):
            raise NaoEncontradoError(
                f"Especialidade não encontrada com o ID: {dados.especialidade_id}"
            )
        if self.vinculos.get_by_profissional_and_especialidade(
            dados.profissional_id, dados.especialidade_id
        ):
            raise ValidacaoError("Especialidade já vinculada ao profissional")

        with transaction(self.db):
            vinculo = self.vinculos.save(
                EspecialidadeProfissional(
                    profissional_id=dados.profissional_id,
                    especialidade_id=dados.especialidade_id,
                )
            )

        self.db.refresh(vinculo)
        logger.info(
            f"Especialidade {dados.especialidade_id} vinculada ao profissional {dados.profissional_id}"
        )
        return EspecialidadeProfissionalResponse.model_validate(vinculo)
