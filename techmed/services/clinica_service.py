from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.database import transaction
from ..core.exceptions import NaoEncontradoError, ValidacaoError
from ..models.clinica import Clinica
from ..repositories.clinica_repository import ClinicaRepository
from ..schemas.clinica import ClinicaCreate, ClinicaResponse

logger = logging.getLogger(__name__)


class ClinicaService:
    def __init__(self, db: Session):
        self.db = db
        self.clinicas = ClinicaRepository(db)

    def cadastrar_clinica(self, dados: ClinicaCreate) -> ClinicaResponse:
        if self.clinicas.get_by_cnpj(dados.cnpj):
            raise ValidacaoError(f"CNPJ já cadastrado: {dados.cnpj}")

        with transaction(self.db):
            clinica = self.clinicas.save(Clinica(**dados.model_dump(), ativo=True))

        logger.info(f"Clínica {clinica.id} cadastrada")
        return ClinicaResponse.model_validate(clinica)

    def listar_todas_clinicas(self) -> List[ClinicaResponse]:
        return [ClinicaResponse.model_validate(c) for c in self.clinicas.get_all()]

    def contar_clinicas(self) -> int:
        return self.clinicas.count()

    def atualizar_status_clinica(self, clinica_id: int) -> None:
        clinica = self.clinicas.get_by_id(clinica_id)
        if not clinica:
            raise NaoEncontradoError(f"Clínica não encontrada com o ID: {clinica_id}")

        with transaction(self.db):
            clinica.ativo = not clinica.ativo
            self.clinicas.save(clinica)

        logger.info(f"Clínica {clinica_id} {'ativada' if clinica.ativo else 'inativada'}")

    def listar_clinicas_ativas(self) -> List[ClinicaResponse]:
        return [ClinicaResponse.model_validate(c) for c in self.clinicas.list_by_ativo(True)]
