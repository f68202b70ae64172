from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.database import transaction
from ..core.exceptions import NaoEncontradoError
from ..models.prontuario import ExameCliente, ProntuarioMedico
from ..repositories.cliente_repository import ClienteRepository
from ..repositories.profissional_repository import ProfissionalRepository
from ..repositories.prontuario_repository import ExameClienteRepository, ProntuarioRepository
from ..schemas.prontuario import ExameClienteResponse, ProntuarioCreate, ProntuarioResponse

logger = logging.getLogger(__name__)


class ProntuarioService:
    def __init__(self, db: Session):
        self.db = db
        self.prontuarios = ProntuarioRepository(db)
        self.exames = ExameClienteRepository(db)
        self.clientes = ClienteRepository(db)
        self.profissionais = ProfissionalRepository(db)

    def cadastrar_prontuario(self, dados: ProntuarioCreate) -> ProntuarioResponse:
        if not self.clientes.get_by_id(dados.cliente_id):
            raise NaoEncontradoError(f"Cliente não encontrado com o ID: {dados.cliente_id}")
        if not self.profissionais.get_by_id(dados.profissional_id):
            raise NaoEncontradoError(
                f"Profissional não encontrado com o ID: {dados.profissional_id}"
            )

        with transaction(self.db):
            prontuario = ProntuarioMedico(
                cliente_id=dados.cliente_id,
                profissional_id=dados.profissional_id,
                data=dados.data,
                descricao=dados.descricao,
                exames=[ExameCliente(exame=exame) for exame in dados.exames],
            )
            self.prontuarios.save(prontuario)

        self.db.refresh(prontuario)
        logger.info(f"Prontuário {prontuario.id} registrado para o cliente {dados.cliente_id}")
        return ProntuarioResponse.model_validate(prontuario)

    def listar_prontuarios_por_cliente(self, cliente_id: int) -> List[ProntuarioResponse]:
        return [
            ProntuarioResponse.model_validate(prontuario)
            for prontuario in self.prontuarios.list_by_cliente_id(cliente_id)
        ]

    def listar_exames_por_prontuario(self, prontuario_id: int) -> List[ExameClienteResponse]:
        if not self.prontuarios.get_by_id(prontuario_id):
            raise NaoEncontradoError(f"Prontuário não encontrado com o ID: {prontuario_id}")
        return [
            ExameClienteResponse.model_validate(exame)
            for exame in self.exames.list_by_prontuario_id(prontuario_id)
        ]
