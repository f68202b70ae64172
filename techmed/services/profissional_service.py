from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.database import transaction
from ..core.exceptions import (
    LOGIN_OU_SENHA_INVALIDOS, CredenciaisInvalidasError, NaoEncontradoError,
    PersistenciaError, ValidacaoError
)
from ..core.security import verify_password
from ..repositories.profissional_repository import ProfissionalRepository
from ..schemas.base import LoginSenha
from ..schemas.profissional import ProfissionalCreate, ProfissionalResponse
from .mappers import login_de, profissional_from_schema

logger = logging.getLogger(__name__)


class ProfissionalService:
    def __init__(self, db: Session):
        self.db = db
        self.profissionais = ProfissionalRepository(db)

    def cadastrar_profissional(self, dados: ProfissionalCreate) -> ProfissionalResponse:
        """Register a new professional, active from the start."""
        login = login_de(dados)
        if self.profissionais.get_by_cpf(dados.cpf):
            raise ValidacaoError(f"CPF já cadastrado: {dados.cpf}")
        if self.profissionais.get_by_login(login):
            raise ValidacaoError(f"Login já cadastrado: {login}")

        try:
            with transaction(self.db):
                profissional = self.profissionais.save(profissional_from_schema(dados))
        except SQLAlchemyError as exc:
            logger.exception(f"Erro ao cadastrar profissional com CPF {dados.cpf}: {exc}")
            raise PersistenciaError("Erro ao cadastrar profissional") from exc

        self.db.refresh(profissional)
        logger.info(f"Profissional {profissional.id} cadastrado")
        return ProfissionalResponse.model_validate(profissional)

    def autenticar_profissional(self, login_senha: LoginSenha) -> ProfissionalResponse:
        """Authenticate by login and password; inactive professionals are refused."""
        profissional = self.profissionais.get_by_login(login_senha.login)

        if not profissional or not verify_password(login_senha.senha, profissional.senha):
            logger.warning(f"Falha de autenticação para o login {login_senha.login}")
            raise CredenciaisInvalidasError(LOGIN_OU_SENHA_INVALIDOS)

        if not profissional.ativo:
            raise CredenciaisInvalidasError("Profissional inativo")

        return ProfissionalResponse.model_validate(profissional)

    def contar_profissionais(self) -> int:
        return self.profissionais.count()

    def atualizar_status_profissional(self, profissional_id: int) -> None:
        """Flip the active flag. Calling it twice restores the original state."""
        profissional = self.profissionais.get_by_id(profissional_id)
        if not profissional:
            raise NaoEncontradoError(f"Profissional não encontrado com o ID: {profissional_id}")

        with transaction(self.db):
            profissional.ativo = not profissional.ativo
            self.profissionais.save(profissional)

        logger.info(
            f"Profissional {profissional_id} {'ativado' if profissional.ativo else 'inativado'}"
        )

    def listar_profissionais_ativos(self) -> List[ProfissionalResponse]:
        return [
            ProfissionalResponse.model_validate(profissional)
            for profissional in self.profissionais.list_by_ativo(True)
        ]
