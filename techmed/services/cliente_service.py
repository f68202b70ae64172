from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
import logging

from ..core.database import transaction
from ..core.exceptions import (
    LOGIN_OU_SENHA_INVALIDOS, CredenciaisInvalidasError, NaoEncontradoError,
    PersistenciaError, ValidacaoError
)
from ..core.security import verify_password
from ..models.cliente import Cliente
from ..repositories.cliente_repository import ClienteRepository
from ..schemas.base import LoginSenha
from ..schemas.cliente import ClienteCreate, ClienteResponse, ClienteUpdate
from .mappers import (
    aplicar_dados_cliente, cliente_from_schema, endereco_cliente_from_schema, login_de
)

logger = logging.getLogger(__name__)


class ClienteService:
    def __init__(self, db: Session):
        self.db = db
        self.clientes = ClienteRepository(db)

    def cadastrar_cliente(self, dados: ClienteCreate) -> ClienteResponse:
        """Register a client and its address in a single transaction."""
        self._verificar_unicidade(dados.cpf, login_de(dados))

        try:
            with transaction(self.db):
                cliente = cliente_from_schema(dados)
                cliente.endereco = endereco_cliente_from_schema(dados.endereco)
                self.clientes.save(cliente)
        except SQLAlchemyError as exc:
            logger.exception(f"Erro ao cadastrar cliente com CPF {dados.cpf}: {exc}")
            raise PersistenciaError("Erro ao cadastrar cliente") from exc

        self.db.refresh(cliente)
        logger.info(f"Cliente {cliente.id} cadastrado")
        return ClienteResponse.model_validate(cliente)

    def buscar_cliente_por_cpf(self, cpf: str) -> ClienteResponse:
        cliente = self.clientes.get_by_cpf(cpf)
        if not cliente:
            raise NaoEncontradoError(f"Cliente não encontrado com o CPF: {cpf}")
        return ClienteResponse.model_validate(cliente)

    def autenticar_cliente(self, login_senha: LoginSenha) -> ClienteResponse:
        """Authenticate by login and password.

        An unknown login and a wrong password raise the very same error.
        """
        cliente = self.clientes.get_by_login(login_senha.login)

        if not cliente or not verify_password(login_senha.senha, cliente.senha):
            logger.warning(f"Falha de autenticação para o login {login_senha.login}")
            raise CredenciaisInvalidasError(LOGIN_OU_SENHA_INVALIDOS)

        return ClienteResponse.model_validate(cliente)

    def contar_clientes(self) -> int:
        return self.clientes.count()

    def atualizar_cliente(self, cliente_id: int, dados: ClienteUpdate) -> ClienteResponse:
        """Overwrite a client and replace its address with a brand new one."""
        cliente = self.clientes.get_by_id(cliente_id)
        if not cliente:
            raise NaoEncontradoError(f"Cliente não encontrado com o ID: {cliente_id}")

        self._verificar_unicidade(dados.cpf, dados.login or cliente.login, ignorar_id=cliente.id)

        try:
            with transaction(self.db):
                aplicar_dados_cliente(cliente, dados)
                if cliente.endereco is not None:
                    # The orphan must be gone before the new row claims cliente_id
                    cliente.endereco = None
                    self.clientes.flush()
                cliente.endereco = endereco_cliente_from_schema(dados.endereco)
                self.clientes.save(cliente)
        except SQLAlchemyError as exc:
            logger.exception(f"Erro ao atualizar cliente {cliente_id}: {exc}")
            raise PersistenciaError("Erro ao atualizar cliente") from exc

        self.db.refresh(cliente)
        logger.info(f"Cliente {cliente.id} atualizado")
        return ClienteResponse.model_validate(cliente)

    def _verificar_unicidade(self, cpf: str, login: str, ignorar_id: Optional[int] = None):
        por_cpf = self.clientes.get_by_cpf(cpf)
        if por_cpf and por_cpf.id != ignorar_id:
            raise ValidacaoError(f"CPF já cadastrado: {cpf}")

        por_login: Optional[Cliente] = self.clientes.get_by_login(login)
        if por_login and por_login.id != ignorar_id:
            raise ValidacaoError(f"Login já cadastrado: {login}")
