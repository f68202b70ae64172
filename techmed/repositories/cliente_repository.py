from typing import Optional

from .base import BaseRepository
from ..models.cliente import Cliente, EnderecoCliente


class ClienteRepository(BaseRepository[Cliente]):
    model = Cliente

    def get_by_cpf(self, cpf: str) -> Optional[Cliente]:
        return self.db.query(Cliente).filter(Cliente.cpf == cpf).first()

    def get_by_login(self, login: str) -> Optional[Cliente]:
        return self.db.query(Cliente).filter(Cliente.login == login).first()


class EnderecoClienteRepository(BaseRepository[EnderecoCliente]):
    model = EnderecoCliente

    def get_by_cliente_id(self, cliente_id: int) -> Optional[EnderecoCliente]:
        return (
            self.db.query(EnderecoCliente)
            .filter(EnderecoCliente.cliente_id == cliente_id)
            .first()
        )
