from datetime import date
from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)

    # Credentials
    login = Column(String(255), unique=True, index=True, nullable=False)
    senha = Column(String(255), nullable=False)

    # Personal information
    nome = Column(String(100), nullable=False)
    sobrenome = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    cpf = Column(String(14), unique=True, index=True, nullable=False)
    celular = Column(String(20), nullable=True)
    data_nascimento = Column(Date, nullable=True)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    endereco = relationship(
        "EnderecoCliente",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def idade(self):
        if self.data_nascimento is None:
            return None
        hoje = date.today()
        aniversario_pendente = (hoje.month, hoje.day) < (
            self.data_nascimento.month, self.data_nascimento.day
        )
        return hoje.year - self.data_nascimento.year - int(aniversario_pendente)

    def __repr__(self):
        return f"<Cliente(id={self.id}, cpf='{self.cpf}', nome='{self.nome} {self.sobrenome}')>"


class EnderecoCliente(Base):
    __tablename__ = "enderecos_clientes"

    id = Column(Integer, primary_key=True, index=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), unique=True, index=True, nullable=False)

    cep = Column(String(9), nullable=False)
    logradouro = Column(String(255), nullable=False)
    numero = Column(String(20), nullable=False)
    complemento = Column(String(255), nullable=True)
    bairro = Column(String(100), nullable=False)
    cidade = Column(String(100), nullable=False)
    estado = Column(String(50), nullable=False)
    pais = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<EnderecoCliente(id={self.id}, cliente_id={self.cliente_id}, cep='{self.cep}')>"
