from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base


class Profissional(Base):
    __tablename__ = "profissionais"

    id = Column(Integer, primary_key=True, index=True)

    # Credentials
    login = Column(String(255), unique=True, index=True, nullable=False)
    senha = Column(String(255), nullable=False)

    # Personal information
    nome = Column(String(100), nullable=False)
    sobrenome = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    cpf = Column(String(14), unique=True, index=True, nullable=False)
    crm = Column(String(20), nullable=True)
    celular = Column(String(20), nullable=True)

    # Soft-disable flag
    ativo = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    endereco = relationship(
        "EnderecoProfissional",
        uselist=False,
        cascade="all, delete-orphan",
    )
    especialidades = relationship(
        "EspecialidadeProfissional",
        cascade="all, delete-orphan",
        order_by="EspecialidadeProfissional.id",
    )

    @property
    def nome_completo(self) -> str:
        return f"{self.nome} {self.sobrenome}".strip()

    def __repr__(self):
        return f"<Profissional(id={self.id}, nome='{self.nome_completo}', ativo={self.ativo})>"


class EnderecoProfissional(Base):
    __tablename__ = "enderecos_profissionais"

    id = Column(Integer, primary_key=True, index=True)
    profissional_id = Column(
        Integer, ForeignKey("profissionais.id"), unique=True, index=True, nullable=False
    )

    cep = Column(String(9), nullable=False)
    logradouro = Column(String(255), nullable=False)
    numero = Column(String(20), nullable=False)
    complemento = Column(String(255), nullable=True)
    bairro = Column(String(100), nullable=False)
    cidade = Column(String(100), nullable=False)
    estado = Column(String(50), nullable=False)
    pais = Column(String(50), nullable=False)


class Especialidade(Base):
    __tablename__ = "especialidades"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<Especialidade(id={self.id}, nome='{self.nome}')>"


class EspecialidadeProfissional(Base):
    __tablename__ = "especialidades_profissionais"
    __table_args__ = (
        UniqueConstraint("profissional_id", "especialidade_id", name="uq_profissional_especialidade"),
    )

    id = Column(Integer, primary_key=True, index=True)
    profissional_id = Column(Integer, ForeignKey("profissionais.id"), index=True, nullable=False)
    especialidade_id = Column(Integer, ForeignKey("especialidades.id"), nullable=False)

    especialidade = relationship("Especialidade", lazy="joined")

    @property
    def nome_especialidade(self):
        return self.especialidade.nome if self.especialidade else None

    def __repr__(self):
        return (
            f"<EspecialidadeProfissional(id={self.id}, profissional_id={self.profissional_id}, "
            f"especialidade_id={self.especialidade_id})>"
        )
