from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base


class ProntuarioMedico(Base):
    __tablename__ = "prontuarios_medicos"

    id = Column(Integer, primary_key=True, index=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), index=True, nullable=False)
    profissional_id = Column(Integer, ForeignKey("profissionais.id"), nullable=False)

    data = Column(Date, nullable=False)
    descricao = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    exames = relationship(
        "ExameCliente",
        cascade="all, delete-orphan",
        order_by="ExameCliente.id",
    )

    def __repr__(self):
        return f"<ProntuarioMedico(id={self.id}, cliente_id={self.cliente_id}, data='{self.data}')>"


class ExameCliente(Base):
    __tablename__ = "exames_clientes"

    id = Column(Integer, primary_key=True, index=True)
    prontuario_medico_id = Column(
        Integer, ForeignKey("prontuarios_medicos.id"), index=True, nullable=False
    )
    exame = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<ExameCliente(id={self.id}, prontuario_medico_id={self.prontuario_medico_id})>"
