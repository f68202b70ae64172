from sqlalchemy import Column, Integer, ForeignKey, Date, Time, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
import enum

from ..core.database import Base


class StatusAgenda(str, enum.Enum):
    DISPONIVEL = "DISPONIVEL"
    AGENDADA = "AGENDADA"
    CANCELADA = "CANCELADA"
    CONCLUIDA = "CONCLUIDA"


class Agenda(Base):
    __tablename__ = "agendas"

    id = Column(Integer, primary_key=True, index=True)

    # Relationships
    profissional_id = Column(Integer, ForeignKey("profissionais.id"), index=True, nullable=False)
    clinica_id = Column(Integer, ForeignKey("clinicas.id"), index=True, nullable=False)
    especialidade_id = Column(Integer, ForeignKey("especialidades.id"), nullable=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True)

    # Slot details
    data = Column(Date, nullable=False, index=True)
    hora = Column(Time, nullable=False)
    status_agenda = Column(SQLEnum(StatusAgenda), default=StatusAgenda.DISPONIVEL, nullable=False)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return (
            f"<Agenda(id={self.id}, profissional_id={self.profissional_id}, "
            f"clinica_id={self.clinica_id}, data='{self.data}', hora='{self.hora}')>"
        )
