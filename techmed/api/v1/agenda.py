from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas.agenda import AgendaCreate, AgendaResponse
from ...services.agenda_service import AgendaService

router = APIRouter(prefix="/agenda", tags=["Agenda"])


@router.post("", response_model=AgendaResponse)
async def cadastrar_agenda(dados: AgendaCreate, db: Session = Depends(get_db)):
    """Open a schedule slot for a professional at a clinic."""
    return AgendaService(db).cadastrar_agenda(dados)
