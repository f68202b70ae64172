from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...schemas.prontuario import ExameClienteResponse, ProntuarioCreate, ProntuarioResponse
from ...services.prontuario_service import ProntuarioService

router = APIRouter(prefix="/prontuarios", tags=["Prontuários"])


@router.post("", response_model=ProntuarioResponse)
async def cadastrar_prontuario(dados: ProntuarioCreate, db: Session = Depends(get_db)):
    """Record a consultation and the exams requested in it."""
    return ProntuarioService(db).cadastrar_prontuario(dados)


@router.get("/cliente/{cliente_id}", response_model=List[ProntuarioResponse])
async def listar_prontuarios_cliente(cliente_id: int, db: Session = Depends(get_db)):
    return ProntuarioService(db).listar_prontuarios_por_cliente(cliente_id)


@router.get("/{prontuario_id}/exames", response_model=List[ExameClienteResponse])
async def listar_exames(prontuario_id: int, db: Session = Depends(get_db)):
    return ProntuarioService(db).listar_exames_por_prontuario(prontuario_id)
