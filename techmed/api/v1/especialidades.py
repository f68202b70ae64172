from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...schemas.especialidade import EspecialidadeCreate, EspecialidadeResponse
from ...services.especialidade_service import EspecialidadeService

router = APIRouter(prefix="/especialidades", tags=["Especialidades"])


@router.post("", response_model=EspecialidadeResponse)
async def cadastrar_especialidade(dados: EspecialidadeCreate, db: Session = Depends(get_db)):
    return EspecialidadeService(db).cadastrar_especialidade(dados)


@router.get("", response_model=List[EspecialidadeResponse])
async def listar_especialidades(db: Session = Depends(get_db)):
    return EspecialidadeService(db).listar_especialidades()
