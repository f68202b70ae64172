from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...schemas.clinica import ClinicaCreate, ClinicaResponse
from ...services.clinica_service import ClinicaService

router = APIRouter(prefix="/clinicas", tags=["Clínicas"])


@router.post("", response_model=ClinicaResponse)
async def cadastrar_clinica(dados: ClinicaCreate, db: Session = Depends(get_db)):
    return ClinicaService(db).cadastrar_clinica(dados)


@router.get("", response_model=List[ClinicaResponse])
async def listar_todas_clinicas(db: Session = Depends(get_db)):
    return ClinicaService(db).listar_todas_clinicas()


@router.get("/contar", response_model=int)
async def contar_clinicas(db: Session = Depends(get_db)):
    return ClinicaService(db).contar_clinicas()


@router.patch("/inativarClinica/{clinica_id}", status_code=status.HTTP_204_NO_CONTENT)
async def atualizar_status_clinica(clinica_id: int, db: Session = Depends(get_db)):
    """Toggle the active flag of a clinic."""
    ClinicaService(db).atualizar_status_clinica(clinica_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/ativas", response_model=List[ClinicaResponse])
async def listar_clinicas_ativas(db: Session = Depends(get_db)):
    return ClinicaService(db).listar_clinicas_ativas()
