from datetime import date, time
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...models.agenda import StatusAgenda
from ...schemas.agenda import AgendaDetalhada
from ...schemas.base import LoginSenha
from ...schemas.especialidade import (
    EspecialidadeProfissionalCreate, EspecialidadeProfissionalResponse
)
from ...schemas.profissional import ProfissionalCreate, ProfissionalResponse
from ...services.agenda_service import AgendaService
from ...services.especialidade_service import EspecialidadeProfissionalService
from ...services.profissional_service import ProfissionalService

router = APIRouter(prefix="/profissionais", tags=["Profissionais"])


@router.post("", response_model=ProfissionalResponse)
async def cadastrar_profissional(
    dados: ProfissionalCreate,
    db: Session = Depends(get_db)
):
    """Register a new professional."""
    return ProfissionalService(db).cadastrar_profissional(dados)


@router.post("/autenticar", response_model=ProfissionalResponse)
async def autenticar_profissional(
    login_senha: LoginSenha,
    db: Session = Depends(get_db)
):
    """Authenticate a professional by login and password."""
    return ProfissionalService(db).autenticar_profissional(login_senha)


@router.get("/agenda", response_model=List[AgendaDetalhada])
async def buscar_agenda(
    clinica_id: int = Query(..., alias="clinicaId"),
    profissional_id: Optional[int] = Query(None, alias="profissionalId"),
    status_agenda: Optional[StatusAgenda] = Query(None, alias="statusAgenda"),
    data: Optional[date] = Query(None),
    hora: Optional[time] = Query(None),
    nome_profissional: Optional[str] = Query(None, alias="nomeProfissional"),
    nome_especialidade: Optional[str] = Query(None, alias="nomeEspecialidade"),
    db: Session = Depends(get_db)
):
    """Schedule of a clinic, optionally narrowed by professional, status, date, time or names."""
    return AgendaService(db).buscar_agenda_detalhada(
        clinica_id,
        profissional_id=profissional_id,
        status_agenda=status_agenda,
        data=data,
        hora=hora,
        nome_profissional=nome_profissional,
        nome_especialidade=nome_especialidade,
    )


@router.get("/contar", response_model=int)
async def contar_profissionais(db: Session = Depends(get_db)):
    return ProfissionalService(db).contar_profissionais()


@router.patch("/inativarProfissional/{profissional_id}", status_code=status.HTTP_204_NO_CONTENT)
async def atualizar_status_profissional(
    profissional_id: int,
    db: Session = Depends(get_db)
):
    """Toggle the active flag of a professional."""
    ProfissionalService(db).atualizar_status_profissional(profissional_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/especialidadesProfissional", response_model=List[EspecialidadeProfissionalResponse])
async def buscar_especialidades_profissional(
    profissional_id: int = Query(..., alias="profissionalId"),
    db: Session = Depends(get_db)
):
    return EspecialidadeProfissionalService(db).buscar_especialidades_por_profissional_id(
        profissional_id
    )


@router.post("/especialidadesProfissional", response_model=EspecialidadeProfissionalResponse)
async def vincular_especialidade(
    dados: EspecialidadeProfissionalCreate,
    db: Session = Depends(get_db)
):
    return EspecialidadeProfissionalService(db).vincular_especialidade(dados)


@router.get("/ativos", response_model=List[ProfissionalResponse])
async def listar_profissionais_ativos(db: Session = Depends(get_db)):
    return ProfissionalService(db).listar_profissionais_ativos()
