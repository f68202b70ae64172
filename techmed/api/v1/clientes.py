from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas.base import LoginSenha
from ...schemas.cliente import ClienteCreate, ClienteResponse, ClienteUpdate
from ...services.cliente_service import ClienteService

router = APIRouter(prefix="/clientes", tags=["Clientes"])


@router.post("", response_model=ClienteResponse)
async def cadastrar_cliente(
    dados: ClienteCreate,
    db: Session = Depends(get_db)
):
    """Register a new client with its address."""
    return ClienteService(db).cadastrar_cliente(dados)


@router.post("/autenticar", response_model=ClienteResponse)
async def autenticar_cliente(
    login_senha: LoginSenha,
    db: Session = Depends(get_db)
):
    """Authenticate a client by login and password."""
    return ClienteService(db).autenticar_cliente(login_senha)


@router.get("/contar", response_model=int)
async def contar_clientes(db: Session = Depends(get_db)):
    return ClienteService(db).contar_clientes()


@router.get("/cpf/{cpf}", response_model=ClienteResponse)
async def buscar_cliente_por_cpf(cpf: str, db: Session = Depends(get_db)):
    return ClienteService(db).buscar_cliente_por_cpf(cpf)


@router.put("/{cliente_id}", response_model=ClienteResponse)
async def atualizar_cliente(
    cliente_id: int,
    dados: ClienteUpdate,
    db: Session = Depends(get_db)
):
    """Replace a client's data and address."""
    return ClienteService(db).atualizar_cliente(cliente_id, dados)
