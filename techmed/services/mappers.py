"""Conversions between transfer objects and entities.

Entity -> schema goes through pydantic ``model_validate`` (``from_attributes``);
only the directions that need extra rules live here.
"""
from typing import Optional

from ..core.security import get_password_hash
from ..models.agenda import Agenda, StatusAgenda
from ..models.cliente import Cliente, EnderecoCliente
from ..models.profissional import Profissional, EnderecoProfissional
from ..schemas.agenda import AgendaCreate, AgendaDetalhada
from ..schemas.base import EnderecoBase
from ..schemas.cliente import ClienteCreate
from ..schemas.profissional import ProfissionalCreate


def login_de(dados) -> str:
    return dados.login or dados.email


def cliente_from_schema(dados: ClienteCreate) -> Cliente:
    cliente = Cliente(login=login_de(dados))
    aplicar_dados_cliente(cliente, dados)
    return cliente


def aplicar_dados_cliente(cliente: Cliente, dados: ClienteCreate) -> None:
    """Overwrite every scalar field of ``cliente``; the address is left alone."""
    if dados.login:
        cliente.login = dados.login
    cliente.senha = get_password_hash(dados.senha)
    cliente.nome = dados.nome
    cliente.sobrenome = dados.sobrenome
    cliente.email = dados.email
    cliente.cpf = dados.cpf
    cliente.celular = dados.celular
    cliente.data_nascimento = dados.data_nascimento


def endereco_cliente_from_schema(dados: EnderecoBase) -> EnderecoCliente:
    return EnderecoCliente(**dados.model_dump())


def profissional_from_schema(dados: ProfissionalCreate) -> Profissional:
    profissional = Profissional(
        login=login_de(dados),
        senha=get_password_hash(dados.senha),
        nome=dados.nome,
        sobrenome=dados.sobrenome,
        email=dados.email,
        cpf=dados.cpf,
        crm=dados.crm,
        celular=dados.celular,
        ativo=True,
    )
    if dados.endereco is not None:
        profissional.endereco = EnderecoProfissional(**dados.endereco.model_dump())
    return profissional


def agenda_from_schema(dados: AgendaCreate) -> Agenda:
    status_agenda = dados.status_agenda
    if status_agenda is None:
        status_agenda = StatusAgenda.AGENDADA if dados.cliente_id else StatusAgenda.DISPONIVEL
    return Agenda(
        profissional_id=dados.profissional_id,
        clinica_id=dados.clinica_id,
        especialidade_id=dados.especialidade_id,
        cliente_id=dados.cliente_id,
        data=dados.data,
        hora=dados.hora,
        status_agenda=status_agenda,
    )


def _nome_cliente(cliente: Optional[Cliente]) -> Optional[str]:
    if cliente is None:
        return None
    return f"{cliente.nome} {cliente.sobrenome}".strip()


def agenda_detalhada_from_row(row) -> AgendaDetalhada:
    agenda, profissional, clinica, especialidade, cliente = row
    return AgendaDetalhada(
        id=agenda.id,
        data=agenda.data,
        hora=agenda.hora,
        status_agenda=agenda.status_agenda,
        profissional_id=profissional.id,
        nome_profissional=profissional.nome_completo,
        clinica_id=clinica.id,
        nome_clinica=clinica.nome,
        especialidade_id=especialidade.id if especialidade else None,
        nome_especialidade=especialidade.nome if especialidade else None,
        cliente_id=cliente.id if cliente else None,
        nome_cliente=_nome_cliente(cliente),
    )
