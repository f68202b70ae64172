"""Request payloads shared by the tests."""
from copy import deepcopy

API = "/api/v1"

ENDERECO = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "numero": "1000",
    "complemento": "Sala 12",
    "bairro": "Bela Vista",
    "cidade": "São Paulo",
    "estado": "SP",
    "pais": "Brasil",
}

CLIENTE = {
    "login": "maria@techmed.com.br",
    "senha": "segredo123",
    "nome": "Maria",
    "sobrenome": "Silva",
    "email": "maria@techmed.com.br",
    "cpf": "12345678901",
    "celular": "11999990000",
    "dataNascimento": "1990-05-20",
    "endereco": ENDERECO,
}

PROFISSIONAL = {
    "senha": "crm123",
    "nome": "João",
    "sobrenome": "Souza",
    "email": "joao@techmed.com.br",
    "cpf": "98765432100",
    "crm": "CRM-SP 123456",
    "celular": "11988887777",
}

CLINICA = {
    "nome": "Clínica Central",
    "cnpj": "12.345.678/0001-90",
    "telefone": "1133334444",
}


def payload(base: dict, **overrides) -> dict:
    data = deepcopy(base)
    data.update(overrides)
    return data


def cliente_payload(**overrides) -> dict:
    return payload(CLIENTE, **overrides)


def profissional_payload(**overrides) -> dict:
    return payload(PROFISSIONAL, **overrides)


def clinica_payload(**overrides) -> dict:
    return payload(CLINICA, **overrides)


def endereco_payload(**overrides) -> dict:
    return payload(ENDERECO, **overrides)
