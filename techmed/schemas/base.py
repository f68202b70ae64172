from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class SchemaBase(BaseModel):
    """camelCase on the wire, snake_case in Python, readable from ORM rows."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class LoginSenha(SchemaBase):
    login: str = Field(..., min_length=1)
    senha: str = Field(..., min_length=1)


class EnderecoBase(SchemaBase):
    cep: str = Field(..., min_length=1, max_length=9)
    logradouro: str
    numero: str
    complemento: Optional[str] = None
    bairro: str
    cidade: str
    estado: str
    pais: str = "Brasil"


class EnderecoResponse(EnderecoBase):
    id: int
