"""
Business rule errors raised by the services.

Every failure that crosses a service boundary belongs to the
RegraDeNegocioError family. The ``kind`` tag tells callers which rule
was broken; ``status_code`` is what the API answers with.
"""
from fastapi import status

LOGIN_OU_SENHA_INVALIDOS = "Login ou senha inválidos"


class RegraDeNegocioError(Exception):
    kind = "regra_de_negocio"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidacaoError(RegraDeNegocioError):
    """Input is well formed but violates a uniqueness or reference rule."""
    kind = "validacao"


class NaoEncontradoError(RegraDeNegocioError):
    kind = "nao_encontrado"
    status_code = status.HTTP_404_NOT_FOUND


class CredenciaisInvalidasError(RegraDeNegocioError):
    kind = "credenciais_invalidas"
    status_code = status.HTTP_401_UNAUTHORIZED


class PersistenciaError(RegraDeNegocioError):
    """The store rejected a write. The original cause is chained and logged only."""
    kind = "persistencia"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
