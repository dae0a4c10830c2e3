"""Hierarquia de erros da API.

Cada erro carrega o status HTTP que o representa. Os handlers em
escola_api.api.error_handlers convertem qualquer EscolaError no envelope
{"message": ...} sem precisar conhecer a subclasse.
"""

from typing import Any


class EscolaError(Exception):
    """Base de todos os erros de domínio."""

    http_status: int = 500

    def __init__(self, message: str, http_status: int | None = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(EscolaError):
    http_status = 400

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class Unauthorized(EscolaError):
    http_status = 401


class InvalidCredentials(Unauthorized):
    """Mesmo erro para email desconhecido e senha errada."""

    def __init__(self):
        super().__init__("Email ou senha incorretos.")


class TokenExpired(Unauthorized):
    def __init__(self):
        super().__init__("Token expirado. Por favor, faça login novamente.")


class Forbidden(EscolaError):
    http_status = 403


class NotFound(EscolaError):
    http_status = 404


class Conflict(EscolaError):
    http_status = 409

    def __init__(self, message: str, campos: list[str] | None = None):
        super().__init__(message)
        self.campos = campos or []

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        if self.campos:
            body["campos"] = self.campos
        return body


class AlreadyEnrolled(Conflict):
    def __init__(self):
        super().__init__(
            "O aluno já está matriculado nesta disciplina.",
            campos=["aluno_id", "disciplina_id"],
        )


class InternalError(EscolaError):
    http_status = 500


class ServerMisconfigured(InternalError):
    def __init__(self, detail: str = "JWT_SECRET não configurado."):
        super().__init__("Erro de configuração do servidor.")
        self.detail = detail
