from typing import Iterable

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError as PydanticValidationError

from escola_api.core.errors import Forbidden, Unauthorized
from escola_api.core.logger import get_logger
from escola_api.core.roles import Role
from escola_api.core.security import verify
from escola_api.schemas.auth import TokenClaims

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthorized("Acesso negado. Token não fornecido.")

    payload = verify(credentials.credentials)
    try:
        claims = TokenClaims.model_validate(payload)
    except PydanticValidationError as exc:
        # assinatura válida mas claims fora do formato esperado
        raise Unauthorized("Token inválido.") from exc

    request.state.user = claims
    return claims


def check_role(user: TokenClaims | None, allowed: frozenset[Role]) -> None:
    if user is None:
        raise Unauthorized("Não autenticado.")
    if user.role not in allowed:
        required = " ou ".join(sorted(r.value for r in allowed)) or "nenhuma"
        logger.info(f"Acesso negado: {user.role.value} id={user.id}, requer {required}")
        raise Forbidden(f"Acesso proibido. Requer função: {required}.")


def require_roles(roles: Iterable[Role]):
    """Dependência de rota que exige uma das funções em `roles`.

    O conjunto é fixado quando a rota é declarada.
    """
    allowed = frozenset(roles)

    def _dependency(request: Request, _: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        user = getattr(request.state, "user", None)
        check_role(user, allowed)
        return user

    return _dependency
