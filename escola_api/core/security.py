from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from escola_api.core.config import settings
from escola_api.core.errors import ServerMisconfigured, TokenExpired, Unauthorized

ALGORITHM = "HS256"


def hash_password(senha: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(senha.encode("utf-8"), salt).decode("utf-8")


def verify_password(senha: str, senha_hash: str) -> bool:
    # checkpw compara em tempo constante
    try:
        return bcrypt.checkpw(senha.encode("utf-8"), senha_hash.encode("utf-8"))
    except ValueError:
        # hash corrompido no banco conta como senha errada
        return False


def _secret() -> str:
    if not settings.JWT_SECRET:
        raise ServerMisconfigured()
    return settings.JWT_SECRET


def sign(payload: Dict[str, Any], ttl: timedelta | None = None) -> str:
    if ttl is None:
        ttl = timedelta(days=settings.JWT_EXPIRATION_DAYS)
    now = datetime.now(timezone.utc)
    claims = {
        **payload,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(claims, _secret(), algorithm=ALGORITHM)


def verify(token: str) -> Dict[str, Any]:
    """Valida assinatura e expiração e devolve as claims.

    Token vencido gera TokenExpired; qualquer outro defeito (assinatura,
    formato, algoritmo) gera Unauthorized genérico.
    """
    secret = _secret()
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except ExpiredSignatureError as exc:
        raise TokenExpired() from exc
    except JWTError as exc:
        raise Unauthorized("Token inválido.") from exc
