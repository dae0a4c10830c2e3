from functools import lru_cache
from typing import Any

from sqlalchemy.orm import Session

from escola_api.core.config import settings
from escola_api.core.errors import InvalidCredentials, ServerMisconfigured
from escola_api.core.logger import get_logger
from escola_api.core.security import hash_password, sign, verify_password
from escola_api.services.identities import find_by_email

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("senha-inexistente")


def login(db: Session, email: str, senha: str) -> dict[str, Any]:
    if not settings.JWT_SECRET:
        raise ServerMisconfigured()

    identity = find_by_email(db, email)
    if identity is None:
        # Gasta o mesmo tempo de um bcrypt para não revelar se o email existe
        verify_password(senha, _dummy_hash())
        logger.info(f"Login recusado: {email}")
        raise InvalidCredentials()

    if not verify_password(senha, identity.record.senha):
        logger.info(f"Login recusado: {email}")
        raise InvalidCredentials()

    token = sign({
        "id": identity.record.id,
        "email": identity.record.email,
        "role": identity.role.value,
    })
    logger.info(f"Login OK: {identity.role.value} id={identity.record.id}")

    return {"token": token, "user": identity.public_fields()}
