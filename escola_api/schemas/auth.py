from typing import Any

from pydantic import BaseModel

from escola_api.core.roles import Role
from escola_api.schemas.fields import Email, Senha


class LoginIn(BaseModel):
    email: Email
    senha: Senha


class LoginOut(BaseModel):
    token: str
    token_type: str = "bearer"
    user: dict[str, Any]


class TokenClaims(BaseModel):
    id: int
    email: str
    role: Role
    iat: int
    exp: int
