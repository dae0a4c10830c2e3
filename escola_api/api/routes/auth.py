from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.roles import TODOS
from escola_api.db.session import get_db
from escola_api.schemas.auth import LoginIn, LoginOut, TokenClaims
from escola_api.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    return auth_service.login(db, payload.email, payload.senha)


@router.get("/me", response_model=TokenClaims)
def me(current_user: TokenClaims = Depends(require_roles(TODOS))):
    return current_user
