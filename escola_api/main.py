from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from escola_api.api.error_handlers import register_error_handlers
from escola_api.core.config import settings
from escola_api.core.errors import ServerMisconfigured
from escola_api.core.logger import get_logger
from escola_api.core.security import hash_password
from escola_api.db.session import SessionLocal
from escola_api.models import Secretario
from escola_api.schemas.fields import Email
from escola_api.services.identities import find_by_email

from escola_api.api.routes.auth import router as auth_router
from escola_api.api.routes.alunos import router as alunos_router, perfil_router as aluno_perfil_router
from escola_api.api.routes.professores import router as professores_router
from escola_api.api.routes.casas import router as casas_router
from escola_api.api.routes.turmas import router as turmas_router
from escola_api.api.routes.disciplinas import router as disciplinas_router
from escola_api.api.routes.matriculas import router as matriculas_router
from escola_api.api.routes.secretario import router as secretario_router, options_router

logger = get_logger(__name__)

app = FastAPI(title="Escola API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
    allow_credentials=True,
)

register_error_handlers(app)

for router in (
    auth_router,
    secretario_router,
    alunos_router,
    aluno_perfil_router,
    professores_router,
    turmas_router,
    disciplinas_router,
    matriculas_router,
    casas_router,
    options_router,
):
    app.include_router(router, prefix="/api")


_email_adapter = TypeAdapter(Email)


def ensure_bootstrap_secretario(db: Session) -> Secretario | None:
    email = settings.BOOTSTRAP_SECRETARIO_EMAIL.strip()
    senha = settings.BOOTSTRAP_SECRETARIO_SENHA
    if not email or not senha:
        return None

    # Mesma normalização do login (domínio em minúsculas)
    try:
        email = _email_adapter.validate_python(email)
    except PydanticValidationError as exc:
        logger.error(f"[BOOTSTRAP] BOOTSTRAP_SECRETARIO_EMAIL inválido: {email}")
        raise ServerMisconfigured(f"BOOTSTRAP_SECRETARIO_EMAIL inválido: {email}") from exc

    found = find_by_email(db, email)
    if found is not None:
        logger.info(f"[BOOTSTRAP] Identidade OK: {email} ({found.role.value})")
        return None

    secretario = Secretario(
        nome=settings.BOOTSTRAP_SECRETARIO_NOME,
        email=email,
        senha=hash_password(senha),
    )
    db.add(secretario)
    db.commit()
    logger.info(f"[BOOTSTRAP] Secretário criado: {email}")
    return secretario


@app.on_event("startup")
def bootstrap():
    if not settings.JWT_SECRET:
        logger.warning("JWT_SECRET não configurado: login e rotas protegidas vão responder 500.")

    db = SessionLocal()
    try:
        ensure_bootstrap_secretario(db)
    finally:
        db.close()


@app.get("/")
def root():
    return {"status": "Online", "documentation": "/docs"}


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("escola_api.main:app", host="0.0.0.0", port=settings.PORT)
