from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.errors import Conflict, NotFound
from escola_api.core.roles import GESTAO, SOMENTE_ALUNO
from escola_api.core.security import hash_password
from escola_api.db.errors import storage_errors
from escola_api.db.session import get_db
from escola_api.models import Aluno
from escola_api.schemas.auth import TokenClaims
from escola_api.schemas.pessoas import AlunoCreate, AlunoDetalheOut, AlunoOut, AlunoUpdate
from escola_api.services.identities import ensure_email_available

router = APIRouter(prefix="/alunos", tags=["alunos"])
perfil_router = APIRouter(prefix="/aluno", tags=["alunos"])

RECURSO = "Aluno(a)"


def _relacao_inexistente() -> NotFound:
    return NotFound("A Casa ou a Turma informada não existe.")


@router.post("", response_model=AlunoOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def create_aluno(payload: AlunoCreate, db: Session = Depends(get_db)):
    ensure_email_available(db, payload.email)

    data = payload.model_dump()
    data["senha"] = hash_password(payload.senha)
    aluno = Aluno(**data)

    with storage_errors(db, RECURSO, on_foreign_key=_relacao_inexistente()):
        db.add(aluno)
        db.commit()
    db.refresh(aluno)
    return aluno


@router.get("", response_model=list[AlunoOut], dependencies=[Depends(require_roles(GESTAO))])
def list_alunos(db: Session = Depends(get_db)):
    return db.execute(select(Aluno).order_by(Aluno.nome)).scalars().all()


@router.get("/{aluno_id}", response_model=AlunoDetalheOut, dependencies=[Depends(require_roles(GESTAO))])
def get_aluno(aluno_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Aluno).where(Aluno.id == aluno_id)).scalar_one()


@router.put("/{aluno_id}", response_model=AlunoOut, dependencies=[Depends(require_roles(GESTAO))])
def update_aluno(payload: AlunoUpdate, aluno_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO, on_foreign_key=_relacao_inexistente()):
        aluno = db.execute(select(Aluno).where(Aluno.id == aluno_id)).scalar_one()

        changes = payload.changes()
        if "email" in changes:
            ensure_email_available(db, changes["email"], owner=aluno)
        if "senha" in changes:
            changes["senha"] = hash_password(changes["senha"])

        for campo, valor in changes.items():
            setattr(aluno, campo, valor)
        db.commit()
    db.refresh(aluno)
    return aluno


@router.delete("/{aluno_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def delete_aluno(aluno_id: int = Path(gt=0), db: Session = Depends(get_db)):
    dependentes = Conflict("Não é possível remover: O aluno possui matrículas ou vínculos ativos.")
    with storage_errors(db, RECURSO, on_foreign_key=dependentes):
        aluno = db.execute(select(Aluno).where(Aluno.id == aluno_id)).scalar_one()
        db.delete(aluno)
        db.commit()
    return None


@perfil_router.get("/info", response_model=AlunoDetalheOut)
def get_aluno_info(
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(require_roles(SOMENTE_ALUNO)),
):
    aluno = db.get(Aluno, current_user.id)
    if aluno is None:
        raise NotFound("Aluno(a) de Hogwarts não encontrado(a).")
    return aluno
