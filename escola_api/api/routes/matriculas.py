from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from escola_api.api.deps import require_roles
from escola_api.core.errors import Forbidden, NotFound
from escola_api.core.roles import CONSULTA, CONSULTA_ALUNO, GESTAO, Role
from escola_api.db.session import get_db
from escola_api.models import Matricula
from escola_api.schemas.auth import TokenClaims
from escola_api.schemas.matricula import (
    MatriculaCreate,
    MatriculaDetalheOut,
    MatriculaDisciplinaOut,
    MatriculaOut,
    NotaIn,
)
from escola_api.services import enrollment

router = APIRouter(prefix="/matriculas", tags=["matriculas"])


@router.post("", response_model=MatriculaDetalheOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def matricular_aluno(payload: MatriculaCreate, db: Session = Depends(get_db)):
    return enrollment.enroll(db, payload.aluno_id, payload.disciplina_id)


@router.get("", response_model=list[MatriculaDetalheOut], dependencies=[Depends(require_roles(CONSULTA))])
def list_matriculas(db: Session = Depends(get_db)):
    return db.execute(
        select(Matricula)
        .options(selectinload(Matricula.aluno), selectinload(Matricula.disciplina))
        .order_by(Matricula.id)
    ).scalars().all()


@router.get("/aluno/{aluno_id}/disciplinas", response_model=list[MatriculaDisciplinaOut])
def get_disciplinas_by_aluno(
    aluno_id: int = Path(gt=0),
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(require_roles(CONSULTA_ALUNO)),
):
    # aluno só consulta as próprias matrículas
    if current_user.role is Role.ALUNO and current_user.id != aluno_id:
        raise Forbidden("Acesso proibido. Aluno só pode consultar as próprias matrículas.")

    matriculas = db.execute(
        select(Matricula)
        .where(Matricula.aluno_id == aluno_id)
        .options(selectinload(Matricula.disciplina))
        .order_by(Matricula.id)
    ).scalars().all()

    if not matriculas:
        raise NotFound("Aluno não encontrado ou sem matrículas ativas.")
    return matriculas


@router.patch("/{aluno_id}/{disciplina_id}/nota", response_model=MatriculaOut,
              dependencies=[Depends(require_roles(CONSULTA))])
def lancar_nota(
    payload: NotaIn,
    aluno_id: int = Path(gt=0),
    disciplina_id: int = Path(gt=0),
    db: Session = Depends(get_db),
):
    return enrollment.set_grade(db, aluno_id, disciplina_id, payload.nota, payload.data_nota)


@router.delete("/{aluno_id}/{disciplina_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def desmatricular_aluno(
    aluno_id: int = Path(gt=0),
    disciplina_id: int = Path(gt=0),
    db: Session = Depends(get_db),
):
    enrollment.unenroll(db, aluno_id, disciplina_id)
    return None
