import uuid

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.errors import Conflict, NotFound
from escola_api.core.roles import CONSULTA, GESTAO, Role
from escola_api.core.security import hash_password
from escola_api.db.errors import storage_errors
from escola_api.db.session import get_db
from escola_api.models import Professor, TurmaDisciplina
from escola_api.schemas.auth import TokenClaims
from escola_api.schemas.pessoas import (
    AlunoDoProfessorOut,
    AlunoOut,
    ProfessorCreate,
    ProfessorDetalheOut,
    ProfessorOut,
    ProfessorUpdate,
    VinculosIn,
)
from escola_api.services.enrollment import students_of_professor
from escola_api.services.identities import ensure_email_available

router = APIRouter(prefix="/professores", tags=["professores"])

RECURSO = "Professor(a)"


# ----------------------------
# Rotas específicas (antes de /{professor_id})
# ----------------------------
@router.get("/me", response_model=ProfessorDetalheOut)
def get_me(
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(require_roles(CONSULTA)),
):
    if current_user.role is not Role.PROFESSOR:
        raise NotFound("Usuário logado não é um professor.")
    prof = db.get(Professor, current_user.id)
    if prof is None:
        raise NotFound("Professor(a) não encontrado(a).")
    return prof


@router.get("/{professor_id}/details", response_model=ProfessorDetalheOut,
            dependencies=[Depends(require_roles(CONSULTA))])
def get_professor_details(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Professor).where(Professor.id == professor_id)).scalar_one()


@router.get("/{professor_id}/alunos", response_model=list[AlunoDoProfessorOut],
            dependencies=[Depends(require_roles(CONSULTA))])
def get_alunos_by_professor(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    return [
        AlunoDoProfessorOut.model_validate(
            {
                **AlunoOut.model_validate(row["aluno"]).model_dump(),
                "casa": row["aluno"].casa,
                "disciplinas": row["disciplinas"],
            },
            from_attributes=True,
        )
        for row in students_of_professor(db, professor_id)
    ]


@router.patch("/{professor_id}/disciplinas", response_model=ProfessorDetalheOut,
              dependencies=[Depends(require_roles(GESTAO))])
def set_vinculos(payload: VinculosIn, professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    """Substitui todos os vínculos (turma, disciplina) do professor."""
    ocupado = Conflict("Disciplina já possui professor nesta turma.", campos=["turma_id", "disciplina_id"])
    with storage_errors(
        db,
        RECURSO,
        on_unique=ocupado,
        on_foreign_key=NotFound("Turma ou Disciplina informada não existe."),
    ):
        prof = db.execute(select(Professor).where(Professor.id == professor_id)).scalar_one()

        db.execute(delete(TurmaDisciplina).where(TurmaDisciplina.professor_id == prof.id))
        pares = {(v.turma_id, v.disciplina_id) for v in payload.vinculos}
        db.add_all(
            TurmaDisciplina(professor_id=prof.id, turma_id=turma_id, disciplina_id=disciplina_id)
            for turma_id, disciplina_id in sorted(pares)
        )
        db.commit()
    db.refresh(prof)
    return prof


# ----------------------------
# CRUD
# ----------------------------
@router.get("", response_model=list[ProfessorOut], dependencies=[Depends(require_roles(CONSULTA))])
def list_professores(db: Session = Depends(get_db)):
    return db.execute(select(Professor).order_by(Professor.nome)).scalars().all()


@router.post("", response_model=ProfessorOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def create_professor(payload: ProfessorCreate, db: Session = Depends(get_db)):
    ensure_email_available(db, payload.email)

    data = payload.model_dump()
    data["senha"] = hash_password(payload.senha)
    prof = Professor(**data, matricula=str(uuid.uuid4()))

    with storage_errors(db, RECURSO):
        db.add(prof)
        db.commit()
    db.refresh(prof)
    return prof


@router.get("/{professor_id}", response_model=ProfessorOut, dependencies=[Depends(require_roles(CONSULTA))])
def get_professor(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Professor).where(Professor.id == professor_id)).scalar_one()


@router.put("/{professor_id}", response_model=ProfessorOut, dependencies=[Depends(require_roles(GESTAO))])
def update_professor(payload: ProfessorUpdate, professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        prof = db.execute(select(Professor).where(Professor.id == professor_id)).scalar_one()

        changes = payload.changes()
        if "email" in changes:
            ensure_email_available(db, changes["email"], owner=prof)
        if "senha" in changes:
            changes["senha"] = hash_password(changes["senha"])

        for campo, valor in changes.items():
            setattr(prof, campo, valor)
        db.commit()
    db.refresh(prof)
    return prof


@router.delete("/{professor_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def delete_professor(professor_id: int = Path(gt=0), db: Session = Depends(get_db)):
    dependentes = Conflict(
        "Não é possível remover: o professor possui turmas, disciplinas ou vínculos."
    )
    with storage_errors(db, RECURSO, on_foreign_key=dependentes):
        prof = db.execute(select(Professor).where(Professor.id == professor_id)).scalar_one()
        db.delete(prof)
        db.commit()
    return None
