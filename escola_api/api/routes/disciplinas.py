from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.errors import Conflict, NotFound
from escola_api.core.roles import GESTAO, TODOS
from escola_api.db.errors import storage_errors
from escola_api.db.session import get_db
from escola_api.models import Disciplina
from escola_api.schemas.disciplina import DisciplinaCreate, DisciplinaOut, DisciplinaUpdate

router = APIRouter(prefix="/disciplinas", tags=["disciplinas"])

RECURSO = "Disciplina"


@router.post("", response_model=DisciplinaOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def create_disciplina(payload: DisciplinaCreate, db: Session = Depends(get_db)):
    disciplina = Disciplina(**payload.model_dump())
    with storage_errors(db, RECURSO, on_foreign_key=NotFound("Professor não encontrado.")):
        db.add(disciplina)
        db.commit()
    db.refresh(disciplina)
    return disciplina


@router.get("", response_model=list[DisciplinaOut], dependencies=[Depends(require_roles(TODOS))])
def list_disciplinas(db: Session = Depends(get_db)):
    return db.execute(select(Disciplina).order_by(Disciplina.nome)).scalars().all()


@router.get("/{disciplina_id}", response_model=DisciplinaOut, dependencies=[Depends(require_roles(TODOS))])
def get_disciplina(disciplina_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Disciplina).where(Disciplina.id == disciplina_id)).scalar_one()


@router.put("/{disciplina_id}", response_model=DisciplinaOut, dependencies=[Depends(require_roles(GESTAO))])
def update_disciplina(payload: DisciplinaUpdate, disciplina_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO, on_foreign_key=NotFound("Professor não encontrado.")):
        disciplina = db.execute(select(Disciplina).where(Disciplina.id == disciplina_id)).scalar_one()
        for campo, valor in payload.changes().items():
            setattr(disciplina, campo, valor)
        db.commit()
    db.refresh(disciplina)
    return disciplina


@router.delete("/{disciplina_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def delete_disciplina(disciplina_id: int = Path(gt=0), db: Session = Depends(get_db)):
    dependentes = Conflict("Não é possível remover: a Disciplina possui matrículas ou professores alocados.")
    with storage_errors(db, RECURSO, on_foreign_key=dependentes):
        disciplina = db.execute(select(Disciplina).where(Disciplina.id == disciplina_id)).scalar_one()
        db.delete(disciplina)
        db.commit()
    return None
