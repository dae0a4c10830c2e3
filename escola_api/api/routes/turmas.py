from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.errors import Conflict, NotFound
from escola_api.core.roles import CONSULTA, GESTAO
from escola_api.db.errors import storage_errors
from escola_api.db.session import get_db
from escola_api.models import Turma
from escola_api.schemas.turma import TurmaCreate, TurmaDetalheOut, TurmaOut, TurmaUpdate

router = APIRouter(prefix="/turmas", tags=["turmas"])

RECURSO = "Turma"


@router.post("", response_model=TurmaOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def create_turma(payload: TurmaCreate, db: Session = Depends(get_db)):
    turma = Turma(**payload.model_dump())
    with storage_errors(db, RECURSO, on_foreign_key=NotFound("Professor responsável não encontrado.")):
        db.add(turma)
        db.commit()
    db.refresh(turma)
    return turma


@router.get("", response_model=list[TurmaOut], dependencies=[Depends(require_roles(CONSULTA))])
def list_turmas(db: Session = Depends(get_db)):
    return db.execute(select(Turma).order_by(Turma.ano_letivo, Turma.nome)).scalars().all()


@router.get("/{turma_id}", response_model=TurmaDetalheOut, dependencies=[Depends(require_roles(CONSULTA))])
def get_turma(turma_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Turma).where(Turma.id == turma_id)).scalar_one()


@router.put("/{turma_id}", response_model=TurmaOut, dependencies=[Depends(require_roles(GESTAO))])
def update_turma(payload: TurmaUpdate, turma_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO, on_foreign_key=NotFound("Professor responsável não encontrado.")):
        turma = db.execute(select(Turma).where(Turma.id == turma_id)).scalar_one()
        for campo, valor in payload.changes().items():
            setattr(turma, campo, valor)
        db.commit()
    db.refresh(turma)
    return turma


@router.delete("/{turma_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def delete_turma(turma_id: int = Path(gt=0), db: Session = Depends(get_db)):
    dependentes = Conflict("Não é possível remover: A Turma ainda possui alunos ou disciplinas vinculadas.")
    with storage_errors(db, RECURSO, on_foreign_key=dependentes):
        turma = db.execute(select(Turma).where(Turma.id == turma_id)).scalar_one()
        db.delete(turma)
        db.commit()
    return None
