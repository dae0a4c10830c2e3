from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.errors import Conflict
from escola_api.core.roles import GESTAO, TODOS
from escola_api.db.errors import storage_errors
from escola_api.db.session import get_db
from escola_api.models import Casa
from escola_api.schemas.casa import CasaCreate, CasaDetalheOut, CasaOut, CasaUpdate

router = APIRouter(prefix="/casas", tags=["casas"])

RECURSO = "Casa"
DEPENDENTES = "Não é possível remover: A Casa ainda possui alunos vinculados."


@router.post("", response_model=CasaOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(GESTAO))])
def create_casa(payload: CasaCreate, db: Session = Depends(get_db)):
    casa = Casa(**payload.model_dump())
    with storage_errors(db, RECURSO):
        db.add(casa)
        db.commit()
    db.refresh(casa)
    return casa


@router.get("", response_model=list[CasaOut], dependencies=[Depends(require_roles(TODOS))])
def list_casas(db: Session = Depends(get_db)):
    return db.execute(select(Casa).order_by(Casa.nome)).scalars().all()


@router.get("/{casa_id}", response_model=CasaDetalheOut, dependencies=[Depends(require_roles(TODOS))])
def get_casa(casa_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        return db.execute(select(Casa).where(Casa.id == casa_id)).scalar_one()


@router.put("/{casa_id}", response_model=CasaOut, dependencies=[Depends(require_roles(GESTAO))])
def update_casa(payload: CasaUpdate, casa_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO):
        casa = db.execute(select(Casa).where(Casa.id == casa_id)).scalar_one()
        for campo, valor in payload.changes().items():
            setattr(casa, campo, valor)
        db.commit()
    db.refresh(casa)
    return casa


@router.delete("/{casa_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_roles(GESTAO))])
def delete_casa(casa_id: int = Path(gt=0), db: Session = Depends(get_db)):
    with storage_errors(db, RECURSO, on_foreign_key=Conflict(DEPENDENTES)):
        casa = db.execute(select(Casa).where(Casa.id == casa_id)).scalar_one()
        db.delete(casa)
        db.commit()
    return None
