from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from escola_api.api.deps import require_roles
from escola_api.core.roles import CONSULTA, GESTAO
from escola_api.db.session import get_db
from escola_api.models import Aluno, Casa, Disciplina, Professor, Turma
from escola_api.schemas.secretario import DashboardOut, OptionsOut

router = APIRouter(prefix="/secretario", tags=["secretario"])
options_router = APIRouter(prefix="/options", tags=["options"])


@router.get("/dashboard", response_model=DashboardOut, dependencies=[Depends(require_roles(GESTAO))])
def get_dashboard(db: Session = Depends(get_db)):
    total_professores = db.execute(select(func.count(Professor.id))).scalar_one()
    total_alunos = db.execute(select(func.count(Aluno.id))).scalar_one()
    total_turmas = db.execute(select(func.count(Turma.id))).scalar_one()

    # casas sem alunos aparecem com zero
    por_casa = db.execute(
        select(Casa.nome, func.count(Aluno.id))
        .outerjoin(Aluno, Aluno.casa_id == Casa.id)
        .group_by(Casa.id, Casa.nome)
        .order_by(Casa.nome)
    ).all()

    return {
        "total_professores": total_professores,
        "total_alunos": total_alunos,
        "turmas_ativas": total_turmas,
        "casas": [{"nome": nome, "alunos": alunos} for nome, alunos in por_casa],
    }


@options_router.get("", response_model=OptionsOut, dependencies=[Depends(require_roles(CONSULTA))])
def get_options(db: Session = Depends(get_db)):
    """Listas enxutas para selects e filtros do front."""
    return {
        "turmas": db.execute(select(Turma).order_by(Turma.ano_letivo, Turma.nome)).scalars().all(),
        "disciplinas": db.execute(select(Disciplina).order_by(Disciplina.nome)).scalars().all(),
        "casas": db.execute(select(Casa).order_by(Casa.nome)).scalars().all(),
    }
