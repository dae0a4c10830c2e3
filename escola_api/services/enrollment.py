from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from escola_api.core.errors import AlreadyEnrolled, NotFound
from escola_api.db.errors import storage_errors
from escola_api.models import Aluno, Matricula, Professor, TurmaDisciplina


def _find(aluno_id: int, disciplina_id: int):
    return select(Matricula).where(
        Matricula.aluno_id == aluno_id,
        Matricula.disciplina_id == disciplina_id,
    )


def enroll(db: Session, aluno_id: int, disciplina_id: int) -> Matricula:
    # Pré-checagem para a mensagem amigável; o unique do banco cobre corridas
    if db.execute(_find(aluno_id, disciplina_id)).scalar_one_or_none() is not None:
        raise AlreadyEnrolled()

    matricula = Matricula(aluno_id=aluno_id, disciplina_id=disciplina_id)
    with storage_errors(
        db,
        "Matrícula",
        on_unique=AlreadyEnrolled(),
        on_foreign_key=NotFound("Falha: O Aluno ou a Disciplina especificada não existe."),
    ):
        db.add(matricula)
        db.commit()
    db.refresh(matricula)
    return matricula


def unenroll(db: Session, aluno_id: int, disciplina_id: int) -> None:
    with storage_errors(db, "Matrícula"):
        matricula = db.execute(_find(aluno_id, disciplina_id)).scalar_one()
        db.delete(matricula)
        db.commit()


def set_grade(db: Session, aluno_id: int, disciplina_id: int, nota: float, data_nota: datetime | None) -> Matricula:
    with storage_errors(db, "Matrícula"):
        matricula = db.execute(_find(aluno_id, disciplina_id)).scalar_one()
        matricula.nota = nota
        matricula.data_nota = data_nota or datetime.now()
        db.commit()
    db.refresh(matricula)
    return matricula


def students_of_professor(db: Session, professor_id: int) -> list[dict]:
    """
    Alunos que estão numa turma onde o professor leciona e matriculados em
    alguma disciplina que ele ministra nessa turma.
    """
    if db.get(Professor, professor_id) is None:
        raise NotFound("Professor não encontrado.")

    vinculos = db.execute(
        select(TurmaDisciplina).where(TurmaDisciplina.professor_id == professor_id)
    ).scalars().all()
    if not vinculos:
        return []

    pares = {(v.turma_id, v.disciplina_id) for v in vinculos}
    turma_ids = {v.turma_id for v in vinculos}

    alunos = db.execute(
        select(Aluno)
        .where(Aluno.turma_id.in_(turma_ids))
        .options(selectinload(Aluno.matriculas).selectinload(Matricula.disciplina))
        .order_by(Aluno.nome)
    ).scalars().all()

    result = []
    for aluno in alunos:
        disciplinas = [
            m.disciplina for m in aluno.matriculas
            if (aluno.turma_id, m.disciplina_id) in pares
        ]
        if disciplinas:
            result.append({"aluno": aluno, "disciplinas": disciplinas})
    return result
