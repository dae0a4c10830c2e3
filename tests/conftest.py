import itertools
import os
from datetime import date

# Precisa vir antes de qualquer import de escola_api (Settings lê o ambiente)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from escola_api.core.roles import Role
from escola_api.core.security import hash_password, sign
from escola_api.db.base import Base
from escola_api.db.session import enable_sqlite_foreign_keys, get_db
from escola_api.main import app
from escola_api.models import (
    Aluno,
    Casa,
    Disciplina,
    Matricula,
    Professor,
    Secretario,
    Turma,
    TurmaDisciplina,
)

SENHA = "segredo123"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class Factory:
    """Cria registros direto no banco, sem passar pela API."""

    def __init__(self, db):
        self.db = db
        self._seq = itertools.count(1)

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def _n(self) -> int:
        return next(self._seq)

    def secretario(self, email=None, senha=SENHA):
        n = self._n()
        return self._save(Secretario(
            nome=f"Secretario {n}",
            email=email or f"secretario{n}@hogwarts.edu",
            senha=hash_password(senha),
        ))

    def professor(self, email=None, senha=SENHA):
        n = self._n()
        return self._save(Professor(
            nome=f"Professor {n}",
            email=email or f"professor{n}@hogwarts.edu",
            senha=hash_password(senha),
            cpf=f"{n:011d}",
            matricula=f"P{n:03d}",
        ))

    def casa(self, nome=None):
        n = self._n()
        return self._save(Casa(nome=nome or f"Casa {n}", cor="#740001"))

    def turma(self, nome=None):
        n = self._n()
        return self._save(Turma(nome=nome or f"Turma {n}", ano_letivo=2026))

    def disciplina(self, nome=None, professor=None):
        n = self._n()
        return self._save(Disciplina(
            nome=nome or f"Disciplina {n}",
            codigo=f"D{n:03d}",
            professor_id=professor.id if professor else None,
        ))

    def aluno(self, casa=None, turma=None, email=None, senha=SENHA):
        n = self._n()
        casa = casa or self.casa()
        turma = turma or self.turma()
        return self._save(Aluno(
            nome=f"Aluno {n}",
            email=email or f"aluno{n}@hogwarts.edu",
            senha=hash_password(senha),
            cpf=f"{90000000000 + n:011d}",
            data_nascimento=date(2010, 1, 1),
            casa_id=casa.id,
            turma_id=turma.id,
        ))

    def matricula(self, aluno, disciplina):
        return self._save(Matricula(aluno_id=aluno.id, disciplina_id=disciplina.id))

    def vinculo(self, professor, turma, disciplina):
        return self._save(TurmaDisciplina(
            professor_id=professor.id, turma_id=turma.id, disciplina_id=disciplina.id
        ))


@pytest.fixture()
def factory(db):
    return Factory(db)


_ROLE_BY_MODEL = {Secretario: Role.SECRETARIO, Professor: Role.PROFESSOR, Aluno: Role.ALUNO}


def auth_headers(record) -> dict[str, str]:
    role = _ROLE_BY_MODEL[type(record)]
    token = sign({"id": record.id, "email": record.email, "role": role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def secretario_headers(factory):
    return auth_headers(factory.secretario())
