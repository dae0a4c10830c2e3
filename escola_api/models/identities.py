from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.casa import Casa
    from escola_api.models.turma import Turma
    from escola_api.models.disciplina import Disciplina
    from escola_api.models.matricula import Matricula
    from escola_api.models.vinculo import TurmaDisciplina


# As três tabelas de identidade são disjuntas. O email é único em cada uma e
# os serviços garantem unicidade entre elas (services/identities.py).

class Secretario(Base):
    __tablename__ = "secretarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    senha: Mapped[str] = mapped_column(String(100), nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(15), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())


class Professor(Base):
    __tablename__ = "professores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    senha: Mapped[str] = mapped_column(String(100), nullable=False)
    cpf: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(15), nullable=True)

    # gerada na criação (uuid4)
    matricula: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    # passive_deletes="all": o ORM não mexe nos filhos e o banco recusa o DELETE
    disciplinas: Mapped[list["Disciplina"]] = relationship(back_populates="professor", passive_deletes="all")
    turmas: Mapped[list["Turma"]] = relationship(back_populates="professor_responsavel", passive_deletes="all")
    vinculos: Mapped[list["TurmaDisciplina"]] = relationship(back_populates="professor", passive_deletes="all")


class Aluno(Base):
    __tablename__ = "alunos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    senha: Mapped[str] = mapped_column(String(100), nullable=False)
    cpf: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(15), nullable=True)
    data_nascimento: Mapped[date] = mapped_column(Date, nullable=False)

    casa_id: Mapped[int] = mapped_column(ForeignKey("casas.id", ondelete="RESTRICT"), nullable=False, index=True)
    turma_id: Mapped[int] = mapped_column(ForeignKey("turmas.id", ondelete="RESTRICT"), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    casa: Mapped["Casa"] = relationship(back_populates="alunos")
    turma: Mapped["Turma"] = relationship(back_populates="alunos")
    matriculas: Mapped[list["Matricula"]] = relationship(back_populates="aluno", passive_deletes="all")
