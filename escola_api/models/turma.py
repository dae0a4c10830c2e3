from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, SmallInteger, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.identities import Aluno, Professor
    from escola_api.models.vinculo import TurmaDisciplina


class Turma(Base):
    __tablename__ = "turmas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # ex: "1º Ano - Matutino"
    nome: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    ano_letivo: Mapped[int] = mapped_column(SmallInteger, nullable=False, index=True)

    professor_responsavel_id: Mapped[int | None] = mapped_column(
        ForeignKey("professores.id", ondelete="RESTRICT"), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    professor_responsavel: Mapped[Optional["Professor"]] = relationship(back_populates="turmas")
    alunos: Mapped[list["Aluno"]] = relationship(back_populates="turma", passive_deletes="all")
    vinculos: Mapped[list["TurmaDisciplina"]] = relationship(back_populates="turma", passive_deletes="all")

    @property
    def total_alunos(self) -> int:
        return len(self.alunos)
