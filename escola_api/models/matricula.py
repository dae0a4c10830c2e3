from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.identities import Aluno
    from escola_api.models.disciplina import Disciplina


class Matricula(Base):
    __tablename__ = "matriculas"
    __table_args__ = (
        UniqueConstraint("aluno_id", "disciplina_id", name="uq_matriculas_aluno_disciplina"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    aluno_id: Mapped[int] = mapped_column(ForeignKey("alunos.id", ondelete="RESTRICT"), nullable=False, index=True)
    disciplina_id: Mapped[int] = mapped_column(
        ForeignKey("disciplinas.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    nota: Mapped[float | None] = mapped_column(Float, nullable=True)
    data_nota: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    aluno: Mapped["Aluno"] = relationship(back_populates="matriculas")
    disciplina: Mapped["Disciplina"] = relationship(back_populates="matriculas")
