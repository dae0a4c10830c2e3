from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.disciplina import Disciplina
    from escola_api.models.identities import Professor
    from escola_api.models.turma import Turma


class TurmaDisciplina(Base):
    """Quem ministra qual disciplina em qual turma."""

    __tablename__ = "turma_disciplinas"
    __table_args__ = (
        UniqueConstraint("turma_id", "disciplina_id", name="uq_turma_disciplinas_turma_disciplina"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    turma_id: Mapped[int] = mapped_column(ForeignKey("turmas.id", ondelete="RESTRICT"), nullable=False, index=True)
    disciplina_id: Mapped[int] = mapped_column(
        ForeignKey("disciplinas.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    professor_id: Mapped[int] = mapped_column(
        ForeignKey("professores.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    turma: Mapped["Turma"] = relationship(back_populates="vinculos")
    disciplina: Mapped["Disciplina"] = relationship(back_populates="vinculos")
    professor: Mapped["Professor"] = relationship(back_populates="vinculos")
