from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.identities import Professor
    from escola_api.models.matricula import Matricula
    from escola_api.models.vinculo import TurmaDisciplina


class Disciplina(Base):
    __tablename__ = "disciplinas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    codigo: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)

    # opcional: disciplina ainda não alocada
    professor_id: Mapped[int | None] = mapped_column(
        ForeignKey("professores.id", ondelete="RESTRICT"), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    professor: Mapped[Optional["Professor"]] = relationship(back_populates="disciplinas")
    matriculas: Mapped[list["Matricula"]] = relationship(back_populates="disciplina", passive_deletes="all")
    vinculos: Mapped[list["TurmaDisciplina"]] = relationship(back_populates="disciplina", passive_deletes="all")

    @property
    def total_matriculas(self) -> int:
        return len(self.matriculas)
