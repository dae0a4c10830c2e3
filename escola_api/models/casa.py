from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from escola_api.db.base import Base

if TYPE_CHECKING:
    from escola_api.models.identities import Aluno


class Casa(Base):
    __tablename__ = "casas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    diretor: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # hexadecimal, ex: "#740001"
    cor: Mapped[str] = mapped_column(String(7), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    alunos: Mapped[list["Aluno"]] = relationship(back_populates="casa", passive_deletes="all")

    @property
    def total_alunos(self) -> int:
        return len(self.alunos)
