from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from escola_api.schemas.disciplina import DisciplinaResumo
from escola_api.schemas.fields import PositiveId


class MatriculaCreate(BaseModel):
    aluno_id: PositiveId
    disciplina_id: PositiveId


class NotaIn(BaseModel):
    nota: Annotated[float, Field(ge=0, le=10)]
    data_nota: Optional[datetime] = None


class AlunoResumo(BaseModel):
    id: int
    nome: str
    email: str

    class Config:
        from_attributes = True


class MatriculaOut(BaseModel):
    id: int
    aluno_id: int
    disciplina_id: int
    nota: float | None
    data_nota: datetime | None

    class Config:
        from_attributes = True


class MatriculaDetalheOut(MatriculaOut):
    aluno: AlunoResumo
    disciplina: DisciplinaResumo


class MatriculaDisciplinaOut(MatriculaOut):
    disciplina: DisciplinaResumo
