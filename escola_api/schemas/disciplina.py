from typing import Annotated, ClassVar, Optional

from pydantic import BaseModel, Field

from escola_api.schemas.fields import NomePessoa, PartialUpdate, PositiveId

Codigo = Annotated[str, Field(min_length=3, max_length=10)]


class DisciplinaCreate(BaseModel):
    nome: NomePessoa
    codigo: Codigo
    professor_id: Optional[PositiveId] = None


class DisciplinaUpdate(PartialUpdate):
    required_columns: ClassVar[frozenset[str]] = frozenset({"nome", "codigo"})

    nome: Optional[NomePessoa] = None
    codigo: Optional[Codigo] = None
    professor_id: Optional[PositiveId] = None


class DisciplinaResumo(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class DisciplinaOut(DisciplinaResumo):
    codigo: str
    professor_id: int | None
    total_matriculas: int
