from typing import Annotated, ClassVar, Optional

from pydantic import BaseModel, Field

from escola_api.schemas.fields import NomeCurto, PartialUpdate, PositiveId

AnoLetivo = Annotated[int, Field(ge=2020)]


class TurmaCreate(BaseModel):
    nome: NomeCurto
    ano_letivo: AnoLetivo
    # opcional: turma ainda sem responsável
    professor_responsavel_id: Optional[PositiveId] = None


class TurmaUpdate(PartialUpdate):
    required_columns: ClassVar[frozenset[str]] = frozenset({"nome", "ano_letivo"})

    nome: Optional[NomeCurto] = None
    ano_letivo: Optional[AnoLetivo] = None
    professor_responsavel_id: Optional[PositiveId] = None


class TurmaResumo(BaseModel):
    id: int
    nome: str
    ano_letivo: int

    class Config:
        from_attributes = True


class TurmaOut(TurmaResumo):
    professor_responsavel_id: int | None
    total_alunos: int


class AlunoDaTurma(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class TurmaDetalheOut(TurmaOut):
    alunos: list[AlunoDaTurma]
