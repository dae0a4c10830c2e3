from typing import ClassVar, Optional

from pydantic import BaseModel

from escola_api.schemas.fields import CorHex, NomeCurto, NomePessoa, PartialUpdate


class CasaCreate(BaseModel):
    nome: NomeCurto
    diretor: Optional[NomePessoa] = None
    cor: CorHex


class CasaUpdate(PartialUpdate):
    required_columns: ClassVar[frozenset[str]] = frozenset({"nome", "cor"})

    nome: Optional[NomeCurto] = None
    diretor: Optional[NomePessoa] = None
    cor: Optional[CorHex] = None


class CasaResumo(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class CasaOut(BaseModel):
    id: int
    nome: str
    diretor: str | None
    cor: str
    total_alunos: int

    class Config:
        from_attributes = True


class AlunoDaCasa(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class CasaDetalheOut(CasaOut):
    alunos: list[AlunoDaCasa]
