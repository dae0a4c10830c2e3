from datetime import date, datetime
from typing import ClassVar, Optional

from pydantic import BaseModel

from escola_api.schemas.casa import CasaResumo
from escola_api.schemas.disciplina import DisciplinaResumo
from escola_api.schemas.fields import (
    Cpf,
    DataPassada,
    Email,
    NomePessoa,
    PartialUpdate,
    PositiveId,
    Senha,
    Telefone,
)
from escola_api.schemas.turma import TurmaResumo


# ----------------------------
# Professor
# ----------------------------
class ProfessorCreate(BaseModel):
    nome: NomePessoa
    email: Email
    senha: Senha
    cpf: Cpf
    telefone: Optional[Telefone] = None


class ProfessorUpdate(PartialUpdate):
    required_columns: ClassVar[frozenset[str]] = frozenset({"nome", "email", "senha", "cpf"})

    nome: Optional[NomePessoa] = None
    email: Optional[Email] = None
    senha: Optional[Senha] = None
    cpf: Optional[Cpf] = None
    telefone: Optional[Telefone] = None


class ProfessorOut(BaseModel):
    id: int
    nome: str
    email: str
    cpf: str
    telefone: str | None
    matricula: str

    class Config:
        from_attributes = True


class VinculoIn(BaseModel):
    turma_id: PositiveId
    disciplina_id: PositiveId


class VinculosIn(BaseModel):
    vinculos: list[VinculoIn]


class VinculoOut(BaseModel):
    turma: TurmaResumo
    disciplina: DisciplinaResumo

    class Config:
        from_attributes = True


class ProfessorDetalheOut(ProfessorOut):
    disciplinas: list[DisciplinaResumo]
    vinculos: list[VinculoOut]


# ----------------------------
# Aluno
# ----------------------------
class AlunoCreate(BaseModel):
    nome: NomePessoa
    email: Email
    senha: Senha
    cpf: Cpf
    telefone: Optional[Telefone] = None
    data_nascimento: DataPassada
    casa_id: PositiveId
    turma_id: PositiveId


class AlunoUpdate(PartialUpdate):
    required_columns: ClassVar[frozenset[str]] = frozenset(
        {"nome", "email", "senha", "cpf", "data_nascimento", "casa_id", "turma_id"}
    )

    nome: Optional[NomePessoa] = None
    email: Optional[Email] = None
    senha: Optional[Senha] = None
    cpf: Optional[Cpf] = None
    telefone: Optional[Telefone] = None
    data_nascimento: Optional[DataPassada] = None
    casa_id: Optional[PositiveId] = None
    turma_id: Optional[PositiveId] = None


class AlunoOut(BaseModel):
    id: int
    nome: str
    email: str
    cpf: str
    telefone: str | None
    data_nascimento: date
    casa_id: int
    turma_id: int

    class Config:
        from_attributes = True


class DisciplinaMatriculada(BaseModel):
    disciplina: DisciplinaResumo
    nota: float | None
    data_nota: datetime | None

    class Config:
        from_attributes = True


class AlunoDetalheOut(AlunoOut):
    casa: CasaResumo
    turma: TurmaResumo
    matriculas: list[DisciplinaMatriculada]


class AlunoDoProfessorOut(AlunoOut):
    casa: CasaResumo
    disciplinas: list[DisciplinaResumo]
