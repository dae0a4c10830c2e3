from pydantic import BaseModel


class CasaStats(BaseModel):
    nome: str
    alunos: int


class DashboardOut(BaseModel):
    total_professores: int
    total_alunos: int
    turmas_ativas: int
    casas: list[CasaStats]


class OptionItem(BaseModel):
    id: int
    nome: str

    class Config:
        from_attributes = True


class TurmaOption(OptionItem):
    ano_letivo: int


class OptionsOut(BaseModel):
    turmas: list[TurmaOption]
    disciplinas: list[OptionItem]
    casas: list[OptionItem]
