# Importar o pacote registra todas as tabelas em Base.metadata
from escola_api.models.identities import Secretario, Professor, Aluno
from escola_api.models.casa import Casa
from escola_api.models.turma import Turma
from escola_api.models.disciplina import Disciplina
from escola_api.models.matricula import Matricula
from escola_api.models.vinculo import TurmaDisciplina

__all__ = [
    "Secretario",
    "Professor",
    "Aluno",
    "Casa",
    "Turma",
    "Disciplina",
    "Matricula",
    "TurmaDisciplina",
]
