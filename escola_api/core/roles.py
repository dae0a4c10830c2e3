from enum import Enum


class Role(str, Enum):
    SECRETARIO = "SECRETARIO"
    PROFESSOR = "PROFESSOR"
    ALUNO = "ALUNO"


# Conjuntos fixos usados nas rotas
GESTAO = frozenset({Role.SECRETARIO})
CONSULTA = frozenset({Role.SECRETARIO, Role.PROFESSOR})
TODOS = frozenset({Role.SECRETARIO, Role.PROFESSOR, Role.ALUNO})
SOMENTE_ALUNO = frozenset({Role.ALUNO})
CONSULTA_ALUNO = frozenset({Role.SECRETARIO, Role.ALUNO})
