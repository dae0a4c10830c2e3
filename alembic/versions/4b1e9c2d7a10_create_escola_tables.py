"""create escola tables

Revision ID: 4b1e9c2d7a10
Revises:
Create Date: 2026-10-19 10:02:41.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c2d7a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "secretarios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("senha", sa.String(length=100), nullable=False),
        sa.Column("telefone", sa.String(length=15), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_secretarios_email", "secretarios", ["email"], unique=True)

    op.create_table(
        "professores",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("senha", sa.String(length=100), nullable=False),
        sa.Column("cpf", sa.String(length=11), nullable=False, unique=True),
        sa.Column("telefone", sa.String(length=15), nullable=True),
        sa.Column("matricula", sa.String(length=36), nullable=False, unique=True),
        *_timestamps(),
    )
    op.create_index("ix_professores_email", "professores", ["email"], unique=True)

    op.create_table(
        "casas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=50), nullable=False, unique=True),
        sa.Column("diretor", sa.String(length=100), nullable=True),
        sa.Column("cor", sa.String(length=7), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "turmas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=50), nullable=False, unique=True),
        sa.Column("ano_letivo", sa.SmallInteger(), nullable=False),
        sa.Column(
            "professor_responsavel_id",
            sa.Integer(),
            sa.ForeignKey("professores.id", ondelete="RESTRICT"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_turmas_ano_letivo", "turmas", ["ano_letivo"])
    op.create_index("ix_turmas_professor_responsavel_id", "turmas", ["professor_responsavel_id"])

    op.create_table(
        "disciplinas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False, unique=True),
        sa.Column("codigo", sa.String(length=10), nullable=False, unique=True),
        sa.Column(
            "professor_id",
            sa.Integer(),
            sa.ForeignKey("professores.id", ondelete="RESTRICT"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_disciplinas_professor_id", "disciplinas", ["professor_id"])

    op.create_table(
        "alunos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("senha", sa.String(length=100), nullable=False),
        sa.Column("cpf", sa.String(length=11), nullable=False, unique=True),
        sa.Column("telefone", sa.String(length=15), nullable=True),
        sa.Column("data_nascimento", sa.Date(), nullable=False),
        sa.Column("casa_id", sa.Integer(), sa.ForeignKey("casas.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("turma_id", sa.Integer(), sa.ForeignKey("turmas.id", ondelete="RESTRICT"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_alunos_email", "alunos", ["email"], unique=True)
    op.create_index("ix_alunos_casa_id", "alunos", ["casa_id"])
    op.create_index("ix_alunos_turma_id", "alunos", ["turma_id"])

    op.create_table(
        "matriculas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("aluno_id", sa.Integer(), sa.ForeignKey("alunos.id", ondelete="RESTRICT"), nullable=False),
        sa.Column(
            "disciplina_id",
            sa.Integer(),
            sa.ForeignKey("disciplinas.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("nota", sa.Float(), nullable=True),
        sa.Column("data_nota", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint("aluno_id", "disciplina_id", name="uq_matriculas_aluno_disciplina"),
    )
    op.create_index("ix_matriculas_aluno_id", "matriculas", ["aluno_id"])
    op.create_index("ix_matriculas_disciplina_id", "matriculas", ["disciplina_id"])

    op.create_table(
        "turma_disciplinas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("turma_id", sa.Integer(), sa.ForeignKey("turmas.id", ondelete="RESTRICT"), nullable=False),
        sa.Column(
            "disciplina_id",
            sa.Integer(),
            sa.ForeignKey("disciplinas.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "professor_id",
            sa.Integer(),
            sa.ForeignKey("professores.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.UniqueConstraint("turma_id", "disciplina_id", name="uq_turma_disciplinas_turma_disciplina"),
    )
    op.create_index("ix_turma_disciplinas_turma_id", "turma_disciplinas", ["turma_id"])
    op.create_index("ix_turma_disciplinas_disciplina_id", "turma_disciplinas", ["disciplina_id"])
    op.create_index("ix_turma_disciplinas_professor_id", "turma_disciplinas", ["professor_id"])


def downgrade() -> None:
    op.drop_table("turma_disciplinas")
    op.drop_table("matriculas")
    op.drop_table("alunos")
    op.drop_table("disciplinas")
    op.drop_table("turmas")
    op.drop_table("casas")
    op.drop_table("professores")
    op.drop_table("secretarios")
