"""Tradução de falhas do banco para os erros HTTP da API.

Toda rota que grava no banco passa pelo context manager `storage_errors`,
então a mesma tabela vale para todas as entidades:

    violação de unique      -> Conflict nomeando o(s) campo(s)
    registro inexistente    -> NotFound
    violação de foreign key -> Conflict explicando o vínculo
    qualquer outra coisa    -> InternalError com a mensagem original
"""

import re
from contextlib import contextmanager
from enum import Enum

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from escola_api.core.errors import Conflict, EscolaError, InternalError, NotFound
from escola_api.core.logger import get_logger

logger = get_logger(__name__)

# SQLSTATE do PostgreSQL
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"

_PG_KEY_RE = re.compile(r"Key \(([^)]+)\)=")
_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (.+)$", re.MULTILINE)


class StorageSignal(str, Enum):
    UNIQUE = "unique"
    NOT_FOUND = "not_found"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


def _driver_code(exc: IntegrityError) -> str | None:
    orig = exc.orig
    # psycopg2 expõe pgcode, psycopg 3 expõe sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def classify(exc: BaseException) -> StorageSignal:
    if isinstance(exc, NoResultFound):
        return StorageSignal.NOT_FOUND
    if not isinstance(exc, IntegrityError):
        return StorageSignal.OTHER

    code = _driver_code(exc)
    if code == PG_UNIQUE_VIOLATION:
        return StorageSignal.UNIQUE
    if code == PG_FOREIGN_KEY_VIOLATION:
        return StorageSignal.FOREIGN_KEY

    # SQLite só informa pela mensagem (e por sqlite_errorname a partir do 3.11)
    name = getattr(exc.orig, "sqlite_errorname", "") or ""
    text = str(exc.orig)
    if name == "SQLITE_CONSTRAINT_UNIQUE" or "UNIQUE constraint failed" in text:
        return StorageSignal.UNIQUE
    if name == "SQLITE_CONSTRAINT_FOREIGNKEY" or "FOREIGN KEY constraint failed" in text:
        return StorageSignal.FOREIGN_KEY
    return StorageSignal.OTHER


def unique_fields(exc: IntegrityError) -> list[str]:
    """Extrai os nomes de coluna de uma violação de unique."""
    text = str(exc.orig)

    m = _PG_KEY_RE.search(text)
    if m:
        return [c.strip() for c in m.group(1).split(",")]

    m = _SQLITE_UNIQUE_RE.search(text)
    if m:
        # "casas.nome" ou "matriculas.aluno_id, matriculas.disciplina_id"
        return [c.strip().split(".")[-1] for c in m.group(1).split(",")]

    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    return [constraint] if constraint else []


def map_storage_error(
    exc: Exception,
    recurso: str,
    *,
    on_unique: EscolaError | None = None,
    on_foreign_key: EscolaError | None = None,
) -> EscolaError:
    signal = classify(exc)

    if signal is StorageSignal.NOT_FOUND:
        return NotFound(f"{recurso} não encontrado(a).")

    if signal is StorageSignal.UNIQUE:
        if on_unique is not None:
            return on_unique
        campos = unique_fields(exc)
        return Conflict(
            f"{recurso}: campo único já existe: {', '.join(campos) or 'desconhecido'}",
            campos=campos,
        )

    if signal is StorageSignal.FOREIGN_KEY:
        if on_foreign_key is not None:
            return on_foreign_key
        return Conflict(
            f"Não é possível concluir a operação: {recurso} possui vínculos ativos."
        )

    orig = getattr(exc, "orig", None)
    return InternalError(str(orig or exc))


@contextmanager
def storage_errors(
    db: Session,
    recurso: str,
    *,
    on_unique: EscolaError | None = None,
    on_foreign_key: EscolaError | None = None,
):
    try:
        yield
    except (NoResultFound, SQLAlchemyError) as exc:
        db.rollback()
        error = map_storage_error(
            exc, recurso, on_unique=on_unique, on_foreign_key=on_foreign_key
        )
        logger.warning(f"{recurso}: {classify(exc).value} -> {error.http_status}")
        raise error from exc
