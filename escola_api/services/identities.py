"""
Resolução de identidades.

Secretário, professor e aluno vivem em tabelas separadas. A busca por email
percorre as tabelas sempre na mesma ordem (secretário > professor > aluno) e
para no primeiro resultado. Como a API recusa o mesmo email em duas tabelas
(ensure_email_available), a ordem só importa para dados legados.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from escola_api.core.errors import Conflict
from escola_api.core.roles import Role
from escola_api.models import Aluno, Professor, Secretario

IdentityRecord = Union[Secretario, Professor, Aluno]

IDENTITY_TABLES: tuple[tuple[Role, type], ...] = (
    (Role.SECRETARIO, Secretario),
    (Role.PROFESSOR, Professor),
    (Role.ALUNO, Aluno),
)

_HIDDEN_COLUMNS = {"senha"}


@dataclass(frozen=True)
class Identity:
    role: Role
    record: IdentityRecord

    def public_fields(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for column in self.record.__table__.columns:
            if column.key in _HIDDEN_COLUMNS:
                continue
            value = getattr(self.record, column.key)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            data[column.key] = value
        data["role"] = self.role.value
        return data


def find_by_email(db: Session, email: str) -> Identity | None:
    for role, model in IDENTITY_TABLES:
        record = db.execute(select(model).where(model.email == email)).scalar_one_or_none()
        if record is not None:
            return Identity(role=role, record=record)
    return None


def ensure_email_available(db: Session, email: str, owner: IdentityRecord | None = None) -> None:
    """Recusa um email já usado por qualquer identidade que não seja `owner`."""
    found = find_by_email(db, email)
    if found is None or found.record is owner:
        return
    raise Conflict(f"Email já cadastrado: {email}", campos=["email"])
