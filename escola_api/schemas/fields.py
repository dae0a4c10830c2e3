from datetime import date
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, EmailStr, Field, model_validator

PositiveId = Annotated[int, Field(gt=0)]
Email = Annotated[EmailStr, Field(max_length=255)]
Senha = Annotated[str, Field(min_length=6, max_length=100)]
Cpf = Annotated[str, Field(min_length=11, max_length=11, pattern=r"^\d+$")]
Telefone = Annotated[str, Field(min_length=10, max_length=15)]
NomePessoa = Annotated[str, Field(min_length=2, max_length=100)]
NomeCurto = Annotated[str, Field(min_length=2, max_length=50)]
CorHex = Annotated[str, Field(max_length=7, pattern=r"^#([0-9A-Fa-f]{3}){1,2}$")]


def _no_passado(value: date) -> date:
    if value >= date.today():
        raise ValueError("Data de nascimento deve ser no passado")
    return value


DataPassada = Annotated[date, AfterValidator(_no_passado)]


class PartialUpdate(BaseModel):
    """Base dos schemas de atualização parcial.

    Campos ausentes não são tocados. Campos listados em `required_columns`
    podem ser omitidos, mas não podem ser enviados como null.
    """

    required_columns: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulos = sorted(
            campo for campo in self.model_fields_set & self.required_columns
            if getattr(self, campo) is None
        )
        if nulos:
            raise ValueError(f"Campos não podem ser nulos: {', '.join(nulos)}")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
