"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada operación declara la forma de sus parámetros como un modelo explícito
  en vez de checks ad-hoc campo por campo.
- El sobre de respuesta del transporte tiene un tipo único que el
  normalizador puede inspeccionar.

Nota:
- Estos modelos describen *qué* viaja, no *cómo* se envía.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Union

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, Field, StrictStr
from pydantic.config import ConfigDict

from systemmanager.core.domain.errors import RemoteError


class TransportResponse(BaseModel):
    """Sobre crudo que devuelve el transporte.

    `data` ausente (None) y `message` ausente se distinguen de valores
    vacíos; el normalizador aplica los defaults.
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(
        ...,
        description="Código HTTP (o sintetizado) de la respuesta.",
    )
    data: Any = Field(
        default=None,
        description="Cuerpo decodificado de la respuesta exitosa.",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje de error reportado por la API remota.",
    )


@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class Failure:
    error: RemoteError


NormalizedResult = Union[Success, Failure]


class SessionParams(BaseModel):
    """Base de los esquemas: toda operación exige un token de sesión."""

    model_config = ConfigDict(extra="forbid")

    session: StrictStr = Field(
        ...,
        min_length=1,
        description="Token JWT de sesión, se reenvía tal cual.",
    )


class FindByIdParams(SessionParams):
    user_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Identificador del usuario (_id en la base).",
    )


class PasswordChange(BaseModel):
    """Objeto `params` de la actualización de password.

    Acepta los nombres del wire (`userId`) o snake_case (`user_id`).
    Exactamente estas tres claves; cualquier otra se rechaza.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    user_id: StrictStr = Field(..., min_length=1, alias="userId")
    old_password: StrictStr = Field(..., min_length=1, alias="oldPassword")
    new_password: StrictStr = Field(..., min_length=1, alias="newPassword")

    def body(self) -> dict[str, str]:
        """Cuerpo del PUT: el userId va en el path, no en el body."""

        return {"oldPassword": self.old_password, "newPassword": self.new_password}


class UpdatePasswordParams(SessionParams):
    params: PasswordChange


def _check_email(value: str) -> str:
    """Valida la sintaxis pero devuelve el email tal cual lo pasó quien llama.

    `validate_email` rechaza la forma con display name (`"Ana <ana@x.com>"`)
    y lanza `EmailNotValidError` (un `ValueError`).
    """

    validate_email(value, check_deliverability=False)
    return value


EmailAddress = Annotated[StrictStr, AfterValidator(_check_email)]


class EmailExistParams(SessionParams):
    email: EmailAddress = Field(
        ...,
        description="Email cuya unicidad se consulta.",
    )
