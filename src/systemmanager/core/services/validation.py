"""Validación de parámetros antes de cualquier I/O.

Síncrona y fail-fast: o devuelve el modelo validado o lanza
`ValidationError` con la primera restricción violada. Nunca toca la red.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic

from systemmanager.core.domain.errors import ValidationError
from systemmanager.core.domain.models import SessionParams

P = TypeVar("P", bound=SessionParams)


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "value"


def validate(schema: type[P], **values: Any) -> P:
    """Valida `values` contra `schema` (un modelo de parámetros)."""

    try:
        return schema.model_validate(values)
    except pydantic.ValidationError as exc:
        first = exc.errors(include_url=False)[0]
        raise ValidationError(_field_path(first["loc"]), first["msg"]) from exc
