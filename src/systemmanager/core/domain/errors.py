"""Errores del SDK.

Hacia quien llama solo salen dos casos: `ValidationError` (el input no cumple
su esquema, no hubo red) y `RemoteError` (cualquier respuesta no-200 o fallo
de transporte). Ambos llevan `status` y `message`.

`ResponseError` y `TransportFailure` son internos del contrato con el
transporte: el normalizador los convierte y nunca escapan de una operación.
"""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "No error message reported!"


class SystemManagerError(Exception):
    """Base de todos los errores del SDK."""

    status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "message": self.message}


class ValidationError(SystemManagerError):
    """Un parámetro no cumple la forma declarada para la operación."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, reason={self.reason!r})"


class RemoteError(SystemManagerError):
    """La API remota (o el transporte) no devolvió un 200."""

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        status: int = 400,
        upstream_status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        # Solo diagnóstico: quien llama no debería ramificar por esto.
        self.upstream_status = upstream_status

    def __repr__(self) -> str:
        return (
            f"RemoteError(status={self.status}, message={self.message!r}, "
            f"upstream_status={self.upstream_status})"
        )


class ResponseError(Exception):
    """Respuesta HTTP no exitosa, con forma de respuesta (status + message)."""

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message or f"HTTP {status}")
        self.status = status
        self.message = message


class TransportFailure(Exception):
    """Fallo sin forma de respuesta: conexión, timeout, cuerpo ilegible."""
