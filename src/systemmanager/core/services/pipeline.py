"""Contrato de ejecución compartido por todos los recursos.

validate → header de sesión → un dispatch → normalizar.

Este módulo consolida lo que cada método de cada recurso repetiría: los
recursos concretos (User, ...) solo declaran esquema, verbo, path y body.
El normalizador es el único lugar donde se interpretan códigos de estado.
"""

from __future__ import annotations

from typing import Any, Mapping

import pydantic

from systemmanager.core.domain.errors import (
    DEFAULT_ERROR_MESSAGE,
    RemoteError,
    TransportFailure,
    ValidationError,
)
from systemmanager.core.domain.models import (
    Failure,
    NormalizedResult,
    Success,
    TransportResponse,
)
from systemmanager.core.interfaces.transport import ParentContext, RequestMeta, TransportClient
from systemmanager.core.log import get_logger

_log = get_logger("pipeline")

_VERBS_WITH_BODY = ("post", "put")


def build_session_header(session: str) -> dict[str, dict[str, str]]:
    """Metadata de transporte con el token tal cual (sin prefijo ni hash)."""

    return {"headers": {"authorization": session}}


def _as_envelope(outcome: TransportResponse | Mapping[str, Any]) -> TransportResponse:
    if isinstance(outcome, TransportResponse):
        return outcome
    try:
        return TransportResponse.model_validate(outcome)
    except pydantic.ValidationError as exc:
        raise TransportFailure(f"Malformed transport response: {outcome!r}") from exc


def is_response_shaped(exc: BaseException) -> bool:
    """Excepción con forma de respuesta: lleva un `status` entero."""

    status = getattr(exc, "status", None)
    return isinstance(status, int) and not isinstance(status, bool)


def normalize_response(
    outcome: TransportResponse | Mapping[str, Any] | BaseException,
) -> NormalizedResult:
    """Clasifica el resultado del transporte en `Success` o `Failure`.

    - Una excepción con forma de respuesta (`ResponseError` o cualquier otra
      con `status` entero y `message` opcional) se trata como respuesta.
    - Un `TransportFailure` no tiene forma de respuesta: se reporta con su
      propia descripción y sin status upstream.
    - Solo el status 200 exacto es éxito; `data` ausente pasa a `{}`.
    """

    if isinstance(outcome, TransportFailure):
        return Failure(RemoteError(str(outcome) or DEFAULT_ERROR_MESSAGE))

    if isinstance(outcome, BaseException):
        if not is_response_shaped(outcome):
            raise TypeError(f"Not a transport outcome: {outcome!r}")
        message = getattr(outcome, "message", None)
        envelope = TransportResponse(
            status=outcome.status,
            message=message if isinstance(message, str) else None,
        )
    else:
        try:
            envelope = _as_envelope(outcome)
        except TransportFailure as exc:
            return Failure(RemoteError(str(exc)))

    if envelope.status == 200:
        return Success({} if envelope.data is None else envelope.data)

    message = envelope.message if envelope.message is not None else DEFAULT_ERROR_MESSAGE
    return Failure(RemoteError(message, upstream_status=envelope.status))


class ResourceFacet:
    """Base de los recursos: toma prestado el cliente del contexto padre.

    El recurso nunca construye ni cierra el transporte; su ciclo de vida es
    del padre.
    """

    def __init__(self, parent: ParentContext | None) -> None:
        if parent is None:
            raise ValidationError("parent", "a parent context is required")
        get_client = getattr(getattr(parent, "dispatch", None), "get_client", None)
        if not callable(get_client):
            raise ValidationError("parent.dispatch", "must expose get_client()")

        self.parent = parent
        self._client: TransportClient = get_client()

    async def _execute(
        self,
        verb: str,
        path: str,
        meta: RequestMeta,
        body: Any = None,
    ) -> Any:
        """Un único dispatch + normalización. Lanza `RemoteError` si no es 200."""

        call = getattr(self._client, verb)
        cause: Exception | None = None
        _log.debug("%s %s", verb.upper(), path)
        try:
            if verb in _VERBS_WITH_BODY:
                outcome = await call(path, body, meta)
            else:
                outcome = await call(path, meta)
        except Exception as exc:
            if not (isinstance(exc, TransportFailure) or is_response_shaped(exc)):
                raise
            outcome = exc
            cause = exc

        result = normalize_response(outcome)
        if isinstance(result, Failure):
            _log.info(
                "%s %s failed: %s (upstream status %s)",
                verb.upper(),
                path,
                result.error.message,
                result.error.upstream_status,
            )
            raise result.error from cause
        return result.data
