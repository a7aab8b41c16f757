"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y base URL para todos los recursos.
- Traduce respuestas y errores de httpx al contrato `TransportClient`
  (sobre `TransportResponse`, `ResponseError`, `TransportFailure`).
- Facilita testeo: se puede sustituir por un stub o montar `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from systemmanager.core.config import AppSettings
from systemmanager.core.domain.errors import ResponseError, TransportFailure
from systemmanager.core.domain.models import TransportResponse
from systemmanager.core.interfaces.transport import RequestMeta
from systemmanager.core.log import get_logger

_log = get_logger("http")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los recursos se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise TransportFailure(
            f"Invalid JSON body from {response.request.method} {response.request.url.path}"
        ) from exc


def _error_message(response: httpx.Response) -> str | None:
    """Mensaje de error del cuerpo (`message` o `error`), si existe."""

    try:
        payload = response.json() if response.content else None
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class HttpTransport:
    """Implementación httpx de `TransportClient`.

    Una petición por llamada, sin reintentos. El cliente httpx es de esta
    instancia; `aclose()` lo cierra (lo llama el contexto padre).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)

    async def get(self, path: str, meta: RequestMeta) -> TransportResponse:
        return await self._request("GET", path, meta)

    async def post(self, path: str, body: Any, meta: RequestMeta) -> TransportResponse:
        return await self._request("POST", path, meta, body=body)

    async def put(self, path: str, body: Any, meta: RequestMeta) -> TransportResponse:
        return await self._request("PUT", path, meta, body=body)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        meta: RequestMeta,
        *,
        body: Any = None,
    ) -> TransportResponse:
        headers = dict(meta.get("headers", {}))
        try:
            response = await self._client.request(
                method,
                path,
                headers=headers,
                json=body if method != "GET" else None,
            )
        except httpx.TransportError as exc:
            _log.debug("%s %s transport error: %r", method, path, exc)
            raise TransportFailure(f"{type(exc).__name__}: {exc}") from exc

        _log.debug("%s %s -> HTTP %s", method, path, response.status_code)
        if not response.is_success:
            raise ResponseError(response.status_code, _error_message(response))
        return TransportResponse(status=response.status_code, data=_decode_body(response))
