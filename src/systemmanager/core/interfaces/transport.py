"""Contratos del transporte y del contexto padre.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente httpx por un stub en tests, o por otro
  transporte, sin acoplar los recursos a una implementación concreta.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from systemmanager.core.domain.models import TransportResponse

RequestMeta = Mapping[str, Mapping[str, str]]


@runtime_checkable
class TransportClient(Protocol):
    """Cliente HTTP compartido.

    Reglas de diseño:
    - Los tres verbos son asíncronos; es el único punto de suspensión.
    - Devuelven un `TransportResponse` o lanzan `ResponseError` /
      `TransportFailure`. No reintentan.
    """

    async def get(self, path: str, meta: RequestMeta) -> TransportResponse:
        ...

    async def post(self, path: str, body: Any, meta: RequestMeta) -> TransportResponse:
        ...

    async def put(self, path: str, body: Any, meta: RequestMeta) -> TransportResponse:
        ...


class DispatchProvider(Protocol):
    def get_client(self) -> TransportClient:
        ...


class ParentContext(Protocol):
    """Lo único que un recurso necesita de su padre: `dispatch.get_client()`."""

    dispatch: DispatchProvider
