"""Punto de entrada del SDK.

`SystemManagerAPI` es el contexto padre: es dueño del único transporte y
expone los recursos por área (`api.admin.user`). Los recursos solo toman
prestado el cliente vía `api.dispatch.get_client()`.
"""

from __future__ import annotations

from types import TracebackType

from systemmanager.adapters.http_client import HttpTransport
from systemmanager.core.config import AppSettings
from systemmanager.core.interfaces.transport import TransportClient
from systemmanager.core.log import get_logger
from systemmanager.resources.admin import User

_log = get_logger("api")


class Dispatch:
    """Dueño del transporte compartido (uno por instancia del SDK)."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        # Un cliente inyectado es de quien lo inyecta; no lo cerramos.
        self._owns_client = client is None

    def get_client(self) -> TransportClient:
        if self._client is None:
            _log.debug("Creating HTTP transport for %s", self._settings.base_url)
            self._client = HttpTransport(self._settings)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and isinstance(self._client, HttpTransport):
            await self._client.aclose()


class Admin:
    """Recursos del área admin."""

    def __init__(self, parent: SystemManagerAPI) -> None:
        self.user = User(parent)


class SystemManagerAPI:
    """Contexto padre del SDK.

    Example::

        async with SystemManagerAPI() as api:
            user = await api.admin.user.find_by_id(user_id, session)
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.dispatch = Dispatch(self.settings, client=client)
        self.admin = Admin(self)

    async def aclose(self) -> None:
        await self.dispatch.aclose()

    async def __aenter__(self) -> SystemManagerAPI:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
