from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from systemmanager import SystemManagerAPI
from systemmanager.core.config import AppSettings
from systemmanager.core.domain.models import TransportResponse

TOKEN = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.test"


@dataclass
class RecordingTransport:
    """Stub de `TransportClient`: registra llamadas y devuelve/lanza `outcome`."""

    outcome: Any = field(default_factory=lambda: TransportResponse(status=200, data={}))
    calls: list[tuple[str, str, Any, Any]] = field(default_factory=list)

    async def _answer(self) -> Any:
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    async def get(self, path: str, meta: Any) -> Any:
        self.calls.append(("get", path, None, meta))
        return await self._answer()

    async def post(self, path: str, body: Any, meta: Any) -> Any:
        self.calls.append(("post", path, body, meta))
        return await self._answer()

    async def put(self, path: str, body: Any, meta: Any) -> Any:
        self.calls.append(("put", path, body, meta))
        return await self._answer()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url="https://api.test.local", http_timeout_seconds=5)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def api(settings: AppSettings, transport: RecordingTransport) -> SystemManagerAPI:
    return SystemManagerAPI(settings, client=transport)
