"""SDK async para la API de administración (System Manager).

Uso típico::

    from systemmanager import SystemManagerAPI

    async with SystemManagerAPI() as api:
        user = await api.admin.user.find_by_id(user_id, session)
"""

from systemmanager.api import SystemManagerAPI
from systemmanager.core.config import AppSettings
from systemmanager.core.domain.errors import RemoteError, SystemManagerError, ValidationError
from systemmanager.core.log import configure_logging

__all__ = [
    "AppSettings",
    "RemoteError",
    "SystemManagerAPI",
    "SystemManagerError",
    "ValidationError",
    "configure_logging",
]
