"""Recurso admin: usuarios.

Cada operación declara su esquema de parámetros, verbo, path y body; el resto
(header de sesión, dispatch, normalización) lo hace `ResourceFacet`.
"""

from __future__ import annotations

from typing import Any, Mapping

from systemmanager.core.domain.models import (
    EmailExistParams,
    FindByIdParams,
    UpdatePasswordParams,
)
from systemmanager.core.interfaces.transport import ParentContext
from systemmanager.core.services.pipeline import ResourceFacet, build_session_header
from systemmanager.core.services.validation import validate


class User(ResourceFacet):
    """Operaciones de administración sobre usuarios."""

    def __init__(self, parent: ParentContext | None = None) -> None:
        super().__init__(parent)

    async def find_by_id(self, user_id: str, session: str) -> Any:
        """Perfil del usuario `user_id` (GET /admin/users/{user_id}).

        Example::

            api = SystemManagerAPI()
            await api.admin.user.find_by_id("55e4a3bd6be6b45210833fae", session)
        """

        params = validate(FindByIdParams, user_id=user_id, session=session)
        return await self._execute(
            "get",
            f"/admin/users/{params.user_id}",
            build_session_header(params.session),
        )

    async def find_by_id_and_update_password(
        self,
        params: Mapping[str, str],
        session: str,
    ) -> Any:
        """Cambia el password del usuario (PUT /admin/users/{userId}/password).

        `params` lleva `userId`, `oldPassword` y `newPassword` (o sus
        equivalentes snake_case). El `userId` va en el path, no en el body.

        Example::

            params = {
                "userId": "55e4a3bd6be6b45210833fae",
                "oldPassword": "123456",
                "newPassword": "123456789",
            }
            await api.admin.user.find_by_id_and_update_password(params, session)
        """

        checked = validate(UpdatePasswordParams, params=params, session=session)
        change = checked.params
        return await self._execute(
            "put",
            f"/admin/users/{change.user_id}/password",
            build_session_header(checked.session),
            body=change.body(),
        )

    async def email_exist(self, email: str, session: str) -> Any:
        """Consulta si `email` ya está registrado (POST /admin/users/email/exist)."""

        params = validate(EmailExistParams, email=email, session=session)
        return await self._execute(
            "post",
            "/admin/users/email/exist",
            build_session_header(params.session),
            body={"email": params.email},
        )
