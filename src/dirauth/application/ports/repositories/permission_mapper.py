"""Permission mapper ports."""

from collections.abc import Collection
from typing import Protocol

from dirauth.domain.entities import (
    ObjectPermissionModel,
    SystemPermissionModel,
    UserModel,
)


class ObjectPermissionMapper(Protocol):
    """Port for per-object permission grants of one entity type."""

    async def select(self, user: UserModel) -> list[ObjectPermissionModel]: ...

    async def insert(self, permissions: Collection[ObjectPermissionModel]) -> None: ...


class SystemPermissionMapper(Protocol):
    """Port for system permission grants."""

    async def select(self, user: UserModel) -> list[SystemPermissionModel]: ...
