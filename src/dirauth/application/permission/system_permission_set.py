"""System permission set."""

from dirauth.application.ports.repositories import SystemPermissionMapper
from dirauth.domain.entities import UserModel
from dirauth.domain.value_objects import SystemPermissionType


class SystemPermissionSet:
    """Per-user view over system permission grants."""

    def __init__(self, user: UserModel, mapper: SystemPermissionMapper) -> None:
        self._user = user
        self._mapper = mapper
        self._granted: set[SystemPermissionType] | None = None

    async def has_permission(self, action: str, identifier: str | None = None) -> bool:
        """Check if the user holds the system permission. identifier is ignored."""
        if self._granted is None:
            perms = await self._mapper.select(self._user)
            self._granted = {p.type for p in perms}
        return SystemPermissionType(action) in self._granted
