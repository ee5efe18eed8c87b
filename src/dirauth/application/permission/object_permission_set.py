"""Object permission set - one user's grants on one entity type."""

from dirauth.application.ports.repositories import ObjectPermissionMapper
from dirauth.domain.entities import UserModel
from dirauth.domain.value_objects import ObjectPermissionType


class ObjectPermissionSet:
    """Per-user view over an object permission mapper.

    Grants are loaded on first use and kept for the life of the set, which
    is one request.
    """

    def __init__(self, user: UserModel, mapper: ObjectPermissionMapper) -> None:
        self._user = user
        self._mapper = mapper
        self._granted: set[tuple[ObjectPermissionType, str]] | None = None

    async def _load(self) -> set[tuple[ObjectPermissionType, str]]:
        if self._granted is None:
            perms = await self._mapper.select(self._user)
            self._granted = {(p.type, p.object_identifier) for p in perms}
        return self._granted

    async def has_permission(self, action: str, identifier: str | None = None) -> bool:
        """Check if the user holds action on the object with identifier."""
        if identifier is None:
            return False
        granted = await self._load()
        return (ObjectPermissionType(action), identifier) in granted
