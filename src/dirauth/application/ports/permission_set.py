"""Permission set port - per-user view over granted permissions."""

from typing import Protocol


class PermissionSet(Protocol):
    """Answers whether one user holds a permission."""

    async def has_permission(self, action: str, identifier: str | None = None) -> bool: ...
