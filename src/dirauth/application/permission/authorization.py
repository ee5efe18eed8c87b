"""Authorization policy - the administrator bypass lives here and only here."""

from dirauth.application.ports import PermissionSet
from dirauth.domain.entities import AuthenticatedUser


def bypasses_permission_checks(user: AuthenticatedUser) -> bool:
    """Whether the user skips every per-object and system permission check."""
    return user.is_administrator


async def authorize(
    user: AuthenticatedUser,
    permissions: PermissionSet,
    action: str,
    identifier: str | None = None,
) -> bool:
    """Check if user may perform action (on identifier, for object permissions)."""
    if bypasses_permission_checks(user):
        return True
    return await permissions.has_permission(action, identifier)
