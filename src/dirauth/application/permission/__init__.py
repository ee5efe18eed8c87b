"""Authorization policy and permission sets."""

from dirauth.application.permission.authorization import (
    authorize,
    bypasses_permission_checks,
)
from dirauth.application.permission.object_permission_set import ObjectPermissionSet
from dirauth.application.permission.system_permission_set import SystemPermissionSet

__all__ = [
    "ObjectPermissionSet",
    "SystemPermissionSet",
    "authorize",
    "bypasses_permission_checks",
]
