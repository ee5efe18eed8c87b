"""Domain value objects."""

from dirauth.domain.value_objects.connection_group_type import ConnectionGroupType
from dirauth.domain.value_objects.object_permission_type import ObjectPermissionType
from dirauth.domain.value_objects.system_permission_type import SystemPermissionType

__all__ = [
    "ConnectionGroupType",
    "ObjectPermissionType",
    "SystemPermissionType",
]
