"""Repository ports."""

from dirauth.application.ports.repositories.connection_group_mapper import (
    ConnectionGroupMapper,
)
from dirauth.application.ports.repositories.connection_mapper import ConnectionMapper
from dirauth.application.ports.repositories.directory_object_mapper import (
    DirectoryObjectMapper,
)
from dirauth.application.ports.repositories.permission_mapper import (
    ObjectPermissionMapper,
    SystemPermissionMapper,
)
from dirauth.application.ports.repositories.user_mapper import UserMapper

__all__ = [
    "ConnectionGroupMapper",
    "ConnectionMapper",
    "DirectoryObjectMapper",
    "ObjectPermissionMapper",
    "SystemPermissionMapper",
    "UserMapper",
]
