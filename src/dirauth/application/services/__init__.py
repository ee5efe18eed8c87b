"""Directory object services."""

from dirauth.application.services.connection_group_service import ConnectionGroupService
from dirauth.application.services.connection_service import ConnectionService
from dirauth.application.services.directory_object import (
    ModeledConnection,
    ModeledConnectionGroup,
    ModeledDirectoryObject,
    ModeledUser,
)
from dirauth.application.services.directory_object_service import (
    IMPLICIT_OBJECT_PERMISSIONS,
    DirectoryObjectService,
)
from dirauth.application.services.user_service import UserService

__all__ = [
    "IMPLICIT_OBJECT_PERMISSIONS",
    "ConnectionGroupService",
    "ConnectionService",
    "DirectoryObjectService",
    "ModeledConnection",
    "ModeledConnectionGroup",
    "ModeledDirectoryObject",
    "ModeledUser",
    "UserService",
]
