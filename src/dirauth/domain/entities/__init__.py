"""Domain entities."""

from dirauth.domain.entities.authenticated_user import AuthenticatedUser
from dirauth.domain.entities.connection import ConnectionModel
from dirauth.domain.entities.connection_group import ConnectionGroupModel
from dirauth.domain.entities.object_model import ObjectModel
from dirauth.domain.entities.permission import ObjectPermissionModel, SystemPermissionModel
from dirauth.domain.entities.user import UserModel

__all__ = [
    "AuthenticatedUser",
    "ConnectionGroupModel",
    "ConnectionModel",
    "ObjectModel",
    "ObjectPermissionModel",
    "SystemPermissionModel",
    "UserModel",
]
