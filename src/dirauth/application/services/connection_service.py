"""Connection directory service."""

from dirauth.application.dto import Connection
from dirauth.application.permission import ObjectPermissionSet
from dirauth.application.ports import UnitOfWork
from dirauth.application.ports.repositories import (
    ConnectionMapper,
    ObjectPermissionMapper,
)
from dirauth.application.services.checks import (
    require_create_permission,
    require_name,
    require_unique_name,
    require_update_permission,
)
from dirauth.application.services.directory_object import ModeledConnection
from dirauth.application.services.directory_object_service import DirectoryObjectService
from dirauth.domain.entities import AuthenticatedUser, ConnectionModel
from dirauth.domain.value_objects import SystemPermissionType


class ConnectionService(DirectoryObjectService[ModeledConnection, Connection, ConnectionModel]):
    """Connections. Identifiers are assigned by storage on insert."""

    object_kind = "connection"

    before_create_checks = (require_create_permission, require_name, require_unique_name)
    before_update_checks = (require_update_permission, require_name, require_unique_name)

    def object_mapper(self, uow: UnitOfWork) -> ConnectionMapper:
        return uow.connections

    def permission_mapper(self, uow: UnitOfWork) -> ObjectPermissionMapper:
        return uow.connection_permissions

    def get_object_instance(
        self, user: AuthenticatedUser, model: ConnectionModel
    ) -> ModeledConnection:
        return ModeledConnection(user, model)

    def get_model_instance(self, user: AuthenticatedUser, obj: Connection) -> ConnectionModel:
        return ConnectionModel(
            name=obj.name,
            protocol=obj.protocol,
            parent_identifier=obj.parent_identifier,
            parameters=dict(obj.parameters),
        )

    async def has_create_permission(self, uow: UnitOfWork, user: AuthenticatedUser) -> bool:
        return await self.has_system_permission(
            uow, user, SystemPermissionType.CREATE_CONNECTION
        )

    def get_permission_set(
        self, uow: UnitOfWork, user: AuthenticatedUser
    ) -> ObjectPermissionSet:
        return ObjectPermissionSet(user.model, uow.connection_permissions)
