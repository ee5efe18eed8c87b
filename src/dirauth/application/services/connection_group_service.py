"""Connection group directory service."""

from dirauth.application.dto import ConnectionGroup
from dirauth.application.permission import ObjectPermissionSet
from dirauth.application.ports import UnitOfWork
from dirauth.application.ports.repositories import (
    ConnectionGroupMapper,
    ObjectPermissionMapper,
)
from dirauth.application.services.checks import (
    require_create_permission,
    require_name,
    require_unique_name,
    require_update_permission,
)
from dirauth.application.services.directory_object import ModeledConnectionGroup
from dirauth.application.services.directory_object_service import DirectoryObjectService
from dirauth.domain.entities import AuthenticatedUser, ConnectionGroupModel
from dirauth.domain.exceptions import ValidationError
from dirauth.domain.value_objects import SystemPermissionType


async def reject_self_parent(
    service: DirectoryObjectService,
    uow: UnitOfWork,
    user: AuthenticatedUser,
    model: ConnectionGroupModel,
) -> None:
    """A group may not be its own parent."""
    if model.identifier is not None and model.parent_identifier == model.identifier:
        raise ValidationError("A connection group may not contain itself.")


class ConnectionGroupService(
    DirectoryObjectService[ModeledConnectionGroup, ConnectionGroup, ConnectionGroupModel]
):
    """Connection groups. Identifiers are assigned by storage on insert."""

    object_kind = "connection group"

    before_create_checks = (require_create_permission, require_name, require_unique_name)
    before_update_checks = (
        require_update_permission,
        require_name,
        require_unique_name,
        reject_self_parent,
    )

    def object_mapper(self, uow: UnitOfWork) -> ConnectionGroupMapper:
        return uow.connection_groups

    def permission_mapper(self, uow: UnitOfWork) -> ObjectPermissionMapper:
        return uow.connection_group_permissions

    def get_object_instance(
        self, user: AuthenticatedUser, model: ConnectionGroupModel
    ) -> ModeledConnectionGroup:
        return ModeledConnectionGroup(user, model)

    def get_model_instance(
        self, user: AuthenticatedUser, obj: ConnectionGroup
    ) -> ConnectionGroupModel:
        return ConnectionGroupModel(
            name=obj.name,
            type=obj.type,
            parent_identifier=obj.parent_identifier,
        )

    async def has_create_permission(self, uow: UnitOfWork, user: AuthenticatedUser) -> bool:
        return await self.has_system_permission(
            uow, user, SystemPermissionType.CREATE_CONNECTION_GROUP
        )

    def get_permission_set(
        self, uow: UnitOfWork, user: AuthenticatedUser
    ) -> ObjectPermissionSet:
        return ObjectPermissionSet(user.model, uow.connection_group_permissions)
