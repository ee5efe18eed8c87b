"""User directory service."""

from dirauth.application.dto import User
from dirauth.application.permission import ObjectPermissionSet
from dirauth.application.ports import UnitOfWork
from dirauth.application.ports.repositories import ObjectPermissionMapper, UserMapper
from dirauth.application.services.checks import (
    require_create_permission,
    require_delete_permission,
    require_update_permission,
)
from dirauth.application.services.directory_object import ModeledUser
from dirauth.application.services.directory_object_service import DirectoryObjectService
from dirauth.domain.entities import AuthenticatedUser, UserModel
from dirauth.domain.exceptions import ValidationError
from dirauth.domain.value_objects import SystemPermissionType


async def require_username(
    service: DirectoryObjectService, uow: UnitOfWork, user: AuthenticatedUser, model: UserModel
) -> None:
    """Reject blank usernames."""
    if not (model.username or "").strip():
        raise ValidationError("The username must not be blank.")


async def require_unique_username(
    service: DirectoryObjectService, uow: UnitOfWork, user: AuthenticatedUser, model: UserModel
) -> None:
    """Reject a username held by any other user row, on create and on rename."""
    existing = await uow.users.select_one(model.username)
    if existing is not None and existing.object_id != model.object_id:
        raise ValidationError(f'User "{model.username}" already exists.')


async def reject_self_delete(
    service: DirectoryObjectService, uow: UnitOfWork, user: AuthenticatedUser, identifier: str
) -> None:
    """Users may not delete their own account."""
    if identifier == user.identifier:
        raise ValidationError("Deleting your own user is not allowed.")


class UserService(DirectoryObjectService[ModeledUser, User, UserModel]):
    """Users, identified by username."""

    object_kind = "user"

    before_create_checks = (
        require_create_permission,
        require_username,
        require_unique_username,
    )
    before_update_checks = (
        require_update_permission,
        require_username,
        require_unique_username,
    )
    before_delete_checks = (require_delete_permission, reject_self_delete)

    def object_mapper(self, uow: UnitOfWork) -> UserMapper:
        return uow.users

    def permission_mapper(self, uow: UnitOfWork) -> ObjectPermissionMapper:
        return uow.user_permissions

    def get_object_instance(self, user: AuthenticatedUser, model: UserModel) -> ModeledUser:
        return ModeledUser(user, model)

    def get_model_instance(self, user: AuthenticatedUser, obj: User) -> UserModel:
        return UserModel(
            identifier=obj.username,
            disabled=obj.disabled,
            full_name=obj.full_name,
            email_address=obj.email_address,
        )

    async def has_create_permission(self, uow: UnitOfWork, user: AuthenticatedUser) -> bool:
        return await self.has_system_permission(uow, user, SystemPermissionType.CREATE_USER)

    def get_permission_set(
        self, uow: UnitOfWork, user: AuthenticatedUser
    ) -> ObjectPermissionSet:
        return ObjectPermissionSet(user.model, uow.user_permissions)
