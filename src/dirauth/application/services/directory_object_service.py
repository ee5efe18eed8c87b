"""Directory object service - permission-enforcing CRUD over a mapper."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from dirauth.application.permission import (
    ObjectPermissionSet,
    SystemPermissionSet,
    authorize,
    bypasses_permission_checks,
)
from dirauth.application.ports import UnitOfWork, UnitOfWorkFactory
from dirauth.application.ports.repositories import (
    DirectoryObjectMapper,
    ObjectPermissionMapper,
)
from dirauth.application.services.checks import (
    Check,
    require_create_permission,
    require_delete_permission,
    require_update_permission,
)
from dirauth.application.services.directory_object import ModeledDirectoryObject
from dirauth.domain.entities import AuthenticatedUser, ObjectModel, ObjectPermissionModel
from dirauth.domain.exceptions import IntegrityViolation
from dirauth.domain.value_objects import ObjectPermissionType, SystemPermissionType

logger = logging.getLogger(__name__)

InternalT = TypeVar("InternalT", bound=ModeledDirectoryObject)
ExternalT = TypeVar("ExternalT")
ModelT = TypeVar("ModelT", bound=ObjectModel)

IMPLICIT_OBJECT_PERMISSIONS: tuple[ObjectPermissionType, ...] = (
    ObjectPermissionType.READ,
    ObjectPermissionType.UPDATE,
    ObjectPermissionType.DELETE,
    ObjectPermissionType.ADMINISTER,
)


class DirectoryObjectService(ABC, Generic[InternalT, ExternalT, ModelT]):
    """Creates, retrieves and changes directory objects on behalf of a user.

    Every operation enforces the user's permissions before touching storage.
    Objects the user cannot read are left out of results rather than
    reported. Administrators bypass all object checks.

    The checks run before create, update and delete default to the class
    attributes below and can be replaced per instance through the
    constructor. Each operation runs inside one unit of work.
    """

    object_kind: ClassVar[str] = "object"

    before_create_checks: ClassVar[Sequence[Check]] = (require_create_permission,)
    before_update_checks: ClassVar[Sequence[Check]] = (require_update_permission,)
    before_delete_checks: ClassVar[Sequence[Check]] = (require_delete_permission,)

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        *,
        implicit_permissions: Sequence[ObjectPermissionType] | None = None,
        before_create: Sequence[Check] | None = None,
        before_update: Sequence[Check] | None = None,
        before_delete: Sequence[Check] | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._implicit_permissions = tuple(
            IMPLICIT_OBJECT_PERMISSIONS
            if implicit_permissions is None
            else implicit_permissions
        )
        self._before_create = tuple(
            self.before_create_checks if before_create is None else before_create
        )
        self._before_update = tuple(
            self.before_update_checks if before_update is None else before_update
        )
        self._before_delete = tuple(
            self.before_delete_checks if before_delete is None else before_delete
        )

    @property
    def implicit_permissions(self) -> tuple[ObjectPermissionType, ...]:
        return self._implicit_permissions

    # --- Extension points ---

    @abstractmethod
    def object_mapper(self, uow: UnitOfWork) -> DirectoryObjectMapper[ModelT]:
        """Mapper for the models behind this service's objects."""

    @abstractmethod
    def permission_mapper(self, uow: UnitOfWork) -> ObjectPermissionMapper:
        """Mapper for the permissions that affect this service's objects."""

    @abstractmethod
    def get_object_instance(self, user: AuthenticatedUser, model: ModelT) -> InternalT:
        """Wrap model in an object bound to user."""

    @abstractmethod
    def get_model_instance(self, user: AuthenticatedUser, obj: ExternalT) -> ModelT:
        """Build a new, not yet stored, model from obj."""

    @abstractmethod
    async def has_create_permission(self, uow: UnitOfWork, user: AuthenticatedUser) -> bool:
        """Whether user may create objects of this type."""

    @abstractmethod
    def get_permission_set(
        self, uow: UnitOfWork, user: AuthenticatedUser
    ) -> ObjectPermissionSet:
        """Permissions of user on objects of this type."""

    def get_object_instances(
        self, user: AuthenticatedUser, models: Collection[ModelT]
    ) -> list[InternalT]:
        return [self.get_object_instance(user, model) for model in models]

    async def has_object_permission(
        self,
        uow: UnitOfWork,
        user: AuthenticatedUser,
        identifier: str | None,
        action: ObjectPermissionType,
    ) -> bool:
        """Whether user may perform action on the object with identifier.

        A None identifier (an object never stored) is granted only to
        administrators. Override to add rules beyond a plain permission set lookup.
        """
        return await authorize(user, self.get_permission_set(uow, user), action, identifier)

    async def has_system_permission(
        self,
        uow: UnitOfWork,
        user: AuthenticatedUser,
        action: SystemPermissionType,
    ) -> bool:
        permissions = SystemPermissionSet(user.model, uow.system_permissions)
        return await authorize(user, permissions, action)

    def get_implicit_permissions(
        self, user: AuthenticatedUser, model: ModelT
    ) -> list[ObjectPermissionModel]:
        """Grants given to the creator of model."""
        return [
            ObjectPermissionModel(
                user_id=user.model.object_id,
                username=user.model.identifier,
                type=action,
                object_identifier=model.identifier,
            )
            for action in self._implicit_permissions
        ]

    async def _run_checks(
        self,
        checks: Sequence[Check],
        uow: UnitOfWork,
        user: AuthenticatedUser,
        target: Any,
    ) -> None:
        for check in checks:
            await check(self, uow, user, target)

    # --- Operations ---

    async def retrieve_object(
        self, user: AuthenticatedUser, identifier: str
    ) -> InternalT | None:
        """Get the object with identifier, or None if missing or unreadable."""
        objects = await self.retrieve_objects(user, {identifier})
        if not objects:
            return None
        if len(objects) > 1:
            raise IntegrityViolation(
                f"{len(objects)} {self.object_kind} records share identifier {identifier!r}"
            )
        return objects[0]

    async def retrieve_objects(
        self, user: AuthenticatedUser, identifiers: Collection[str]
    ) -> list[InternalT]:
        """Get all objects with the given identifiers that user may read."""
        if not identifiers:
            return []

        async with self._uow_factory() as uow:
            mapper = self.object_mapper(uow)
            if bypasses_permission_checks(user):
                models = await mapper.select(identifiers)
            else:
                models = await mapper.select_readable(user.model, identifiers)

        logger.debug(
            "User %r retrieved %d of %d requested %s objects",
            user.identifier,
            len(models),
            len(identifiers),
            self.object_kind,
        )
        return self.get_object_instances(user, models)

    async def create_object(self, user: AuthenticatedUser, obj: ExternalT) -> InternalT:
        """Store a new object and grant the implicit permissions to its creator."""
        model = self.get_model_instance(user, obj)

        async with self._uow_factory() as uow:
            await self._run_checks(self._before_create, uow, user, model)
            try:
                await self.object_mapper(uow).insert(model)
                await self.permission_mapper(uow).insert(
                    self.get_implicit_permissions(user, model)
                )
            except BaseException:
                await uow.rollback()
                raise

        logger.debug(
            "User %r created %s %r", user.identifier, self.object_kind, model.identifier
        )
        return self.get_object_instance(user, model)

    async def update_object(self, user: AuthenticatedUser, obj: InternalT) -> None:
        """Write back changes made to obj. Has no effect if it no longer exists."""
        model = obj.model
        async with self._uow_factory() as uow:
            await self._run_checks(self._before_update, uow, user, model)
            await self.object_mapper(uow).update(model)

        logger.debug(
            "User %r updated %s %r", user.identifier, self.object_kind, model.identifier
        )

    async def delete_object(self, user: AuthenticatedUser, identifier: str) -> None:
        """Delete the object with identifier. Has no effect if it does not exist."""
        async with self._uow_factory() as uow:
            await self._run_checks(self._before_delete, uow, user, identifier)
            await self.object_mapper(uow).delete(identifier)

        logger.debug("User %r deleted %s %r", user.identifier, self.object_kind, identifier)

    async def get_identifiers(self, user: AuthenticatedUser) -> set[str]:
        """Identifiers of all objects of this type that user may read."""
        async with self._uow_factory() as uow:
            mapper = self.object_mapper(uow)
            if bypasses_permission_checks(user):
                return await mapper.select_identifiers()
            return await mapper.select_readable_identifiers(user.model)
