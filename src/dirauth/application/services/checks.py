"""Check functions run by directory object services before each mutation.

A check has the signature ``(service, uow, user, target)`` where target is
the model being created or updated, or the identifier being deleted. A check
either returns or raises; services run their checks in order and stop at the
first exception.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from dirauth.application.ports import UnitOfWork
from dirauth.domain.entities import AuthenticatedUser, ObjectModel
from dirauth.domain.exceptions import PermissionDenied, ValidationError
from dirauth.domain.value_objects import ObjectPermissionType

if TYPE_CHECKING:
    from dirauth.application.services.directory_object_service import (
        DirectoryObjectService,
    )

logger = logging.getLogger(__name__)

Check = Callable[["DirectoryObjectService", UnitOfWork, AuthenticatedUser, Any], Awaitable[None]]


async def require_create_permission(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    model: ObjectModel,
) -> None:
    """Deny unless the user may create objects of the service's type."""
    if not await service.has_create_permission(uow, user):
        logger.info("Denied create of %s to user %r", service.object_kind, user.identifier)
        raise PermissionDenied()


async def require_object_permission(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    identifier: str | None,
    action: ObjectPermissionType,
) -> None:
    """Deny unless the user holds action on the object."""
    if not await service.has_object_permission(uow, user, identifier, action):
        logger.info(
            "Denied %s on %s %r to user %r",
            action,
            service.object_kind,
            identifier,
            user.identifier,
        )
        raise PermissionDenied()


async def require_update_permission(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    model: ObjectModel,
) -> None:
    await require_object_permission(
        service, uow, user, model.identifier, ObjectPermissionType.UPDATE
    )


async def require_delete_permission(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    identifier: str,
) -> None:
    await require_object_permission(
        service, uow, user, identifier, ObjectPermissionType.DELETE
    )


async def require_name(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    model: Any,
) -> None:
    """Reject blank names."""
    if not (model.name or "").strip():
        raise ValidationError(f"The {service.object_kind} name must not be blank.")


async def require_unique_name(
    service: "DirectoryObjectService",
    uow: UnitOfWork,
    user: AuthenticatedUser,
    model: Any,
) -> None:
    """Reject a name already used by another object under the same parent."""
    existing = await service.object_mapper(uow).select_one_by_name(
        model.parent_identifier, model.name
    )
    if existing is not None and existing.identifier != model.identifier:
        raise ValidationError(f'The {service.object_kind} "{model.name}" already exists.')
