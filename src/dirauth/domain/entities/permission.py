"""Permission grant records."""

from dataclasses import dataclass

from dirauth.domain.value_objects import ObjectPermissionType, SystemPermissionType


@dataclass(frozen=True)
class ObjectPermissionModel:
    """Grant of one action on one object to one user."""

    user_id: int | None
    username: str | None
    type: ObjectPermissionType
    object_identifier: str


@dataclass(frozen=True)
class SystemPermissionModel:
    """Grant of one system-wide action to one user."""

    user_id: int | None
    username: str | None
    type: SystemPermissionType
