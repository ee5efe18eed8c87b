"""Actions that can be granted on a single directory object."""

from enum import StrEnum


class ObjectPermissionType(StrEnum):
    """Per-object permission actions."""

    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ADMINISTER = "ADMINISTER"
