"""System-wide permissions, not tied to any object."""

from enum import StrEnum


class SystemPermissionType(StrEnum):
    """System permission actions."""

    CREATE_CONNECTION = "CREATE_CONNECTION"
    CREATE_CONNECTION_GROUP = "CREATE_CONNECTION_GROUP"
    CREATE_USER = "CREATE_USER"
    ADMINISTER = "ADMINISTER"
