"""Connection group types."""

from enum import StrEnum


class ConnectionGroupType(StrEnum):
    """How a connection group behaves when connected to."""

    ORGANIZATIONAL = "ORGANIZATIONAL"
    BALANCING = "BALANCING"
