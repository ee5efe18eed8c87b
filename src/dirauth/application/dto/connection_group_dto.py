"""Connection group DTOs."""

from dataclasses import dataclass

from dirauth.domain.value_objects import ConnectionGroupType


@dataclass
class ConnectionGroup:
    """External representation of a connection group."""

    name: str
    type: ConnectionGroupType = ConnectionGroupType.ORGANIZATIONAL
    parent_identifier: str | None = None
