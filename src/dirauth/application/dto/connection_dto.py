"""Connection DTOs."""

from dataclasses import dataclass, field


@dataclass
class Connection:
    """External representation of a connection."""

    name: str
    protocol: str
    parent_identifier: str | None = None
    parameters: dict[str, str] = field(default_factory=dict)
