"""Connection entity."""

from dataclasses import dataclass, field

from dirauth.domain.entities.object_model import ObjectModel


@dataclass
class ConnectionModel(ObjectModel):
    """Connection row. A parent_identifier of None means the root group."""

    name: str = ""
    protocol: str | None = None
    parent_identifier: str | None = None
    parameters: dict[str, str] = field(default_factory=dict)
