"""Connection group entity."""

from dataclasses import dataclass

from dirauth.domain.entities.object_model import ObjectModel
from dirauth.domain.value_objects import ConnectionGroupType


@dataclass
class ConnectionGroupModel(ObjectModel):
    """Connection group row."""

    name: str = ""
    type: ConnectionGroupType = ConnectionGroupType.ORGANIZATIONAL
    parent_identifier: str | None = None
