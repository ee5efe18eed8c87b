"""Connection mapper port."""

from typing import Protocol

from dirauth.application.ports.repositories.directory_object_mapper import (
    DirectoryObjectMapper,
)
from dirauth.domain.entities import ConnectionModel


class ConnectionMapper(DirectoryObjectMapper[ConnectionModel], Protocol):
    """Port for connection persistence."""

    async def select_one_by_name(
        self, parent_identifier: str | None, name: str
    ) -> ConnectionModel | None: ...
