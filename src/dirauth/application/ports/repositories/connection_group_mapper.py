"""Connection group mapper port."""

from typing import Protocol

from dirauth.application.ports.repositories.directory_object_mapper import (
    DirectoryObjectMapper,
)
from dirauth.domain.entities import ConnectionGroupModel


class ConnectionGroupMapper(DirectoryObjectMapper[ConnectionGroupModel], Protocol):
    """Port for connection group persistence."""

    async def select_one_by_name(
        self, parent_identifier: str | None, name: str
    ) -> ConnectionGroupModel | None: ...
