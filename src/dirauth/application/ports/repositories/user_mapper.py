"""User mapper port."""

from typing import Protocol

from dirauth.application.ports.repositories.directory_object_mapper import (
    DirectoryObjectMapper,
)
from dirauth.domain.entities import UserModel


class UserMapper(DirectoryObjectMapper[UserModel], Protocol):
    """Port for user persistence."""

    async def select_one(self, username: str) -> UserModel | None: ...
