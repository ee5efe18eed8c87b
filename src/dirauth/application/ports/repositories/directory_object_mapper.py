"""Directory object mapper port - storage primitives for one entity type."""

from collections.abc import Collection
from typing import Protocol, TypeVar

from dirauth.domain.entities import ObjectModel, UserModel

ModelT = TypeVar("ModelT", bound=ObjectModel)


class DirectoryObjectMapper(Protocol[ModelT]):
    """Port for persistence of directory object models.

    ``insert`` must assign the model its ``object_id`` (and its
    ``identifier`` where storage generates it). ``update`` locates the row by
    ``object_id``, so it may change the identifier. ``update`` and ``delete``
    are no-ops for rows that do not exist.
    """

    async def select(self, identifiers: Collection[str]) -> list[ModelT]: ...

    async def select_readable(
        self, user: UserModel, identifiers: Collection[str]
    ) -> list[ModelT]: ...

    async def select_identifiers(self) -> set[str]: ...

    async def select_readable_identifiers(self, user: UserModel) -> set[str]: ...

    async def insert(self, model: ModelT) -> None: ...

    async def update(self, model: ModelT) -> None: ...

    async def delete(self, identifier: str) -> None: ...
