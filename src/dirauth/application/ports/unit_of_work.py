"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from dirauth.application.ports.repositories import (
    ConnectionGroupMapper,
    ConnectionMapper,
    ObjectPermissionMapper,
    SystemPermissionMapper,
    UserMapper,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and mapper access."""

    @property
    def users(self) -> UserMapper: ...

    @property
    def connections(self) -> ConnectionMapper: ...

    @property
    def connection_groups(self) -> ConnectionGroupMapper: ...

    @property
    def user_permissions(self) -> ObjectPermissionMapper: ...

    @property
    def connection_permissions(self) -> ObjectPermissionMapper: ...

    @property
    def connection_group_permissions(self) -> ObjectPermissionMapper: ...

    @property
    def system_permissions(self) -> SystemPermissionMapper: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for UnitOfWork instances.

    Each call opens one transaction, committed when the context exits
    cleanly and rolled back when it exits with an exception.
    """

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
