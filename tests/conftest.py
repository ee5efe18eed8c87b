"""Pytest fixtures for dirauth tests."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator, Collection
from contextlib import asynccontextmanager

import pytest

from dirauth.domain.entities import (
    AuthenticatedUser,
    ConnectionGroupModel,
    ConnectionModel,
    ObjectModel,
    ObjectPermissionModel,
    SystemPermissionModel,
    UserModel,
)
from dirauth.domain.value_objects import ObjectPermissionType, SystemPermissionType


# --- Fake permission mappers ---


class FakeObjectPermissionMapper:
    """In-memory object permission grants."""

    def __init__(self) -> None:
        self._grants: set[ObjectPermissionModel] = set()
        self.fail_on_insert = False
        self.calls: list[str] = []

    def grant(
        self, user: UserModel, action: ObjectPermissionType, identifier: str
    ) -> None:
        """Helper to add a grant for tests."""
        self._grants.add(
            ObjectPermissionModel(
                user_id=user.object_id,
                username=user.identifier,
                type=action,
                object_identifier=identifier,
            )
        )

    def holds(self, username: str, action: ObjectPermissionType, identifier: str) -> bool:
        return any(
            p.username == username and p.type == action and p.object_identifier == identifier
            for p in self._grants
        )

    async def select(self, user: UserModel) -> list[ObjectPermissionModel]:
        self.calls.append("select")
        return [p for p in self._grants if p.username == user.identifier]

    async def insert(self, permissions: Collection[ObjectPermissionModel]) -> None:
        self.calls.append("insert")
        if self.fail_on_insert:
            raise RuntimeError("permission insert failed")
        self._grants.update(permissions)

    def dump(self) -> object:
        return copy.deepcopy(self._grants)

    def load(self, state: object) -> None:
        self._grants = copy.deepcopy(state)


class FakeSystemPermissionMapper:
    """In-memory system permission grants."""

    def __init__(self) -> None:
        self._grants: set[SystemPermissionModel] = set()

    def grant(self, user: UserModel, action: SystemPermissionType) -> None:
        """Helper to add a grant for tests."""
        self._grants.add(
            SystemPermissionModel(user_id=user.object_id, username=user.identifier, type=action)
        )

    async def select(self, user: UserModel) -> list[SystemPermissionModel]:
        return [p for p in self._grants if p.username == user.identifier]

    def dump(self) -> object:
        return copy.deepcopy(self._grants)

    def load(self, state: object) -> None:
        self._grants = copy.deepcopy(state)


# --- Fake object mappers ---


class FakeDirectoryObjectMapper:
    """In-memory directory object mapper.

    Returns copies so that callers only change storage through update().
    """

    def __init__(
        self,
        permissions: FakeObjectPermissionMapper,
        assign_identifiers: bool = True,
    ) -> None:
        self._by_identifier: dict[str, ObjectModel] = {}
        self._next_id = 1
        self._permissions = permissions
        self._assign_identifiers = assign_identifiers
        self.calls: list[str] = []

    def seed(self, model: ObjectModel) -> ObjectModel:
        """Helper to store a model directly, bypassing services."""
        self._store(model)
        return model

    def _store(self, model: ObjectModel) -> None:
        if model.object_id is None:
            model.object_id = self._next_id
        self._next_id = max(self._next_id, model.object_id) + 1
        if self._assign_identifiers and model.identifier is None:
            model.identifier = str(model.object_id)
        self._by_identifier[model.identifier] = copy.deepcopy(model)

    def _readable(self, user: UserModel) -> set[str]:
        return {
            p.object_identifier
            for p in self._permissions._grants
            if p.username == user.identifier and p.type == ObjectPermissionType.READ
        }

    async def select(self, identifiers: Collection[str]) -> list[ObjectModel]:
        self.calls.append("select")
        return [
            copy.deepcopy(self._by_identifier[i])
            for i in sorted(set(identifiers))
            if i in self._by_identifier
        ]

    async def select_readable(
        self, user: UserModel, identifiers: Collection[str]
    ) -> list[ObjectModel]:
        self.calls.append("select_readable")
        readable = self._readable(user)
        return [
            copy.deepcopy(self._by_identifier[i])
            for i in sorted(set(identifiers))
            if i in self._by_identifier and i in readable
        ]

    async def select_identifiers(self) -> set[str]:
        self.calls.append("select_identifiers")
        return set(self._by_identifier)

    async def select_readable_identifiers(self, user: UserModel) -> set[str]:
        self.calls.append("select_readable_identifiers")
        return set(self._by_identifier) & self._readable(user)

    async def insert(self, model: ObjectModel) -> None:
        self.calls.append("insert")
        if model.identifier is not None and model.identifier in self._by_identifier:
            raise RuntimeError(f"duplicate identifier {model.identifier}")
        self._store(model)

    async def update(self, model: ObjectModel) -> None:
        self.calls.append("update")
        for identifier, stored in list(self._by_identifier.items()):
            if stored.object_id == model.object_id:
                del self._by_identifier[identifier]
                self._by_identifier[model.identifier] = copy.deepcopy(model)
                return

    async def delete(self, identifier: str) -> None:
        self.calls.append("delete")
        self._by_identifier.pop(identifier, None)

    def dump(self) -> object:
        return (copy.deepcopy(self._by_identifier), self._next_id)

    def load(self, state: object) -> None:
        by_identifier, self._next_id = copy.deepcopy(state)
        self._by_identifier = by_identifier


class FakeUserMapper(FakeDirectoryObjectMapper):
    """In-memory user mapper. Usernames are identifiers."""

    def __init__(self, permissions: FakeObjectPermissionMapper) -> None:
        super().__init__(permissions, assign_identifiers=False)

    async def select_one(self, username: str) -> UserModel | None:
        model = self._by_identifier.get(username)
        return copy.deepcopy(model) if model else None


class FakeNamedObjectMapper(FakeDirectoryObjectMapper):
    """In-memory mapper for connections and connection groups."""

    async def select_one_by_name(
        self, parent_identifier: str | None, name: str
    ) -> ObjectModel | None:
        for model in self._by_identifier.values():
            if model.parent_identifier == parent_identifier and model.name == name:
                return copy.deepcopy(model)
        return None


# --- Fake UnitOfWork ---


class FakeDatabase:
    """Shared in-memory storage behind every FakeUnitOfWork."""

    def __init__(self) -> None:
        self.user_permissions = FakeObjectPermissionMapper()
        self.connection_permissions = FakeObjectPermissionMapper()
        self.connection_group_permissions = FakeObjectPermissionMapper()
        self.system_permissions = FakeSystemPermissionMapper()
        self.users = FakeUserMapper(self.user_permissions)
        self.connections = FakeNamedObjectMapper(self.connection_permissions)
        self.connection_groups = FakeNamedObjectMapper(self.connection_group_permissions)
        self.transactions = 0

    def _tables(self) -> dict[str, object]:
        return {
            "users": self.users,
            "connections": self.connections,
            "connection_groups": self.connection_groups,
            "user_permissions": self.user_permissions,
            "connection_permissions": self.connection_permissions,
            "connection_group_permissions": self.connection_group_permissions,
            "system_permissions": self.system_permissions,
        }

    def snapshot(self) -> dict[str, object]:
        return {name: table.dump() for name, table in self._tables().items()}

    def restore(self, state: dict[str, object]) -> None:
        for name, table in self._tables().items():
            table.load(state[name])


class FakeUnitOfWork:
    """In-memory Unit of Work. Rollback restores storage as it was at begin."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self._snapshot = db.snapshot()
        self.committed = False
        self.rolled_back = False

    @property
    def users(self) -> FakeUserMapper:
        return self._db.users

    @property
    def connections(self) -> FakeNamedObjectMapper:
        return self._db.connections

    @property
    def connection_groups(self) -> FakeNamedObjectMapper:
        return self._db.connection_groups

    @property
    def user_permissions(self) -> FakeObjectPermissionMapper:
        return self._db.user_permissions

    @property
    def connection_permissions(self) -> FakeObjectPermissionMapper:
        return self._db.connection_permissions

    @property
    def connection_group_permissions(self) -> FakeObjectPermissionMapper:
        return self._db.connection_group_permissions

    @property
    def system_permissions(self) -> FakeSystemPermissionMapper:
        return self._db.system_permissions

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self._db.restore(self._snapshot)
        self.rolled_back = True


# --- Fixtures ---


@pytest.fixture
def db() -> FakeDatabase:
    """Fresh in-memory storage seeded with three users."""
    db = FakeDatabase()
    for object_id, username in [(1, "admin"), (2, "alice"), (3, "bob")]:
        db.users.seed(UserModel(object_id=object_id, identifier=username))
    return db


@pytest.fixture
def uow_factory(db: FakeDatabase):
    """Factory returning async context manager with FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        db.transactions += 1
        uow = FakeUnitOfWork(db)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


@pytest.fixture
def admin() -> AuthenticatedUser:
    return AuthenticatedUser(UserModel(object_id=1, identifier="admin"), is_administrator=True)


@pytest.fixture
def alice() -> AuthenticatedUser:
    return AuthenticatedUser(UserModel(object_id=2, identifier="alice"))


@pytest.fixture
def bob() -> AuthenticatedUser:
    return AuthenticatedUser(UserModel(object_id=3, identifier="bob"))


@pytest.fixture
def seed_connections(db: FakeDatabase):
    """Helper storing connections directly, returning their identifiers."""

    def _seed(*names: str, parent_identifier: str | None = None) -> list[str]:
        return [
            db.connections.seed(
                ConnectionModel(name=name, protocol="rdp", parent_identifier=parent_identifier)
            ).identifier
            for name in names
        ]

    return _seed


@pytest.fixture
def seed_connection_groups(db: FakeDatabase):
    """Helper storing connection groups directly, returning their identifiers."""

    def _seed(*names: str) -> list[str]:
        return [
            db.connection_groups.seed(ConnectionGroupModel(name=name)).identifier
            for name in names
        ]

    return _seed
