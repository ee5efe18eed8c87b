"""Internal wrappers around directory object models."""

from typing import Generic, TypeVar

from dirauth.domain.entities import (
    AuthenticatedUser,
    ConnectionGroupModel,
    ConnectionModel,
    ObjectModel,
    UserModel,
)
from dirauth.domain.value_objects import ConnectionGroupType

ModelT = TypeVar("ModelT", bound=ObjectModel)


class ModeledDirectoryObject(Generic[ModelT]):
    """Object backed by a model, bound to the user it was retrieved for.

    Instances live for one request and are never cached.
    """

    def __init__(self, current_user: AuthenticatedUser, model: ModelT) -> None:
        self._current_user = current_user
        self._model = model

    @property
    def current_user(self) -> AuthenticatedUser:
        return self._current_user

    @property
    def model(self) -> ModelT:
        return self._model

    @property
    def identifier(self) -> str | None:
        return self._model.identifier

    @identifier.setter
    def identifier(self, value: str | None) -> None:
        self._model.identifier = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self.identifier!r})"


class ModeledUser(ModeledDirectoryObject[UserModel]):
    """User backed by a UserModel."""

    @property
    def username(self) -> str | None:
        return self._model.username

    @username.setter
    def username(self, value: str) -> None:
        self._model.username = value

    @property
    def disabled(self) -> bool:
        return self._model.disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._model.disabled = value

    @property
    def full_name(self) -> str | None:
        return self._model.full_name

    @full_name.setter
    def full_name(self, value: str | None) -> None:
        self._model.full_name = value

    @property
    def email_address(self) -> str | None:
        return self._model.email_address

    @email_address.setter
    def email_address(self, value: str | None) -> None:
        self._model.email_address = value


class ModeledConnection(ModeledDirectoryObject[ConnectionModel]):
    """Connection backed by a ConnectionModel."""

    @property
    def name(self) -> str:
        return self._model.name

    @name.setter
    def name(self, value: str) -> None:
        self._model.name = value

    @property
    def protocol(self) -> str | None:
        return self._model.protocol

    @protocol.setter
    def protocol(self, value: str | None) -> None:
        self._model.protocol = value

    @property
    def parent_identifier(self) -> str | None:
        return self._model.parent_identifier

    @parent_identifier.setter
    def parent_identifier(self, value: str | None) -> None:
        self._model.parent_identifier = value

    @property
    def parameters(self) -> dict[str, str]:
        return self._model.parameters

    @parameters.setter
    def parameters(self, value: dict[str, str]) -> None:
        self._model.parameters = dict(value)


class ModeledConnectionGroup(ModeledDirectoryObject[ConnectionGroupModel]):
    """Connection group backed by a ConnectionGroupModel."""

    @property
    def name(self) -> str:
        return self._model.name

    @name.setter
    def name(self, value: str) -> None:
        self._model.name = value

    @property
    def type(self) -> ConnectionGroupType:
        return self._model.type

    @type.setter
    def type(self, value: ConnectionGroupType) -> None:
        self._model.type = value

    @property
    def parent_identifier(self) -> str | None:
        return self._model.parent_identifier

    @parent_identifier.setter
    def parent_identifier(self, value: str | None) -> None:
        self._model.parent_identifier = value
