"""User entity."""

from dataclasses import dataclass

from dirauth.domain.entities.object_model import ObjectModel


@dataclass
class UserModel(ObjectModel):
    """User row. The identifier of a user is its username."""

    disabled: bool = False
    full_name: str | None = None
    email_address: str | None = None

    @property
    def username(self) -> str | None:
        return self.identifier

    @username.setter
    def username(self, value: str | None) -> None:
        self.identifier = value
