"""Authenticated user - the subject of every directory operation."""

from dataclasses import dataclass

from dirauth.domain.entities.user import UserModel


@dataclass(frozen=True)
class AuthenticatedUser:
    """Caller identity for the duration of one request."""

    model: UserModel
    is_administrator: bool = False

    @property
    def identifier(self) -> str | None:
        return self.model.identifier
