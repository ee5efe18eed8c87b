"""User DTOs."""

from dataclasses import dataclass


@dataclass
class User:
    """External representation of a user."""

    username: str
    disabled: bool = False
    full_name: str | None = None
    email_address: str | None = None
