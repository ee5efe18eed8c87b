"""External-facing DTOs."""

from dirauth.application.dto.connection_dto import Connection
from dirauth.application.dto.connection_group_dto import ConnectionGroup
from dirauth.application.dto.user_dto import User

__all__ = [
    "Connection",
    "ConnectionGroup",
    "User",
]
