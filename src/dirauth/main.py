"""Composition root."""

import logging
from dataclasses import dataclass

from dirauth.application.ports import UnitOfWorkFactory
from dirauth.application.services import (
    ConnectionGroupService,
    ConnectionService,
    UserService,
)
from dirauth.config import Settings, get_settings


@dataclass
class DirectoryServices:
    """One service per directory object type."""

    users: UserService
    connections: ConnectionService
    connection_groups: ConnectionGroupService


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_services(
    unit_of_work_factory: UnitOfWorkFactory,
    settings: Settings | None = None,
) -> DirectoryServices:
    """Build the directory services on top of the caller's unit of work factory."""
    settings = settings or get_settings()
    implicit = settings.implicit_permissions
    return DirectoryServices(
        users=UserService(unit_of_work_factory, implicit_permissions=implicit),
        connections=ConnectionService(unit_of_work_factory, implicit_permissions=implicit),
        connection_groups=ConnectionGroupService(
            unit_of_work_factory, implicit_permissions=implicit
        ),
    )
