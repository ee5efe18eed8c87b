"""Application ports - interfaces for external adapters."""

from dirauth.application.ports.permission_set import PermissionSet
from dirauth.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionSet",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
