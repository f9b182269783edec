"""Application ports - interfaces for external adapters."""

from sharedrive.application.ports.permission_checker import Actions, PermissionChecker
from sharedrive.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Actions",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
