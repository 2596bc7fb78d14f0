"""Application ports - interfaces for external adapters."""

from roleperm.application.ports.cache import Cache
from roleperm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Cache",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
