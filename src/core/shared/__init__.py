"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    InfrastructureError,
    HashingUnavailableError,
    RepositoryError,
)
from .interfaces import UnitOfWork, PasswordHasher

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "InfrastructureError",
    "HashingUnavailableError",
    "RepositoryError",
    "UnitOfWork",
    "PasswordHasher",
]
