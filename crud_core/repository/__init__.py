"""
Repository pattern: data access abstraction, decouples the generic controller from the database session.
"""

from .base import BaseRepository, IRepository, ISpecificationRepository
from .specification import FieldSpecification, Specification
from .unit_of_work import RepositoryRegistry, UnitOfWork, default_registry

__all__ = [
    "BaseRepository",
    "IRepository",
    "ISpecificationRepository",
    "Specification",
    "FieldSpecification",
    "RepositoryRegistry",
    "UnitOfWork",
    "default_registry",
]
