"""
Unit of Work: resolves repositories by capability and owns the transaction boundary.
"""

from functools import partial
from typing import Any, Callable, Dict, Optional, Type
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from crud_core.exceptions.errors import RepositoryNotRegisteredError
from .base import BaseRepository, IRepository, ISpecificationRepository

RepositoryFactory = Callable[[AsyncSession], Any]


class RepositoryRegistry:
    """Maps a parameterized capability (e.g. IRepository[int, Widget]) to a repository factory."""

    def __init__(self):
        self._factories: Dict[Any, RepositoryFactory] = {}

    def register(self, capability: Any, factory: RepositoryFactory) -> None:
        """Register a factory for a capability; registering the same capability twice is an error."""
        if capability in self._factories:
            raise ValueError(f"Repository already registered for {capability!r}")
        self._factories[capability] = factory

    def register_entity(
        self,
        key_type: Type,
        entity_type: Type[SQLModel],
        repository_class: Optional[RepositoryFactory] = None,
    ) -> None:
        """Register one factory for both the plain and the specification capability of an entity."""
        factory = repository_class or partial(BaseRepository, model=entity_type)
        self.register(IRepository[key_type, entity_type], factory)
        self.register(ISpecificationRepository[key_type, entity_type], factory)

    def resolve(self, capability: Any) -> RepositoryFactory:
        try:
            return self._factories[capability]
        except KeyError:
            raise RepositoryNotRegisteredError(capability) from None

    def __contains__(self, capability: Any) -> bool:
        return capability in self._factories


# Application-wide registry, populated at startup
default_registry = RepositoryRegistry()


class UnitOfWork:
    """Hands out repositories sharing one session and commits their changes as a single unit."""

    def __init__(self, session: Optional[AsyncSession] = None, registry: Optional[RepositoryRegistry] = None):
        """Initialize UnitOfWork; session must be provided."""
        if session is None:
            raise ValueError("Session must be provided.")

        self.session = session
        self.registry = registry if registry is not None else default_registry
        self._repositories: Dict[RepositoryFactory, Any] = {}

    def get(self, capability: Any) -> Any:
        """Resolve the repository registered for a capability (cached per factory)."""
        factory = self.registry.resolve(capability)
        if factory not in self._repositories:
            self._repositories[factory] = factory(self.session)
        return self._repositories[factory]

    async def commit(self) -> None:
        """Commit all changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()
