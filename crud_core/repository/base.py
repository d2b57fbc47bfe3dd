"""
Repository capabilities and their generic SQLModel implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from crud_core.exceptions.errors import EntityNotFoundError
from .specification import Specification

TKey = TypeVar("TKey")
T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[TKey, T]):
    """Plain CRUD capability over entities of type T keyed by TKey."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Create entity."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update entity."""
        pass

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def get(self, id: TKey) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def delete(self, id: TKey) -> bool:
        """Delete entity."""
        pass


class ISpecificationRepository(ABC, Generic[TKey, T]):
    """Query capability over entities of type T."""

    @abstractmethod
    async def get_by_specification(self, specification: Specification[T]) -> List[T]:
        """Get entities matching the specification."""
        pass


class BaseRepository(IRepository[TKey, T], ISpecificationRepository[TKey, T]):
    """Generic repository over an AsyncSession; provides both capabilities. Changes are pending until the Unit-of-Work commits."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Update an existing entity; raises EntityNotFoundError instead of inserting a new row."""
        if await self.get(entity.id) is None:
            raise EntityNotFoundError(self.model, entity.id)
        # merge() copies a detached instance onto the stored row
        return await self.session.merge(entity)

    async def get_all(self) -> List[T]:
        result = await self.session.exec(select(self.model))
        return list(result.all())

    async def get(self, id: TKey) -> Optional[T]:
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_specification(self, specification: Specification[T]) -> List[T]:
        statement = select(self.model).where(specification.to_expression(self.model))
        result = await self.session.exec(statement)
        return list(result.all())

    async def delete(self, id: TKey) -> bool:
        entity = await self.get(id)
        if entity:
            await self.session.delete(entity)
            return True
        return False
