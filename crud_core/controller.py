"""
Generic server operations: validation, repository dispatch, commit and envelope.

Each operation runs as a single sequence. Any fault raised while resolving a
repository, calling it or committing is logged and reported to the caller as
a BadRequest envelope with a fixed message; fault detail never leaves this
module.
"""

import asyncio
from typing import Any, Awaitable, Generic, List, Optional, Type, TypeVar
from loguru import logger
from crud_core.config import settings
from crud_core.repository.base import IRepository, ISpecificationRepository
from crud_core.repository.specification import Specification
from crud_core.repository.unit_of_work import UnitOfWork
from crud_core.response import ServerResponse
from crud_core.validation import (
    EntityValidator,
    KeyValidator,
    ValidationResult,
    Validator,
    always_valid,
)

TKey = TypeVar("TKey")
T = TypeVar("T")

NULL_ENTITY = "Null Entity was given"
ID_MISMATCH = "Entity's Id did not match"
DATABASE_ERROR = "DataBase Error"
NOT_FOUND = "Not Found"


def _rejection(result: ValidationResult) -> ServerResponse:
    return ServerResponse(status_code=result.status_code, message=result.message)


class GenericController(Generic[TKey, T]):
    """CRUD operations for one entity type against the repositories of a Unit-of-Work."""

    def __init__(self, unit_of_work: UnitOfWork, key_type: Type[TKey], entity_type: Type[T]):
        if unit_of_work is None:
            raise ValueError("UnitOfWork was None")
        self.unit_of_work = unit_of_work
        self.key_type = key_type
        self.entity_type = entity_type

    @property
    def repository(self) -> IRepository[TKey, T]:
        return self.unit_of_work.get(IRepository[self.key_type, self.entity_type])

    @property
    def specification_repository(self) -> ISpecificationRepository[TKey, T]:
        return self.unit_of_work.get(ISpecificationRepository[self.key_type, self.entity_type])

    async def _await(self, awaitable: Awaitable[Any], timeout: Optional[float]) -> Any:
        if timeout is None:
            timeout = settings.OPERATION_TIMEOUT_SECONDS
        return await asyncio.wait_for(awaitable, timeout)

    def _fault(self, operation: str, exc: Exception, value: Any = None) -> ServerResponse:
        logger.opt(exception=exc).error(
            f"{self.entity_type.__name__}.{operation} failed: {type(exc).__name__}: {exc}"
        )
        return ServerResponse.bad_request(DATABASE_ERROR, value=value)

    async def create(
        self,
        entity: Optional[T],
        validator: Optional[EntityValidator] = None,
        timeout: Optional[float] = None,
    ) -> ServerResponse[T]:
        """Insert a new entity and commit."""
        if entity is None:
            return ServerResponse.bad_request(NULL_ENTITY)

        result = await (validator or always_valid)(entity)
        if not result.passed:
            return _rejection(result)

        try:
            await self._await(self.repository.create(entity), timeout)
            await self._await(self.unit_of_work.commit(), timeout)
        except Exception as e:
            return self._fault("create", e)
        return ServerResponse.ok(entity)

    async def update(
        self,
        id: TKey,
        entity: Optional[T],
        validator: Optional[EntityValidator] = None,
        timeout: Optional[float] = None,
    ) -> ServerResponse[T]:
        """Update the entity identified by id and commit; id must equal entity.id."""
        if entity is None:
            return ServerResponse.bad_request(NULL_ENTITY)

        if id != entity.id:
            return ServerResponse.bad_request(ID_MISMATCH)

        result = await (validator or always_valid)(entity)
        if not result.passed:
            return _rejection(result)

        try:
            await self._await(self.repository.update(entity), timeout)
            await self._await(self.unit_of_work.commit(), timeout)
        except Exception as e:
            return self._fault("update", e)
        return ServerResponse.ok(entity)

    async def get_many(
        self,
        specification: Optional[Specification] = None,
        validator: Optional[Validator] = None,
        timeout: Optional[float] = None,
    ) -> ServerResponse[List[T]]:
        """Return all entities, or those matching the specification."""
        result = await (validator or always_valid)()
        if not result.passed:
            return _rejection(result)

        try:
            if specification is None:
                entities = await self._await(self.repository.get_all(), timeout)
            else:
                entities = await self._await(
                    self.specification_repository.get_by_specification(specification), timeout
                )
        except Exception as e:
            return self._fault("get_many", e)
        return ServerResponse.ok(list(entities))

    async def get_one(
        self,
        id: TKey,
        validator: Optional[KeyValidator] = None,
        timeout: Optional[float] = None,
    ) -> ServerResponse[T]:
        """Return one entity; a missing entity is reported as BadRequest 'Not Found'."""
        result = await (validator or always_valid)(id)
        if not result.passed:
            return _rejection(result)

        try:
            entity = await self._await(self.repository.get(id), timeout)
        except Exception as e:
            return self._fault("get_one", e)

        if entity is None:
            return ServerResponse.bad_request(NOT_FOUND)
        return ServerResponse.ok(entity)

    async def delete(
        self,
        id: TKey,
        validator: Optional[KeyValidator] = None,
        timeout: Optional[float] = None,
    ) -> ServerResponse[bool]:
        """Delete the entity identified by id and commit."""
        result = await (validator or always_valid)(id)
        if not result.passed:
            return _rejection(result)

        try:
            await self._await(self.repository.delete(id), timeout)
            await self._await(self.unit_of_work.commit(), timeout)
        except Exception as e:
            return self._fault("delete", e, value=False)
        return ServerResponse.ok(True)
