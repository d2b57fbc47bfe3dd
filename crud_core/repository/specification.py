"""
Specifications: caller-owned query objects consumed read-only by repositories.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Type, TypeVar
from sqlalchemy import and_, or_, not_, true
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import SQLModel

T = TypeVar("T", bound=SQLModel)


class Specification(ABC, Generic[T]):
    """A predicate over entities of one model, rendered as a SQL expression."""

    @abstractmethod
    def to_expression(self, model: Type[T]) -> ColumnElement[bool]:
        """Build the WHERE clause for the given model."""
        pass

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


class FieldSpecification(Specification[T]):
    """Equality match on model attributes (e.g. name='bolt'); unknown attributes are rejected."""

    def __init__(self, **filters: Any):
        self.filters = filters

    def to_expression(self, model: Type[T]) -> ColumnElement[bool]:
        clauses = []
        for key, value in self.filters.items():
            if not hasattr(model, key):
                raise AttributeError(f"{model.__name__} has no attribute {key!r}")
            clauses.append(getattr(model, key) == value)
        if not clauses:
            return true()
        return and_(*clauses)


class AndSpecification(Specification[T]):
    def __init__(self, *parts: Specification[T]):
        self.parts = parts

    def to_expression(self, model: Type[T]) -> ColumnElement[bool]:
        return and_(*(part.to_expression(model) for part in self.parts))


class OrSpecification(Specification[T]):
    def __init__(self, *parts: Specification[T]):
        self.parts = parts

    def to_expression(self, model: Type[T]) -> ColumnElement[bool]:
        return or_(*(part.to_expression(model) for part in self.parts))


class NotSpecification(Specification[T]):
    def __init__(self, inner: Specification[T]):
        self.inner = inner

    def to_expression(self, model: Type[T]) -> ColumnElement[bool]:
        return not_(self.inner.to_expression(model))
