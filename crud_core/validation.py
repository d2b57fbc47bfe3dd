"""
Validator contract for the generic controller.

A validator is an async callable receiving the operation's argument (the entity
for create/update, the id for get_one/delete, nothing for get_many) and
returning a ValidationResult. The operation proceeds only when the result has a
value and that value is True; otherwise the validator's own status and message
become the operation's response.
"""

from http import HTTPStatus
from typing import Any, Awaitable, Callable, TypeVar
from pydantic import BaseModel, ConfigDict

T = TypeVar("T")
TKey = TypeVar("TKey")


class ValidationResult(BaseModel):
    """Tri-state validator outcome."""

    model_config = ConfigDict(frozen=True)

    has_value: bool
    value: bool = False
    status_code: HTTPStatus = HTTPStatus.OK
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.has_value and self.value

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(has_value=True, value=True, status_code=HTTPStatus.OK, message="Success")

    @classmethod
    def invalid(cls, message: str, status_code: HTTPStatus = HTTPStatus.BAD_REQUEST) -> "ValidationResult":
        return cls(has_value=True, value=False, status_code=status_code, message=message)

    @classmethod
    def undetermined(cls, message: str, status_code: HTTPStatus = HTTPStatus.BAD_REQUEST) -> "ValidationResult":
        """No decision could be made; treated as a rejection."""
        return cls(has_value=False, status_code=status_code, message=message)


EntityValidator = Callable[[T], Awaitable[ValidationResult]]
KeyValidator = Callable[[TKey], Awaitable[ValidationResult]]
Validator = Callable[[], Awaitable[ValidationResult]]


async def always_valid(*args: Any) -> ValidationResult:
    """Default validator for every operation."""
    return ValidationResult.valid()
