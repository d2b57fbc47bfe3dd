from http import HTTPStatus
from typing import Any, Callable, Generic, Optional, TypeVar
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ConfigDict

T = TypeVar("T")
U = TypeVar("U")


class ResponseModel(BaseModel):
    """JSON error body returned by the global exception handler."""
    code: int = 400
    message: str = "error"
    data: Optional[Any] = None

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return {"code": code, "message": message, "data": data}


class ServerResponse(BaseModel, Generic[T]):
    """Result of one controller operation: status classification, message and optional value."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: HTTPStatus
    message: str
    value: Optional[T] = None

    @property
    def is_ok(self) -> bool:
        return self.status_code == HTTPStatus.OK

    @classmethod
    def ok(cls, value: Any, message: str = "Success") -> "ServerResponse":
        return cls(status_code=HTTPStatus.OK, message=message, value=value)

    @classmethod
    def bad_request(cls, message: str, value: Any = None) -> "ServerResponse":
        return cls(status_code=HTTPStatus.BAD_REQUEST, message=message, value=value)

    def map_value(self, fn: Callable[[T], U]) -> "ServerResponse[U]":
        """Return a copy whose value is transformed by fn; error envelopes are returned unchanged."""
        if not self.is_ok:
            return self
        return ServerResponse(status_code=self.status_code, message=self.message, value=fn(self.value))


def to_response(response: ServerResponse) -> Response:
    """Translate an envelope into the transport result."""
    if response.status_code == HTTPStatus.OK:
        return JSONResponse(status_code=HTTPStatus.OK, content=jsonable_encoder(response.value))
    if response.status_code == HTTPStatus.NOT_FOUND:
        return PlainTextResponse(response.message, status_code=HTTPStatus.NOT_FOUND)
    # BadRequest and every other classification
    return PlainTextResponse(response.message, status_code=HTTPStatus.BAD_REQUEST)
