"""
Generic HTTP client mirroring the generic REST router.

TGet is the shape returned by reads, TPut the shape sent on writes. Every
request carries the bearer token from the access-token service; a missing
token raises UnauthorizedError before anything is sent.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter
from crud_core.config import Settings, settings as app_settings
from crud_core.exceptions.errors import UnauthorizedError
from crud_core.http.route_builder import HttpRouteBuilder, ServerAddress
from .auth import IAccessTokenService

TGet = TypeVar("TGet", bound=BaseModel)
TPut = TypeVar("TPut", bound=BaseModel)


def build_async_client(settings: Optional[Settings] = None, **kwargs: Any) -> httpx.AsyncClient:
    """Create the shared httpx.AsyncClient; build once per process and pass it to every service client."""
    settings = settings or app_settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
        headers={"Accept": "application/json"},
        **kwargs,
    )


class GenericHttpApiServiceClient(Generic[TGet, TPut]):
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth_service: IAccessTokenService,
        server_address: ServerAddress,
        api_route: str,
        controller_route: str,
        get_model: Type[TGet],
        put_model: Type[TPut],
    ):
        self.http_client = http_client
        self.auth_service = auth_service
        self.route_builder = HttpRouteBuilder(server_address, api_route, controller_route)
        self.get_model = get_model
        self.put_model = put_model
        self._list_adapter = TypeAdapter(List[get_model])

    async def get_all(self, timeout: Optional[float] = None) -> Optional[List[TGet]]:
        request = await self._request_template("GET", self.route_builder.get_route(), timeout=timeout)
        response = await self._send(request)
        if not response.is_success:
            return None
        return self._list_adapter.validate_json(response.content)

    async def get_one(self, id: Any, timeout: Optional[float] = None) -> Optional[TGet]:
        request = await self._request_template("GET", self.route_builder.get_route(id), timeout=timeout)
        response = await self._send(request)
        if not response.is_success:
            return None
        return self.get_model.model_validate_json(response.content)

    async def put(self, entity: TPut, timeout: Optional[float] = None) -> Optional[TGet]:
        """Create-or-replace; the id travels in the body only."""
        return await self._write(self.route_builder.get_route(), entity, timeout)

    async def push(self, id: Any, entity: TPut, timeout: Optional[float] = None) -> Optional[TGet]:
        """Replace the entity at route/{id}."""
        return await self._write(self.route_builder.get_route(id), entity, timeout)

    async def delete(self, id: Any, timeout: Optional[float] = None) -> bool:
        request = await self._request_template("DELETE", self.route_builder.get_route(id), timeout=timeout)
        response = await self._send(request)
        return response.is_success

    async def _write(self, endpoint: str, entity: TPut, timeout: Optional[float]) -> Optional[TGet]:
        request = await self._request_template(
            "PUT",
            endpoint,
            content=entity.model_dump_json(),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
        response = await self._send(request)
        if not response.is_success:
            return None
        return self.get_model.model_validate_json(response.content)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        response = await self.http_client.send(request)
        if not response.is_success:
            logger.warning(f"{request.method} {request.url} returned {response.status_code}")
        return response

    async def _request_template(
        self,
        method: str,
        endpoint: str,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Request:
        access_token = await self.auth_service.get_access_token()
        if access_token is None:
            raise UnauthorizedError()

        request_headers = {"Authorization": f"Bearer {access_token}"}
        if headers:
            request_headers.update(headers)

        # Explicit None would disable the client's default timeout
        extra = {"timeout": timeout} if timeout is not None else {}
        return self.http_client.build_request(method, endpoint, content=content, headers=request_headers, **extra)
