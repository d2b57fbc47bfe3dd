from typing import Any, Optional
from pydantic import BaseModel


class ServerAddress(BaseModel):
    protocol: str = "http"
    address: str = "localhost"
    port: str = "80"

    def __str__(self) -> str:
        return f"{self.protocol}://{self.address}:{self.port}"

    @classmethod
    def from_settings(cls, settings) -> "ServerAddress":
        return cls(
            protocol=settings.SERVER_PROTOCOL,
            address=settings.SERVER_ADDRESS,
            port=str(settings.SERVER_PORT),
        )


def build_route(
    protocol: str,
    address: str,
    port: str,
    api_route: str,
    controller_route: str,
    id: Optional[Any] = None,
) -> str:
    """{protocol}://{address}:{port}/{api_route}/{controller_route}[/{id}]"""
    route = f"{protocol}://{address}:{port}/{api_route}/{controller_route}"
    if id is not None:
        route = f"{route}/{id}"
    return route


class HttpRouteBuilder:
    """Builds the routes of one controller on one server."""

    def __init__(self, server_address: ServerAddress, api_route: str, controller_route: str):
        self.server_address = server_address
        self.api_route = api_route
        self.controller_route = controller_route

    def get_route(self, id: Optional[Any] = None) -> str:
        return build_route(
            self.server_address.protocol,
            self.server_address.address,
            self.server_address.port,
            self.api_route,
            self.controller_route,
            id,
        )
