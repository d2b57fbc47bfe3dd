import httpx
from crud_core.clients.auth import IAccessTokenService
from crud_core.clients.generic_client import GenericHttpApiServiceClient
from crud_core.http.route_builder import ServerAddress
from .models import WidgetRead, WidgetWrite

CONTROLLER_ROUTE = "widgets"


class WidgetClient(GenericHttpApiServiceClient[WidgetRead, WidgetWrite]):
    """HTTP client for the widget endpoints."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth_service: IAccessTokenService,
        server_address: ServerAddress,
        api_route: str,
    ):
        super().__init__(
            http_client,
            auth_service,
            server_address,
            api_route,
            CONTROLLER_ROUTE,
            get_model=WidgetRead,
            put_model=WidgetWrite,
        )
