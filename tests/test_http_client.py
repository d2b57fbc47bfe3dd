"""Generic HTTP client test cases."""
import json
import httpx
import pytest

from apps.widgets.client import WidgetClient
from apps.widgets.models import WidgetRead, WidgetWrite
from crud_core.clients.auth import StaticAccessTokenService
from crud_core.clients.generic_client import build_async_client
from crud_core.config import Settings, settings
from crud_core.exceptions.errors import UnauthorizedError
from crud_core.http.route_builder import ServerAddress

ADDRESS = ServerAddress(protocol="https", address="api.example.com", port="8443")
BASE = "https://api.example.com:8443/api/v1/widgets"


class RecordingTransport(httpx.AsyncBaseTransport):
    """Answers every request with a canned response and records what was sent."""

    def __init__(self, status_code: int = 200, payload=None, content: bytes = None):
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.requests = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)


def make_client(transport, token="secret-token") -> WidgetClient:
    http_client = httpx.AsyncClient(transport=transport)
    return WidgetClient(http_client, StaticAccessTokenService(token), ADDRESS, "api/v1")


class TestReads:
    @pytest.mark.asyncio
    async def test_get_all(self):
        transport = RecordingTransport(payload=[{"id": 1, "name": "bolt", "quantity": 2}])

        widgets = await make_client(transport).get_all()

        assert widgets == [WidgetRead(id=1, name="bolt", quantity=2)]
        request = transport.requests[0]
        assert request.method == "GET"
        assert str(request.url) == BASE
        assert request.headers["Authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    async def test_get_all_failure_returns_none(self):
        transport = RecordingTransport(status_code=400, content=b"DataBase Error")

        assert await make_client(transport).get_all() is None

    @pytest.mark.asyncio
    async def test_get_one(self):
        transport = RecordingTransport(payload={"id": 7, "name": "nut", "quantity": 0})

        widget = await make_client(transport).get_one(7)

        assert widget.id == 7
        assert str(transport.requests[0].url) == f"{BASE}/7"

    @pytest.mark.asyncio
    async def test_get_one_failure_returns_none(self):
        transport = RecordingTransport(status_code=400, content=b"Not Found")

        assert await make_client(transport).get_one(7) is None


class TestWrites:
    @pytest.mark.asyncio
    async def test_put_sends_write_shape(self):
        transport = RecordingTransport(payload={"id": 3, "name": "gear", "quantity": 1})

        widget = await make_client(transport).put(WidgetWrite(name="gear", quantity=1))

        assert widget == WidgetRead(id=3, name="gear", quantity=1)
        request = transport.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == BASE
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"id": None, "name": "gear", "quantity": 1, "description": None}

    @pytest.mark.asyncio
    async def test_push_puts_to_id_route(self):
        transport = RecordingTransport(payload={"id": 3, "name": "gear", "quantity": 4})

        widget = await make_client(transport).push(3, WidgetWrite(id=3, name="gear", quantity=4))

        assert widget.quantity == 4
        request = transport.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE}/3"

    @pytest.mark.asyncio
    async def test_write_failure_returns_none(self):
        transport = RecordingTransport(status_code=400, content=b"Widget name is required")

        assert await make_client(transport).put(WidgetWrite(name=" ")) is None


class TestDelete:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code, expected", [(200, True), (204, True), (400, False), (404, False), (500, False)])
    async def test_delete_reports_status_only(self, status_code, expected):
        # Body is deliberately not JSON; delete must never parse it
        transport = RecordingTransport(status_code=status_code, content=b"<html>not json</html>")

        assert await make_client(transport).delete(9) is expected
        request = transport.requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == f"{BASE}/9"


class TestAuthorization:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("call", [
        lambda c: c.get_all(),
        lambda c: c.get_one(1),
        lambda c: c.put(WidgetWrite(name="bolt")),
        lambda c: c.push(1, WidgetWrite(id=1, name="bolt")),
        lambda c: c.delete(1),
    ])
    async def test_missing_token_fails_before_sending(self, call):
        transport = RecordingTransport()

        with pytest.raises(UnauthorizedError):
            await call(make_client(transport, token=None))

        assert transport.requests == []


class TestTimeouts:
    @pytest.mark.asyncio
    async def test_per_request_timeout_is_forwarded(self):
        transport = RecordingTransport(payload=[])

        await make_client(transport).get_all(timeout=2.5)

        assert transport.requests[0].extensions["timeout"]["read"] == 2.5

    @pytest.mark.asyncio
    async def test_client_default_timeout_applies(self):
        transport = RecordingTransport(payload=[])
        http_client = build_async_client(Settings(HTTP_TIMEOUT_SECONDS=4), transport=transport)
        client = WidgetClient(http_client, StaticAccessTokenService("t"), ADDRESS, "api/v1")

        await client.get_all()

        assert transport.requests[0].extensions["timeout"]["read"] == 4


class TestAgainstApp:
    """Client round trip against the mounted widget router."""

    @pytest.mark.asyncio
    async def test_round_trip(self, client, access_token):
        from main import app

        http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
        widgets = WidgetClient(
            http_client,
            StaticAccessTokenService(access_token),
            ServerAddress(protocol="http", address="test", port="80"),
            settings.API_ROOT,
        )

        created = await widgets.put(WidgetWrite(name="sprocket", quantity=3))
        assert created.id is not None

        replaced = await widgets.push(created.id, WidgetWrite(id=created.id, name="sprocket", quantity=8))
        assert replaced.quantity == 8

        assert await widgets.get_one(created.id) == replaced
        assert [w.name for w in await widgets.get_all()] == ["sprocket"]

        assert await widgets.delete(created.id) is True
        assert await widgets.get_one(created.id) is None

        await http_client.aclose()
