import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from lavaroute import RoutePlannerClient, RoutePlannerType, Status
from lavaroute.constants.config import CLIENT_NAME
from lavaroute.exceptions import HTTPException, MalformedPayloadException, UnauthorizedException

PASSWORD = "youshallnotpass"

ERROR_BODY = {
    "timestamp": 1667857581613,
    "status": 500,
    "error": "Internal Server Error",
    "message": "Something broke",
    "path": "/v4/routeplanner/status",
}


@pytest.fixture
async def serve():
    servers = []

    async def _serve(handler) -> RoutePlannerClient:
        app = web.Application()
        app.router.add_get("/v4/routeplanner/status", handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return RoutePlannerClient(host=server.host, port=server.port, password=PASSWORD)

    yield _serve
    for server in servers:
        await server.close()


def test_endpoint_urls():
    client = RoutePlannerClient(host="localhost", password=PASSWORD, port=2333)
    assert str(client.get_endpoint_routeplanner_status()) == "http://localhost:2333/v4/routeplanner/status"
    secure = RoutePlannerClient(host="lavalink.example", password=PASSWORD, ssl=True)
    assert secure.port == 443
    assert secure.base_api_url.scheme == "https"
    assert secure.base_api_url.host == "lavalink.example"
    assert secure.base_api_url.path == "/v4"


async def test_fetch_decodes_status(serve):
    seen_headers = {}

    async def handler(request: web.Request) -> web.Response:
        seen_headers.update(request.headers)
        return web.json_response(
            {"class": "RotatingIpRoutePlanner", "details": {"rotateIndex": "1", "currentAddress": "10.0.0.2"}}
        )

    async with await serve(handler) as client:
        status = await client.fetch_routeplanner_status()

    assert status.strategy is RoutePlannerType.RotatingIp
    assert status.details.rotateIndex == "1"
    assert status.details.currentAddress == "10.0.0.2"
    assert seen_headers["Authorization"] == PASSWORD
    assert seen_headers["Client-Name"] == CLIENT_NAME


async def test_fetch_without_route_planner(serve):
    async def handler(request: web.Request) -> web.Response:
        return web.Response(status=204)

    async with await serve(handler) as client:
        status = await client.fetch_routeplanner_status()

    assert status == Status()
    assert status.strategy is None


async def test_fetch_unauthorized(serve):
    async def handler(request: web.Request) -> web.Response:
        return web.json_response({**ERROR_BODY, "status": 401, "error": "Unauthorized"}, status=401)

    async with await serve(handler) as client:
        with pytest.raises(UnauthorizedException) as exc_info:
            await client.fetch_routeplanner_status()

    assert exc_info.value.response.status == 401


async def test_fetch_server_error_returns_falsy_exception(serve):
    async def handler(request: web.Request) -> web.Response:
        return web.json_response(ERROR_BODY, status=500)

    async with await serve(handler) as client:
        result = await client.fetch_routeplanner_status()

    assert isinstance(result, HTTPException)
    assert not result
    assert result.response.message == "Something broke"
    assert result.response.timestamp.year == 2022


async def test_fetch_server_error_without_json_body(serve):
    async def handler(request: web.Request) -> web.Response:
        return web.Response(status=502, text="Bad Gateway")

    async with await serve(handler) as client:
        result = await client.fetch_routeplanner_status()

    assert isinstance(result, HTTPException)
    assert result.response.status == 502
    assert result.response.path == "/v4/routeplanner/status"


async def test_fetch_non_object_body(serve):
    async def handler(request: web.Request) -> web.Response:
        return web.json_response(["RotatingIpRoutePlanner"])

    async with await serve(handler) as client:
        with pytest.raises(MalformedPayloadException):
            await client.fetch_routeplanner_status()
