from __future__ import annotations

import contextlib
from datetime import datetime

import aiohttp
from dacite import DaciteError, from_dict
from yarl import URL

from lavaroute.compat import json
from lavaroute.constants.config import CLIENT_NAME
from lavaroute.constants.node import (
    DEFAULT_API_VERSION,
    GOOD_RESPONSE_RANGE,
    NO_CONTENT_STATUS,
    UNAUTHORIZED_STATUSES,
)
from lavaroute.exceptions.request import HTTPException, UnauthorizedException
from lavaroute.helpers.time import get_tz_utc
from lavaroute.logging import getLogger
from lavaroute.nodes.api.decoding import decode_route_planner_status
from lavaroute.nodes.api.responses.errors import LavalinkError
from lavaroute.nodes.api.responses.route_planner import Status


class RoutePlannerClient:
    """Reads the route planner status of a single Lavalink node.

    Parameters
    ----------
    host: :class:`str`
        The host of the node.
    password: :class:`str`
        The password of the node.
    port: :class:`int`, optional
        The port of the node, defaults to 443 with ``ssl`` and 80 without.
    ssl: :class:`bool`, optional
        Whether to use https.
    session: :class:`aiohttp.ClientSession`, optional
        The session to use, if not given the client creates and owns one.
    api_version: :class:`int`, optional
        The major version of the node REST API.
    """

    __slots__ = (
        "_host",
        "_port",
        "_password",
        "_ssl",
        "_session",
        "_owns_session",
        "_api_version",
        "_logger",
    )

    def __init__(
        self,
        host: str,
        password: str,
        port: int | None = None,
        ssl: bool = False,
        session: aiohttp.ClientSession | None = None,
        api_version: int = DEFAULT_API_VERSION,
    ) -> None:
        self._host = host
        self._password = password
        self._ssl = ssl
        self._port = port if port is not None else (443 if ssl else 80)
        self._session = session
        self._owns_session = session is None
        self._api_version = api_version
        self._logger = getLogger(f"LavaRoute.RoutePlannerClient-{host}:{self._port}")

    def __repr__(self) -> str:
        return f"<RoutePlannerClient host={self._host} port={self._port} ssl={self._ssl}>"

    async def __aenter__(self) -> RoutePlannerClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def connection_protocol(self) -> str:
        """The protocol used for the connection"""
        return "https" if self._ssl else "http"

    @property
    def host(self) -> str:
        """The host of the node"""
        return self._host

    @property
    def port(self) -> int:
        """The port of the node"""
        return self._port

    @property
    def base_url(self) -> URL:
        """Returns the base URL of the target node."""
        return URL(f"{self.connection_protocol}://{self.host}:{self.port}")

    @property
    def base_api_url(self) -> URL:
        """Returns the base API URL of the target node."""
        return self.base_url / f"v{self._api_version}"

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(json_serialize=json.dumps)
            self._owns_session = True
        return self._session

    def get_endpoint_routeplanner_status(self) -> URL:
        """Returns the routeplanner status endpoint of the target node."""
        return self.base_api_url / "routeplanner" / "status"

    async def close(self) -> None:
        """Closes the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def _read_failure(self, res: aiohttp.ClientResponse) -> LavalinkError:
        with contextlib.suppress(ValueError, DaciteError):
            body = await res.json(loads=json.loads, content_type=None)
            if isinstance(body, dict):
                return from_dict(data_class=LavalinkError, data=body)
        self._logger.trace("Node returned a non standard error body for %s", res.url.path)
        return LavalinkError(
            timestamp=datetime.now(tz=get_tz_utc()),
            status=res.status,
            error=res.reason or "Unknown",
            message=f"Unexpected response from {res.url.path}",
            path=res.url.path,
        )

    async def fetch_routeplanner_status(self) -> Status | HTTPException:
        """|coro|
        Fetches the routeplanner status response from the target node.

        Returns
        -------
        :class:`Status` | :class:`HTTPException`
            The decoded status, an empty status if the node has no route planner configured,
            or a falsy :class:`HTTPException` if the request failed.

        Raises
        ------
        UnauthorizedException
            If the node rejected the password.
        MalformedPayloadException
            If the node answered with something that isn't a JSON object.
        """
        async with self.session.get(
            self.get_endpoint_routeplanner_status(),
            headers={
                "Authorization": self._password,
                "Client-Name": CLIENT_NAME,
            },
        ) as res:
            if res.status == NO_CONTENT_STATUS:
                self._logger.verbose("Route planner is disabled on this node")
                return Status()
            if res.status in GOOD_RESPONSE_RANGE:
                return decode_route_planner_status(await res.read())
            failure = await self._read_failure(res)
            if res.status in UNAUTHORIZED_STATUSES:
                raise UnauthorizedException(failure)
            self._logger.trace("Failed to get routeplanner status: %d %s", failure.status, failure.message)
            return HTTPException(failure)
