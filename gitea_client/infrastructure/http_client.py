"""Gitea REST API transport implemented on aiohttp."""
import asyncio
import logging
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar, Union, get_args, get_origin

import aiohttp
from pydantic import TypeAdapter, ValidationError

from gitea_client.domain.auth import Auth
from gitea_client.domain.errors import ErrorKind, GiteaError
from gitea_client.domain.gitea_interface import IGiteaTransport, RawResponse, Request
from gitea_client.version import __version__


logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _is_optional(target: Any) -> bool:
    return get_origin(target) is Union and type(None) in get_args(target)


class GiteaHTTPClient(IGiteaTransport):
    """Gitea API client holding the base URL and a preconfigured HTTP session.

    Implements the IGiteaTransport port. Headers are computed once at
    construction; the aiohttp session is created on first use so the client
    can be built outside of a running event loop.
    """

    API_PREFIX = "api/v1"

    def __init__(
        self,
        base_url: str,
        auth: Optional[Auth] = None,
        timeout: Optional[float] = None
    ):
        """Initialize the client.

        Args:
            base_url: Root URL of the Gitea instance, e.g. https://gitea.example.com
                (without /api/v1)
            auth: Authentication to send with every request (default: none)
            timeout: Total timeout per request in seconds (default: aiohttp's)

        Raises:
            ValueError: If the credentials cannot be sent as a header value
        """
        self._base_url = base_url.rstrip("/")
        self._auth = auth or Auth.none()
        self._timeout = timeout
        self._headers = {
            "Accept": "application/json",
            "User-Agent": f"gitea-client/{__version__}",
        }
        if self._auth.header_value is not None:
            self._headers["Authorization"] = self._auth.header_value
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict:
        """Default headers sent with every request."""
        return dict(self._headers)

    async def _init_session(self) -> aiohttp.ClientSession:
        """Initialize the HTTP session (lazy initialization)."""
        if self._session is None or self._session.closed:
            timeout = (
                aiohttp.ClientTimeout(total=self._timeout)
                if self._timeout is not None
                else aiohttp.ClientTimeout()
            )
            self._session = aiohttp.ClientSession(headers=self._headers, timeout=timeout)
        return self._session

    def request(self, method: str, path: str) -> Request:
        url = f"{self._base_url}/{self.API_PREFIX}/{str(path).lstrip('/')}"
        return Request(method=method.upper(), url=url)

    async def execute(self, request: Request) -> RawResponse:
        """Send a request and return its response.

        Args:
            request: Request built with request() or one of the verb shortcuts

        Returns:
            The 2xx response with its body read as text

        Raises:
            GiteaError: HTTP_ERROR for 4xx/5xx responses (message is the body),
                TRANSPORT_ERROR when no response was received
        """
        session = await self._init_session()
        logger.debug(f"{request.method} {request.url} params={list(request.params)}")

        try:
            async with session.request(
                request.method,
                request.url,
                params=list(request.params) or None,
                json=request.json
            ) as response:
                status = response.status
                body = await response.text(errors="replace")
                headers = dict(response.headers)
        except aiohttp.ClientResponseError as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise GiteaError(str(e), ErrorKind.TRANSPORT_ERROR, e.status or 400) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{request.method} {request.url} failed: {e!r}")
            raise GiteaError(str(e) or type(e).__name__, ErrorKind.TRANSPORT_ERROR, 400) from e

        if status >= 400:
            logger.warning(f"{request.method} {request.url} returned {status}")
            raise GiteaError(body, ErrorKind.HTTP_ERROR, status)

        return RawResponse(status=status, body=body, headers=headers)

    def parse(self, response: RawResponse, target: Type[T]) -> T:
        """Parse a JSON response body into the given type.

        An empty body parses to None when `target` is Optional, which covers
        endpoints that answer 204 No Content.

        Raises:
            GiteaError: SERIALIZATION_ERROR carrying the response status
        """
        if _is_optional(target) and not response.body.strip():
            return None
        try:
            return _adapter(target).validate_json(response.body)
        except ValidationError as e:
            raise GiteaError(
                f"Error parsing response: {e}",
                ErrorKind.SERIALIZATION_ERROR,
                response.status
            ) from e

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "GiteaHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
