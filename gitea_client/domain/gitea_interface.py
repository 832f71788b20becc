"""Gitea API transport interface (port) and the values that cross it.

Endpoint builders only talk to this interface; the aiohttp adapter in the
infrastructure layer implements it.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Sequence, Tuple, Type, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Request:
    """Immutable description of a single HTTP call."""
    method: str
    url: str
    params: Tuple[Tuple[str, str], ...] = ()
    json: Optional[Any] = None

    def with_params(self, params: Sequence[Tuple[str, str]]) -> 'Request':
        """Returns a new Request with the given query pairs appended."""
        return replace(self, params=self.params + tuple(params))

    def with_json(self, body: Any) -> 'Request':
        """Returns a new Request carrying the given JSON body."""
        return replace(self, json=body)


@dataclass(frozen=True)
class RawResponse:
    """A successful (2xx) response with its body already read."""
    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)


class IGiteaTransport(ABC):
    """Abstract interface for sending requests to a Gitea instance."""

    @abstractmethod
    def request(self, method: str, path: str) -> Request:
        """Build a request addressed to `{base_url}/api/v1/{path}`.

        Args:
            method: HTTP verb
            path: Path relative to the versioned API root

        Returns:
            Request descriptor; no I/O is performed
        """
        pass

    @abstractmethod
    async def execute(self, request: Request) -> RawResponse:
        """Send a request.

        Raises:
            GiteaError: On a 4xx/5xx response or a connection failure
        """
        pass

    @abstractmethod
    def parse(self, response: RawResponse, target: Type[T]) -> T:
        """Deserialize a response body into `target`.

        Raises:
            GiteaError: When the body does not match `target`
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass

    def get(self, path: str) -> Request:
        return self.request("GET", path)

    def post(self, path: str) -> Request:
        return self.request("POST", path)

    def patch(self, path: str) -> Request:
        return self.request("PATCH", path)

    def put(self, path: str) -> Request:
        return self.request("PUT", path)

    def delete(self, path: str) -> Request:
        return self.request("DELETE", path)
