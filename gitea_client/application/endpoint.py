"""Generic, table-driven request builder shared by every API operation.

A concrete endpoint is a class that states its verb, route template,
required arguments and response type, and declares its optional parameters
with QueryParam/BodyParam:

    class GetCommits(Endpoint):
        method = "GET"
        route = "repos/{owner}/{repo}/commits"
        arguments = ("owner", "repo")
        response = List[Commit]

        sha = QueryParam()
        not_ = QueryParam("not")

Required arguments named in the route render into the path; any other
required argument is a mandatory JSON body field.
"""
import logging
from string import Formatter
from typing import Any, ClassVar, Dict, FrozenSet, Tuple

from gitea_client.domain.errors import GiteaError
from gitea_client.domain.gitea_interface import IGiteaTransport, RawResponse, Request
from gitea_client.domain.params import (
    BodyParam,
    declared_params,
    encode_body_value,
    get_options,
    project_body,
    project_query,
)


logger = logging.getLogger(__name__)


class Endpoint:
    """Base class for one API operation's builder."""

    method: ClassVar[str] = "GET"
    route: ClassVar[str] = ""
    arguments: ClassVar[Tuple[str, ...]] = ()
    response: ClassVar[Any] = None

    def __init__(self, *args: Any, **kwargs: Any):
        name = type(self).__name__
        if len(args) > len(self.arguments):
            raise TypeError(
                f"{name}() takes {len(self.arguments)} arguments but {len(args)} were given"
            )
        values = dict(zip(self.arguments, args))
        for key, value in kwargs.items():
            if key not in self.arguments:
                raise TypeError(f"{name}() got an unexpected argument {key!r}")
            if key in values:
                raise TypeError(f"{name}() got multiple values for argument {key!r}")
            values[key] = value
        missing = [arg for arg in self.arguments if arg not in values]
        if missing:
            raise TypeError(f"{name}() missing required arguments: {', '.join(missing)}")
        self._bound = values
        self._options: Dict[str, Any] = {}

    @classmethod
    def path_fields(cls) -> FrozenSet[str]:
        """Names of the placeholders in the route template."""
        return frozenset(field for _, field, _, _ in Formatter().parse(cls.route) if field)

    @classmethod
    def has_body(cls) -> bool:
        """Whether this operation sends a JSON body at all."""
        if any(isinstance(p, BodyParam) for p in declared_params(cls)):
            return True
        return any(arg not in cls.path_fields() for arg in cls.arguments)

    @property
    def bound_arguments(self) -> Dict[str, Any]:
        return dict(self._bound)

    @property
    def options(self) -> Dict[str, Any]:
        """Optional parameters that have been set, by attribute name."""
        return dict(get_options(self))

    def render_path(self) -> str:
        fields = self.path_fields()
        return self.route.format(**{k: v for k, v in self._bound.items() if k in fields})

    def render_body(self) -> Dict[str, Any]:
        fields = self.path_fields()
        body = {
            key: encode_body_value(value)
            for key, value in self._bound.items()
            if key not in fields
        }
        body.update(project_body(self))
        return body

    def build_request(self, client: IGiteaTransport) -> Request:
        """Render this operation into a request. No I/O is performed."""
        request = client.request(self.method, self.render_path())
        params = project_query(self)
        if params:
            request = request.with_params(params)
        if self.has_body():
            request = request.with_json(self.render_body())
        return request

    def handle_response(self, client: IGiteaTransport, response: RawResponse) -> Any:
        if self.response is None:
            return None
        return client.parse(response, self.response)

    async def send(self, client: IGiteaTransport) -> Any:
        """Send the request and return the parsed response.

        Raises:
            GiteaError: If the request fails or the response cannot be parsed
        """
        response = await client.execute(self.build_request(client))
        return self.handle_response(client, response)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._bound.items())
        opts = ", ".join(f"{k}={v!r}" for k, v in get_options(self).items())
        return f"{type(self).__name__}({args}{'; ' if opts else ''}{opts})"


class ExistenceCheck(Endpoint):
    """Endpoint answering a yes/no question through 2xx vs 404."""

    async def send(self, client: IGiteaTransport) -> bool:
        try:
            await client.execute(self.build_request(client))
        except GiteaError as e:
            if e.is_not_found:
                logger.debug(f"{type(self).__name__}: not found, answering False")
                return False
            raise
        return True


class SearchEndpoint(Endpoint):
    """Endpoint whose results come wrapped in an {ok, data} envelope."""

    def handle_response(self, client: IGiteaTransport, response: RawResponse) -> Any:
        return client.parse(response, self.response).data


class StatusEndpoint(Endpoint):
    """Endpoint whose only result is the HTTP status code."""

    def handle_response(self, client: IGiteaTransport, response: RawResponse) -> int:
        return response.status
