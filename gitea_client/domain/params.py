"""Declarative request parameters and their projection onto the wire.

An endpoint class declares each optional parameter once, next to its wire
name and transport (query string or JSON body):

    class ListIssues(Endpoint):
        query = QueryParam("q")
        page = QueryParam()

On an instance the attribute becomes a chained setter, so callers write
`ListIssues("acme", "widgets").query("crash").page(2)`. Values live in the
instance's option mapping and stay absent until a setter is called;
`project_query` and `project_body` only ever emit the present ones.
"""
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel


class Param:
    """Base descriptor for an optional endpoint parameter."""

    def __init__(self, wire_name: Optional[str] = None):
        self._wire_name = wire_name
        self.name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @property
    def wire_name(self) -> str:
        return self._wire_name or self.name

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return _Setter(instance, self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        set_option(instance, self.name, value)


class QueryParam(Param):
    """Parameter rendered into the URL query string."""


class BodyParam(Param):
    """Parameter rendered into the JSON request body."""


class _Setter:
    """Bound setter returned when a Param is read on a builder instance."""

    def __init__(self, instance: Any, name: str):
        self._instance = instance
        self.__name__ = name

    def __call__(self, value: Any) -> Any:
        set_option(self._instance, self.__name__, value)
        return self._instance

    def __repr__(self) -> str:
        return f"<setter {type(self._instance).__name__}.{self.__name__}>"


def set_option(instance: Any, name: str, value: Any) -> None:
    """Store an option value; None returns the option to the absent state."""
    options = instance.__dict__.setdefault("_options", {})
    if value is None:
        options.pop(name, None)
    else:
        options[name] = value


def get_options(instance: Any) -> Dict[str, Any]:
    return instance.__dict__.get("_options", {})


def declared_params(cls: type) -> Iterator[Param]:
    """Yield the Params declared on a class and its bases, in declaration order."""
    params: Dict[str, Param] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, Param):
                # an override keeps the position of the base declaration
                params[name] = attr
    yield from params.values()


def encode_query_value(value: Any) -> str:
    """Render a value the way the Gitea API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        # "any of" filters are one comma-separated value, not repeated keys
        return ",".join(encode_query_value(v) for v in value)
    return str(value)


def encode_body_value(value: Any) -> Any:
    """Convert a value into something json.dumps accepts."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return [encode_body_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): encode_body_value(v) for k, v in value.items()}
    return value


def _project(instance: Any, kind: type, encode: Callable[[Any], Any]) -> Iterator[Tuple[str, Any]]:
    options = get_options(instance)
    for param in declared_params(type(instance)):
        if isinstance(param, kind) and param.name in options:
            yield param.wire_name, encode(options[param.name])


def project_query(instance: Any) -> List[Tuple[str, str]]:
    """Project the present query parameters of a builder onto (wire name, value) pairs."""
    return list(_project(instance, QueryParam, encode_query_value))


def project_body(instance: Any) -> Dict[str, Any]:
    """Project the present body parameters of a builder onto a JSON object."""
    return dict(_project(instance, BodyParam, encode_body_value))
