"""Tests for the generic endpoint builder."""
from typing import List

import pytest

from gitea_client.application.endpoint import Endpoint
from gitea_client.application.issues import CreateIssue, EditComment, ListIssues
from gitea_client.application.pulls import GetPullRequestByBranches
from gitea_client.application.repos import DeleteRepo, GetRepo, UpdateRepoAvatar
from gitea_client.domain.errors import ErrorKind, GiteaError
from gitea_client.domain.gitea_interface import RawResponse, Request
from gitea_client.domain.models import Repository
from gitea_client.infrastructure.http_client import GiteaHTTPClient


class StubTransport(GiteaHTTPClient):
    """Transport answering every request with a canned response, without I/O."""

    def __init__(self, status: int = 200, body: str = "{}"):
        super().__init__("https://example.test")
        self.status = status
        self.body = body
        self.sent: List[Request] = []

    async def execute(self, request: Request) -> RawResponse:
        self.sent.append(request)
        if self.status >= 400:
            raise GiteaError(self.body, ErrorKind.HTTP_ERROR, self.status)
        return RawResponse(status=self.status, body=self.body)


async def test_get_repo_end_to_end():
    """Test get repo against a canned response, with no auth."""
    transport = StubTransport(body='{"id":1,"name":"widgets","owner":{"login":"acme"},"stars_count":3}')

    repo = await GetRepo("acme", "widgets").send(transport)

    assert isinstance(repo, Repository)
    assert repo.name == "widgets"
    assert repo.owner.login == "acme"
    assert transport.sent == [
        Request(method="GET", url="https://example.test/api/v1/repos/acme/widgets")
    ]
    assert "Authorization" not in transport.headers


async def test_create_issue_sends_only_title():
    """Test that required body arguments are sent and unset options are not."""
    transport = StubTransport(status=201, body='{"number":1,"title":"bug"}')

    issue = await CreateIssue("acme", "widgets", title="bug").send(transport)

    request = transport.sent[0]
    assert issue.title == "bug"
    assert request.method == "POST"
    assert request.url == "https://example.test/api/v1/repos/acme/widgets/issues"
    assert request.json == {"title": "bug"}
    assert request.params == ()


async def test_list_issues_sends_only_set_query_params():
    """Test that only page and limit reach the query string."""
    transport = StubTransport(body="[]")

    issues = await ListIssues("acme", "widgets").page(2).limit(10).send(transport)

    request = transport.sent[0]
    assert issues == []
    assert request.method == "GET"
    assert request.params == (("page", "2"), ("limit", "10"))
    assert request.json is None


async def test_status_endpoint_returns_status_code():
    """Test that avatar updates return the HTTP status."""
    transport = StubTransport(status=204, body="")

    status = await UpdateRepoAvatar("acme", "widgets", "aGVsbG8=").send(transport)

    assert status == 204
    assert transport.sent[0].json == {"image": "aGVsbG8="}


async def test_endpoint_without_response_returns_none():
    """Test that operations without a typed result return None."""
    transport = StubTransport(status=204, body="")

    assert await DeleteRepo("acme", "widgets").send(transport) is None
    assert transport.sent[0].method == "DELETE"


async def test_http_errors_propagate():
    """Test that GiteaError is not swallowed by plain endpoints."""
    transport = StubTransport(status=404, body="not found")

    with pytest.raises(GiteaError) as exc_info:
        await GetRepo("acme", "missing").send(transport)

    assert exc_info.value.is_not_found


def test_path_and_body_arguments_are_split():
    """Test which required arguments go into the path and which into the body."""
    builder = EditComment("acme", "widgets", 42, "updated")

    assert EditComment.path_fields() == {"owner", "repo", "comment"}
    assert builder.render_path() == "repos/acme/widgets/issues/comments/42"
    assert builder.render_body() == {"body": "updated"}


def test_route_order_differs_from_argument_order():
    """Test that path placeholders are filled by name."""
    builder = GetPullRequestByBranches("acme", "widgets", head="feature", base="main")

    assert builder.render_path() == "repos/acme/widgets/pulls/main/feature"
    assert not GetPullRequestByBranches.has_body()


def test_has_body():
    """Test which operations send a JSON body."""
    assert CreateIssue.has_body()
    assert UpdateRepoAvatar.has_body()
    assert not GetRepo.has_body()
    assert not ListIssues.has_body()


def test_missing_argument():
    """Test that a missing required argument raises TypeError."""
    with pytest.raises(TypeError, match="title"):
        CreateIssue("acme", "widgets")


def test_too_many_arguments():
    """Test that extra positional arguments raise TypeError."""
    with pytest.raises(TypeError):
        GetRepo("acme", "widgets", "extra")


def test_unexpected_and_duplicate_arguments():
    """Test keyword argument checking."""
    with pytest.raises(TypeError, match="unexpected"):
        GetRepo("acme", "widgets", branch="main")
    with pytest.raises(TypeError, match="multiple"):
        GetRepo("acme", "widgets", owner="acme")


def test_repr_shows_arguments_and_options():
    """Test the builder repr."""
    builder = ListIssues("acme", "widgets").page(2)

    assert repr(builder) == "ListIssues(owner='acme', repo='widgets'; page=2)"
    assert builder.bound_arguments == {"owner": "acme", "repo": "widgets"}


def test_custom_endpoint():
    """Test declaring an endpoint outside the built-in catalog."""
    class GetVersion(Endpoint):
        route = "version"

    request = GetVersion().build_request(GiteaHTTPClient("https://example.test"))

    assert request.url == "https://example.test/api/v1/version"
    assert request.json is None
