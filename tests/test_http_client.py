"""Tests for the aiohttp transport."""
from typing import List, Optional

import pytest

from gitea_client.domain.auth import Auth
from gitea_client.domain.errors import ErrorKind, GiteaError
from gitea_client.domain.gitea_interface import RawResponse
from gitea_client.domain.models import Comment, User
from gitea_client.infrastructure.http_client import GiteaHTTPClient


def test_request_joins_base_url_and_path():
    """Test URL construction with and without stray slashes."""
    client = GiteaHTTPClient("https://example.test/")

    request = client.request("get", "/repos/acme/widgets")

    assert request.method == "GET"
    assert request.url == "https://example.test/api/v1/repos/acme/widgets"
    assert client.get("version").url == "https://example.test/api/v1/version"
    assert client.delete("user").method == "DELETE"


def test_default_headers():
    """Test the headers sent with every request."""
    anonymous = GiteaHTTPClient("https://example.test")
    with_token = GiteaHTTPClient("https://example.test", Auth.token("abc123"))

    assert anonymous.headers["Accept"] == "application/json"
    assert anonymous.headers["User-Agent"].startswith("gitea-client/")
    assert "Authorization" not in anonymous.headers
    assert with_token.headers["Authorization"] == "token abc123"


async def test_execute_sends_headers_params_and_body(gitea):
    """Test that a request reaches the server intact."""
    gitea.respond(json_body={"login": "alice"})
    async with GiteaHTTPClient(gitea.base_url, Auth.token("abc123")) as client:
        request = client.post("user/repos").with_params([("page", "2")]).with_json({"name": "widgets"})
        response = await client.execute(request)

    assert response.status == 200
    assert client.parse(response, User).login == "alice"
    assert gitea.last.method == "POST"
    assert gitea.last.path == "/api/v1/user/repos"
    assert gitea.last.query == [("page", "2")]
    assert gitea.last.body == {"name": "widgets"}
    assert gitea.last.headers["Authorization"] == "token abc123"


async def test_http_error_carries_body_and_status(client, gitea):
    """Test that 4xx responses raise HTTP_ERROR with the body as message."""
    gitea.respond(404, text='{"message":"The target couldn\'t be found."}')

    with pytest.raises(GiteaError) as exc_info:
        await client.execute(client.get("repos/acme/missing"))

    assert exc_info.value.kind is ErrorKind.HTTP_ERROR
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == '{"message":"The target couldn\'t be found."}'


async def test_server_error(client, gitea):
    """Test that 5xx responses raise HTTP_ERROR too."""
    gitea.respond(500, text="internal error")

    with pytest.raises(GiteaError) as exc_info:
        await client.execute(client.get("user"))

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "internal error"


async def test_connection_refused_is_transport_error():
    """Test that an unreachable server raises TRANSPORT_ERROR with status 400."""
    async with GiteaHTTPClient("http://127.0.0.1:1") as client:
        with pytest.raises(GiteaError) as exc_info:
            await client.execute(client.get("user"))

    assert exc_info.value.kind is ErrorKind.TRANSPORT_ERROR
    assert exc_info.value.status_code == 400


async def test_timeout_is_transport_error(gitea):
    """Test that a request exceeding the timeout raises TRANSPORT_ERROR."""
    gitea.respond(json_body={}, delay=1.0)

    async with GiteaHTTPClient(gitea.base_url, timeout=0.1) as client:
        with pytest.raises(GiteaError) as exc_info:
            await client.execute(client.get("user"))

    assert exc_info.value.kind is ErrorKind.TRANSPORT_ERROR


def test_parse_invalid_json_is_serialization_error():
    """Test that unparseable bodies raise SERIALIZATION_ERROR with the response status."""
    client = GiteaHTTPClient("https://example.test")

    with pytest.raises(GiteaError) as exc_info:
        client.parse(RawResponse(status=201, body="<html>"), User)

    assert exc_info.value.kind is ErrorKind.SERIALIZATION_ERROR
    assert exc_info.value.status_code == 201
    assert exc_info.value.message.startswith("Error parsing response")


def test_parse_wrong_shape_is_serialization_error():
    """Test that a JSON object where a list is expected fails to parse."""
    client = GiteaHTTPClient("https://example.test")

    with pytest.raises(GiteaError) as exc_info:
        client.parse(RawResponse(status=200, body='{"login": "alice"}'), List[User])

    assert exc_info.value.kind is ErrorKind.SERIALIZATION_ERROR


def test_parse_empty_body():
    """Test that an empty body is None only for Optional targets."""
    client = GiteaHTTPClient("https://example.test")

    assert client.parse(RawResponse(status=204, body=""), Optional[Comment]) is None
    with pytest.raises(GiteaError):
        client.parse(RawResponse(status=204, body=""), Comment)


async def test_session_is_recreated_after_close(client, gitea):
    """Test that a closed client opens a new session on next use."""
    gitea.respond(json_body={})
    gitea.respond(json_body={})

    await client.execute(client.get("user"))
    await client.close()
    await client.execute(client.get("user"))

    assert len(gitea.requests) == 2


async def test_invalid_utf8_error_body_is_http_error(client, gitea):
    """Test that an undecodable error body still raises HTTP_ERROR with the text."""
    gitea.respond(500, raw=b'{"login": "\xff\xfe"}')

    with pytest.raises(GiteaError) as exc_info:
        await client.user().current().send(client)

    assert exc_info.value.kind is ErrorKind.HTTP_ERROR
    assert exc_info.value.status_code == 500
    assert "\ufffd" in exc_info.value.message


async def test_invalid_utf8_success_body_is_decoded_lossily(client, gitea):
    """Test that invalid bytes inside a JSON string become replacement characters."""
    gitea.respond(200, raw=b'{"login": "\xff"}')

    user = await client.user().current().send(client)

    assert user.login == "\ufffd"


async def test_undecodable_success_body_is_serialization_error(client, gitea):
    """Test that a 2xx body of invalid bytes fails in parsing, not decoding."""
    gitea.respond(200, raw=b"\xff\xfe")

    with pytest.raises(GiteaError) as exc_info:
        await client.user().current().send(client)

    assert exc_info.value.kind is ErrorKind.SERIALIZATION_ERROR
    assert exc_info.value.status_code == 200
