"""Shared fixtures: an in-process fake Gitea server and a client pointed at it."""
import asyncio
import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, Tuple

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from gitea_client.application.client import GiteaClient


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: List[Tuple[str, str]]
    headers: Dict[str, str]
    body: Optional[Any] = None


@dataclass
class CannedResponse:
    status: int = 200
    body: str = "{}"
    delay: float = 0.0
    raw: Optional[bytes] = None


@dataclass
class FakeGitea:
    """Catch-all aiohttp app answering with queued responses and recording requests."""
    requests: List[RecordedRequest] = field(default_factory=list)
    responses: Deque[CannedResponse] = field(default_factory=deque)
    base_url: str = ""

    def respond(
        self,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        delay: float = 0.0,
        raw: Optional[bytes] = None
    ):
        if text is None:
            text = json.dumps({} if json_body is None else json_body)
        self.responses.append(CannedResponse(status=status, body=text, delay=delay, raw=raw))

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        raw = await request.text()
        self.requests.append(RecordedRequest(
            method=request.method,
            path=request.path,
            query=list(request.query.items()),
            headers=dict(request.headers),
            body=json.loads(raw) if raw else None
        ))
        canned = self.responses.popleft() if self.responses else CannedResponse()
        if canned.delay:
            await asyncio.sleep(canned.delay)
        if canned.status == 204:
            return web.Response(status=204)
        if canned.raw is not None:
            return web.Response(
                status=canned.status, body=canned.raw, content_type="application/json", charset="utf-8"
            )
        return web.Response(status=canned.status, text=canned.body, content_type="application/json")

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handle)
        return app


@pytest_asyncio.fixture
async def gitea():
    fake = FakeGitea()
    server = TestServer(fake.make_app())
    await server.start_server()
    fake.base_url = str(server.make_url("/")).rstrip("/")
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def client(gitea):
    client = GiteaClient(gitea.base_url)
    yield client
    await client.close()
