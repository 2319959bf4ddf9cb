"""
Pytest fixtures for DrawIt tests.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from ..config import Settings
from ..sdk import DrawItClient


def envelope(data: Any = None, success: bool = True, message: str = None) -> Dict[str, Any]:
    """Build a backend reply body."""
    return {"success": success, "message": message, "data": data}


class FakeBackend:
    """Answers requests from a route table and records what was sent."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def reply(self, method: str, path: str, body: Any, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            (request.method, request.url.path),
            (404, envelope(success=False, message="Route not found")),
        )
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    """Settings isolated from the developer's environment and config file."""
    monkeypatch.setenv("DRAWIT_HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return Settings(base_url="http://drawit.test/", timeout=5, device_id="device-1")


@pytest.fixture
def client(settings: Settings, backend: FakeBackend):
    """DrawItClient wired to the fake backend."""
    client = DrawItClient(settings=settings, transport=httpx.MockTransport(backend.handler))
    yield client
    asyncio.run(client.close())


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
