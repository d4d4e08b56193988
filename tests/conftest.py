"""Shared fixtures: in-memory GitHub and Gemini HTTP backends."""

import base64
import json
import logging
from typing import Any, Callable, Dict, List, Union

import httpx
import pytest

from readmegen.services.gemini import GeminiClient
from readmegen.tools.github import GitHubClient

REPO_PATH = "/repos/octocat/Hello-World"

Route = Union[tuple, Callable[[httpx.Request], httpx.Response]]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that serves fixed routes and records every request.

    A route is a ``(status, body)`` tuple or a handler; async handlers are awaited.
    """

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


def encode_package_json(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mimic the GitHub contents API payload for a JSON file."""
    encoded = base64.b64encode(json.dumps(data).encode()).decode()
    # GitHub wraps base64 content at 60 characters
    wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60))
    return {"name": "package.json", "encoding": "base64", "content": wrapped}


def repo_payload(**overrides) -> Dict[str, Any]:
    payload = {
        "name": "Hello-World",
        "owner": {"login": "octocat"},
        "html_url": "https://github.com/octocat/Hello-World",
        "description": "My first repository on GitHub!",
        "homepage": "",
        "topics": [],
        "language": "C",
        "stargazers_count": 1500,
        "forks_count": 42,
        "open_issues_count": 3,
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2024-05-01T10:00:00Z",
        "license": {"name": "MIT License"},
    }
    payload.update(overrides)
    return payload


def listing(*names: str) -> List[Dict[str, str]]:
    return [{"name": name, "type": "file"} for name in names]


def gemini_success(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def make_transport() -> Callable[[Dict[str, Route]], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_github(make_transport):
    """Build a GitHubClient over fixed routes; returns (client, transport)."""
    def _make(routes: Dict[str, Route]):
        transport = make_transport(routes)
        return GitHubClient(base_url="https://api.github.test", transport=transport), transport
    return _make


@pytest.fixture
def make_gemini(make_transport):
    """Build a GeminiClient whose endpoint answers with ``route``."""
    def _make(route: Route, api_key: str = "test-key"):
        client = GeminiClient(api_key=api_key, base_url="https://gemini.test")
        transport = make_transport({
            f"/v1beta/models/{client.model}:generateContent": route
        })
        client.transport = transport
        return client, transport
    return _make
