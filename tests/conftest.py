"""Shared fixtures for pagetiles tests."""

import textwrap
from pathlib import Path
from typing import Optional

import pytest
from starlette.datastructures import State
from starlette.requests import Request
from starlette.responses import Response

from pagetiles.actions.invocation import ActionInvocation
from pagetiles.actions.schemas import ActionConfig
from pagetiles.config import DEFINITIONS_REGISTRY_KEY, TEMPLATES_KEY
from tests import sample_app


def make_request(headers: Optional[dict[str, str]] = None, path: str = "/") -> Request:
    raw_headers = [
        (k.lower().encode("latin-1"), v.encode("latin-1"))
        for k, v in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": raw_headers,
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
    }
    return Request(scope)


class RecordingTemplates:
    """Stand-in for Jinja2Templates that records forwards."""

    def __init__(self, events: list):
        self.events = events
        self.forwards: list[str] = []

    def TemplateResponse(self, request, name, context=None):
        self.forwards.append(name)
        self.events.append(("forward", name))
        return Response(content=f"rendered {name}", media_type="text/html")


class FakeRegistry:
    """Definitions registry double recording lookups."""

    def __init__(self, definitions=None):
        self.definitions = definitions or {}
        self.lookups: list[tuple[str, Optional[str]]] = []

    def get_definition(self, name, locale=None):
        self.lookups.append((name, locale))
        return self.definitions.get(name)


@pytest.fixture(autouse=True)
def clear_events():
    sample_app.EVENTS.clear()
    yield
    sample_app.EVENTS.clear()


@pytest.fixture
def events():
    return sample_app.EVENTS


@pytest.fixture
def templates(events):
    return RecordingTemplates(events)


@pytest.fixture
def application(templates):
    state = State()
    setattr(state, TEMPLATES_KEY, templates)
    return state


@pytest.fixture
def make_invocation(application):
    def _make(
        action_class: str = "tests.sample_app:UserAction",
        method: str = "edit",
        headers: Optional[dict[str, str]] = None,
        registry=None,
        results: Optional[dict] = None,
    ) -> ActionInvocation:
        if registry is not None:
            setattr(application, DEFINITIONS_REGISTRY_KEY, registry)
        config = ActionConfig(
            name="editUser",
            action_class=action_class,
            method=method,
            results=results or {},
        )
        return ActionInvocation(config, make_request(headers), application=application)

    return _make


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip())
    return path
