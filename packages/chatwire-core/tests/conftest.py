"""Shared test fixtures — FakeTransport for testing without network access."""

from __future__ import annotations

import json
from typing import Any

import pytest

from chatwire.client import Credentials
from chatwire.models.params import GenerationParameters
from chatwire.models.transcript import Transcript


class FakeResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


class FakeTransport:
    """A configurable stand-in for ``requests.Session``.

    Set ``status_code`` and ``body`` (a dict is JSON-encoded) before calling,
    or ``error`` to make ``post`` raise. Keeps a log of all calls in ``calls``.
    """

    def __init__(self, status_code: int = 200, body: Any = "", error: Exception | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url, data=None, *, headers=None, timeout=None) -> FakeResponse:
        self.calls.append({"url": url, "data": data, "headers": dict(headers or {}), "timeout": timeout})
        if self.error is not None:
            raise self.error
        text = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return FakeResponse(self.status_code, text)

    def close(self) -> None:
        self.closed = True

    def sent_json(self, i: int = -1) -> dict[str, Any]:
        return json.loads(self.calls[i]["data"])


def make_response_body(content: str = "Hello!", **overrides: Any) -> dict[str, Any]:
    body = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "choices": [
            {
                "index": 0,
                "logprobs": None,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }
    body.update(overrides)
    return body


@pytest.fixture
def transport():
    """Return a FakeTransport answering 200 with a one-choice completion."""
    return FakeTransport(body=make_response_body())


@pytest.fixture
def credentials():
    return Credentials(key="sk-test-secret")


@pytest.fixture
def transcript():
    t = Transcript()
    t.append("system", "You help.")
    t.append("user", "Hi")
    return t


@pytest.fixture
def params():
    return GenerationParameters()


@pytest.fixture
def make_body():
    """Return the response-body factory, so tests can tweak a valid body."""
    return make_response_body
