from __future__ import annotations

import json as _json
from typing import Any

import pytest

import scriptrelay.relay.upstream as upstream_mod


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._json = json_data
        self._text = text

    def json(self) -> Any:
        if self._text is not None:  # raises like httpx on non-JSON bodies
            return _json.loads(self._text)
        return self._json


class FakeUpstream:
    """Stands in for httpx.Client and records every outbound call."""

    def __init__(self) -> None:
        self.response = FakeResponse(
            200,
            {
                "content": [{"type": "text", "text": "We planned Goa, BUT the rain came."}],
                "usage": {"input_tokens": 42, "output_tokens": 17},
            },
        )
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []
        self.timeouts: list[Any] = []
        self.client_options: list[dict[str, Any]] = []

    def __call__(self, timeout: float | int | None = None, **options: Any) -> "FakeUpstream":  # httpx.Client(...)
        self.timeouts.append(timeout)
        self.client_options.append(options)
        return self

    def __enter__(self) -> "FakeUpstream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def post(self, url: str, headers: dict[str, str] | None = None, json: Any = None) -> FakeResponse:  # noqa: A002
        self.calls.append({"url": url, "headers": headers, "json": json})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CLAUDE_API_KEY", "CLAUDE_API_URL", "NODE_ENV", "RELAY_ENV", "RELAY_CONFIG", "UPSTREAM_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("CLAUDE_API_KEY", "sk-test")
    return "sk-test"


@pytest.fixture()
def fake_upstream(monkeypatch: pytest.MonkeyPatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr(upstream_mod.httpx, "Client", fake)
    return fake


def body_of(out: Any) -> Any:
    """Decode the JSON body of a RelayResponse."""
    return _json.loads(out.body)
