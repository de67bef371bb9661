from __future__ import annotations

import pytest

import scriptrelay.client as client_mod
from scriptrelay.client import ScriptClient, ScriptClientError

from conftest import FakeResponse, FakeUpstream


@pytest.fixture()
def fake_relay(monkeypatch: pytest.MonkeyPatch) -> FakeUpstream:
    fake = FakeUpstream()
    fake.response = FakeResponse(200, {"script": "Short. Punchy.", "metadata": {}})
    monkeypatch.setattr(client_mod.httpx, "Client", fake)
    return fake


def test_generate_returns_script(fake_relay: FakeUpstream) -> None:
    out = ScriptClient("http://relay.local/generate-script").generate("trip to Goa")
    assert out == "Short. Punchy."
    assert fake_relay.calls[0]["url"] == "http://relay.local/generate-script"
    assert fake_relay.calls[0]["json"] == {"input": "trip to Goa"}


def test_generate_sends_system_prompt(fake_relay: FakeUpstream) -> None:
    ScriptClient().generate("trip", system_prompt="Be brief.")
    assert fake_relay.calls[0]["json"] == {"input": "trip", "systemPrompt": "Be brief."}


def test_blank_input_is_rejected_locally(fake_relay: FakeUpstream) -> None:
    with pytest.raises(ValueError, match="Please enter your ideas"):
        ScriptClient().generate("   ")
    assert fake_relay.calls == []


def test_error_payload_is_raised(fake_relay: FakeUpstream) -> None:
    fake_relay.response = FakeResponse(429, {"error": "Claude API error: Rate limited"})
    with pytest.raises(ScriptClientError) as exc:
        ScriptClient().generate("x")
    assert str(exc.value) == "Claude API error: Rate limited"
    assert exc.value.status_code == 429
    assert len(fake_relay.calls) == 1


def test_non_json_error_uses_fallback(fake_relay: FakeUpstream) -> None:
    fake_relay.response = FakeResponse(502, text="Bad Gateway")
    with pytest.raises(ScriptClientError, match="Failed to generate script"):
        ScriptClient().generate("x")
