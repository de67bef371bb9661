"""Single-shot client for the Claude Messages API."""
from __future__ import annotations
import logging
from typing import Any

import httpx

from scriptrelay.common.config import ANTHROPIC_VERSION, MAX_TOKENS, MODEL_ID, Settings

LOGGER = logging.getLogger("scriptrelay.relay.upstream")

FALLBACK_ERROR = "Failed to generate script"

class UpstreamError(Exception):
    """Upstream answered with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

def build_payload(prompt: str) -> dict[str, Any]:
    return {
        "model": MODEL_ID,
        "max_tokens": MAX_TOKENS,
        "messages": [{"role": "user", "content": prompt}],
    }

def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
    """Best-effort JSON decode; anything unreadable becomes an empty dict."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}

def _error_message(data: dict[str, Any]) -> str:
    err = data.get("error")
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    return FALLBACK_ERROR

def send_messages(prompt: str, settings: Settings) -> dict[str, Any]:
    """
    POST one user message upstream and return the decoded JSON body.

    Args:
        prompt: Full message content (instruction, separator, raw input).
        settings: Configuration holding the credential and endpoint.

    Raises:
        UpstreamError: upstream returned a non-2xx status.
        httpx.HTTPError: transport failure.
    """
    headers = {
        "content-type": "application/json",
        "x-api-key": settings.api_key or "",
        "anthropic-version": ANTHROPIC_VERSION,
    }
    with httpx.Client(timeout=settings.upstream_timeout, follow_redirects=True) as client:
        r = client.post(settings.api_url, headers=headers, json=build_payload(prompt))

    if not 200 <= r.status_code < 300:
        data = _parse_error_body(r)
        LOGGER.error("Claude API error: %s %s", r.status_code, data)
        raise UpstreamError(r.status_code, _error_message(data))
    return r.json()

def extract_text(data: Any) -> str | None:
    """Return ``content[0].text`` from a Messages response, or None."""
    if not isinstance(data, dict):
        return None
    content = data.get("content")
    if not isinstance(content, list) or not content:
        return None
    first = content[0]
    if not isinstance(first, dict):
        return None
    text = first.get("text")
    return text if isinstance(text, str) and text else None
