"""Client for a running relay: one POST per call, no retries."""
from __future__ import annotations
import logging
from typing import Any

import httpx

LOGGER = logging.getLogger("scriptrelay.client")

DEFAULT_URL = "http://localhost:8000/generate-script"
EMPTY_INPUT = "Please enter your ideas"
FALLBACK_ERROR = "Failed to generate script"

class ScriptClientError(Exception):
    """Relay reported a failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

class ScriptClient:
    def __init__(self, url: str = DEFAULT_URL, timeout: float = 120.0) -> None:
        self.url = url
        self.timeout = timeout

    def generate(self, text: str, system_prompt: str | None = None) -> str:
        """
        Ask the relay for a script.

        Args:
            text: Raw anecdote.
            system_prompt: Optional instruction override sent as ``systemPrompt``.

        Returns:
            The generated script text.

        Raises:
            ValueError: ``text`` is blank; nothing is sent.
            ScriptClientError: relay answered with an error payload.
        """
        if not text.strip():
            raise ValueError(EMPTY_INPUT)

        payload: dict[str, Any] = {"input": text}
        if system_prompt:
            payload["systemPrompt"] = system_prompt

        with httpx.Client(timeout=self.timeout) as client:
            r = client.post(self.url, json=payload)

        try:
            data = r.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not 200 <= r.status_code < 300:
            message = data.get("error") or FALLBACK_ERROR
            LOGGER.error("Relay returned %s: %s", r.status_code, message)
            raise ScriptClientError(str(message), r.status_code)
        script = data.get("script")
        if not isinstance(script, str):
            raise ScriptClientError(FALLBACK_ERROR, r.status_code)
        return script
