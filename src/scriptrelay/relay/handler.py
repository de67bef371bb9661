"""Stateless relay handler.

Maps one HTTP exchange (method + raw body) to a JSON response, independent of
the web framework hosting it. Nothing raised inside escapes ``handle``.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field

from scriptrelay.common.config import MODEL_ID, is_development, load_settings
from scriptrelay.common.schema import (
    MISSING_INPUT,
    GenerateRequest,
    MissingInputError,
    ScriptErr,
    ScriptMetadata,
    ScriptOk,
    ScriptResult,
)
from scriptrelay.common.templates import render_prompt
from scriptrelay.relay import upstream

LOGGER = logging.getLogger("scriptrelay.relay.handler")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}

METHOD_NOT_ALLOWED = "Method not allowed"
MISSING_API_KEY = "Server configuration error: Missing API key"
NO_SCRIPT = "Failed to extract script from AI response"
GENERIC_FAILURE = "Failed to generate script. Please try again."

@dataclass
class RelayResponse:
    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

def _respond(status_code: int, result: ScriptResult) -> RelayResponse:
    return RelayResponse(status_code, json.dumps(result.to_body()))

def _generate(body: str | bytes | None) -> tuple[int, ScriptResult]:
    try:
        req = GenerateRequest.from_body(body)
    except MissingInputError:
        return 400, ScriptErr(error=MISSING_INPUT)

    settings = load_settings()
    if not settings.api_key:
        LOGGER.error("CLAUDE_API_KEY environment variable is not set")
        return 500, ScriptErr(error=MISSING_API_KEY)

    LOGGER.info("Calling Claude API to generate script...")
    try:
        data = upstream.send_messages(render_prompt(req.input, req.system_prompt), settings)
    except upstream.UpstreamError as e:
        return e.status_code, ScriptErr(error=f"Claude API error: {e.message}")

    script = upstream.extract_text(data)
    if not script:
        LOGGER.error("No script text in Claude response: %s", data)
        return 500, ScriptErr(error=NO_SCRIPT)

    LOGGER.info("Script generated successfully")
    usage = data.get("usage")
    return 200, ScriptOk(script=script, metadata=ScriptMetadata.now(MODEL_ID, usage))

def handle(method: str, body: str | bytes | None = None) -> RelayResponse:
    """
    Handle one relay invocation.

    Args:
        method: HTTP method of the inbound request.
        body: Raw request body.

    Returns:
        Response with CORS headers and a JSON body (empty for preflight).
    """
    method = (method or "").upper()
    if method == "OPTIONS":
        return RelayResponse(200)
    if method != "POST":
        return _respond(405, ScriptErr(error=METHOD_NOT_ALLOWED))

    try:
        status_code, result = _generate(body)
    except Exception as e:
        LOGGER.exception("Error generating script: %s", e)
        details = str(e) if is_development() else None
        return _respond(500, ScriptErr(error=GENERIC_FAILURE, details=details))
    return _respond(status_code, result)
