"""FastAPI host for the script relay.

Endpoints:
- GET /health
- POST /generate-script  { "input": "...", "systemPrompt": "..." }
  (OPTIONS answers CORS preflight, every other method gets 405)
"""
from __future__ import annotations
import logging
import os

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from scriptrelay.common.config import MODEL_ID
from scriptrelay.common.logging_setup import setup_logging
from scriptrelay.relay.handler import RelayResponse, handle

LOGGER = logging.getLogger("scriptrelay.relay.app")
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

RELAY_PATH = "/generate-script"

app = FastAPI(title="Script Relay")

def _to_response(out: RelayResponse) -> Response:
    return Response(content=out.body, status_code=out.status_code, headers=out.headers)

@app.exception_handler(StarletteHTTPException)
async def _relay_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    """Methods the route does not list still get the relay's own 405 body and CORS headers."""
    if exc.status_code == 405 and request.url.path == RELAY_PATH:
        return _to_response(handle(request.method))
    return await http_exception_handler(request, exc)

@app.on_event("startup")
def _check_api_key_on_startup() -> None:
    """Warn early when the upstream credential is missing; requests will 500."""
    if not os.getenv("CLAUDE_API_KEY"):
        LOGGER.warning("CLAUDE_API_KEY is not set; %s will return 500", RELAY_PATH)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": MODEL_ID}

@app.api_route(RELAY_PATH, methods=["POST", "OPTIONS"])
async def generate_script(request: Request) -> Response:
    body = await request.body()
    # handle() blocks on the upstream call; keep it off the event loop
    out = await run_in_threadpool(handle, request.method, body)
    return _to_response(out)
