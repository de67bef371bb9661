"""Command-line entry points: call a relay, or serve one."""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

import httpx

from scriptrelay.client import DEFAULT_URL, ScriptClient, ScriptClientError
from scriptrelay.common.config import load_settings
from scriptrelay.common.logging_setup import setup_logging
from scriptrelay.common.templates import load_template

LOGGER = logging.getLogger("scriptrelay.cli")

def generate_main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Turn an anecdote into a short video script")
    ap.add_argument("--text", required=True, help="Raw anecdote text")
    ap.add_argument("--url", default=DEFAULT_URL, help="Relay endpoint")
    ap.add_argument("--prompt-file", default=None, help="Instruction text sent as systemPrompt")
    ap.add_argument("--out", default=None, help="Also write the script to this file")
    ap.add_argument("--timeout", type=float, default=120.0)
    args = ap.parse_args(argv)

    system_prompt = load_template(args.prompt_file) if args.prompt_file else None
    client = ScriptClient(args.url, timeout=args.timeout)
    try:
        script = client.generate(args.text, system_prompt=system_prompt)
    except (ValueError, ScriptClientError, httpx.HTTPError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.out:
        Path(args.out).write_text(script, encoding="utf-8")
        LOGGER.info("Script written to %s", args.out)
    print(script)
    return 0

def serve_main() -> None:
    import uvicorn

    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "scriptrelay.relay.fastapi_app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

def main() -> None:
    setup_logging(logging.WARNING)
    sys.exit(generate_main())

if __name__ == "__main__":
    main()
