"""Process-wide configuration for the relay.

Values come from the environment. An optional YAML file named by
``RELAY_CONFIG`` may provide defaults for the non-secret keys; the
environment always wins. The API key is only ever read from the environment.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

MODEL_ID = "claude-sonnet-4-5-20250929"
MAX_TOKENS = 1500
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"

@dataclass(frozen=True)
class Settings:
    """Snapshot of relay configuration taken at call time."""
    api_key: str | None
    api_url: str = DEFAULT_API_URL
    development: bool = False
    upstream_timeout: float = 120.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

@lru_cache(maxsize=8)
def _read_cfg(path: str, mtime: float) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}

def load_cfg(path: str) -> dict[str, Any]:
    """Parsed YAML mapping, re-read only when the file changes; other shapes give {}."""
    return dict(_read_cfg(path, Path(path).stat().st_mtime))

def is_development() -> bool:
    """Development mode is set only through RELAY_ENV or NODE_ENV."""
    value = os.getenv("RELAY_ENV") or os.getenv("NODE_ENV") or ""
    return value.strip().lower() == "development"

def load_settings() -> Settings:
    """
    Read configuration from the environment (and optional YAML defaults).

    Called per request so changes to the environment take effect without
    re-importing the app.
    """
    cfg: dict[str, Any] = {}
    cfg_path = os.getenv("RELAY_CONFIG")
    if cfg_path and Path(cfg_path).exists():
        cfg = load_cfg(cfg_path)

    return Settings(
        api_key=os.getenv("CLAUDE_API_KEY") or None,
        api_url=os.getenv("CLAUDE_API_URL", cfg.get("api_url", DEFAULT_API_URL)),
        development=is_development(),
        upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", cfg.get("upstream_timeout", 120.0))),
        log_level=os.getenv("LOG_LEVEL", cfg.get("log_level", "INFO")),
        host=os.getenv("RELAY_HOST", cfg.get("host", "0.0.0.0")),
        port=int(os.getenv("RELAY_PORT", cfg.get("port", 8000))),
    )
