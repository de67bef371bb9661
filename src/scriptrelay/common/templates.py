"""Prompt templating helpers."""
from __future__ import annotations
from pathlib import Path

DEFAULT_SYSTEM_PROMPT = (
    "You are a storytelling scriptwriter. Create a compelling 30-60 second "
    "video script from the following ideas."
)
INPUT_SEPARATOR = "\n\nRaw Input:\n"

def load_template(path: str = "configs/storytelling_prompt.txt") -> str:
    """
    Load an instruction text file.

    Args:
        path: Path to the prompt file.
    """
    return Path(path).read_text(encoding="utf-8")

def render_prompt(user_input: str, system_prompt: str | None = None) -> str:
    """
    Join the instruction text and the caller's raw input.

    Args:
        user_input: Raw anecdote text, passed through untouched.
        system_prompt: Caller override; an empty value falls back to the default.

    Returns:
        The single user-message content sent upstream.
    """
    return f"{system_prompt or DEFAULT_SYSTEM_PROMPT}{INPUT_SEPARATOR}{user_input}"
