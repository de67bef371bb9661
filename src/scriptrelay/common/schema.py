"""Pydantic models for relay request/response types."""
from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

MISSING_INPUT = "Missing required field: input"

class MissingInputError(ValueError):
    """Request body has no usable ``input`` string."""

    def __init__(self) -> None:
        super().__init__(MISSING_INPUT)

class GenerateRequest(BaseModel):
    """Caller payload: the raw anecdote plus an optional instruction override."""
    model_config = ConfigDict(populate_by_name=True)

    input: str
    system_prompt: str | None = Field(default=None, alias="systemPrompt")

    @classmethod
    def from_body(cls, body: str | bytes | None) -> "GenerateRequest":
        """
        Parse a raw HTTP body.

        Raises:
            MissingInputError: body is not a JSON object with a non-empty ``input`` string.
        """
        try:
            data = json.loads(body or "")
        except ValueError:
            raise MissingInputError() from None
        if not isinstance(data, dict):
            raise MissingInputError()
        text = data.get("input")
        if not isinstance(text, str) or not text:
            raise MissingInputError()
        system_prompt = data.get("systemPrompt")
        if not isinstance(system_prompt, str):
            system_prompt = None
        return cls(input=text, system_prompt=system_prompt)

class ScriptMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_at: str = Field(alias="generatedAt")
    model: str
    tokens_used: Any = Field(default=None, alias="tokensUsed")

    @classmethod
    def now(cls, model: str, tokens_used: Any) -> "ScriptMetadata":
        stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return cls(generated_at=stamp, model=model, tokens_used=tokens_used)

class ScriptOk(BaseModel):
    """Successful generation."""
    script: str
    metadata: ScriptMetadata

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

class ScriptErr(BaseModel):
    """Failed generation; ``details`` is only set in development mode."""
    error: str
    details: str | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

ScriptResult = Union[ScriptOk, ScriptErr]
