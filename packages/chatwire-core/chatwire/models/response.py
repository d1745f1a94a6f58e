"""Response models — what comes back from a successful completion call.

Scalar fields are strict: a string where the provider contract says integer
is a schema mismatch, not something to coerce.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr

from chatwire.models.transcript import Turn


class FinishReason(str, Enum):
    """Known termination causes. Providers may report others."""
    stop = "stop"
    length = "length"
    content_filter = "content_filter"
    tool_calls = "tool_calls"
    function_call = "function_call"


class UsageStats(BaseModel):
    """Token accounting. ``total_tokens`` is reported, never recomputed."""
    prompt_tokens: StrictInt = Field(..., ge=0)
    completion_tokens: StrictInt = Field(..., ge=0)
    total_tokens: StrictInt = Field(..., ge=0)


class Choice(BaseModel):
    """One generated candidate."""
    index: StrictInt
    finish_reason: StrictStr
    message: Turn
    logprobs: dict[str, Any] | None = None


class CompletionResponse(BaseModel):
    """Parsed body of a 200 response from the chat-completions endpoint."""
    id: StrictStr
    object: StrictStr
    created: StrictInt = Field(..., description="Unix timestamp (seconds)")
    choices: list[Choice]
    usage: UsageStats

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.created, tz=timezone.utc)

    @property
    def first_message(self) -> Turn | None:
        """The first candidate's message, or *None* if there are no choices."""
        if not self.choices:
            return None
        return self.choices[0].message
