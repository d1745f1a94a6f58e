"""Generation parameters — the tunable part of a completion request."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODEL = "gpt-3.5-turbo"


class GenerationParameters(BaseModel):
    """Sampling and length settings for one completion call.

    Values are validated on construction and on assignment, so a caller may
    adjust fields before submitting without bypassing the range checks.
    """
    model_config = ConfigDict(validate_assignment=True)

    model: str = DEFAULT_MODEL
    temperature: float = Field(1.0, ge=0.0, le=2.0)
    top_p: float = Field(1.0, ge=0.0, le=1.0)
    candidate_count: int = Field(1, ge=1, description="Sent as `n`")
    stream: bool = False
    stop_sequences: list[str] | None = Field(None, description="Sent as `stop`")
    max_output_tokens: int = Field(512, ge=1, description="Sent as `max_tokens`")
    presence_penalty: float = Field(0.0, ge=-2.0, le=2.0)
    frequency_penalty: float = Field(0.0, ge=-2.0, le=2.0)
    logit_bias: dict[str, float] = Field(default_factory=dict)

    @field_validator("logit_bias", mode="before")
    @classmethod
    def _token_ids_as_str(cls, value: Any) -> Any:
        # Token ids are sent as JSON object keys; YAML may give them as ints.
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    @field_validator("stream")
    @classmethod
    def _no_streaming(cls, value: bool) -> bool:
        if value:
            raise ValueError("streaming responses are not supported")
        return value
