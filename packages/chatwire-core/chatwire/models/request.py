"""Request envelope — the exact JSON body posted to the provider."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chatwire.models.params import GenerationParameters
from chatwire.models.transcript import Transcript, Turn


class CompletionRequest(BaseModel):
    """Wire payload: generation parameters plus a transcript snapshot.

    Field names follow the provider contract (``n``, ``stop``,
    ``max_tokens``) rather than the names used on ``GenerationParameters``.
    """
    model: str
    messages: list[Turn]
    temperature: float
    top_p: float
    n: int
    stream: bool
    stop: list[str] | None
    max_tokens: int
    presence_penalty: float
    frequency_penalty: float
    logit_bias: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def build(cls, transcript: Transcript, params: GenerationParameters) -> CompletionRequest:
        return cls(
            model=params.model,
            messages=list(transcript.snapshot()),
            temperature=params.temperature,
            top_p=params.top_p,
            n=params.candidate_count,
            stream=params.stream,
            stop=list(params.stop_sequences) if params.stop_sequences is not None else None,
            max_tokens=params.max_output_tokens,
            presence_penalty=params.presence_penalty,
            frequency_penalty=params.frequency_penalty,
            logit_bias=dict(params.logit_bias),
        )

    def to_json(self) -> str:
        return self.model_dump_json()

    def parameters(self) -> GenerationParameters:
        """Recover the generation parameters this envelope was built from."""
        return GenerationParameters(
            model=self.model,
            temperature=self.temperature,
            top_p=self.top_p,
            candidate_count=self.n,
            stream=self.stream,
            stop_sequences=self.stop,
            max_output_tokens=self.max_tokens,
            presence_penalty=self.presence_penalty,
            frequency_penalty=self.frequency_penalty,
            logit_bias=self.logit_bias,
        )

    def transcript(self) -> Transcript:
        return Transcript(turns=list(self.messages))
