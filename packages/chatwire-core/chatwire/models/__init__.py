from chatwire.models.transcript import Role, Turn, Transcript
from chatwire.models.params import DEFAULT_MODEL, GenerationParameters
from chatwire.models.request import CompletionRequest
from chatwire.models.response import Choice, CompletionResponse, FinishReason, UsageStats

__all__ = [
    "Role", "Turn", "Transcript",
    "DEFAULT_MODEL", "GenerationParameters",
    "CompletionRequest",
    "Choice", "CompletionResponse", "FinishReason", "UsageStats",
]
