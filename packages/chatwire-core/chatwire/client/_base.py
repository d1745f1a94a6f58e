"""Client and transport protocols."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from chatwire.client._credentials import Credentials
from chatwire.models.params import GenerationParameters
from chatwire.models.response import CompletionResponse
from chatwire.models.transcript import Transcript


@runtime_checkable
class TransportResponse(Protocol):
    """The parts of an HTTP response the client reads."""

    status_code: int
    text: str


@runtime_checkable
class Transport(Protocol):
    """Anything with a ``requests.Session``-compatible ``post``."""

    def post(
        self,
        url: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        ...


@runtime_checkable
class ChatClient(Protocol):
    """Protocol that completion clients satisfy."""

    def complete(
        self,
        transcript: Transcript,
        params: GenerationParameters,
        credentials: Credentials,
    ) -> CompletionResponse:
        """Run one request/response cycle.

        Args:
            transcript: Conversation history; read, never modified.
            params: Generation settings for this call.
            credentials: API key used for the bearer header.

        Returns:
            The parsed response.

        Raises:
            CompletionError: On transport, status or schema failure.
        """
        ...
