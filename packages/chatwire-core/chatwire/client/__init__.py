"""Completion client — authenticated chat-completions calls over HTTPS."""

from __future__ import annotations

from chatwire.client._base import ChatClient, Transport, TransportResponse
from chatwire.client._config import OPENAI_CHAT_ENDPOINT, get_endpoint, get_timeout
from chatwire.client._credentials import (
    Credentials,
    CredentialsError,
    credentials_from_env,
    load_credentials,
)
from chatwire.client._errors import (
    CompletionError,
    DeserializationError,
    HttpStatusError,
    TransportError,
)
from chatwire.client._http import CompletionClient

__all__ = [
    "ChatClient", "Transport", "TransportResponse",
    "CompletionClient", "get_completion_client", "OPENAI_CHAT_ENDPOINT",
    "Credentials", "CredentialsError", "credentials_from_env", "load_credentials",
    "CompletionError", "DeserializationError", "HttpStatusError", "TransportError",
]


def get_completion_client(transport: Transport | None = None) -> CompletionClient:
    """Create a completion client from environment configuration.

    Uses ``CHATWIRE_ENDPOINT`` and ``CHATWIRE_TIMEOUT_SECONDS``; see
    ``chatwire.client._config``.
    """
    return CompletionClient(transport, endpoint=get_endpoint(), timeout=get_timeout())
