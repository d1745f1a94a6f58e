"""Client configuration from environment variables."""

from __future__ import annotations

import os

OPENAI_CHAT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_SECRETS_FILE = "secrets.json"


def get_endpoint() -> str:
    """Return ``CHATWIRE_ENDPOINT``, or the OpenAI chat-completions URL."""
    return os.environ.get("CHATWIRE_ENDPOINT") or OPENAI_CHAT_ENDPOINT


def get_model() -> str | None:
    """Return the model override from ``CHATWIRE_MODEL``, or *None* for the default."""
    return os.environ.get("CHATWIRE_MODEL") or None


def get_timeout() -> float | None:
    """Return the transport timeout in seconds, or *None* for no deadline.

    Raises:
        ValueError: If ``CHATWIRE_TIMEOUT_SECONDS`` is not a number.
    """
    raw = os.environ.get("CHATWIRE_TIMEOUT_SECONDS")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(
            f"CHATWIRE_TIMEOUT_SECONDS must be a number (seconds), got {raw!r}"
        ) from exc


def get_secrets_file() -> str:
    return os.environ.get("CHATWIRE_SECRETS_FILE") or DEFAULT_SECRETS_FILE
