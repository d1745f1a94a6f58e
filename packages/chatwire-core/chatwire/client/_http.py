"""HTTP completion client — one POST per call, outcome classified."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from chatwire.client._base import Transport
from chatwire.client._config import OPENAI_CHAT_ENDPOINT
from chatwire.client._credentials import Credentials
from chatwire.client._errors import DeserializationError, HttpStatusError, TransportError
from chatwire.models.params import GenerationParameters
from chatwire.models.request import CompletionRequest
from chatwire.models.response import CompletionResponse
from chatwire.models.transcript import Transcript

logger = logging.getLogger(__name__)


class CompletionClient:
    """Chat-completions client over an injectable ``requests``-style transport.

    The client holds no per-call state: each ``complete`` builds a fresh
    envelope, performs a single POST and never retries. A ``requests.Session``
    is created when no transport is given; connection pooling is left to it.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        endpoint: str = OPENAI_CHAT_ENDPOINT,
        timeout: float | None = None,
    ) -> None:
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else requests.Session()
        self.endpoint = endpoint
        self.timeout = timeout

    def complete(
        self,
        transcript: Transcript,
        params: GenerationParameters,
        credentials: Credentials,
    ) -> CompletionResponse:
        """Send *transcript* with *params* and return the parsed response.

        The transcript is only read. Append ``response.choices[0].message``
        yourself if it should become part of the history.

        Raises:
            TransportError: No HTTP response was received.
            HttpStatusError: The status was not 200. The body is kept raw.
            DeserializationError: A 200 body did not match the response schema.
        """
        body = CompletionRequest.build(transcript, params).to_json()
        headers = {
            "Content-Type": "application/json",
            "Authorization": credentials.bearer(),
        }

        logger.debug(
            "POST %s model=%s turns=%d bytes=%d",
            self.endpoint, params.model, len(transcript), len(body),
        )
        try:
            response = self._transport.post(
                self.endpoint,
                data=body.encode("utf-8"),
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.RequestException, OSError) as exc:
            logger.warning("Request to %s failed: %s", self.endpoint, type(exc).__name__)
            raise TransportError(exc) from exc

        if response.status_code != 200:
            logger.info("Completion rejected with HTTP %d", response.status_code)
            raise HttpStatusError(response.status_code, response.text)

        return _parse_response(response.text)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()  # type: ignore[attr-defined]

    def __enter__(self) -> CompletionClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _parse_response(raw_body: str) -> CompletionResponse:
    try:
        parsed = CompletionResponse.model_validate_json(raw_body)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<body>'}: {err['msg']}"
            for err in errors
        )
        raise DeserializationError(detail, raw_body) from exc
    logger.debug(
        "Completion %s: %d choice(s), %d total tokens",
        parsed.id, len(parsed.choices), parsed.usage.total_tokens,
    )
    return parsed
