"""Completion failures, classified by where the request went wrong."""

from __future__ import annotations


class CompletionError(Exception):
    """Base class for every failure of a single ``complete`` call."""


class TransportError(CompletionError):
    """The request never produced an HTTP response (DNS, TLS, connect, I/O)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause


class HttpStatusError(CompletionError):
    """The provider answered with a status other than 200."""

    def __init__(self, status: int, raw_body: str) -> None:
        super().__init__(f"HTTP {status}: {raw_body}")
        self.status = status
        self.raw_body = raw_body


class DeserializationError(CompletionError):
    """A 200 response whose body does not match the response schema."""

    def __init__(self, detail: str, raw_body: str) -> None:
        super().__init__(f"Malformed completion response: {detail}")
        self.detail = detail
        self.raw_body = raw_body
