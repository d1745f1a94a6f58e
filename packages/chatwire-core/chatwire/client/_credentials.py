"""API credentials — an explicit value, loaded once at the program boundary."""

from __future__ import annotations

import json
import os
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator


class CredentialsError(ValueError):
    """Credentials could not be read or parsed."""


class Credentials(BaseModel):
    """Bearer key for the provider. ``repr`` and ``str`` never show the key."""
    model_config = ConfigDict(frozen=True, hide_input_in_errors=True)

    key: SecretStr = Field(..., validation_alias=AliasChoices("key", "openai_key"))

    @field_validator("key")
    @classmethod
    def _header_safe(cls, value: SecretStr) -> SecretStr:
        # Visible ASCII only, so the key is a valid header value as-is.
        raw = value.get_secret_value()
        if not raw or not all(33 <= ord(c) <= 126 for c in raw):
            raise ValueError("key must be non-empty printable ASCII without whitespace")
        return value

    def bearer(self) -> str:
        return f"Bearer {self.key.get_secret_value()}"


def load_credentials(path: str | Path) -> Credentials:
    """Load credentials from a JSON or YAML file.

    The file must hold a mapping with a ``key`` (or ``openai_key``) entry.

    Raises:
        CredentialsError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialsError(
            f"Could not read {path}. Create it and add your API key."
        ) from exc

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CredentialsError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CredentialsError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        return Credentials.model_validate(data)
    except ValidationError:
        # The key must not appear in error text.
        raise CredentialsError(f"No API key found in {path}") from None


def credentials_from_env(var: str = "OPENAI_API_KEY") -> Credentials:
    """Build credentials from an environment variable.

    Raises:
        CredentialsError: If the variable is unset, empty, or not a valid key.
    """
    key = os.environ.get(var)
    if not key:
        raise CredentialsError(f"Missing {var} environment variable")
    try:
        return Credentials(key=key)
    except ValidationError:
        raise CredentialsError(f"Invalid API key in {var}") from None
