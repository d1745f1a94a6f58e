"""YAML I/O and conversation file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from chatwire.models.params import GenerationParameters
from chatwire.models.transcript import Transcript, Turn


class Conversation(BaseModel):
    """A transcript on disk, with optional generation parameter overrides."""
    parameters: GenerationParameters = Field(default_factory=GenerationParameters)
    turns: list[Turn] = Field(default_factory=list)

    def transcript(self) -> Transcript:
        return Transcript(turns=list(self.turns))


def load_yaml(path: Path) -> Any:
    """Load a YAML (or JSON) file and return the parsed data."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def save_yaml(data: dict[str, Any], path: Path) -> None:
    """Save a dict as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def load_conversation(path: Path) -> Conversation:
    """Load a conversation file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not a mapping or fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"No conversation file at {path}")
    try:
        data = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return Conversation.model_validate(data)


def save_conversation(conversation: Conversation, path: Path) -> None:
    save_yaml(conversation.model_dump(mode="json", exclude_defaults=True), path)
