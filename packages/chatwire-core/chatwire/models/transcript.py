"""Transcript models — the ordered conversation history sent as context."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    system = "system"
    user = "user"
    assistant = "assistant"


class Turn(BaseModel):
    """One labeled utterance in a conversation."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Transcript(BaseModel):
    """Append-only sequence of turns, in conversation order."""
    turns: list[Turn] = Field(default_factory=list)

    def append(self, role: Role | str, content: str) -> Turn:
        """Add a turn at the end of the transcript and return it."""
        turn = Turn(role=role, content=content)
        self.turns.append(turn)
        return turn

    def snapshot(self) -> tuple[Turn, ...]:
        return tuple(self.turns)

    def __iter__(self) -> Iterator[Turn]:  # type: ignore[override]
        return iter(self.turns)

    def __len__(self) -> int:
        return len(self.turns)
