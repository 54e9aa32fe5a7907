"""Concrete player."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color


@dataclass(frozen=True, slots=True)
class Player:
    """A named participant playing one color."""

    name: str
    color: Color

    def __str__(self) -> str:
        return f"{self.color.title}Player"
