"""Game-loop settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All user-configurable settings of a game run."""

    # Players
    white_name: str = "A"
    black_name: str = "B"

    # Pacing: pause before each turn, in seconds
    move_delay_seconds: float = 0.0

    # Mirror moves when the first one does not start on a White piece
    auto_orient: bool = True

    # Log the mover's attacking region before each move (DEBUG level)
    show_attacking_region: bool = True
