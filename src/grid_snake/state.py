"""Game lifecycle states."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GameStatus(enum.Enum):
    PAUSED = "paused"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameOverReason(enum.Enum):
    """Why a game ended."""

    PLAYGROUND_FILLED = "playground_filled"
    BORDER_HIT = "border_hit"
    SELF_BITE = "self_bite"


@dataclass(frozen=True)
class GameState:
    """Current phase of a game; ``reason`` is set only once it is over."""

    status: GameStatus
    reason: GameOverReason | None = None

    def __post_init__(self) -> None:
        if (self.status is GameStatus.GAME_OVER) != (self.reason is not None):
            raise ValueError("A reason is required for, and only for, GAME_OVER.")

    @classmethod
    def paused(cls) -> GameState:
        return cls(GameStatus.PAUSED)

    @classmethod
    def playing(cls) -> GameState:
        return cls(GameStatus.PLAYING)

    @classmethod
    def game_over(cls, reason: GameOverReason) -> GameState:
        return cls(GameStatus.GAME_OVER, reason)

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "reason": self.reason.value if self.reason is not None else None,
        }
