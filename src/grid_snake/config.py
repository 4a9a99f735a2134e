"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, food and seeding for a single game.

    Supports JSON serialization for reproducibility. Board dimensions are
    validated when the board is built.
    """

    width: int = 20
    height: int = 20
    initial_food: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.initial_food < 0:
            raise ValueError("initial_food must not be negative.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
