"""Tests for game lifecycle states."""

import pytest

from grid_snake.state import GameOverReason, GameState, GameStatus


class TestGameState:
    def test_constructors(self):
        assert GameState.paused().status is GameStatus.PAUSED
        assert GameState.playing().is_playing
        over = GameState.game_over(GameOverReason.SELF_BITE)
        assert over.is_over
        assert over.reason is GameOverReason.SELF_BITE

    def test_reason_only_when_over(self):
        with pytest.raises(ValueError, match="reason"):
            GameState(GameStatus.GAME_OVER)
        with pytest.raises(ValueError, match="reason"):
            GameState(GameStatus.PLAYING, GameOverReason.BORDER_HIT)

    def test_to_dict(self):
        assert GameState.game_over(GameOverReason.PLAYGROUND_FILLED).to_dict() == {
            "status": "game_over", "reason": "playground_filled",
        }
