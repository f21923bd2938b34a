"""
Tests for event dispatch and the game-state machine.
"""

from dataclasses import replace

import pytest

from breakout.game import (
    Controls,
    GameState,
    InputSignal,
    Model,
    Resize,
    Tick,
    Viewport,
    start_game,
    update,
)
from breakout.game.entities import Ball, Paddle
from breakout.models import Vector2D, ZERO


class TestInitialModel:
    """Test the startup snapshot."""

    def test_not_started_and_at_rest(self, config):
        """A fresh model waits for start with the ball still."""
        model = Model.initial(config)
        assert model.state is GameState.NOT_STARTED
        assert model.ball.velocity == ZERO
        assert model.lives == config.lives
        assert model.score == 0
        assert len(model.bricks) == 72

    def test_layout_kept_for_resets(self, config, far_brick):
        """The starting bricks are remembered."""
        model = Model.initial(config, bricks=[far_brick])
        assert model.layout == (far_brick,)


class TestStartSignal:
    """Test transitions into PLAYING."""

    def test_start_from_not_started(self, config):
        """Start launches the ball at its configured velocity."""
        model = update(Model.initial(config), InputSignal.START_PRESSED, config)
        assert model.state is GameState.PLAYING
        assert model.ball.velocity == config.ball_velocity
        assert model.ball.position == config.ball_start

    def test_start_ignored_while_playing(self, playing, config):
        """A second start does not reset a running game."""
        assert update(playing, InputSignal.START_PRESSED, config) is playing

    @pytest.mark.parametrize("state", [GameState.WON, GameState.LOST])
    def test_restart_resets_everything(self, playing, config, state):
        """Starting after a finished game restores lives, bricks, paddle and ball."""
        finished = replace(
            playing,
            state=state,
            lives=0,
            bricks=tuple(b.hit() for b in playing.bricks),
            paddle=Paddle(x=200.0),
            ball=Ball(position=Vector2D(x=50.0, y=50.0)),
            controls=Controls(left_held=True),
        )
        model = start_game(finished, config)
        assert model.state is GameState.PLAYING
        assert model.lives == config.lives
        assert model.score == 0
        assert not any(b.broken for b in model.bricks)
        assert model.paddle.x == 0.0
        assert model.ball == Ball.initial(config)
        # Held keys survive a restart
        assert model.controls.left_held


class TestMovementSignals:
    """Test held-key flags."""

    def test_press_and_release(self, config):
        """Press sets, release clears."""
        model = Model.initial(config)
        model = update(model, InputSignal.MOVE_LEFT_PRESSED, config)
        model = update(model, InputSignal.MOVE_RIGHT_PRESSED, config)
        assert model.controls == Controls(left_held=True, right_held=True)
        model = update(model, InputSignal.MOVE_LEFT_RELEASED, config)
        assert model.controls == Controls(left_held=False, right_held=True)
        model = update(model, InputSignal.MOVE_RIGHT_RELEASED, config)
        assert model.controls == Controls()

    def test_flags_tracked_outside_play(self, config):
        """Keys held before start are remembered but do not move the paddle."""
        model = update(Model.initial(config), InputSignal.MOVE_RIGHT_PRESSED, config)
        model = update(model, Tick(1.0), config)
        assert model.paddle.x == 0.0
        model = update(model, InputSignal.START_PRESSED, config)
        model = update(model, Tick(0.1), config)
        assert model.paddle.x == pytest.approx(40.0)

    def test_paddle_velocity_priority(self):
        """Left wins when both are held."""
        assert Controls(left_held=True, right_held=True).paddle_velocity(10.0) == -10.0
        assert Controls(right_held=True).paddle_velocity(10.0) == 10.0
        assert Controls().paddle_velocity(10.0) == 0.0


class TestTickAndResize:
    """Test the remaining events."""

    def test_tick_advances_play(self, playing, config):
        """Tick runs the simulation."""
        model = update(playing, Tick(0.1), config)
        assert model.ball.position != playing.ball.position

    def test_resize_only_touches_viewport(self, playing, config):
        """Resize never changes physics state."""
        model = update(playing, Resize(1920, 1080), config)
        assert model.viewport == Viewport(width=1920, height=1080)
        assert model.ball == playing.ball
        assert model.paddle == playing.paddle

    @pytest.mark.parametrize("elapsed", [-0.1, float('nan'), float('inf')])
    def test_bad_tick_rejected(self, elapsed):
        """Negative or non-finite elapsed time is invalid."""
        with pytest.raises(ValueError):
            Tick(elapsed)

    def test_bad_resize_rejected(self):
        """Viewport sizes must be positive."""
        with pytest.raises(ValueError):
            Resize(0, 600)

    def test_unknown_event(self, playing, config):
        """Anything else is a programming error."""
        with pytest.raises(TypeError):
            update(playing, "tick", config)


class TestFullGame:
    """Play through to a terminal state."""

    def test_lose_all_lives(self, config, far_brick):
        """A ball that never meets the paddle costs every life."""
        model = Model.initial(config, bricks=[far_brick])
        model = update(model, InputSignal.START_PRESSED, config)
        # Hold left: the ball heads right and the paddle hides at the left wall
        model = update(model, InputSignal.MOVE_LEFT_PRESSED, config)
        for _ in range(10000):
            model = update(model, Tick(1 / 60), config)
            if model.state is not GameState.PLAYING:
                break
        assert model.state is GameState.LOST
        assert model.lives == 0
        assert model.ball.velocity == ZERO

        model = update(model, InputSignal.START_PRESSED, config)
        assert model.state is GameState.PLAYING
        assert model.lives == config.lives
