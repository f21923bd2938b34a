"""Pytest fixtures for Breakout tests."""
import os

# Headless pygame for rendering tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from breakout.config import GameConfig
from breakout.game import GameState, Model
from breakout.game.entities import Ball, Brick
from breakout.models import Vector2D


@pytest.fixture
def config():
    """Default simulation constants."""
    return GameConfig()


@pytest.fixture
def far_brick():
    """A brick far from the ball's starting area."""
    return Brick(position=Vector2D(x=0.0, y=250.0), size=Vector2D(x=60.0, y=20.0), points=5)


@pytest.fixture
def playing(config, far_brick):
    """A PLAYING model with a single out-of-the-way brick."""
    model = Model.initial(config, bricks=[far_brick])
    return Model(
        paddle=model.paddle,
        ball=Ball.initial(config),
        bricks=model.bricks,
        lives=config.lives,
        state=GameState.PLAYING,
        layout=model.layout,
    )
