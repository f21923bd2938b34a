"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod

import pygame

from ..config import GameConfig
from ..game.entities import Ball, Brick, Paddle
from ..game.model import Model
from .transform import ScreenTransform


class BreakoutSkin(ABC):
    """Base class for game skins.

    Skins read the Model snapshot and draw it. They never touch the
    simulation.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_arena(self, screen: pygame.Surface, transform: ScreenTransform, config: GameConfig) -> None:
        """Render the play area background and borders."""
        pass

    @abstractmethod
    def render_paddle(
        self,
        paddle: Paddle,
        screen: pygame.Surface,
        transform: ScreenTransform,
        config: GameConfig,
    ) -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(
        self,
        ball: Ball,
        screen: pygame.Surface,
        transform: ScreenTransform,
        config: GameConfig,
    ) -> None:
        """Render the ball."""
        pass

    @abstractmethod
    def render_brick(self, brick: Brick, screen: pygame.Surface, transform: ScreenTransform) -> None:
        """Render one unbroken brick."""
        pass

    def render_hud(self, screen: pygame.Surface, model: Model, level_name: str = "") -> None:
        """Render the heads-up display (score, lives, etc.).

        Args:
            screen: Pygame surface to draw on
            model: Current snapshot
            level_name: Current level name
        """
        pass

    def render_overlay(self, screen: pygame.Surface, model: Model) -> None:
        """Render the start / won / lost message, if any."""
        pass

    def render(self, screen: pygame.Surface, model: Model, config: GameConfig, level_name: str = "") -> None:
        """Render a full frame."""
        transform = ScreenTransform.for_viewport(model.viewport, config)
        self.render_arena(screen, transform, config)
        for brick in model.bricks:
            if not brick.broken:
                self.render_brick(brick, screen, transform)
        self.render_paddle(model.paddle, screen, transform, config)
        self.render_ball(model.ball, screen, transform, config)
        self.render_hud(screen, model, level_name)
        self.render_overlay(screen, model)
