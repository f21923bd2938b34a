"""Geometric skin - flat shapes on a letterboxed arena."""

from typing import Optional, Tuple

import pygame

from ..config import ARENA_COLOR, BACKGROUND_COLOR, BRICK_COLORS, GameConfig
from ..game.entities import Ball, Brick, Paddle
from ..game.game_state import GameState
from ..game.model import Model
from ..models import Vector2D
from .base import BreakoutSkin
from .transform import ScreenTransform


class GeometricSkin(BreakoutSkin):
    """Renders game using simple geometric shapes.

    - Arena: black rectangle with a gray border, background outside it
    - Paddle: Blue rectangle with white outline
    - Ball: White circle
    - Bricks: Colored rectangles, shrunk by a pixel so seams show
    """

    NAME = "geometric"
    DESCRIPTION = "Simple shapes"

    PADDLE_COLOR = (100, 150, 255)
    PADDLE_OUTLINE = (255, 255, 255)
    BALL_COLOR = (255, 255, 255)
    BORDER_COLOR = (150, 150, 150)
    HUD_COLOR = (255, 255, 255)

    OVERLAY_TEXT = {
        GameState.NOT_STARTED: ("BREAKOUT", "Press SPACE to start"),
        GameState.WON: ("YOU WIN!", "Press SPACE to play again"),
        GameState.LOST: ("GAME OVER", "Press SPACE to play again"),
    }

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
            self._big_font = pygame.font.Font(None, 72)

    @staticmethod
    def brick_color(brick: Brick) -> Tuple[int, int, int]:
        """Resolve a brick's color name, white if unknown."""
        return BRICK_COLORS.get(brick.color, (255, 255, 255))

    def render_arena(self, screen: pygame.Surface, transform: ScreenTransform, config: GameConfig) -> None:
        screen.fill(BACKGROUND_COLOR)
        rect = transform.rect(Vector2D(x=0.0, y=0.0), Vector2D(x=config.width, y=config.height))
        pygame.draw.rect(screen, ARENA_COLOR, rect)
        pygame.draw.rect(screen, self.BORDER_COLOR, rect, 1)

    def render_paddle(
        self,
        paddle: Paddle,
        screen: pygame.Surface,
        transform: ScreenTransform,
        config: GameConfig,
    ) -> None:
        """Render paddle as a colored rectangle."""
        size = Vector2D(x=config.paddle_width, y=config.paddle_height)
        rect = transform.rect(paddle.position(config), size)
        pygame.draw.rect(screen, self.PADDLE_COLOR, rect)
        pygame.draw.rect(screen, self.PADDLE_OUTLINE, rect, 2)

    def render_ball(
        self,
        ball: Ball,
        screen: pygame.Surface,
        transform: ScreenTransform,
        config: GameConfig,
    ) -> None:
        """Render ball as a white circle."""
        pygame.draw.circle(
            screen,
            self.BALL_COLOR,
            transform.point(ball.position),
            transform.length(config.ball_radius),
        )

    def render_brick(self, brick: Brick, screen: pygame.Surface, transform: ScreenTransform) -> None:
        """Render brick as a colored rectangle."""
        left, top, width, height = transform.rect(brick.position, brick.size)
        fill = (left, top, max(1, width - 1), max(1, height - 1))
        pygame.draw.rect(screen, self.brick_color(brick), fill)

    def render_hud(self, screen: pygame.Surface, model: Model, level_name: str = "") -> None:
        """Render HUD with score and lives."""
        self._ensure_font()

        # Score (top left)
        score_text = self._font.render(f"Score: {model.score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        # Lives (top right)
        lives_text = self._font.render(f"Lives: {model.lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

        # Level name (top center)
        if level_name:
            level_text = self._font.render(level_name, True, self.HUD_COLOR)
            level_rect = level_text.get_rect()
            level_rect.midtop = (screen.get_width() // 2, 10)
            screen.blit(level_text, level_rect)

    def render_overlay(self, screen: pygame.Surface, model: Model) -> None:
        """Render title, win or game over text outside of play."""
        text = self.OVERLAY_TEXT.get(model.state)
        if text is None:
            return
        self._ensure_font()

        title, hint = text
        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        title_surface = self._big_font.render(title, True, self.HUD_COLOR)
        screen.blit(title_surface, title_surface.get_rect(center=(center_x, center_y)))

        lines = [hint]
        if model.state is not GameState.NOT_STARTED:
            lines.insert(0, f"Score: {model.score}")
        for i, line in enumerate(lines):
            surface = self._font.render(line, True, self.HUD_COLOR)
            screen.blit(surface, surface.get_rect(center=(center_x, center_y + 50 + i * 36)))
