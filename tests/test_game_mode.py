"""
Tests for the BreakoutMode driver, rendering and the CLI parser.
"""

from dataclasses import replace

import pygame
import pytest

from breakout.config import BACKGROUND_COLOR, BRICK_COLORS, GameConfig
from breakout.game import GameState, InputSignal, Viewport
from breakout.game_mode import BreakoutMode
from breakout.main import build_parser, main
from breakout.models import Vector2D
from breakout.skins import GeometricSkin, ScreenTransform, viewport_scale


@pytest.fixture(scope="module", autouse=True)
def pygame_fonts():
    """Fonts are needed by the HUD."""
    pygame.font.init()
    yield
    pygame.font.quit()


def pixel(screen, xy):
    return tuple(screen.get_at(xy))[:3]


class TestScreenTransform:
    """Test arena-to-screen scaling."""

    @pytest.mark.parametrize("width,height,expected", [
        (800, 600, 1.0),
        (1600, 900, 1.5),
        (400, 600, 0.5),
    ])
    def test_scale(self, config, width, height, expected):
        """Uniform scale fits the tighter axis."""
        assert viewport_scale(Viewport(width=width, height=height), config) == pytest.approx(expected)

    def test_origin_is_screen_center(self, config):
        """Arena origin maps to the middle of the window."""
        transform = ScreenTransform.for_viewport(Viewport(width=1600, height=900), config)
        assert transform.point(Vector2D(x=0.0, y=0.0)) == (800, 450)

    def test_y_flips(self, config):
        """Arena up is screen up."""
        transform = ScreenTransform.for_viewport(Viewport(width=800, height=600), config)
        assert transform.point(Vector2D(x=-400.0, y=300.0)) == (0, 0)
        assert transform.point(Vector2D(x=400.0, y=-300.0)) == (800, 600)

    def test_rect(self, config):
        """Rects are (left, top, width, height) in pixels."""
        transform = ScreenTransform.for_viewport(Viewport(width=1600, height=1200), config)
        assert transform.rect(Vector2D(x=0.0, y=0.0), Vector2D(x=100.0, y=20.0)) == (700, 580, 200, 40)


class TestBreakoutMode:
    """Test the driver around update()."""

    def test_default_level(self):
        """The classic level is loaded by default."""
        game = BreakoutMode()
        assert game.level_name == "Classic"
        assert len(game.model.bricks) == 72
        assert game.state is GameState.NOT_STARTED

    def test_builtin_grid(self):
        """level=None uses the generated grid."""
        game = BreakoutMode(level=None)
        assert game.level_name == "Default"
        assert len(game.model.bricks) == 72

    def test_level_from_file(self, tmp_path):
        """A YAML path loads that file."""
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "name: Tiny\n"
            "brick_types: {a: {color: red, points: 2}}\n"
            "layout_key: {A: a}\n"
            "layout: |\n  AA\n"
        )
        game = BreakoutMode(level=path)
        assert game.level_name == "Tiny"
        assert len(game.model.bricks) == 2

    def test_start_and_update(self):
        """Start then a tick moves the ball."""
        game = BreakoutMode()
        game.handle_input([InputSignal.START_PRESSED])
        assert game.state is GameState.PLAYING
        before = game.model.ball.position
        game.update(0.05)
        assert game.model.ball.position != before

    def test_resize(self):
        """Resize updates the viewport."""
        game = BreakoutMode()
        game.resize(1024, 768)
        assert game.model.viewport == Viewport(width=1024, height=768)

    def test_reset(self):
        """reset() returns to a fresh NOT_STARTED game with the same viewport."""
        game = BreakoutMode(width=1024, height=768)
        game.handle_input([InputSignal.START_PRESSED])
        game.update(0.5)
        game.reset()
        assert game.state is GameState.NOT_STARTED
        assert game.model.ball.velocity == Vector2D(x=0.0, y=0.0)
        assert not any(b.broken for b in game.model.bricks)
        assert game.model.viewport == Viewport(width=1024, height=768)

    def test_level_announced(self, capsys):
        """Loading a level logs its name, author and description."""
        BreakoutMode()
        out = capsys.readouterr().out
        assert "[game_mode] INFO: Level 'Classic' by breakout: Six full rows." in out

    def test_level_without_description(self, tmp_path, capsys):
        """Missing author and description fall back to defaults."""
        path = tmp_path / "bare.yaml"
        path.write_text("brick_types: {a: {}}\nlayout_key: {A: a}\nlayout: A\n")
        BreakoutMode(level=path)
        assert "Level 'bare' by unknown: no description" in capsys.readouterr().out

    def test_custom_config(self):
        """Config is passed through to the model."""
        game = BreakoutMode(config=GameConfig(lives=5))
        assert game.model.lives == 5


class TestRendering:
    """Test the geometric skin on an off-screen surface."""

    def test_playing_frame(self):
        """Ball, bricks and arena land where the transform puts them."""
        game = BreakoutMode()
        game.handle_input([InputSignal.START_PRESSED])
        screen = pygame.Surface((800, 600))
        game.render(screen)

        # Ball at the origin
        assert pixel(screen, (400, 300)) == GeometricSkin.BALL_COLOR
        # First classic brick: center (-352, 250)
        assert pixel(screen, (48, 50)) == BRICK_COLORS['red']
        # Paddle at y=-270 -> screen y 570
        assert pixel(screen, (400, 570)) == GeometricSkin.PADDLE_COLOR

    def test_broken_bricks_not_drawn(self):
        """A broken brick leaves bare arena."""
        game = BreakoutMode()
        game.handle_input([InputSignal.START_PRESSED])
        model = game.model
        model = replace(model, bricks=(model.bricks[0].hit(),) + model.bricks[1:])
        screen = pygame.Surface((800, 600))
        GeometricSkin().render(screen, model, game.config)
        assert pixel(screen, (48, 50)) == (0, 0, 0)

    @pytest.mark.parametrize("state", [GameState.NOT_STARTED, GameState.WON, GameState.LOST])
    def test_overlays_render(self, state):
        """Title and end screens draw without error."""
        game = BreakoutMode()
        model = replace(game.model, state=state)
        screen = pygame.Surface((800, 600))
        GeometricSkin().render(screen, model, game.config, "Classic")

    def test_letterboxed(self):
        """A wide window leaves background bars at the sides."""
        game = BreakoutMode(width=1600, height=600)
        game.handle_input([InputSignal.START_PRESSED])
        screen = pygame.Surface((1600, 600))
        game.render(screen)
        assert pixel(screen, (100, 300)) == BACKGROUND_COLOR


class TestParser:
    """Test command line defaults."""

    def test_defaults(self):
        """Uncapped frame rate and the classic level."""
        args = build_parser().parse_args([])
        assert args.fps == 0
        assert args.level == 'classic'
        assert args.lives is None
        assert args.config is None

    def test_options(self):
        """Options parse to the expected types."""
        args = build_parser().parse_args(['--level', 'pyramid', '--lives', '5', '--fullscreen'])
        assert args.level == 'pyramid'
        assert args.lives == 5
        assert args.fullscreen


class TestMain:
    """Test start-up failures reported before the window opens."""

    def test_invalid_lives(self, capsys):
        """--lives 0 is a usage error, not a traceback."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--lives', '0'])
        assert exc_info.value.code == 2
        assert "invalid configuration" in capsys.readouterr().err

    def test_invalid_config_file(self, tmp_path, capsys):
        """Bad values in --config are a usage error."""
        path = tmp_path / "bad.yaml"
        path.write_text("ball_radius: -1\n")
        with pytest.raises(SystemExit) as exc_info:
            main(['--config', str(path)])
        assert exc_info.value.code == 2
        assert "ball_radius" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        """A missing --config file is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--config', str(tmp_path / "absent.yaml")])
        assert exc_info.value.code == 2

    def test_missing_level(self, capsys):
        """An unknown level is logged with its traceback and exits 1."""
        assert main(['--level', 'no_such_level']) == 1
        out = capsys.readouterr().out
        assert "[main] ERROR: Could not load level 'no_such_level'" in out
        assert "LevelLoadError: Level not found: no_such_level" in out
