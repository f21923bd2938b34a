"""Breakout - the driver around the pure update function.

BreakoutMode owns the single current Model and the read-only GameConfig.
Every event is passed through update() in arrival order and the result
replaces the current Model.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

import pygame

from .config import DEFAULT_CONFIG, GameConfig
from .game import Event, GameState, InputSignal, Model, Resize, Tick, Viewport, update
from .game.level_loader import DEFAULT_LEVEL, LevelData, LevelLoader
from .logging import get_logger
from .skins import SKINS, BreakoutSkin, GeometricSkin

log = get_logger('game_mode')


class BreakoutMode:
    """Breakout game mode.

    Features:
    - Arrow keys move the paddle, space starts or restarts
    - YAML levels (by slug from the bundled levels, or by file path)
    - Letterboxed scaling to any window size
    """

    NAME = "Breakout"
    DESCRIPTION = "Paddle-and-ball brick breaking."
    VERSION = "1.0.0"

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        level: Optional[Union[str, Path]] = DEFAULT_LEVEL,
        skin: str = GeometricSkin.NAME,
        width: int = 800,
        height: int = 600,
        loader: Optional[LevelLoader] = None,
    ):
        """Initialize Breakout.

        Args:
            config: Simulation constants
            level: Level slug, path to a level file, or None for the built-in grid
            skin: Visual skin to use
            width: Viewport width
            height: Viewport height
            loader: Level loader (defaults to the bundled levels directory)
        """
        self._config = config
        self._loader = loader or LevelLoader()
        self._level: Optional[LevelData] = self._load_level(level) if level is not None else None
        if self._level is not None:
            log.info(
                "Level '%s' by %s: %s",
                self._level.name,
                self._level.author,
                self._level.description or "no description",
            )

        skin_class = SKINS.get(skin, GeometricSkin)
        self._skin: BreakoutSkin = skin_class()

        bricks = self._level.bricks if self._level is not None else None
        self._model = Model.initial(config, bricks=bricks, viewport=Viewport(width=width, height=height))

    def _load_level(self, level: Union[str, Path]) -> LevelData:
        """Resolve a level slug or file path."""
        path = Path(level)
        if path.suffix in ('.yaml', '.yml'):
            return self._loader.load_file(path, self._config)
        return self._loader.load_level(str(level), self._config)

    @property
    def model(self) -> Model:
        """Current snapshot."""
        return self._model

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._model.state

    @property
    def level_name(self) -> str:
        return self._level.name if self._level is not None else "Default"

    def dispatch(self, event: Event) -> Model:
        """Apply one event and replace the current snapshot."""
        previous = self._model.state
        self._model = update(self._model, event, self._config)
        if self._model.state is not previous:
            log.debug("State %s -> %s", previous.value, self._model.state.value)
        return self._model

    def handle_input(self, signals: Iterable[InputSignal]) -> None:
        """Apply input signals in order."""
        for signal in signals:
            self.dispatch(signal)

    def update(self, dt: float) -> None:
        """Advance by one frame of dt seconds."""
        self.dispatch(Tick(dt))

    def resize(self, width: int, height: int) -> None:
        """Record a new window size."""
        self.dispatch(Resize(width, height))

    def render(self, screen: pygame.Surface) -> None:
        """Render the current snapshot."""
        self._skin.render(screen, self._model, self._config, self.level_name)

    def reset(self) -> None:
        """Discard the current game and return to NOT_STARTED."""
        self._model = Model.initial(self._config, bricks=self._model.layout, viewport=self._model.viewport)
