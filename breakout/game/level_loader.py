"""Level loader for Breakout.

Loads YAML levels with ASCII art brick layouts.

Example level:
    name: "Classic"
    description: "Six rows, higher rows score more"
    brick_types:
      red:    {color: red, points: 6}
      orange: {color: orange, points: 5}
    layout_key:
      R: red
      O: orange
    layout: |
      RRRRRRRRRRRR
      OOOOOO..OOOO

Whitespace, '.', '-' and '_' leave a gap. Optional keys brick_width,
brick_height, gap and top override the GameConfig grid defaults.
Files are checked against schemas/level.schema.json before parsing.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from ..config import GameConfig
from ..logging import get_logger
from ..models import Vector2D
from .entities import Brick

log = get_logger('level_loader')

LEVELS_DIR = Path(__file__).resolve().parent.parent / 'levels'
DEFAULT_LEVEL = 'classic'
LEVEL_SCHEMA_PATH = Path(__file__).resolve().parent.parent / 'schemas' / 'level.schema.json'

_GAP_CHARS = (' ', '.', '-', '_')


class LevelLoadError(Exception):
    """Raised when a level file is missing or malformed."""
    pass


_level_schema: Optional[Dict[str, Any]] = None


def _get_level_schema() -> Dict[str, Any]:
    """Lazy-load level schema."""
    global _level_schema
    if _level_schema is None:
        with open(LEVEL_SCHEMA_PATH) as f:
            _level_schema = json.load(f)
    return _level_schema


def validate_level_yaml(data: Any, source_path: Optional[Path] = None) -> None:
    """Validate parsed level YAML against the level schema.

    Args:
        data: Parsed YAML data
        source_path: Optional path for error messages

    Raises:
        LevelLoadError: If the document does not match the schema
    """
    try:
        jsonschema.validate(data, _get_level_schema())
    except jsonschema.ValidationError as e:
        path_str = f" in {source_path}" if source_path else ""
        location = '/'.join(str(p) for p in e.absolute_path) or '<root>'
        raise LevelLoadError(f"Schema validation error{path_str}: {e.message} at {location}") from e


@dataclass(frozen=True)
class BrickType:
    """Brick type definition from level YAML."""
    color: str = "red"
    points: int = 1


@dataclass
class LevelData:
    """Parsed level data ready for game use."""
    name: str
    slug: str
    description: str = ""
    author: str = "unknown"
    bricks: List[Brick] = field(default_factory=list)
    file_path: Optional[Path] = None


class LevelLoader:
    """Finds and parses level YAML files.

    Usage:
        loader = LevelLoader()
        loader.list_levels()            # ['classic', 'pyramid', ...]
        level = loader.load_level('classic', config)
        level = loader.load_file('my_level.yaml', config)
    """

    def __init__(self, levels_dir: Union[str, Path] = LEVELS_DIR):
        """Initialize the level loader.

        Args:
            levels_dir: Directory containing level YAML files
        """
        self._levels_dir = Path(levels_dir)

    @property
    def levels_dir(self) -> Path:
        """Get the levels directory."""
        return self._levels_dir

    def list_levels(self) -> List[str]:
        """List available level slugs (sorted)."""
        if not self._levels_dir.exists():
            return []
        return sorted(
            path.stem for path in self._levels_dir.glob('*.yaml')
            if not path.name.startswith(('_', '.'))
        )

    def load_level(self, slug: str, config: GameConfig) -> LevelData:
        """Load a level by slug from the levels directory.

        Raises:
            LevelLoadError: If the level does not exist or is invalid
        """
        path = self._levels_dir / f"{slug}.yaml"
        if not path.exists():
            raise LevelLoadError(f"Level not found: {slug}")
        return self.load_file(path, config)

    def load_file(self, path: Union[str, Path], config: GameConfig) -> LevelData:
        """Load a level from an explicit file path.

        Raises:
            LevelLoadError: If the file is missing, not YAML, or invalid
        """
        path = Path(path)
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise LevelLoadError(f"Level file not found: {path}") from e
        except yaml.YAMLError as e:
            raise LevelLoadError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            raise LevelLoadError(f"Empty level file: {path}")
        validate_level_yaml(data, path)

        level = self._parse_level_data(data, path, config)
        log.debug("Loaded level '%s' by %s with %d bricks", level.name, level.author, len(level.bricks))
        return level

    def _parse_level_data(
        self,
        data: Dict[str, Any],
        file_path: Path,
        config: GameConfig,
    ) -> LevelData:
        """Parse schema-checked YAML data into LevelData.

        Args:
            data: Raw YAML data dict
            file_path: Path to the level file (for error messages)
            config: Supplies grid defaults

        Returns:
            Parsed LevelData object
        """
        brick_types = self._parse_brick_types(data.get('brick_types', {}))

        bricks = self._parse_ascii_layout(
            data['layout'],
            data.get('layout_key', {}),
            brick_types,
            width=float(data.get('brick_width', config.brick_width)),
            height=float(data.get('brick_height', config.brick_height)),
            gap=float(data.get('gap', config.brick_gap)),
            top=float(data.get('top', config.brick_top)),
            file_path=file_path,
        )
        if not bricks:
            raise LevelLoadError(f"{file_path}: layout contains no bricks")

        return LevelData(
            name=data.get('name', file_path.stem),
            slug=file_path.stem,
            description=data.get('description', ''),
            author=data.get('author', 'unknown'),
            bricks=bricks,
            file_path=file_path,
        )

    def _parse_brick_types(self, types_data: Dict[str, Any]) -> Dict[str, BrickType]:
        """Parse brick type definitions.

        Args:
            types_data: Dict of brick type name -> config

        Returns:
            Dict of brick type name -> BrickType
        """
        return {
            name: BrickType(
                color=type_config.get('color', 'red'),
                points=type_config.get('points', 1),
            )
            for name, type_config in types_data.items()
        }

    def _parse_ascii_layout(
        self,
        layout: str,
        layout_key: Dict[str, str],
        brick_types: Dict[str, BrickType],
        width: float,
        height: float,
        gap: float,
        top: float,
        file_path: Path,
    ) -> List[Brick]:
        """Parse ASCII art layout into bricks.

        Rows are read top to bottom and the grid is centered on x = 0
        using the longest row.

        Args:
            layout: Multi-line ASCII art string
            layout_key: Maps characters to brick type names
            brick_types: Available brick types
            width: Width of each brick
            height: Height of each brick
            gap: Space between neighbouring bricks
            top: Y of the top edge of the first row
            file_path: For error messages

        Returns:
            List of Brick objects, row by row
        """
        lines = layout.strip('\n').split('\n')
        cols = max(len(line) for line in lines)
        step_x = width + gap
        step_y = height + gap
        left = -(cols * step_x - gap) / 2 + width / 2
        first_row_y = top - height / 2
        size = Vector2D(x=width, y=height)

        bricks = []
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char in _GAP_CHARS:
                    continue

                type_name = layout_key.get(char)
                if type_name is None:
                    raise LevelLoadError(f"{file_path}: layout character '{char}' has no layout_key entry")
                if type_name == 'empty':
                    continue

                brick_type = brick_types.get(type_name)
                if brick_type is None:
                    raise LevelLoadError(f"{file_path}: unknown brick type '{type_name}'")

                bricks.append(Brick(
                    position=Vector2D(x=left + col * step_x, y=first_row_y - row * step_y),
                    size=size,
                    color=brick_type.color,
                    points=brick_type.points,
                ))
        return bricks
