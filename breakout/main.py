#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m breakout
    python -m breakout --level pyramid
    python -m breakout --config my_config.yaml --lives 5
    python -m breakout --fullscreen
"""

import argparse
import sys
from typing import List, Optional

import pygame
import yaml

from breakout.config import DEFAULT_CONFIG, GameConfig, load_config
from breakout.game.level_loader import DEFAULT_LEVEL, LevelLoadError, LevelLoader
from breakout.game_mode import BreakoutMode
from breakout.input import KeyboardInputSource
from breakout.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="Breakout")

    # Display options
    parser.add_argument('--width', type=int, default=800, help='Window width')
    parser.add_argument('--height', type=int, default=600, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=0, help='Frame cap (0 = uncapped)')

    # Game options
    parser.add_argument('--config', type=str, default=None, help='YAML game configuration file')
    parser.add_argument('--level', type=str, default=DEFAULT_LEVEL,
                        help=f"Level slug ({', '.join(LevelLoader().list_levels())}) or YAML file")
    parser.add_argument('--lives', type=int, default=None, help='Starting lives')
    parser.add_argument('--log-level', type=str, default=None, help='Default log level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout standalone."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        if args.lives is not None:
            config = GameConfig.model_validate({**config.model_dump(), 'lives': args.lives})
    except (OSError, ValueError, yaml.YAMLError) as e:
        parser.error(f"invalid configuration: {e}")

    try:
        game = BreakoutMode(config=config, level=args.level, width=args.width, height=args.height)
    except LevelLoadError:
        log.exception("Could not load level '%s'", args.level)
        return 1

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    game.resize(*screen.get_size())
    pygame.display.set_caption("Breakout")

    keyboard = KeyboardInputSource()

    log.info("Level '%s': arrows move, SPACE starts, R resets, ESC quits", game.level_name)

    clock = pygame.time.Clock()
    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if keyboard.handle_event(event):
                continue
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                game.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()
                    log.info("Game reset")

        game.handle_input(keyboard.poll_signals())
        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
