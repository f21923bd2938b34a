"""
Breakout Logging

Per-module console logging with environment-driven levels.

Usage:
    from breakout.logging import get_logger

    log = get_logger('simulation')
    log.debug("Paddle clamped")
    log.info("Life lost, %d remaining", lives)
    log.trace("Brick sides this frame: %s", sides)  # per-frame noise

Configuration:
    Environment variables:
        BREAKOUT_LOG_LEVEL=DEBUG          # Global default level
        BREAKOUT_LOG_SIMULATION=TRACE     # Module-specific level
        BREAKOUT_LOG_GAME_MODE=WARNING

    Or programmatically:
        from breakout.logging import configure_logging
        configure_logging(level='DEBUG', modules={'simulation': 'TRACE'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_ENV_PREFIX = 'BREAKOUT_LOG_'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, falling back to INFO."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    BREAKOUT_LOG_LEVEL sets the default; any other BREAKOUT_LOG_<NAME>
    sets the level of module <name> (lowercased).
    """
    level_key = _ENV_PREFIX + 'LEVEL'
    if level_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[level_key])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != level_key:
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


def reset_logging() -> None:
    """Restore defaults, then re-read the environment."""
    _config['default_level'] = LogLevel.INFO
    _config['module_levels'] = {}
    _load_env_config()


# Load env config on import
_load_env_config()


class BreakoutLogger:
    """
    Logger for a specific module.

    Messages use %-style formatting, applied only when the level is enabled.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if a message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR level, then the exception being handled, if any."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        if sys.exc_info()[0] is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self._log(LogLevel.ERROR, 'ERROR', '  %s', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BreakoutLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'simulation', 'level_loader')

    Returns:
        BreakoutLogger instance for the module
    """
    return BreakoutLogger(module)
