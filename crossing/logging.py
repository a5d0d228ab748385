"""
Bug Crossing Logging

Small per-module logger used by the game, the engine and the host services.
Messages are printed as ``[module] LEVEL: message`` so they show up in the
terminal that launched the game.

Usage:
    from crossing.logging import get_logger

    log = get_logger('controller')
    log.debug("Collision, resetting")
    log.info("Player won")

Configuration:
    Environment variables:
        CROSSING_LOG_LEVEL=DEBUG          # Global default level
        CROSSING_LOG_CONTROLLER=TRACE     # Module-specific level

    Or programmatically:
        from crossing.logging import configure_logging
        configure_logging(level='DEBUG', modules={'obstacle': 'TRACE'})
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_ENV_PREFIX = 'CROSSING_LOG_'

_config: Dict = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
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


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


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
            _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)


def reset_logging() -> None:
    """Drop all programmatic configuration and re-read the environment."""
    _config['default_level'] = LogLevel.INFO
    _config['module_levels'] = {}
    _load_env_config()


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'] = {}


def _load_env_config() -> None:
    """Load configuration from environment variables.

    CROSSING_LOG_LEVEL sets the default level, any other
    CROSSING_LOG_<MODULE> sets the level of that module
    (CROSSING_LOG_CONTROLLER=DEBUG -> controller: DEBUG).
    """
    if 'CROSSING_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['CROSSING_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != 'CROSSING_LOG_LEVEL':
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class CrossingLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
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

    def critical(self, msg: str, *args) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args, exc_info: bool = True) -> None:
        """
        Log an exception with traceback.

        Args:
            msg: Message describing what failed
            exc_info: If True, include current exception traceback
        """
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        if exc_info:
            tb = traceback.format_exc()
            if tb and tb.strip() != 'NoneType: None':
                for line in tb.strip().split('\n'):
                    self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> CrossingLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'controller', 'engine', 'resources')

    Returns:
        CrossingLogger instance for the module
    """
    return CrossingLogger(module)
