"""
Shared host services for Bug Crossing.

- logging: per-module logger configured from code or environment
- resources: sprite image cache with placeholder fallback
"""

from crossing.logging import get_logger, configure_logging, LogLevel

__all__ = ['get_logger', 'configure_logging', 'LogLevel']
