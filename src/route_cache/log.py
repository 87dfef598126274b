"""Level-gated log sink for cache events.

Messages are emitted through the standard ``logging`` module under the
``route_cache`` logger. The cache's own level decides what reaches it:

- ``silent``: nothing is emitted
- ``normal``: everything except ``debug`` severity
- ``debug``: everything
"""

import logging
from typing import Literal

LogLevel = Literal["normal", "debug", "silent"]
Severity = Literal["log", "warn", "error", "debug"]

_SEVERITY_TO_LOGGING = {
    "log": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "debug": logging.DEBUG,
}


class CacheLogger:
    """Log sink used by the key deriver and the interceptor.

    Example:
        ```python
        logger = CacheLogger(level="debug")
        logger.log("Cache miss for key: cache:GET:/users", "debug")
        ```
    """

    prefix = "[Cache]"

    def __init__(self, level: LogLevel = "normal", logger: logging.Logger | None = None) -> None:
        """Initialize the cache logger.

        Args:
            level: Cache log level (normal, debug or silent).
            logger: Underlying stdlib logger. Defaults to ``route_cache``.
        """
        self._logger = logger or logging.getLogger("route_cache")
        self.level = level

    @property
    def level(self) -> LogLevel:
        """Get the current cache log level."""
        return self._level

    @level.setter
    def level(self, level: LogLevel) -> None:
        self._level = level
        # Let debug messages through the stdlib filter when asked for them
        if level == "debug" and self._logger.getEffectiveLevel() > logging.DEBUG:
            self._logger.setLevel(logging.DEBUG)

    def is_enabled_for(self, severity: Severity) -> bool:
        """Check whether a message of the given severity would be emitted."""
        if self._level == "silent":
            return False
        if severity == "debug" and self._level != "debug":
            return False
        return True

    def log(self, message: str, severity: Severity = "log") -> None:
        """Emit a message unless the current level suppresses it.

        Args:
            message: The message text.
            severity: One of log, warn, error, debug.
        """
        if not self.is_enabled_for(severity):
            return
        self._logger.log(_SEVERITY_TO_LOGGING[severity], "%s %s", self.prefix, message)
