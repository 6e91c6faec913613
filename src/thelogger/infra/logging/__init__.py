from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _HANDLER_TAG_ATTR,
    PACKAGE_LOGGER_NAME,
    configure_logging,
    get_logger,
)

__all__ = [
    "LoggingConfig",
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logger",
]
