from __future__ import annotations

"""
Diagnostics channel setup.

Installs one stderr handler on the ``thelogger`` package logger, so every
module logger (``logging.getLogger(__name__)``) reports through it while
the root logger of a host application is left alone.
"""

import logging
import sys

from thelogger.infra.logging.config import LoggingConfig

PACKAGE_LOGGER_NAME: str = "thelogger"

# Tag on handlers installed by configure_logging
_HANDLER_TAG_ATTR: str = "_thelogger_handler"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the package logger, once.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    handler installed by the previous call is replaced.

    Args:
        cfg: Diagnostics channel settings.
        force: If True, drop the current handler and apply ``cfg``.

    Returns:
        logging.Logger: The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    ours = [h for h in package_logger.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    if ours and not force:
        return package_logger

    for handler in ours:
        package_logger.removeHandler(handler)
        handler.close()

    level = _parse_level(cfg.level)
    package_logger.setLevel(level)

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(cfg.fmt))
        setattr(sh, _HANDLER_TAG_ATTR, True)
        package_logger.addHandler(sh)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a diagnostics logger under the package namespace.

    Names outside the namespace (``__main__`` when a module runs with
    ``python -m``) are attached as children of the package logger.
    """
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(PACKAGE_LOGGER_NAME).getChild(name)


def _parse_level(level: str) -> int:
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.WARNING
