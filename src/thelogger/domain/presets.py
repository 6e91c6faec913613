from __future__ import annotations

"""
Named Configuration Presets.

Persists reusable ``LoggerConfig`` values as JSON in the user data
directory so that a whole configuration can be swapped into a running
logger by name. Reads are forgiving: a missing, corrupted or
unsupported-version file means "no presets". Writes are atomic and
propagate I/O errors.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from thelogger.domain.config import LoggerConfig
from thelogger.domain.constants import CURRENT_PRESET_VERSION, PRESETS_FILENAME
from thelogger.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)


def get_presets_path() -> str:
    """Default location of the presets file."""
    return os.path.join(get_user_data_dir(), PRESETS_FILENAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_presets(path: Optional[str] = None) -> Dict[str, LoggerConfig]:
    """
    Load every saved preset.

    Args:
        path: Presets file; defaults to ``get_presets_path()``.

    Returns:
        Dict[str, LoggerConfig]: Presets by name, empty on any read failure.
    """
    path = path or get_presets_path()
    if not os.path.exists(path):
        logger.debug("Presets file not found. No presets available.")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load presets: {e}. Ignoring file.")
        return {}

    if not isinstance(data, dict):
        logger.warning("Corrupted presets file. Ignoring it.")
        return {}

    version = data.get("version", CURRENT_PRESET_VERSION)
    if not _is_supported_version(version):
        logger.warning(
            f"Presets file version {version!r} is not supported "
            f"(expected {CURRENT_PRESET_VERSION}). Ignoring it."
        )
        return {}

    raw = data.get("presets")
    if not isinstance(raw, dict):
        logger.warning("Corrupted presets file. Ignoring it.")
        return {}

    presets: Dict[str, LoggerConfig] = {}
    for name, values in raw.items():
        if not isinstance(values, dict):
            logger.warning(f"Skipping malformed preset '{name}'.")
            continue
        presets[name] = LoggerConfig.from_dict(values)
    return presets


def get_preset(name: str, path: Optional[str] = None) -> Optional[LoggerConfig]:
    """Return the preset saved under ``name``, or None."""
    return load_presets(path).get(name)


def save_preset(name: str, config: LoggerConfig, path: Optional[str] = None) -> None:
    """
    Store ``config`` under ``name``, replacing any preset with that name.

    Raises:
        OSError: If the presets file cannot be written.
    """
    path = path or get_presets_path()
    presets = load_presets(path)
    presets[name] = config
    _write_presets(path, presets)
    logger.debug(f"Preset '{name}' saved to {path}")


def delete_preset(name: str, path: Optional[str] = None) -> bool:
    """
    Remove a preset.

    Returns:
        bool: True if a preset with that name existed.
    """
    path = path or get_presets_path()
    presets = load_presets(path)
    if presets.pop(name, None) is None:
        return False
    _write_presets(path, presets)
    return True

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_supported_version(version: Any) -> bool:
    """Same major version as the one this build writes."""
    if not isinstance(version, str):
        return False
    return version.split(".")[0] == CURRENT_PRESET_VERSION.split(".")[0]


def _write_presets(path: str, presets: Dict[str, LoggerConfig]) -> None:
    payload: Dict[str, Any] = {
        "version": CURRENT_PRESET_VERSION,
        "presets": {name: cfg.to_dict() for name, cfg in presets.items()},
    }
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)

    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=4)
    os.replace(tmp_path, path)
