from __future__ import annotations

"""
Call-Site Capture.

Extracts the ``(file, line, column)`` triple of the code that issued a log
call by walking up the Python stack. The formatter never captures anything
itself; it only receives the triple produced here (or one supplied by the
caller).
"""

import inspect
import os
import sys
from typing import Optional

from thelogger.domain.record_models import CallSite


def capture_call_site(stacklevel: int = 1, full_path: bool = False) -> Optional[CallSite]:
    """
    Describe the frame ``stacklevel`` levels above this function.

    Args:
        stacklevel: 1 for the direct caller, 2 for its caller, and so on
            (same convention as ``logging.Logger.log``).
        full_path: Keep the absolute file path instead of its base name.

    Returns:
        Optional[CallSite]: The call site, or None if the stack is too shallow.
    """
    try:
        frame = sys._getframe(stacklevel)
    except ValueError:
        return None

    try:
        info = inspect.getframeinfo(frame, context=0)
        file_name = info.filename if full_path else os.path.basename(info.filename)
        return CallSite(file=file_name, line=info.lineno, column=_column_of(info))
    finally:
        del frame


def _column_of(info: inspect.Traceback) -> Optional[int]:
    """1-based column of the executing instruction, when the interpreter records it."""
    positions = getattr(info, "positions", None)
    if positions is None or positions.col_offset is None:
        return None
    return positions.col_offset + 1
