from __future__ import annotations

"""
Daily File Sink.

Append-only destination for rendered records. The file is chosen once, from
the local date at construction, and is kept for the lifetime of the sink:
a process that outlives midnight keeps writing to the file of the day it
started.

Writes go straight to an ``O_APPEND`` descriptor, one ``os.write`` per
record, serialized by a lock private to the sink. There is no userspace
buffer: a record that fails is cut back off the file, so it is either fully
written or not at all.
"""

import logging
import os
import threading
from datetime import date
from typing import Optional

from thelogger.domain.constants import LOG_FILE_ENCODING
from thelogger.domain.errors import SinkUnavailableError, SinkWriteError
from thelogger.infra.fs import daily_log_filename, ensure_dir, resolve_logs_dir

logger = logging.getLogger(__name__)

_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND | getattr(os, "O_BINARY", 0)
_FILE_MODE = 0o644


class DailyFileSink:
    """
    Single-writer, append-only sink backed by ``Log YYYY-MM-DD.log``.

    Args:
        logs_dir: Directory receiving the daily file (default ``<cwd>/logs``).
        day: Calendar day naming the file (default: today, local time).

    Raises:
        SinkUnavailableError: If the directory or file cannot be created.
    """

    def __init__(self, logs_dir: Optional[str] = None, day: Optional[date] = None) -> None:
        self._lock = threading.Lock()
        self._dir = resolve_logs_dir(logs_dir)
        self._path = os.path.join(self._dir, daily_log_filename(day or date.today()))
        self._fd: Optional[int] = self._open()

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._fd is None

    def append(self, line: str) -> None:
        """
        Write one complete record.

        On any failure the file is truncated back to its size before the
        call, so no bytes of the rejected record remain.

        Args:
            line: Fully rendered record, terminator included.

        Raises:
            SinkWriteError: If the sink is closed or the OS rejects the write.
        """
        try:
            data = line.encode(LOG_FILE_ENCODING)
        except UnicodeEncodeError as e:
            raise SinkWriteError(self._path, str(e)) from e

        with self._lock:
            if self._fd is None:
                raise SinkWriteError(self._path, "sink is closed")
            try:
                size_before = os.fstat(self._fd).st_size
            except OSError as e:
                logger.error(f"Append to '{self._path}' failed: {e}")
                raise SinkWriteError(self._path, str(e)) from e

            try:
                written = os.write(self._fd, data)
            except OSError as e:
                logger.error(f"Append to '{self._path}' failed: {e}")
                self._truncate(size_before)
                raise SinkWriteError(self._path, str(e)) from e

            if written != len(data):
                reason = f"short write ({written} of {len(data)} bytes)"
                logger.error(f"Append to '{self._path}' failed: {reason}")
                self._truncate(size_before)
                raise SinkWriteError(self._path, reason)

    def close(self) -> None:
        """Release the file descriptor. Safe to call more than once."""
        with self._lock:
            if self._fd is None:
                return
            fd, self._fd = self._fd, None
        try:
            os.close(fd)
        except OSError as e:
            logger.warning(f"Closing '{self._path}' failed: {e}")
        logger.debug(f"Sink closed: {self._path}")

    def __enter__(self) -> DailyFileSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _open(self) -> int:
        try:
            ensure_dir(self._dir)
            fd = os.open(self._path, _OPEN_FLAGS, _FILE_MODE)
        except OSError as e:
            logger.critical(f"Cannot open log sink at '{self._path}': {e}")
            raise SinkUnavailableError(self._path, str(e)) from e

        logger.debug(f"Sink opened in append mode: {self._path}")
        return fd

    def _truncate(self, size: int) -> None:
        """Cut a partially written record off the end of the file. Caller holds the lock."""
        try:
            os.ftruncate(self._fd, size)
        except OSError as e:
            logger.critical(f"Could not remove partial record from '{self._path}': {e}")
