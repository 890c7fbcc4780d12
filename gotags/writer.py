"""Commits an aggregated TAGS buffer to disk."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .errors import PersistenceError
from .logging import get_logger

logger = get_logger("writer")


class WriteMode(str, Enum):
    """How the destination file is opened."""

    CREATE = "create"
    APPEND = "append"


def write_tags(buffer: bytes, destination: Path, mode: WriteMode = WriteMode.CREATE) -> int:
    """Write ``buffer`` to ``destination`` and return the number of bytes written.

    ``CREATE`` truncates any existing file before writing so no stale bytes
    survive a shorter index. ``APPEND`` requires the file to exist already.
    """
    destination = Path(destination)
    if mode is WriteMode.APPEND:
        if not destination.is_file():
            raise PersistenceError(f"Error appending file \"{destination}\": file does not exist")
        open_mode = "ab"
    else:
        open_mode = "wb"

    try:
        with destination.open(open_mode) as handle:
            written = handle.write(buffer)
    except OSError as exc:
        verb = "appending" if mode is WriteMode.APPEND else "writing"
        raise PersistenceError(
            f"Error {verb} file \"{destination}\": {exc.strerror or exc}"
        ) from exc

    logger.debug("Wrote %d bytes to %s (%s)", written, destination, mode.value)
    return written


__all__ = ["WriteMode", "write_tags"]
