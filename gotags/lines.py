"""Reads individual source lines back from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .errors import LineNotFoundError

_NEWLINE = b"\n"


def read_line(filename: str, lineno: int) -> bytes:
    """Return line ``lineno`` (1-based) of ``filename`` without its newline.

    Only newline-terminated lines count, so an unterminated final line is
    reported as missing.
    """
    if lineno < 1:
        raise LineNotFoundError(filename, lineno, "line numbers start at 1")
    try:
        with open(filename, "rb") as handle:
            for current, raw in enumerate(handle, start=1):
                if current < lineno:
                    continue
                if not raw.endswith(_NEWLINE):
                    break
                return raw[:-1]
    except OSError as exc:
        raise LineNotFoundError(filename, lineno, f"cannot read file: {exc.strerror or exc}") from exc
    raise LineNotFoundError(filename, lineno, "line is past the end of the file")


class LineResolver:
    """Resolves source lines, optionally keeping each file's lines in memory."""

    def __init__(self, *, cache: bool = False) -> None:
        self.cache = cache
        self._lines: Dict[str, List[bytes]] = {}

    def line_text(self, filename: str, lineno: int) -> bytes:
        if not self.cache:
            return read_line(filename, lineno)
        lines = self._lines.get(filename)
        if lines is None:
            lines = self._load(filename, lineno)
            self._lines[filename] = lines
        if lineno < 1:
            raise LineNotFoundError(filename, lineno, "line numbers start at 1")
        if lineno > len(lines):
            raise LineNotFoundError(filename, lineno, "line is past the end of the file")
        return lines[lineno - 1]

    def clear(self) -> None:
        self._lines.clear()

    @staticmethod
    def _load(filename: str, lineno: int) -> List[bytes]:
        try:
            data = Path(filename).read_bytes()
        except OSError as exc:
            raise LineNotFoundError(filename, lineno, f"cannot read file: {exc.strerror or exc}") from exc
        # The trailing piece after the last newline is not a complete line.
        return data.split(_NEWLINE)[:-1]


__all__ = ["LineResolver", "read_line"]
