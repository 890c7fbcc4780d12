"""Error types raised by the tagging pipeline."""

from __future__ import annotations

from typing import Optional


class TagsError(RuntimeError):
    """Base class for failures while building or saving a TAGS index."""


class ParseError(TagsError):
    """Raised when a source file is not valid Go."""

    def __init__(
        self,
        filename: str,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.filename = filename
        self.message = message
        self.line = line
        self.column = column
        if line is not None and column is not None:
            location = f"{filename}:{line}:{column}"
        else:
            location = filename
        super().__init__(f"{location}: {message}")


class LineNotFoundError(TagsError):
    """Raised when a source line cannot be read back from disk."""

    def __init__(self, filename: str, line: int, reason: str) -> None:
        self.filename = filename
        self.line = line
        self.reason = reason
        super().__init__(f"{filename}:{line}: {reason}")


class AbortedRun(TagsError):
    """Raised when a run produces nothing worth persisting."""


class PersistenceError(TagsError):
    """Raised when the TAGS destination cannot be opened or written."""


__all__ = [
    "AbortedRun",
    "LineNotFoundError",
    "ParseError",
    "PersistenceError",
    "TagsError",
]
