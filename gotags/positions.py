"""Shared coordinate space for every file parsed during one run."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Tuple

from .models import Position


@dataclass(frozen=True)
class SourceFile:
    """Handle for a registered file.

    ``base`` is the registry position of the file's first byte; the file
    owns positions ``base`` through ``base + size`` inclusive so that the
    end-of-file offset stays addressable.
    """

    name: str
    base: int
    size: int
    line_starts: Tuple[int, ...] = field(repr=False, default=(0,))

    def pos(self, offset: int) -> int:
        """Translate a byte offset within this file into a registry position."""
        if offset < 0 or offset > self.size:
            raise ValueError(f"offset {offset} out of range for {self.name} (size {self.size})")
        return self.base + offset

    def position(self, offset: int) -> Position:
        line_index = bisect_right(self.line_starts, offset) - 1
        line_start = self.line_starts[line_index]
        return Position(
            filename=self.name,
            offset=offset,
            line=line_index + 1,
            column=offset - line_start + 1,
        )


class PositionRegistry:
    """Append-only set of files, each mapped onto a disjoint position range."""

    def __init__(self) -> None:
        self._files: List[SourceFile] = []
        self._bases: List[int] = []
        self._next_base = 1

    def __len__(self) -> int:
        return len(self._files)

    def register(self, name: str, text: bytes) -> SourceFile:
        """Add ``text`` under ``name`` and return its handle."""
        line_starts = [0]
        line_starts.extend(index + 1 for index, byte in enumerate(text) if byte == 0x0A)
        handle = SourceFile(
            name=name,
            base=self._next_base,
            size=len(text),
            line_starts=tuple(line_starts),
        )
        self._files.append(handle)
        self._bases.append(handle.base)
        # One extra slot past EOF keeps neighbouring ranges disjoint.
        self._next_base = handle.base + handle.size + 1
        return handle

    def file_for(self, pos: int) -> SourceFile:
        index = bisect_right(self._bases, pos) - 1
        if index < 0:
            raise ValueError(f"position {pos} is not registered")
        handle = self._files[index]
        if pos > handle.base + handle.size:
            raise ValueError(f"position {pos} is not registered")
        return handle

    def resolve(self, pos: int) -> Position:
        """Convert a registry position into ``(filename, line, column)``."""
        handle = self.file_for(pos)
        return handle.position(pos - handle.base)


__all__ = ["PositionRegistry", "SourceFile"]
