"""Core data models shared across gotags components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .formatter import render_file_block


@dataclass(frozen=True)
class Position:
    """Human-readable location of a byte within a registered file."""

    filename: str
    offset: int
    line: int
    column: int

    @property
    def line_offset(self) -> int:
        """Byte offset of the first byte of ``line`` within the file."""
        return self.offset - (self.column - 1)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class TaggableIdentifier:
    """A top-level declaration name eligible for the index."""

    name: str
    kind: str
    position: Position

    @property
    def filename(self) -> str:
        return self.position.filename

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


@dataclass(frozen=True)
class FileBlock:
    """Rendered records for one input file, in walk order."""

    filename: str
    records: Tuple[bytes, ...] = ()

    @property
    def body(self) -> bytes:
        return b"".join(self.records)

    @property
    def size(self) -> int:
        return sum(len(record) for record in self.records)

    @property
    def header(self) -> bytes:
        header, _ = render_file_block(self.filename, self.records)
        return header

    def to_bytes(self) -> bytes:
        header, body = render_file_block(self.filename, self.records)
        return header + body


@dataclass
class TagsIndex:
    """Ordered sequence of file blocks produced by one run."""

    blocks: List[FileBlock] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return sum(len(block.records) for block in self.blocks)

    def to_bytes(self) -> bytes:
        return b"".join(block.to_bytes() for block in self.blocks)
