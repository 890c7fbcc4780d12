"""Rendering of TAGS records and per-file blocks."""

from __future__ import annotations

from typing import Iterable, List, Tuple

_FORM_FEED = b"\f"
_ETAGS_NAME_MARK = b"\x7f"
_ETAGS_LINE_MARK = b"\x01"


def render_record(line_text: bytes, name: str, line: int, column: int) -> bytes:
    """Render one record as ``<line text><name><line>,<column>\\n``."""
    return b"%s%s%d,%d\n" % (line_text, name.encode("utf-8"), line, column)


def render_etags_record(line_text: bytes, name: str, line: int, line_offset: int) -> bytes:
    """Render one record in the layout Emacs ``etags`` writes.

    The pattern and the explicit tag name are separated by DEL, and the
    name is followed by SOH, the line number and the byte offset of the
    start of that line.
    """
    return b"%s%s%s%s%d,%d\n" % (
        line_text,
        _ETAGS_NAME_MARK,
        name.encode("utf-8"),
        _ETAGS_LINE_MARK,
        line,
        line_offset,
    )


def render_file_block(filename: str, records: Iterable[bytes]) -> Tuple[bytes, bytes]:
    """Return the ``(header, body)`` pair for a file's records.

    The header declares the exact byte length of ``body`` so a reader can
    split the aggregated stream back into per-file sections.
    """
    body = b"".join(records)
    header = b"%s\n%s,%d\n" % (_FORM_FEED, filename.encode("utf-8"), len(body))
    return header, body


def split_index(data: bytes) -> List[Tuple[str, bytes]]:
    """Split an aggregated TAGS buffer into ``(filename, body)`` sections."""
    sections: List[Tuple[str, bytes]] = []
    cursor = 0
    while cursor < len(data):
        if data[cursor : cursor + 2] != _FORM_FEED + b"\n":
            raise ValueError(f"Expected section separator at byte {cursor}")
        cursor += 2
        end_of_header = data.find(b"\n", cursor)
        if end_of_header < 0:
            raise ValueError(f"Unterminated section header at byte {cursor}")
        filename_bytes, sep, size_bytes = data[cursor:end_of_header].rpartition(b",")
        if not sep or not size_bytes.isdigit():
            raise ValueError(f"Malformed section header at byte {cursor}")
        size = int(size_bytes)
        start = end_of_header + 1
        body = data[start : start + size]
        if len(body) != size:
            raise ValueError(
                f"Section for {filename_bytes.decode('utf-8', errors='replace')} "
                f"declares {size} bytes but only {len(body)} remain"
            )
        sections.append((filename_bytes.decode("utf-8"), body))
        cursor = start + size
    return sections


__all__ = [
    "render_etags_record",
    "render_file_block",
    "render_record",
    "split_index",
]
