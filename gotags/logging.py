"""Diagnostics plumbing: every component logs below the ``gotags`` logger."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "gotags"
_CONSOLE_FORMAT = "[gotags] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Logger for ``component`` (e.g. ``gotags.parser``), or the root one."""
    return logging.getLogger(f"{_ROOT}.{component}" if component else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route tagging diagnostics to stderr and, if given, to ``log_file``.

    Skipped records and skipped files surface as warnings; ``verbose``
    also shows per-file debug detail.
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger(_ROOT)
    root.setLevel(level)
    root.propagate = False

    # main() may run several times in one process (tests); start clean each time.
    for existing in list(root.handlers):
        root.removeHandler(existing)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        root.addHandler(sink)

    return root


__all__ = ["configure_logging", "get_logger"]
