"""Expands command-line inputs into the ordered list of files to tag."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    "node_modules",
    "__pycache__",
}

_GO_SUFFIX = ".go"

logger = get_logger("sources")


def collect_sources(
    paths: Sequence[str],
    *,
    recursive: bool = False,
    exclude_paths: Sequence[str] = (),
) -> List[str]:
    """Return the files to tag, keeping the caller's order.

    Files are passed through untouched. Directories are walked for ``.go``
    files when ``recursive`` is set and skipped with a warning otherwise.
    """
    sources: List[str] = []
    for raw in paths:
        path = Path(raw)
        if not path.is_dir():
            sources.append(raw)
            continue
        if not recursive:
            logger.warning("Skipping directory %s (use -R to descend into directories)", raw)
            continue
        sources.extend(_walk_go_files(path, exclude_paths))
    return sources


def _walk_go_files(root: Path, exclude_paths: Sequence[str]) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            name
            for name in dirnames
            if name not in _EXCLUDED_DIRS
            and not _is_excluded(_relative(current / name, root), exclude_paths)
        )
        for name in sorted(filenames):
            if not name.endswith(_GO_SUFFIX):
                continue
            candidate = current / name
            if _is_excluded(_relative(candidate, root), exclude_paths):
                continue
            yield str(candidate)


def _relative(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()


def _is_excluded(rel_path: str, patterns: Sequence[str]) -> bool:
    for pattern in patterns:
        cleaned = pattern.rstrip("/")
        if fnmatchcase(rel_path, cleaned):
            return True
        if any(fnmatchcase(part, cleaned) for part in rel_path.split("/")):
            return True
    return False


__all__ = ["collect_sources"]
