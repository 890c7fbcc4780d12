"""Emacs-style TAGS index generation for Go sources."""

from .aggregator import IndexAggregator
from .config import TagsConfig, load_config
from .errors import AbortedRun, LineNotFoundError, ParseError, PersistenceError, TagsError
from .writer import WriteMode, write_tags

__all__ = [
    "AbortedRun",
    "IndexAggregator",
    "LineNotFoundError",
    "ParseError",
    "PersistenceError",
    "TagsConfig",
    "TagsError",
    "WriteMode",
    "load_config",
    "write_tags",
]
