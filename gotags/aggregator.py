"""Builds the aggregated TAGS index for a list of Go files."""

from __future__ import annotations

from typing import List, Sequence

from .config import TagsConfig
from .errors import AbortedRun, LineNotFoundError, ParseError
from .extractor import extract_identifiers
from .formatter import render_etags_record, render_record
from .lines import LineResolver
from .logging import get_logger
from .models import FileBlock, TagsIndex, TaggableIdentifier
from .parser import GoParser
from .positions import PositionRegistry


class IndexAggregator:
    """Parses files in order and concatenates their rendered blocks."""

    def __init__(
        self,
        *,
        record_style: str = "plain",
        on_parse_error: str = "abort",
        line_resolver: LineResolver | None = None,
    ) -> None:
        self.record_style = record_style
        self.on_parse_error = on_parse_error
        self.line_resolver = line_resolver or LineResolver()
        self.logger = get_logger("aggregator")

    @classmethod
    def from_config(cls, config: TagsConfig) -> "IndexAggregator":
        return cls(
            record_style=config.record_style,
            on_parse_error=config.on_parse_error,
            line_resolver=LineResolver(cache=config.cache_lines),
        )

    def build(self, files: Sequence[str]) -> bytes:
        """Return the serialized index for ``files``."""
        return self.build_index(files).to_bytes()

    def build_index(self, files: Sequence[str]) -> TagsIndex:
        """Parse and tag every file, raising :class:`AbortedRun` on failure."""
        parser = GoParser(PositionRegistry())
        index = TagsIndex()

        try:
            for filename in files:
                try:
                    tree = parser.parse(filename)
                except ParseError as exc:
                    if self.on_parse_error == "skip":
                        self.logger.warning("Skipping %s: %s", filename, exc)
                        continue
                    self.logger.error("Parsing errors experienced, aborting: %s", exc)
                    raise AbortedRun(f"Parsing errors experienced, aborting: {exc}") from exc

                records: List[bytes] = []
                for identifier in extract_identifiers(tree):
                    record = self._render(identifier)
                    if record is not None:
                        records.append(record)
                index.blocks.append(FileBlock(filename=filename, records=tuple(records)))
                self.logger.debug("Tagged %d identifiers in %s", len(records), filename)
        finally:
            self.line_resolver.clear()

        if index.record_count == 0:
            raise AbortedRun("No tags were produced, aborting")
        return index

    def _render(self, identifier: TaggableIdentifier) -> bytes | None:
        try:
            text = self.line_resolver.line_text(identifier.filename, identifier.line)
        except LineNotFoundError as exc:
            self.logger.warning(
                "Could not read line for %s at %s: %s", identifier.name, identifier.position, exc
            )
            return None
        if self.record_style == "etags":
            return render_etags_record(
                text, identifier.name, identifier.line, identifier.position.line_offset
            )
        return render_record(text, identifier.name, identifier.line, identifier.column)


__all__ = ["IndexAggregator"]
