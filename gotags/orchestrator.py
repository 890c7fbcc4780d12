"""Runs one complete tagging pass: collect, aggregate, persist."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .aggregator import IndexAggregator
from .config import TagsConfig
from .errors import AbortedRun
from .logging import get_logger
from .sources import collect_sources
from .writer import write_tags


@dataclass
class RunResult:
    """Summary of a persisted tagging run."""

    destination: Path
    files: List[str]
    tags: int
    bytes_written: int


class Orchestrator:
    """Coordinates the tagging pipeline for a given configuration."""

    def __init__(self, config: TagsConfig, aggregator: IndexAggregator | None = None) -> None:
        self.config = config
        self.aggregator = aggregator or IndexAggregator.from_config(config)
        self.logger = get_logger("orchestrator")

    def run(self, paths: Sequence[str]) -> RunResult:
        """Tag ``paths`` and write the index to the configured destination.

        Nothing is written when the aggregator aborts.
        """
        files = collect_sources(
            paths,
            recursive=self.config.recursive,
            exclude_paths=self.config.exclude_paths,
        )
        if not files:
            raise AbortedRun("No source files given, aborting")
        self.logger.info("Tagging %d files", len(files))

        index = self.aggregator.build_index(files)
        buffer = index.to_bytes()

        destination = self.config.destination
        written = write_tags(buffer, destination, self.config.write_mode)
        self.logger.info(
            "Saved %d tags to %s (%s)", index.record_count, destination, self.config.write_mode.value
        )
        return RunResult(
            destination=destination,
            files=[block.filename for block in index.blocks],
            tags=index.record_count,
            bytes_written=written,
        )


__all__ = ["Orchestrator", "RunResult"]
