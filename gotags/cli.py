"""CLI entrypoint for gotags."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from .config import ConfigError, TagsConfig, load_config
from .errors import TagsError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gotags",
        description="Generate an Emacs TAGS file for Go source files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-d",
        "--dir",
        dest="output_dir",
        help="Directory to save the TAGS file in (defaults to the current directory).",
    )
    parser.add_argument(
        "-n",
        "--name",
        dest="output_name",
        help="Name of the TAGS file (defaults to TAGS).",
    )
    parser.add_argument(
        "-a",
        "--append",
        action="store_true",
        help="Append to an existing TAGS file instead of replacing it.",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="Descend into directories and tag every .go file found.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a .gotags.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--etags",
        action="store_true",
        help="Write records with the DEL/SOH separators Emacs etags uses.",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip files with syntax errors instead of aborting the run.",
    )
    parser.add_argument(
        "--cache-lines",
        action="store_true",
        help="Keep each file's lines in memory while resolving tags.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log output to this file.",
    )
    parser.add_argument("files", nargs="*", help="Go source files to tag.")
    return parser


def _resolve_config(args: argparse.Namespace) -> TagsConfig:
    config = load_config(args.config if args.config is not None else Path.cwd())
    overrides: dict[str, object] = {}
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir).expanduser()
    if args.output_name:
        overrides["output_name"] = args.output_name
    if args.append:
        overrides["append"] = True
    if args.recursive:
        overrides["recursive"] = True
    if args.etags:
        overrides["record_style"] = "etags"
    if args.skip_invalid:
        overrides["on_parse_error"] = "skip"
    if args.cache_lines:
        overrides["cache_lines"] = True
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gotags."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        parser.exit(1, f"gotags: {exc}\n")

    if not args.files:
        parser.exit(1, "gotags: no input files given\n")

    try:
        result = Orchestrator(config).run(args.files)
    except TagsError as exc:
        parser.exit(1, f"gotags: {exc}\nRun with --verbose for more details.\n")
    print(f"Wrote {result.tags} tags for {len(result.files)} files to {_relativize(result.destination)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
