"""Command-line interface for dupe-d."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import DupeConfig, load_config
from .errors import DupeDError, InvalidArguments
from .report import write_csv
from .scan import get_folder_path, process_files
from .util import echo, format_extensions

EXAMPLES = """examples:
  dupe-d
  dupe-d /path/to/directory
  dupe-d --ext jpg --ext png /path/to/directory
  dupe-d --ext=jpg,png,pdf"""


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog or "dupe-d",
        description=(
            "dupe-d is a tool to identify file duplicates by generating a hash for every file. "
            "Sort the CSV report on the Hash column to spot duplicates."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", nargs="*", help="Folder to scan (default: current directory)")
    parser.add_argument(
        "-e", "--ext",
        action="append",
        help="File extensions to process (can be specified multiple times or comma-separated)",
    )
    parser.add_argument("--config", help="Optional YAML configuration file")
    parser.add_argument("--algorithm", choices=["sha256", "sha1", "md5", "blake3"], help="Digest algorithm (default: sha256)")
    parser.add_argument("--chunk-bytes", type=_positive_int, help="Chunk size (bytes) for streaming reads")
    parser.add_argument("--max-workers", type=_positive_int, help="Hash files on this many threads (default: 1)")
    parser.add_argument("--skip-errors", action="store_true", help="Skip unreadable files instead of aborting the scan")
    parser.add_argument("--output-dir", help="Folder for the CSV report (default: current directory)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_overrides(cfg: DupeConfig, args: argparse.Namespace) -> DupeConfig:
    if args.ext is not None:
        cfg.include_ext = list(args.ext)
    if args.algorithm:
        cfg.scanner.algorithm = args.algorithm
    if args.chunk_bytes is not None:
        cfg.scanner.chunk_bytes = args.chunk_bytes
    if args.max_workers is not None:
        cfg.scanner.max_workers = args.max_workers
    if args.skip_errors:
        cfg.scanner.skip_errors = True
    if args.output_dir:
        cfg.report.output_dir = args.output_dir
    return cfg


def run_from_args(args: argparse.Namespace) -> int:
    if len(args.directory) > 1:
        raise InvalidArguments(f"accepts at most 1 arg(s), received {len(args.directory)}")

    cfg = load_config(Path(args.config) if args.config else None)
    cfg = _apply_overrides(cfg, args)

    folder_path = get_folder_path(args.directory)
    exts = format_extensions(cfg.include_ext)

    result = process_files(folder_path, exts, cfg.scanner)
    write_csv(result.records, cfg.report)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        return run_from_args(args)
    except DupeDError as e:
        echo(f"Error: {e}", sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
