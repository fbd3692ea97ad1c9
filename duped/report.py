"""CSV report for a finished scan."""
from __future__ import annotations
import csv
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from .config import ReportConfig
from .errors import ReportWriteFailure
from .scan import FileRecord
from .util import echo

HEADER = ["Name", "Path", "Size (MB)", "Hash"]
BYTES_PER_MB = 1048576.0


def output_filename(now: Optional[datetime] = None, prefix: str = "hash_results") -> str:
    # Second resolution: two runs within the same second write the same name
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{stamp}.csv"


def format_size_mb(size_bytes: int) -> str:
    return f"{size_bytes / BYTES_PER_MB:.2f}"


def record_row(record: FileRecord) -> List[str]:
    return [record.name, record.path, format_size_mb(record.size), record.hash]


def write_csv(
    records: Iterable[FileRecord],
    cfg: Optional[ReportConfig] = None,
    now: Optional[datetime] = None,
) -> str:
    """Write ``records`` to a timestamped CSV and return the path reported.

    An existing file with the same name is overwritten. Filenames that are not
    valid UTF-8 are written back as their original bytes. When writing fails the
    partial file is removed before ``ReportWriteFailure`` is raised.
    """
    cfg = cfg or ReportConfig()
    out = Path(cfg.output_dir) / output_filename(now, cfg.prefix)
    out_str = str(out) if cfg.output_dir not in ("", ".") else out.name

    try:
        f = open(out, "w", newline="", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise ReportWriteFailure(f"failed to create CSV file: {e}", out_str) from e

    try:
        with f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            for record in records:
                writer.writerow(record_row(record))
    except Exception as e:
        _discard(out)
        raise ReportWriteFailure(f"failed to write content to CSV: {e}", out_str) from e

    try:
        shown = os.path.abspath(out)
    except OSError:
        shown = out_str
    echo(f"Output written to: {shown}")
    return shown


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass
