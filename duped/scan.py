# duped/scan.py
"""
Folder resolution and the walk + hash pipeline.

Files are visited in sorted, top-down order and every matched file is hashed
exactly once. By default the first unreadable file aborts the whole scan.
"""
from __future__ import annotations
import os
import stat
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .config import ScannerConfig
from .errors import NotADirectory, PathNotAccessible, ScanFailure, WorkingDirectoryUnavailable
from .util import echo, hash_file, matches_extension

LogCallback = Callable[[str], None]


@dataclass(frozen=True)
class FileRecord:
    name: str
    path: str
    size: int
    hash: str


@dataclass
class ScanResult:
    records: List[FileRecord] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)  # (path, reason)


def _emit(cb: Optional[Callable[..., None]], *args) -> None:
    if not cb:
        return
    try:
        cb(*args)
    except Exception:
        pass


def get_folder_path(args: Sequence[str]) -> str:
    """Return the folder to scan: the first argument, or the working directory."""
    if args:
        return validate_directory(args[0])
    try:
        return os.getcwd()
    except OSError as e:
        raise WorkingDirectoryUnavailable(e) from e


def validate_directory(path: str) -> str:
    try:
        st = os.stat(path)
    except OSError as e:
        raise PathNotAccessible(path, e) from e
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectory(path)
    return path


def walk_files(folder_path: str) -> Iterator[str]:
    """Yield every non-directory entry under ``folder_path`` in sorted order."""

    def on_error(e: OSError) -> None:
        where = e.filename if e.filename is not None else folder_path
        raise ScanFailure(f"failed to walk {where}: {e}", where) from e

    for dirpath, dirnames, filenames in os.walk(folder_path, onerror=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            yield os.path.join(dirpath, name)


def hash_record(path: str, scanner: ScannerConfig) -> FileRecord:
    try:
        digest = hash_file(path, scanner.algorithm, scanner.chunk_bytes)
    except OSError as e:
        raise ScanFailure(f"failed to hash file {path}: {e}", path) from e
    try:
        st = os.stat(path)
    except OSError as e:
        raise ScanFailure(f"failed to get file stats for {path}: {e}", path) from e
    return FileRecord(name=os.path.basename(path), path=path, size=st.st_size, hash=digest)


def process_files(
    folder_path: str,
    exts: Sequence[str],
    scanner: Optional[ScannerConfig] = None,
    log_cb: Optional[LogCallback] = None,
) -> ScanResult:
    scanner = scanner or ScannerConfig()

    def emit_log(message: str) -> None:
        echo(message)
        _emit(log_cb, message)

    def emit_warn(message: str) -> None:
        echo(message, sys.stderr)
        _emit(log_cb, message)

    emit_log(f"Scanning folder: {folder_path}")
    if exts:
        emit_log(f"Filtering by extensions: {', '.join(exts)}")
    else:
        emit_log("Processing all file types")

    result = ScanResult()

    def collect(path: str, fetch: Callable[[], FileRecord]) -> None:
        try:
            record = fetch()
        except ScanFailure as e:
            if not scanner.skip_errors:
                raise
            result.skipped.append((path, str(e.__cause__ or e)))
            emit_warn(f"Skipped: {path} ({e.__cause__ or e})")
            return
        result.records.append(record)

    matched = (p for p in walk_files(folder_path) if matches_extension(p, exts))

    if scanner.max_workers <= 1:
        for path in matched:
            emit_log(f"Processing: {path}")
            collect(path, lambda p=path: hash_record(p, scanner))
    else:
        # Results are gathered in walk order, not completion order
        with ThreadPoolExecutor(max_workers=scanner.max_workers) as ex:
            pending: List[Tuple[str, Future]] = []
            try:
                for path in matched:
                    emit_log(f"Processing: {path}")
                    pending.append((path, ex.submit(hash_record, path, scanner)))
                for path, fut in pending:
                    collect(path, fut.result)
            except BaseException:
                for _, fut in pending:
                    fut.cancel()
                raise

    if result.skipped:
        emit_warn(f"Skipped {len(result.skipped)} file(s) that could not be hashed")
    return result
