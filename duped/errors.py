"""Exceptions raised by the dupe-d pipeline.

Every error is fatal for the run; the CLI prints it as ``Error: <message>``.
"""
from __future__ import annotations

from typing import Optional


class DupeDError(Exception):
    """Base class for all dupe-d failures."""


class InvalidArguments(DupeDError):
    pass


class InvalidConfiguration(DupeDError):
    pass


class PathNotAccessible(DupeDError):
    def __init__(self, path: str, reason: object) -> None:
        self.path = path
        super().__init__(f"directory not accessible: {reason}")


class NotADirectory(DupeDError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"path is not a directory: {path}")


class WorkingDirectoryUnavailable(DupeDError):
    def __init__(self, reason: object) -> None:
        super().__init__(f"cannot determine current directory: {reason}")


class ScanFailure(DupeDError):
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class ReportWriteFailure(DupeDError):
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)
