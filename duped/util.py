from __future__ import annotations
import hashlib
import os
import sys
from typing import Iterable, List, Optional, Sequence, TextIO, Union

import blake3

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_CHUNK_BYTES = 1024 * 1024


def echo(message: str, stream: Optional[TextIO] = None) -> None:
    """Print a line that may carry undecodable filename bytes.

    Names that are not valid in the filesystem encoding come back from
    ``os.walk`` with surrogates; those are shown as backslash escapes.
    """
    stream = stream or sys.stdout
    try:
        print(message, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "utf-8"
        print(message.encode(encoding, "backslashreplace").decode(encoding), file=stream)


def format_extensions(raw_exts: Iterable[str]) -> List[str]:
    """Turn ``--ext`` tokens into dot-prefixed extensions.

    Each token may hold several comma-separated extensions. Blank entries are
    dropped, case is kept and duplicates are not removed.
    """
    formatted: List[str] = []
    for raw in raw_exts:
        for ext in raw.split(","):
            ext = ext.strip()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            formatted.append(ext)
    return formatted


def file_extension(path: PathLike) -> str:
    name = os.path.basename(os.fspath(path))
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def matches_extension(path: PathLike, exts: Sequence[str]) -> bool:
    # Exact, case-sensitive comparison; an empty filter matches everything
    if not exts:
        return True
    return file_extension(path) in exts


def _stream_into(h, path: PathLike, chunk_size: int) -> str:
    with open(path, "rb") as f:
        while True:
            b = f.read(chunk_size)
            if not b:
                break
            h.update(b)
    return h.hexdigest()


def sha256_file(path: PathLike, chunk_size: int = DEFAULT_CHUNK_BYTES) -> str:
    return _stream_into(hashlib.sha256(), path, chunk_size)


def blake3_file(path: PathLike, chunk_size: int = DEFAULT_CHUNK_BYTES) -> str:
    """Compute the BLAKE3 digest for a file."""
    return _stream_into(blake3.blake3(), path, chunk_size)


def hash_file(path: PathLike, algorithm: str = "sha256", chunk_size: int = DEFAULT_CHUNK_BYTES) -> str:
    """Return the lowercase hex digest of ``path`` using ``algorithm``.

    Raises ``OSError`` when the file cannot be opened or read and
    ``ValueError`` for an unknown algorithm.
    """
    if algorithm == "sha256":
        return sha256_file(path, chunk_size)
    if algorithm == "blake3":
        return blake3_file(path, chunk_size)
    if algorithm in ("sha1", "md5"):
        return _stream_into(hashlib.new(algorithm), path, chunk_size)
    raise ValueError(f"Unsupported hash algorithm: {algorithm}")
