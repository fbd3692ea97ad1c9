from __future__ import annotations
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, ValidationError
import yaml

from .errors import InvalidConfiguration

Algorithm = Literal["sha256", "sha1", "md5", "blake3"]

class ScannerConfig(BaseModel):
    algorithm: Algorithm = "sha256"
    chunk_bytes: int = Field(default=1024 * 1024, gt=0)  # 1 MiB streaming reads
    max_workers: int = Field(default=1, ge=1)
    skip_errors: bool = False

class ReportConfig(BaseModel):
    prefix: str = "hash_results"
    output_dir: str = "."

class DupeConfig(BaseModel):
    include_ext: List[str] = Field(default_factory=list)
    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

def load_config(path: Optional[Path] = None) -> DupeConfig:
    if path is None:
        return DupeConfig()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidConfiguration(f"cannot read config file {path}: {e}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise InvalidConfiguration(f"malformed config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"config file {path} must contain a mapping")
    try:
        return DupeConfig(**data)
    except ValidationError as e:
        raise InvalidConfiguration(f"invalid config file {path}: {e}") from e
