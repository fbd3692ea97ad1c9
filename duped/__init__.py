"""dupe-d: hash every file under a folder into a CSV report for spotting duplicates."""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
