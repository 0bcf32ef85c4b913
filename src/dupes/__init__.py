"""
dupes — find duplicate files by content across one or more directory trees.

Core features:
- Staged filtering: size → full-content digest → optional byte-by-byte verification
- Files of a unique size are never read
- Pluggable digests: SHA-256 (default), other hashlib algorithms, xxHash128
- CLI interface with glob and minimum-size filters
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dupes")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API: only what users should import directly
from dupes.commands import DetectionCommand
from dupes.core import (
    DetectionParams, DuplicateCluster, RunStatistics, ConfigError, TraversalError,
    CandidateIndex, DuplicateCollator, DetectionSession, DuplicateDetector)
from dupes.utils.convert_utils import ConvertUtils

__all__ = [
    "DetectionCommand",
    "DetectionParams",
    "DuplicateCluster",
    "RunStatistics",
    "ConfigError",
    "TraversalError",
    "CandidateIndex",
    "DuplicateCollator",
    "DetectionSession",
    "DuplicateDetector",
    "ConvertUtils",
    "__version__",
]
