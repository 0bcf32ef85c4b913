"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate detection: observations, outcomes, clusters, statistics
and run parameters.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dupes.core.errors import ConfigError
from dupes.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class OutcomeKind(Enum):
    """What the candidate index decided about a newly observed file."""
    RECORDED = "recorded"
    DUPLICATE = "duplicate"
    HASH_COLLISION = "hash-collision"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileObservation:
    """
    One filesystem entry discovered by the scanner.
    Produced once per entry and never mutated.
    """
    path: str
    size: int  # in bytes
    is_regular: bool = True

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return f"<FileObservation path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class Outcome:
    """
    Result of CandidateIndex.observe().
    `original` is set for DUPLICATE and HASH_COLLISION: the first-seen path the new file matched.
    """
    kind: OutcomeKind
    original: Optional[str] = None

    @classmethod
    def recorded(cls) -> "Outcome":
        return cls(OutcomeKind.RECORDED)

    @classmethod
    def duplicate(cls, original: str) -> "Outcome":
        return cls(OutcomeKind.DUPLICATE, original)

    @classmethod
    def hash_collision(cls, original: str) -> "Outcome":
        return cls(OutcomeKind.HASH_COLLISION, original)


@dataclass
class DuplicateCluster:
    """
    A first-seen ("original") path and the paths confirmed identical to it,
    in discovery order.
    """
    original: str
    duplicates: List[str] = field(default_factory=list)

    @property
    def paths(self) -> List[str]:
        """Original first, then duplicates."""
        return [self.original] + self.duplicates

    def __repr__(self):
        return f"<DuplicateCluster original={self.original}, count={len(self.duplicates)}>"


@dataclass
class RunStatistics:
    """Counters for one run. They only ever go up."""
    files_examined: int = 0
    duplicates_found: int = 0
    bytes_wasted: int = 0

    def summary_line(self) -> str:
        return (
            f"{ConvertUtils.count_with_thousands(self.files_examined)} files examined, "
            f"{ConvertUtils.count_with_thousands(self.duplicates_found)} duplicates found, "
            f"{ConvertUtils.bytes_to_human(self.bytes_wasted)} wasted"
        )


"""
DTO for detection parameters with built-in validation.
Interface-agnostic — used by both the CLI and library callers.
"""

DEFAULT_PATTERN = "*"
DEFAULT_ALGORITHM = "sha256"


@dataclass
class DetectionParams:
    """Parameters for a detection run with validation."""
    roots: List[str]
    min_size_bytes: int = 1
    pattern: str = DEFAULT_PATTERN
    paranoid: bool = False
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        # Imported here: hasher -> interfaces -> models would be circular at module level
        from dupes.core.matcher import compile_pattern
        from dupes.core.hasher import get_algorithm

        if not self.roots:
            raise ConfigError("At least one root directory is required")

        if self.min_size_bytes < 0:
            raise ConfigError("Minimum size cannot be negative")

        compile_pattern(self.pattern)

        self.algorithm = self.algorithm.strip().lower()
        try:
            get_algorithm(self.algorithm)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    @staticmethod
    def from_human_readable(
            roots: List[str],
            min_size_str: str = "1",
            pattern: str = DEFAULT_PATTERN,
            paranoid: bool = False,
            algorithm: str = DEFAULT_ALGORITHM,
    ) -> 'DetectionParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        try:
            min_size = ConvertUtils.human_to_bytes(min_size_str)
        except ValueError as e:
            raise ConfigError(f"Invalid minimum size: {e}") from e

        return DetectionParams(
            roots=list(roots),
            min_size_bytes=min_size,
            pattern=pattern,
            paranoid=paranoid,
            algorithm=algorithm,
        )
