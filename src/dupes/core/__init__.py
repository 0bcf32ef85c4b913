"""
Core detection engine — scanner, hasher, comparator, candidate index, collator and driver.

This package contains the performance-critical foundation of dupes:
- FileScannerImpl: lazy recursive walk of one or more roots
- HasherImpl + HashAlgorithm implementations: whole-file digests (SHA-256 by default)
- ByteComparatorImpl: byte-exact verification for paranoid mode
- CandidateIndex: size bucket -> digest bucket progressive filtering
- DuplicateCollator: clusters keyed by the first-seen path
- DuplicateDetector + DetectionSession: the traversal driver and its per-run state

All components are pure Python with no UI dependencies.
"""

from .errors import ConfigError, TraversalError
from .models import (
    FileObservation, Outcome, OutcomeKind, DuplicateCluster, RunStatistics, DetectionParams)
from .matcher import FileFilter, compile_pattern
from .hasher import HasherImpl, HashlibAlgorithmImpl, XXHash128AlgorithmImpl, ALGORITHMS, get_algorithm
from .comparator import ByteComparatorImpl
from .index import CandidateIndex
from .collator import DuplicateCollator
from .scanner import FileScannerImpl
from .detector import DetectionSession, DuplicateDetector

__all__ = [
    "ConfigError",
    "TraversalError",
    "FileObservation",
    "Outcome",
    "OutcomeKind",
    "DuplicateCluster",
    "RunStatistics",
    "DetectionParams",
    "FileFilter",
    "compile_pattern",
    "HasherImpl",
    "HashlibAlgorithmImpl",
    "XXHash128AlgorithmImpl",
    "ALGORITHMS",
    "get_algorithm",
    "ByteComparatorImpl",
    "CandidateIndex",
    "DuplicateCollator",
    "FileScannerImpl",
    "DetectionSession",
    "DuplicateDetector",
]
