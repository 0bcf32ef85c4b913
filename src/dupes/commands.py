"""
Unified command orchestrator for duplicate detection.
This is the single entry point for business logic used by the CLI and by library callers.
"""
import logging
from typing import Callable, List, Optional, Tuple

from dupes.core.comparator import ByteComparatorImpl
from dupes.core.detector import (
    CollisionCallback, DetectionSession, DuplicateDetector, ProgressCallback, WarningCallback)
from dupes.core.hasher import HasherImpl, get_algorithm
from dupes.core.index import CandidateIndex
from dupes.core.matcher import FileFilter
from dupes.core.models import DetectionParams, DuplicateCluster, RunStatistics
from dupes.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


class DetectionCommand:
    """
    Orchestrates the entire detection workflow:
    1. Build hasher, comparator and filter from the parameters
    2. Walk every root and classify each qualifying file
    3. Return the sorted duplicate clusters and run statistics

    Usage:
        params = DetectionParams(roots=["/data"], paranoid=True)
        command = DetectionCommand()
        clusters, stats = command.execute(
            params,
            on_collision=print_collision,
            on_warning=print_warning
        )
    """

    def __init__(self):
        self._session: Optional[DetectionSession] = None

    def execute(
            self,
            params: DetectionParams,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[Callable[[], bool]] = None,
            on_collision: Optional[CollisionCallback] = None,
            on_warning: Optional[WarningCallback] = None
    ) -> Tuple[List[DuplicateCluster], RunStatistics]:
        """
        Execute detection with given parameters.

        Args:
            params: Validated detection parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)
            on_collision: (path, algorithm, original) -> None, paranoid mode only
            on_warning: (message) -> None, walk and read errors

        Returns:
            Tuple of (duplicate_clusters, statistics)
        """
        hasher = HasherImpl(get_algorithm(params.algorithm))
        comparator = ByteComparatorImpl() if params.paranoid else None
        detector = DuplicateDetector(
            file_filter=FileFilter(params.min_size_bytes, params.pattern),
            on_collision=on_collision,
            on_warning=on_warning
        )
        index = CandidateIndex(
            hasher, comparator, paranoid=params.paranoid, on_unreadable=detector.report_unreadable
        )
        self._session = DetectionSession(index)
        scanner = FileScannerImpl(params.roots)

        logger.debug(
            f"Detecting duplicates in {params.roots} "
            f"(min_size={params.min_size_bytes}, pattern={params.pattern!r}, "
            f"algorithm={params.algorithm}, paranoid={params.paranoid})"
        )
        detector.run(
            scanner.scan(stopped_flag=stopped_flag),
            self._session,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        )

        return self._session.clusters(), self._session.stats

    @property
    def has_indexed_files(self) -> bool:
        """True if the last run recorded at least one file in a bucket."""
        return self._session is not None and self._session.has_indexed_files
