"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

detector.py
Traversal driver: feeds a stream of observations through the filter, the candidate
index and the duplicate collator, one file at a time.

All per-run state lives in a DetectionSession, so every run (and every test)
starts from a fresh session.
"""

import logging
import os
import time
from typing import Callable, Iterable, List, Optional, Union

from dupes.core.collator import DuplicateCollator
from dupes.core.errors import TraversalError
from dupes.core.index import CandidateIndex
from dupes.core.matcher import FileFilter
from dupes.core.models import DuplicateCluster, FileObservation, OutcomeKind, RunStatistics

logger = logging.getLogger(__name__)

CollisionCallback = Callable[[str, str, str], None]  # (path, algorithm, original)
WarningCallback = Callable[[str], None]
ProgressCallback = Callable[[str, int, Optional[int]], None]


class DetectionSession:
    """
    Owns the mutable state of one run: candidate index, collator and statistics.
    Nothing outside the session mutates them.
    """

    def __init__(self, index: CandidateIndex, stats: Optional[RunStatistics] = None):
        self.stats = stats if stats is not None else RunStatistics()
        self.index = index
        self.collator = DuplicateCollator(self.stats)

    @property
    def has_indexed_files(self) -> bool:
        return not self.index.is_empty

    def clusters(self) -> List[DuplicateCluster]:
        return self.collator.finalize()


class DuplicateDetector:
    """
    Consumes observations in order and classifies each qualifying file.

    Non-fatal events go to the optional callbacks:
        on_collision(path, algorithm, original): digest match rejected by byte comparison
        on_warning(message): walk errors and per-file read errors
    """

    def __init__(
        self,
        file_filter: Optional[FileFilter] = None,
        on_collision: Optional[CollisionCallback] = None,
        on_warning: Optional[WarningCallback] = None,
        progress_interval: int = 1000
    ):
        self.file_filter = file_filter or FileFilter()
        self.on_collision = on_collision
        self.on_warning = on_warning
        self.progress_interval = progress_interval

    def run(
        self,
        items: Iterable[Union[FileObservation, TraversalError]],
        session: DetectionSession,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> DetectionSession:
        """
        Processes every item from the scanner stream. Returns the same session, updated.
        """
        start_time = time.time()
        progress_counter = 0

        for item in items:
            if stopped_flag and stopped_flag():
                logger.debug("Detection interrupted by user")
                break

            if isinstance(item, TraversalError):
                self._warn(str(item))
                continue

            if self.process(item, session):
                progress_counter += 1
                if progress_callback and progress_counter >= self.progress_interval:
                    progress_callback('scanning', session.stats.files_examined, None)
                    progress_counter = 0

        if progress_callback and progress_counter > 0:
            progress_callback('scanning', session.stats.files_examined, None)

        logger.debug(f"Detection finished in {time.time() - start_time:.2f} seconds")
        logger.debug(
            f"{session.stats.files_examined} examined, "
            f"{session.stats.duplicates_found} duplicates, "
            f"{session.stats.bytes_wasted} bytes wasted"
        )
        return session

    def process(self, observation: FileObservation, session: DetectionSession) -> bool:
        """
        Classifies a single observation. Returns True if the file was examined
        (regular, and accepted by the filter).
        """
        if not observation.is_regular:
            return False

        if not self.file_filter.size_passes(observation.size):
            logger.debug(f"Skipping {observation.path} (size {observation.size} below minimum)")
            return False

        if not self.file_filter.name_passes(observation.name):
            logger.debug(f"Skipping {observation.path} (name does not match pattern)")
            return False

        session.stats.files_examined += 1

        try:
            outcome = session.index.observe(observation.path, observation.size)
        except OSError as e:
            self.report_unreadable(os.fsdecode(e.filename) if e.filename else observation.path, e)
            return True

        if outcome.kind is OutcomeKind.DUPLICATE:
            session.collator.record(outcome.original, observation.path, observation.size)
        elif outcome.kind is OutcomeKind.HASH_COLLISION and self.on_collision:
            algorithm = session.index.hasher.algorithm.name
            self.on_collision(observation.path, algorithm, outcome.original)

        return True

    def report_unreadable(self, path: str, error: OSError) -> None:
        """Warns about a file that dropped out of the run because it could not be read."""
        logger.debug(f"Dropping {path}: {error}")
        self._warn(f"{path}: {error.strerror or error}")

    def _warn(self, message: str) -> None:
        logger.debug(f"Warning: {message}")
        if self.on_warning:
            self.on_warning(message)
