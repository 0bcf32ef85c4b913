"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Walks root paths and produces a lazy, single-pass stream of file observations.
Features:
- Recursively scans directories with os.scandir, depth-first in lexical name order
  (files and subdirectories interleaved)
- Does not follow symbolic links; they are reported as non-regular entries
- Walk failures are yielded as TraversalError items instead of being raised,
  so an unreadable entry never stops the walk of its siblings or other roots
"""

import logging
import os
import stat
from typing import Callable, Iterator, List, Optional, Union

from dupes.core.errors import TraversalError
from dupes.core.interfaces import FileScanner
from dupes.core.models import FileObservation

logger = logging.getLogger(__name__)

ScanItem = Union[FileObservation, TraversalError]


class FileScannerImpl(FileScanner):
    """
    Scans one or more roots recursively.

    Attributes:
        roots: Paths to walk, in order. A root may also be a single file.
    """

    def __init__(self, roots: List[str]):
        self.roots = list(roots)

    def scan(self, stopped_flag: Optional[Callable[[], bool]] = None) -> Iterator[ScanItem]:
        """
        Yields a FileObservation for every non-directory entry reachable from the roots,
        and a TraversalError for every entry that could not be read.
        """
        for root in self.roots:
            if stopped_flag and stopped_flag():
                logger.debug("Scan interrupted by user")
                return
            logger.debug(f"Scanning root: {root}")
            yield from self._scan_root(root, stopped_flag)

    def _scan_root(self, root: str, stopped_flag: Optional[Callable[[], bool]]) -> Iterator[ScanItem]:
        try:
            root_stat = os.lstat(root)
        except OSError as e:
            logger.debug(f"Cannot open root {root}: {e}")
            yield TraversalError(root, e)
            return

        if not stat.S_ISDIR(root_stat.st_mode):
            yield self._observation(root, root_stat)
            return

        try:
            stack: List[Iterator[os.DirEntry]] = [iter(self._list_dir(root))]
        except OSError as e:
            logger.debug(f"Cannot read directory {root}: {e}")
            yield TraversalError(root, e)
            return

        # Depth-first; a directory's contents come before its later siblings
        while stack:
            if stopped_flag and stopped_flag():
                logger.debug("Scan interrupted by user")
                return

            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(iter(self._list_dir(entry.path)))
                    continue
                entry_stat = entry.stat(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Walk error at {entry.path}: {e}")
                yield TraversalError(entry.path, e)
                continue

            yield self._observation(entry.path, entry_stat)

    @staticmethod
    def _list_dir(directory: str) -> List[os.DirEntry]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)

    @staticmethod
    def _observation(path: str, file_stat: os.stat_result) -> FileObservation:
        return FileObservation(
            path=path,
            size=file_stat.st_size,
            is_regular=stat.S_ISREG(file_stat.st_mode),
        )
