"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/collator.py
Collects confirmed duplicate pairs into clusters keyed by the original path.
"""

from collections import defaultdict
from typing import Dict, List, Optional

from dupes.core.models import DuplicateCluster, RunStatistics


class DuplicateCollator:
    """
    Accumulates duplicates per original in discovery order and produces
    clusters sorted by original path for reproducible reporting.
    """

    def __init__(self, stats: Optional[RunStatistics] = None):
        self.stats = stats if stats is not None else RunStatistics()
        self._clusters: Dict[str, List[str]] = defaultdict(list)

    def record(self, original: str, duplicate: str, size: int) -> None:
        """Appends `duplicate` to the cluster of `original` and updates the statistics."""
        self._clusters[original].append(duplicate)
        self.stats.duplicates_found += 1
        self.stats.bytes_wasted += size

    def finalize(self) -> List[DuplicateCluster]:
        """Returns all clusters sorted by original path."""
        return [
            DuplicateCluster(original=original, duplicates=list(self._clusters[original]))
            for original in sorted(self._clusters)
        ]
