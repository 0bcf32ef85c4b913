"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
Progressive candidate filtering: size bucket first, content digest second,
optional byte-exact verification last.

Files are hashed lazily. A file of a size nobody else has is remembered by
size alone and never read. Only when a second file of the same size shows up
are both of them digested.
"""

import logging
from typing import Callable, Dict, Optional, Set

from dupes.core.interfaces import Hasher, Comparator
from dupes.core.models import Outcome

logger = logging.getLogger(__name__)

UnreadableCallback = Callable[[str, OSError], None]


class CandidateIndex:
    """
    Decides, for each newly observed file, whether it is the first of its kind,
    a duplicate of an earlier file, or a digest match that failed verification.

    Attributes:
        size_buckets: size -> path of the first file seen with that size
        digest_buckets: digest -> path of the first file seen with that digest
        on_unreadable: called with (path, error) when the earlier file of a size
            cannot be digested at promotion time
    """

    def __init__(
        self,
        hasher: Hasher,
        comparator: Optional[Comparator] = None,
        paranoid: bool = False,
        on_unreadable: Optional[UnreadableCallback] = None
    ):
        if paranoid and comparator is None:
            raise ValueError("Paranoid verification requires a comparator")
        self.hasher = hasher
        self.comparator = comparator
        self.paranoid = paranoid
        self.on_unreadable = on_unreadable
        self.size_buckets: Dict[int, str] = {}
        self.digest_buckets: Dict[bytes, str] = {}
        self._promoted_sizes: Set[int] = set()  # sizes whose first path was already digested or dropped

    @property
    def is_empty(self) -> bool:
        """True until at least one file has been recorded."""
        return not self.size_buckets and not self.digest_buckets

    def observe(self, path: str, size: int) -> Outcome:
        """
        Folds one file into the index.

        Raises:
            OSError: if digesting `path` or comparing it fails. Nothing is committed for `path`
                in that case, and entries already committed for other files are left untouched.
                A failure on the earlier file of the same size is reported to `on_unreadable`
                instead, and `path` is still classified.
        """
        first_path = self.size_buckets.get(size)
        if first_path is None:
            self.size_buckets[size] = path
            logger.debug(f"New size {size}: {path}")
            return Outcome.recorded()

        if size not in self._promoted_sizes:
            logger.debug(f"Second file of size {size}, promoting {first_path}")
            self._promoted_sizes.add(size)
            try:
                first_digest = self.hasher.compute_digest(first_path)
            except OSError as e:
                # The first file drops out; `path` carries on as a candidate of its own
                logger.debug(f"Dropping {first_path}: {e}")
                if self.on_unreadable:
                    self.on_unreadable(first_path, e)
            else:
                self.digest_buckets.setdefault(first_digest, first_path)

        digest = self.hasher.compute_digest(path)

        original = self.digest_buckets.get(digest)
        if original is None:
            self.digest_buckets[digest] = path
            return Outcome.recorded()

        if self.paranoid and not self.comparator.identical(path, original):
            # Not registered anywhere: a later copy of `path` will not be matched against it
            logger.info(f"{path} {self.hasher.algorithm.name}-collides with {original}")
            return Outcome.hash_collision(original)

        logger.debug(f"Duplicate: {path} == {original}")
        return Outcome.duplicate(original)
