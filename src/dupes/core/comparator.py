"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Byte-by-byte file comparison used by paranoid verification.
"""

import mmap
from typing import BinaryIO

from dupes.core.interfaces import Comparator


class ByteComparatorImpl(Comparator):
    """
    Compares two files in lock-step, one buffer at a time.
    Buffer size defaults to the platform page size.
    """

    def __init__(self, buffer_size: int = mmap.PAGESIZE):
        self.buffer_size = buffer_size

    def identical(self, path_a: str, path_b: str) -> bool:
        """
        True if both files hold exactly the same bytes.

        Raises:
            OSError: if either file cannot be opened or read; both handles are closed either way
        """
        with open(path_a, 'rb') as a, open(path_b, 'rb') as b:
            return self._streams_match(a, b)

    def _streams_match(self, a: BinaryIO, b: BinaryIO) -> bool:
        while True:
            chunk_a = a.read(self.buffer_size)
            chunk_b = b.read(self.buffer_size)

            # Differing content or one stream ending first both show up here
            if chunk_a != chunk_b:
                return False

            # Only when both end in the same iteration are the files identical
            if not chunk_a:
                return True
