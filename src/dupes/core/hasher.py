"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content digests with pluggable hash algorithms.

The HasherImpl class streams a file through a fresh hash object on every call,
so no hasher state is ever shared between two digests.
"""

import hashlib
import logging
from typing import Dict

import xxhash

from dupes.core.interfaces import Hasher, HashAlgorithm, HashState

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


class HashlibAlgorithmImpl(HashAlgorithm):
    """Any algorithm provided by hashlib (sha256, sha1, blake2b, ...)."""

    def __init__(self, name: str):
        hashlib.new(name)  # raises ValueError for unknown names
        self.name = name

    def new(self) -> HashState:
        return hashlib.new(self.name)


# Use the same way to implement and use any other hashing algorithm
class XXHash128AlgorithmImpl(HashAlgorithm):
    """xxHash 128-bit. Fast but not cryptographic: pair it with paranoid verification."""
    name = "xxh128"

    def new(self) -> HashState:
        return xxhash.xxh128()


ALGORITHMS: Dict[str, HashAlgorithm] = {
    "sha256": HashlibAlgorithmImpl("sha256"),
    "sha1": HashlibAlgorithmImpl("sha1"),
    "sha512": HashlibAlgorithmImpl("sha512"),
    "blake2b": HashlibAlgorithmImpl("blake2b"),
    "md5": HashlibAlgorithmImpl("md5"),
    "xxh128": XXHash128AlgorithmImpl(),
}


def get_algorithm(name: str) -> HashAlgorithm:
    """Looks up a supported algorithm by name."""
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported hash algorithm: '{name}'. "
            f"Supported: {', '.join(sorted(ALGORITHMS))}"
        ) from None


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Computes the digest of the entire content of a file.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = READ_CHUNK_SIZE):
        self.algorithm = algorithm or ALGORITHMS["sha256"]
        self.chunk_size = chunk_size

    def compute_digest(self, path: str) -> bytes:
        """
        Streams the file at `path` through a fresh hash object and returns the digest.

        Raises:
            OSError: if the file cannot be opened or a read fails; the handle is closed either way
        """
        state = self.algorithm.new()
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(self.chunk_size), b''):
                state.update(chunk)
        digest = state.digest()
        logger.debug(f"{self.algorithm.name} {digest.hex()} {path}")
        return digest
