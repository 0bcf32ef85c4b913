"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the detection engine.
These protocols enforce structural typing using Python's `typing.Protocol` so the
candidate index and traversal driver can be tested with stand-in collaborators.

Key Components:
---------------
- HashAlgorithm: Factory for streaming hash objects (SHA-256, BLAKE2b, xxHash128, ...).
- Hasher: Interface for computing a whole-file content digest.
- Comparator: Interface for byte-exact equality of two files.
- FileScanner: Interface for walking root paths into a stream of observations.
"""

from typing import Protocol, Iterator, Union, Optional, Callable

from dupes.core.errors import TraversalError
from dupes.core.models import FileObservation


# ===== Interfaces =====

class HashState(Protocol):
    """The incremental object returned by HashAlgorithm.new() (hashlib/xxhash API)."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the detection logic.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh hash object. Never shared between two digests."""
        ...


class Hasher(Protocol):
    """Interface for hashing a file's full content."""
    algorithm: HashAlgorithm

    def compute_digest(self, path: str) -> bytes: ...


class Comparator(Protocol):
    """Interface for byte-by-byte file comparison."""
    def identical(self, path_a: str, path_b: str) -> bool: ...


class FileScanner(Protocol):
    """Interface for walking roots into a single-pass stream of observations and walk errors."""
    def scan(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None
    ) -> Iterator[Union[FileObservation, TraversalError]]: ...
