"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Error types shared by the detection engine and its callers.
"""

from typing import Optional


class ConfigError(ValueError):
    """Invalid run configuration (bad glob pattern, no roots, ...). Fatal before any work starts."""


class TraversalError(OSError):
    """
    A directory-walk failure on a single entry.

    The scanner yields these inside its observation stream instead of raising them,
    so one unreadable entry never stops the walk of its siblings.
    """

    def __init__(self, path: str, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"{path}: {reason}")
