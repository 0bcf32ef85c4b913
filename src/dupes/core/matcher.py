"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/matcher.py
Glob pattern validation and file filtering.

Pattern syntax (matched against the base name of a file):
    *           any sequence of non-separator characters
    ?           any single non-separator character
    [abc] [a-z] character class, [^...] negates it
    \\c         matches c literally

Unlike fnmatch, malformed patterns are rejected up front instead of being
silently read as literals.
"""

import os
import re
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from dupes.core.errors import ConfigError

_NOT_SEP = r"[^/]" if os.sep == "/" else r"[^/\\]"


def _take_class_char(pattern: str, i: int) -> Tuple[str, int]:
    """Reads one (possibly escaped) range bound of a character class starting at pattern[i]."""
    if i >= len(pattern) or pattern[i] in "-]":
        raise ConfigError(f"invalid pattern '{pattern}': bad character class")
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise ConfigError(f"invalid pattern '{pattern}': trailing backslash")
    char = pattern[i]
    i += 1
    # A class is never allowed to end right after a bound
    if i >= len(pattern):
        raise ConfigError(f"invalid pattern '{pattern}': unterminated character class")
    return char, i


def _translate_class(pattern: str, i: int) -> Tuple[str, int]:
    """Translates the class that opens at pattern[i] == '['. Returns (regex, index after ']')."""
    i += 1
    negated = i < len(pattern) and pattern[i] == "^"
    if negated:
        i += 1

    ranges: List[str] = []
    count = 0
    while True:
        if i < len(pattern) and pattern[i] == "]" and count > 0:
            i += 1
            break
        lo, i = _take_class_char(pattern, i)
        hi = lo
        if pattern[i] == "-":
            hi, i = _take_class_char(pattern, i + 1)
        count += 1
        # Inverted ranges are legal and match nothing
        if lo <= hi:
            ranges.append(re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}")

    if not ranges:
        return ("." if negated else "(?!)"), i
    return f"[{'^' if negated else ''}{''.join(ranges)}]", i


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Validates a glob pattern and compiles it to a regex for full-name matching.

    Raises:
        ConfigError: if the pattern is malformed
    """
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "*":
            parts.append(f"{_NOT_SEP}*")
            i += 1
        elif char == "?":
            parts.append(_NOT_SEP)
            i += 1
        elif char == "[":
            regex, i = _translate_class(pattern, i)
            parts.append(regex)
        elif char == "\\":
            if i + 1 >= len(pattern):
                raise ConfigError(f"invalid pattern '{pattern}': trailing backslash")
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            parts.append(re.escape(char))
            i += 1
    return re.compile("".join(parts), re.DOTALL)


class FileFilter:
    """
    Size and name predicate applied to every regular file before it reaches the index.

    Attributes:
        min_size: Minimum file size in bytes; smaller files are skipped
        pattern: Glob matched against the file's base name; None or '*' matches everything
    """

    def __init__(self, min_size: int = 1, pattern: Optional[str] = None):
        self.min_size = min_size
        self.pattern = None if pattern in (None, "*") else pattern
        self._regex = compile_pattern(self.pattern) if self.pattern else None

    def size_passes(self, size: int) -> bool:
        return size >= self.min_size

    def name_passes(self, name: str) -> bool:
        if self._regex is None:
            return True
        return self._regex.fullmatch(name) is not None
