from dupes.core.hasher import ALGORITHMS

ALGORITHM_CHOICES = sorted(ALGORITHMS.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used after the size check:\n"
    "  sha256  : SHA-256 (default)\n"
    "  sha1, sha512, blake2b, md5 : other hashlib digests\n"
    "  xxh128  : xxHash 128-bit, much faster but not cryptographic (use with -p)\n"
    "Example    : %(prog)s -a xxh128 -p ~/Photos\n"
)

PATTERN_HELP_TEXT = (
    "Glob matched against file names (not paths). Default: *\n"
    "  *  any run of characters    ?  one character\n"
    "  [abc] [a-z] [^0-9]  classes  \\c  literal c\n"
    "Example    : %(prog)s -g '*.jpg' ~/Photos\n"
)

EPILOG_TEXT = """
Output:
  Each group lists the first file seen, then its duplicates, then a blank line.
  A summary line follows: files examined, duplicates found, space wasted.

Examples:
  Find duplicates in two folders
  %(prog)s ~/Downloads ~/Documents

  Only files of at least 1MB, verified byte by byte
  %(prog)s -s 1M -p ~/Downloads

  Only JPEG files
  %(prog)s -g '*.jpg' ~/Photos
"""
