#!/usr/bin/env python3
"""
dupes CLI — Command line interface for duplicate file detection.
Reports groups of files with identical content under one or more directories.
Read-only: files are never moved, linked or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from typing import List, NoReturn, Optional, Sequence

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupes.aliases import ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT, PATTERN_HELP_TEXT
from dupes.commands import DetectionCommand
from dupes.core.errors import ConfigError
from dupes.core.models import DEFAULT_ALGORITHM, DEFAULT_PATTERN, DetectionParams, DuplicateCluster


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Paths are printed as the filesystem gave them, undecodable bytes included
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dupes",
            usage="%(prog)s [option...] directory...",
            description="dupes — find duplicate files by content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "roots",
            nargs="*",
            metavar="directory",
            help="Directories to scan for duplicates"
        )

        # Detection options
        parser.add_argument(
            "-p", "--paranoid",
            action="store_true",
            help="Paranoid byte-by-byte file comparison on digest matches"
        )
        parser.add_argument(
            "-s", "--min-size",
            default="1",
            type=str,
            metavar="SIZE",
            help="Minimum size of files to consider (e.g., 100, 500K, 1MB). Default: 1"
        )
        parser.add_argument(
            "-g", "--glob",
            default=DEFAULT_PATTERN,
            type=str,
            metavar="PATTERN",
            dest="pattern",
            help=PATTERN_HELP_TEXT
        )
        parser.add_argument(
            "-a", "--algorithm",
            choices=ALGORITHM_CHOICES,
            default=DEFAULT_ALGORITHM,
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress warnings about unreadable files and directories"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and debug logging on stderr"
        )
        return parser

    @classmethod
    def parse_args(cls, args: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return cls.build_parser().parse_args(args)

    def create_params(self, args: argparse.Namespace) -> DetectionParams:
        """Create DetectionParams from CLI arguments. Exits on invalid configuration."""
        try:
            return DetectionParams.from_human_readable(
                roots=args.roots,
                min_size_str=args.min_size,
                pattern=args.pattern,
                paranoid=args.paranoid,
                algorithm=args.algorithm,
            )
        except ConfigError as e:
            self.error_exit(str(e))

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files examined...")
        sys.stderr.flush()

    @staticmethod
    def report_collision(path: str, algorithm: str, original: str) -> None:
        print(f"cool: {path} {algorithm}-collides with {original}!")

    def run_detection(self, params: DetectionParams) -> None:
        """Execute detection and print clusters followed by the summary line."""
        command = DetectionCommand()
        clusters, stats = command.execute(
            params,
            progress_callback=self.progress_callback if self.verbose else None,
            on_collision=self.report_collision,
            on_warning=self.warning
        )

        if self.verbose:
            sys.stderr.write("\n")

        self.output_results(clusters)

        if command.has_indexed_files:
            print(stats.summary_line())

    @staticmethod
    def output_results(clusters: List[DuplicateCluster]) -> None:
        """Original path, its duplicates, then a blank line, for each cluster."""
        for cluster in clusters:
            for path in cluster.paths:
                print(path)
            print()

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[Sequence[str]] = None) -> None:
        """Main entry point."""
        parser = self.build_parser()
        args = parser.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("dupes").setLevel(logging.DEBUG)

        if not args.roots:
            parser.print_usage(sys.stderr)
            sys.exit(1)

        params = self.create_params(args)
        self.run_detection(params)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
