"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import DATASET_FILES, UserConfig
from .logging_utils import VERBOSITY_NORMAL, VERBOSITY_QUIET, VERBOSITY_VERBOSE


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.

    Every flag is optional; with none, both datasets are extracted from
    the current directory into assets/data/.
    """
    parser = argparse.ArgumentParser(
        prog="portfolio-extract",
        description="Extract career and special-thanks data from the site's HTML pages into CSV.",
        epilog="""
Examples:
  Refresh both CSV files from the site root:
    portfolio-extract

  Refresh only the career table, failing the build on validation errors:
    portfolio-extract --only career --strict

  Use a different site checkout and print what the front end will show:
    portfolio-extract --root ../site --summary
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--root", default=".",
                        help="Site root containing career-table.html and special-thanks.html (default: .)")
    parser.add_argument("--data-dir",
                        help="Output directory for CSV files (default: <root>/assets/data)")
    parser.add_argument("--only", choices=sorted(DATASET_FILES),
                        help="Process a single dataset.")
    parser.add_argument("--strict", action="store_true",
                        help="Exit non-zero when a dataset fails validation or the roundtrip check.")
    parser.add_argument("--no-roundtrip", action="store_true",
                        help="Skip reloading written CSV files for comparison.")
    parser.add_argument("--summary", action="store_true",
                        help="Log a per-dataset summary of the written CSV files.")
    parser.add_argument("--list-extractors", action="store_true",
                        help="List registered extractors and exit.")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true",
                           help="Only log warnings and errors.")
    verbosity.add_argument("--verbose", action="store_true",
                           help="Log debug details.")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, all output is also written there.")

    args = parser.parse_args(argv)

    if args.quiet:
        level = VERBOSITY_QUIET
    elif args.verbose:
        level = VERBOSITY_VERBOSE
    else:
        level = VERBOSITY_NORMAL

    return UserConfig(
        root_dir=Path(args.root),
        data_dir=Path(args.data_dir) if args.data_dir else None,
        only=args.only,
        strict=args.strict,
        roundtrip=not args.no_roundtrip,
        summary=args.summary,
        list_extractors=args.list_extractors,
        debug=args.debug,
        verbosity=level,
        log_file=args.log_file,
    )
