#!/usr/bin/env python3
"""
Command-line interface for portfoliodata.

Three-phase architecture:
1. Gather user requirements (parse args) -> UserConfig
2. Prepare execution environment (validate root, create data dir)
3. Execute pipeline (extract, validate and save each dataset)
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import List, Optional

from .cli_execute import execute_pipeline
from .cli_gather import gather_user_requirements
from .cli_prepare import prepare_execution_environment
from .extractors import list_extractors
from .logging_utils import LOG, setup_logging


def _print_extractors() -> None:
    for extractor in list_extractors():
        print(f"{extractor['name']:<10} {extractor['kind']:<8} {extractor['description']}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with three-phase architecture.

    Phase 1: Gather user requirements (parse args)
    Phase 2: Prepare execution environment (validate, setup)
    Phase 3: Execute pipeline (run datasets)
    """
    config = gather_user_requirements(argv)

    if config.list_extractors:
        _print_extractors()
        return 0

    # Setup logging (side effect necessary for all phases)
    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)

    try:
        LOG.info("Starting data extraction in %s", config.root_dir)
        config = prepare_execution_environment(config)
        return execute_pipeline(config)
    except Exception as e:
        LOG.error("Extraction aborted: %s", e)
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
