"""
CLI Phase 2: Prepare execution environment.

Validates the site root and creates the output directory.
No actual execution - just setup.
"""

from __future__ import annotations

from .cli_config import UserConfig
from .logging_utils import LOG


def prepare_execution_environment(config: UserConfig) -> UserConfig:
    """
    Phase 2: Validate inputs and prepare execution environment.

    - Validates the site root is a directory
    - Creates the CSV output directory
    - No execution yet; missing source pages are reported by the pipeline

    Returns the same config (for chaining).
    """
    if not config.root_dir.is_dir():
        LOG.error("Site root is not a directory: %s", config.root_dir)
        raise ValueError(f"Site root is not a directory: {config.root_dir}")

    # raises FileExistsError when a non-directory is in the way
    config.output_dir.mkdir(parents=True, exist_ok=True)

    return config
