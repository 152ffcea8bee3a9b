"""
CLI configuration data structures.

Defines UserConfig used across the three-phase CLI architecture and the
fixed page -> CSV layout of the site.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .logging_utils import VERBOSITY_NORMAL
from .shared import DatasetSpec, RecordKind

DEFAULT_DATA_DIR = Path("assets") / "data"

# dataset name -> (record kind, source page, output CSV)
DATASET_FILES: Dict[str, Tuple[RecordKind, str, str]] = {
    "career": (RecordKind.CAREER, "career-table.html", "career_data.csv"),
    "thanks": (RecordKind.THANKS, "special-thanks.html", "thanks_data.csv"),
}


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    # Site layout
    root_dir: Path = Path(".")
    data_dir: Optional[Path] = None  # defaults to root_dir/assets/data
    only: Optional[str] = None  # run a single dataset

    # Execution settings
    strict: bool = False  # validation/roundtrip failure -> exit code 1
    roundtrip: bool = True
    summary: bool = False
    list_extractors: bool = False

    # Logging
    debug: bool = False
    verbosity: int = VERBOSITY_NORMAL
    log_file: Optional[str] = None

    @property
    def output_dir(self) -> Path:
        return self.data_dir if self.data_dir is not None else self.root_dir / DEFAULT_DATA_DIR

    @property
    def datasets(self) -> List[DatasetSpec]:
        """Datasets to run, in processing order."""
        specs = []
        for name, (kind, source, output) in DATASET_FILES.items():
            if self.only and name != self.only:
                continue
            specs.append(
                DatasetSpec(
                    name=name,
                    kind=kind,
                    source=self.root_dir / source,
                    output=self.output_dir / output,
                )
            )
        return specs
