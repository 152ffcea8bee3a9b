"""
Shared models.

Defines the record schemas (field order per record kind), verification
results and the per-dataset work item that the orchestrator threads through
the Extract -> Verify -> Save -> Roundtrip steps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .logging_utils import fmt_issues

# ------------------------- Record schemas -------------------------

Record = Dict[str, str]

CAREER_FIELDS: Tuple[str, ...] = (
    "no",
    "serverName",
    "note",
    "category",
    "count",
    "department",
    "position",
    "job",
    "term",
)

THANKS_FIELDS: Tuple[str, ...] = (
    "year",
    "type",
    "number",
    "user",
    "item",
    "date",
    "displayDate",
)


class RecordKind(str, Enum):
    CAREER = "career"
    THANKS = "thanks"

    @property
    def fields(self) -> Tuple[str, ...]:
        """Declared column order for this kind."""
        if self is RecordKind.CAREER:
            return CAREER_FIELDS
        return THANKS_FIELDS

    def new_record(self, **values: str) -> Record:
        """Build a record with every field present, in declared order."""
        unknown = set(values) - set(self.fields)
        if unknown:
            raise KeyError(f"unknown {self.value} fields: {', '.join(sorted(unknown))}")
        return {name: values.get(name, "") for name in self.fields}


# ------------------------- Models -------------------------

@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    errors: List[str]
    warnings: List[str]


@dataclass(frozen=True)
class DatasetSpec:
    """One dataset pipeline: which page to read and where its CSV goes."""
    name: str
    kind: RecordKind
    source: Path
    output: Path


class StepName(str, Enum):
    Extract = "Extract"
    Verify = "Verify"
    Save = "Save"
    Roundtrip = "Roundtrip"


@dataclass
class StepStatus:
    step: StepName
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and not self.errors


@dataclass
class DatasetWork:
    """
    Container for one dataset run.

    records holds the extracted snapshot; written tells whether the CSV
    output was (over)written during this run.
    """
    spec: DatasetSpec
    records: List[Record] = field(default_factory=list)
    written: bool = False
    step_statuses: Dict[StepName, StepStatus] = field(default_factory=dict)

    def ensure_step_status(self, step: StepName) -> StepStatus:
        status = self.step_statuses.get(step)
        if status is None:
            status = StepStatus(step=step)
            self.step_statuses[step] = status
        return status

    def add_warning(self, step: StepName, message: str) -> None:
        self.ensure_step_status(step).warnings.append(message)

    def add_error(self, step: StepName, message: str) -> None:
        self.ensure_step_status(step).errors.append(message)

    def has_no_errors(self, step: Optional[StepName] = None) -> bool:
        if step is None:
            return all(not status.errors for status in self.step_statuses.values())
        status = self.step_statuses.get(step)
        return not status.errors if status else True

    @property
    def errors(self) -> List[str]:
        return [e for status in self.step_statuses.values() for e in status.errors]

    @property
    def warnings(self) -> List[str]:
        return [w for status in self.step_statuses.values() for w in status.warnings]


def get_status_icons(work: DatasetWork) -> Dict[StepName, str]:
    """Generate status icons for pipeline steps based on the work statuses."""
    def icon_for(step_name: StepName) -> str:
        status = work.step_statuses.get(step_name)
        if status is None:
            return "➖"
        if status.errors:
            return "❌"
        if status.warnings:
            return "⚠️ "
        if step_name == StepName.Extract:
            return "🟢"
        return "✅"

    return {step_name: icon_for(step_name) for step_name in StepName}


def emit_work_status(work: DatasetWork) -> str:
    icons = get_status_icons(work)
    warnings = work.warnings
    # per-row degradation warnings are logged individually; only count them here
    warn_summary = [f"{len(warnings)} warning(s)"] if warnings else []
    return (
        f"{icons[StepName.Extract]}"
        f"{icons[StepName.Verify]}"
        f"{icons[StepName.Save]}"
        f"{icons[StepName.Roundtrip]} "
        f"{work.spec.name} | {len(work.records)} record(s) | "
        f"{fmt_issues(work.errors, warn_summary)}"
    )
