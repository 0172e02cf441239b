"""Domain-level results for a validation run."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from .models import PASSED, SKIPPED, SOFT_FAILURE, CheckResult


@dataclass(frozen=True)
class RunSummary:
    total_entries: int
    passed: int
    soft_failures: int
    skipped: int
    generated_at: datetime


@dataclass(frozen=True)
class RunReport:
    resource_name: str
    summary: RunSummary
    results: Sequence[CheckResult] = field(default_factory=tuple)

    def has_soft_failures(self) -> bool:
        return self.summary.soft_failures > 0


def build_report(resource_name: str, results: Sequence[CheckResult], generated_at: datetime) -> RunReport:
    summary = RunSummary(
        total_entries=len(results),
        passed=len([r for r in results if r.status == PASSED]),
        soft_failures=len([r for r in results if r.status == SOFT_FAILURE]),
        skipped=len([r for r in results if r.status == SKIPPED]),
        generated_at=generated_at,
    )
    return RunReport(resource_name=resource_name, summary=summary, results=tuple(results))
