"""Domain models for archive fixture validation."""
from __future__ import annotations

from dataclasses import dataclass

PASSED = "passed"
SOFT_FAILURE = "soft_failure"
SKIPPED = "skipped"


@dataclass(frozen=True)
class ArchiveEntry:
    """One named byte blob read from the archive."""

    name: str
    content: bytes


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a check that did not abort the run."""

    entry_name: str
    kind: str
    status: str
    message: str

    @property
    def passed(self) -> bool:
        return self.status == PASSED
