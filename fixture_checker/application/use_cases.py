"""Application services orchestrating the archive validation run."""
from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Sequence

from fixture_checker.application.validators import validate_csv, validate_json, validate_pdf, validate_xlsx
from fixture_checker.config import SETTINGS
from fixture_checker.domain.models import SKIPPED, ArchiveEntry, CheckResult
from fixture_checker.domain.repositories import ResourceLoader
from fixture_checker.domain.results import RunReport, build_report
from fixture_checker.domain.services import ExpectationChecker
from fixture_checker.infrastructure.archive.zip_reader import iter_entries
from fixture_checker.infrastructure.resources.loaders import FileSystemResourceLoader

logger = logging.getLogger(__name__)

EntryValidator = Callable[[bytes, str, ExpectationChecker], CheckResult]

DISPATCH_TABLE: tuple[tuple[str, EntryValidator], ...] = (
    (".pdf", validate_pdf),
    (".csv", validate_csv),
    (".xlsx", validate_xlsx),
    (".json", validate_json),
)


@dataclass(slots=True)
class ArchiveValidationContext:
    loader: ResourceLoader
    checker: ExpectationChecker = field(default_factory=ExpectationChecker)
    dispatch: Sequence[tuple[str, EntryValidator]] = DISPATCH_TABLE


class ValidateArchiveUseCase:
    def __init__(self, context: ArchiveValidationContext) -> None:
        self._context = context

    def classify(self, name: str) -> EntryValidator | None:
        for suffix, validator in self._context.dispatch:
            if name.endswith(suffix):
                return validator
        return None

    def validate_entry(self, entry: ArchiveEntry) -> CheckResult:
        validator = self.classify(entry.name)
        if validator is None:
            logger.info(f"Unknown file type: {entry.name}")
            return CheckResult(entry.name, "unknown", SKIPPED, "Unknown file type")
        return validator(entry.content, entry.name, self._context.checker)

    def execute(self, resource_name: str | None = None) -> RunReport:
        resource_name = resource_name or SETTINGS.archive_resource
        results: list[CheckResult] = []
        with self._context.loader.open(resource_name) as stream:
            with closing(iter_entries(stream)) as entries:
                for entry in entries:
                    logger.info(f"Archive entry: {entry.name}")
                    results.append(self.validate_entry(entry))
        report = build_report(resource_name, results, generated_at=datetime.now(timezone.utc))
        logger.info(
            f"Validated {report.summary.total_entries} entries from {resource_name}: "
            f"{report.summary.passed} passed, {report.summary.soft_failures} soft failures, "
            f"{report.summary.skipped} skipped"
        )
        return report


def run_validation(resource_name: str | None = None, loader: ResourceLoader | None = None) -> RunReport:
    """Validate every entry of the named archive resource; hard mismatches raise."""
    if loader is None:
        loader = FileSystemResourceLoader(SETTINGS.resources_dir)
    context = ArchiveValidationContext(loader=loader)
    return ValidateArchiveUseCase(context).execute(resource_name)
