"""Format-specific validators: parse an entry, then check it."""
from __future__ import annotations

import logging

from fixture_checker.domain.errors import FixtureAssertionError, FixtureParseError
from fixture_checker.domain.models import PASSED, SOFT_FAILURE, CheckResult
from fixture_checker.domain.services import ExpectationChecker
from fixture_checker.infrastructure.parsing.documents import read_json
from fixture_checker.infrastructure.parsing.pdf import extract_text
from fixture_checker.infrastructure.parsing.tabular import read_csv_rows, read_sheet

logger = logging.getLogger(__name__)


def _checker(checker: ExpectationChecker | None) -> ExpectationChecker:
    return checker if checker is not None else ExpectationChecker()


def _named(exc: FixtureAssertionError | FixtureParseError, entry_name: str) -> Exception:
    if isinstance(exc, FixtureAssertionError):
        return exc.for_entry(entry_name)
    return FixtureParseError(exc.kind, exc.detail, entry_name=entry_name)


def validate_pdf(content: bytes, entry_name: str = "<pdf>", checker: ExpectationChecker | None = None) -> CheckResult:
    """Soft check: a missing marker is reported, never raised."""
    checker = _checker(checker)
    marker = checker.expectations.pdf_marker
    try:
        text = extract_text(content)
    except FixtureParseError as exc:
        raise _named(exc, entry_name) from exc
    logger.info(f"Checking PDF {entry_name}")
    if checker.pdf_text_matches(text):
        logger.info(f"PDF {entry_name} check passed")
        return CheckResult(entry_name, "pdf", PASSED, f"Text contains '{marker}'")
    logger.warning(f"PDF {entry_name} does not contain expected text '{marker}'")
    return CheckResult(entry_name, "pdf", SOFT_FAILURE, f"Text does not contain '{marker}'")


def validate_csv(content: bytes, entry_name: str = "<csv>", checker: ExpectationChecker | None = None) -> CheckResult:
    checker = _checker(checker)
    try:
        rows = read_csv_rows(content)
        logger.info(f"Checking CSV {entry_name}")
        checker.check_csv_rows(rows)
    except (FixtureAssertionError, FixtureParseError) as exc:
        raise _named(exc, entry_name) from exc
    return CheckResult(entry_name, "csv", PASSED, f"{len(rows) - 1} data rows under header")


def validate_xlsx(content: bytes, entry_name: str = "<xlsx>", checker: ExpectationChecker | None = None) -> CheckResult:
    checker = _checker(checker)
    try:
        sheet = read_sheet(content)
        logger.info(f"Checking XLSX {entry_name}")
        checker.check_sheet(sheet.first_cell, sheet.rows)
    except (FixtureAssertionError, FixtureParseError) as exc:
        raise _named(exc, entry_name) from exc
    return CheckResult(entry_name, "xlsx", PASSED, f"{len(sheet.rows) - 1} data rows under header")


def validate_json(content: bytes, entry_name: str = "<json>", checker: ExpectationChecker | None = None) -> CheckResult:
    checker = _checker(checker)
    try:
        document = read_json(content)
        logger.info(f"Checking JSON {entry_name}")
        checker.check_library(document)
    except (FixtureAssertionError, FixtureParseError) as exc:
        raise _named(exc, entry_name) from exc
    return CheckResult(entry_name, "json", PASSED, "Library document matches")
