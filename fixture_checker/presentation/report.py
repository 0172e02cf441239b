"""Report renderers for validation runs."""
from __future__ import annotations

import csv
import io
from typing import Sequence

from fixture_checker.domain.models import CheckResult
from fixture_checker.domain.results import RunReport


def results_to_rows(results: Sequence[CheckResult]) -> list[dict[str, str]]:
    return [
        {
            "entry": item.entry_name,
            "kind": item.kind,
            "status": item.status,
            "message": item.message,
        }
        for item in results
    ]


def render_csv(results: Sequence[CheckResult]) -> bytes:
    rows = results_to_rows(results)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_text(report: RunReport) -> str:
    summary = report.summary
    lines = [
        "Validation Summary",
        "==================",
        f"Archive: {report.resource_name}",
        f"Entries: {summary.total_entries}",
        f"Passed: {summary.passed}",
        f"Soft failures: {summary.soft_failures}",
        f"Skipped: {summary.skipped}",
    ]
    if report.results:
        lines.append("")
        for item in report.results:
            lines.append(f"- [{item.status}] {item.entry_name} ({item.kind}): {item.message}")
    return "\n".join(lines)
