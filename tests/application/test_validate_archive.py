import io
import logging

import pytest
from openpyxl import Workbook

from fixture_checker.application.use_cases import (
    ArchiveValidationContext,
    ValidateArchiveUseCase,
    run_validation,
)
from fixture_checker.application.validators import validate_csv, validate_json, validate_pdf, validate_xlsx
from fixture_checker.domain.errors import FixtureAssertionError, FixtureParseError, ResourceNotFoundError
from fixture_checker.domain.models import PASSED, SKIPPED, SOFT_FAILURE
from fixture_checker.infrastructure.archive.fixture_builder import (
    build_archive_bytes,
    library_document,
    render_csv,
    render_json,
    render_pdf,
    render_xlsx,
    sample_frame,
)
from fixture_checker.infrastructure.resources.loaders import InMemoryResourceLoader

ARCHIVE = "files/random_test_data.zip"


def csv_bytes(data_rows: int) -> bytes:
    lines = ["id,name"] + [f"{i},name_{i}" for i in range(1, data_rows + 1)]
    return ("\n".join(lines) + "\n").encode("utf-8")


def run_archive(files: dict[str, bytes]):
    loader = InMemoryResourceLoader({ARCHIVE: build_archive_bytes(files)})
    return run_validation(ARCHIVE, loader=loader)


def test_csv_with_hundred_rows_passes():
    report = run_archive({"data.csv": csv_bytes(100)})

    assert report.summary.passed == 1
    assert report.results[0].status == PASSED


def test_csv_with_ninety_nine_rows_fails():
    with pytest.raises(FixtureAssertionError, match="expected 100, actual 99") as excinfo:
        run_archive({"data.csv": csv_bytes(99)})

    assert excinfo.value.entry_name == "data.csv"
    assert excinfo.value.expected == 100
    assert excinfo.value.actual == 99


def test_pdf_without_marker_is_soft(caplog):
    with caplog.at_level(logging.INFO):
        report = run_archive({"report.pdf": render_pdf(["Quarterly report"])})

    assert report.results[0].status == SOFT_FAILURE
    assert report.has_soft_failures()
    assert any(
        record.levelno == logging.WARNING and "does not contain expected text 'Column_1'" in record.getMessage()
        for record in caplog.records
    )


def test_pdf_with_marker_passes(caplog):
    with caplog.at_level(logging.INFO):
        report = run_archive({"report.pdf": render_pdf(["Column_1 Column_2"])})

    assert report.results[0].status == PASSED
    assert "PDF report.pdf check passed" in caplog.text


def test_unknown_entry_is_skipped(caplog):
    with caplog.at_level(logging.INFO):
        report = run_archive({"notes.txt": b"just notes", "data.csv": csv_bytes(100)})

    assert [result.status for result in report.results] == [SKIPPED, PASSED]
    assert "Unknown file type: notes.txt" in caplog.text


def test_every_entry_name_is_logged(caplog):
    with caplog.at_level(logging.INFO):
        run_archive({"notes.txt": b"", "data.csv": csv_bytes(100)})

    assert "Archive entry: notes.txt" in caplog.text
    assert "Archive entry: data.csv" in caplog.text


def test_mixed_archive_passes():
    frame = sample_frame(100)
    report = run_archive(
        {
            "report.pdf": render_pdf(["Column_1"]),
            "data.csv": render_csv(frame),
            "data.xlsx": render_xlsx(frame),
            "library.json": render_json(library_document()),
            "readme.md": b"# fixtures",
        }
    )

    summary = report.summary
    assert summary.total_entries == 5
    assert summary.passed == 4
    assert summary.skipped == 1
    assert summary.soft_failures == 0


def test_first_hard_failure_stops_the_run(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(FixtureAssertionError):
            run_archive({"bad.csv": csv_bytes(10), "later.txt": b"never read"})

    assert "Archive entry: later.txt" not in caplog.text


def test_xlsx_row_count_mismatch():
    with pytest.raises(FixtureAssertionError, match="XLSX does not contain 100 data rows") as excinfo:
        run_archive({"data.xlsx": render_xlsx(sample_frame(50))})

    assert excinfo.value.actual == 50


def test_suffix_matching_is_case_sensitive():
    report = run_archive({"DATA.CSV": csv_bytes(3)})

    assert report.results[0].status == SKIPPED


def test_malformed_entry_aborts_with_parse_error():
    with pytest.raises(FixtureParseError) as excinfo:
        run_archive({"broken.xlsx": b"not a workbook"})

    assert excinfo.value.entry_name == "broken.xlsx"


def test_missing_archive_resource():
    with pytest.raises(ResourceNotFoundError):
        run_validation("files/absent.zip", loader=InMemoryResourceLoader({}))


def test_custom_dispatch_table():
    loader = InMemoryResourceLoader({ARCHIVE: build_archive_bytes({"library.json": b"[]"})})
    context = ArchiveValidationContext(loader=loader, dispatch=((".csv", validate_csv),))

    report = ValidateArchiveUseCase(context).execute(ARCHIVE)

    assert report.results[0].status == SKIPPED


def test_validators_can_run_standalone():
    frame = sample_frame(100)

    assert validate_csv(render_csv(frame)).passed
    assert validate_xlsx(render_xlsx(frame)).passed
    assert validate_json(render_json(library_document())).passed
    assert validate_pdf(render_pdf(["nothing here"])).status == SOFT_FAILURE


class RecordingLoader:
    def __init__(self, loader: InMemoryResourceLoader) -> None:
        self._loader = loader
        self.streams = []

    def open(self, path: str):
        stream = self._loader.open(path)
        self.streams.append(stream)
        return stream


def test_archive_stream_closed_after_hard_failure():
    inner = InMemoryResourceLoader(
        {ARCHIVE: build_archive_bytes({"bad.csv": csv_bytes(5), "data.xlsx": render_xlsx(sample_frame(100))})}
    )
    loader = RecordingLoader(inner)

    with pytest.raises(FixtureAssertionError):
        ValidateArchiveUseCase(ArchiveValidationContext(loader=loader)).execute(ARCHIVE)

    assert len(loader.streams) == 1
    assert loader.streams[0].closed


def test_archive_stream_closed_after_success():
    loader = RecordingLoader(InMemoryResourceLoader({ARCHIVE: build_archive_bytes({"data.csv": csv_bytes(100)})}))

    ValidateArchiveUseCase(ArchiveValidationContext(loader=loader)).execute(ARCHIVE)

    assert loader.streams[0].closed


def test_xlsx_wrong_header_fails():
    with pytest.raises(FixtureAssertionError, match="First XLSX header is not 'id'") as excinfo:
        run_archive({"data.xlsx": render_xlsx(sample_frame(100, header="uuid"))})

    assert excinfo.value.entry_name == "data.xlsx"
    assert excinfo.value.expected == "id"
    assert excinfo.value.actual == "uuid"


def test_xlsx_header_must_be_in_first_row():
    workbook = Workbook()
    sheet = workbook.active
    sheet.cell(row=2, column=1, value="id")
    sheet.cell(row=2, column=2, value="name")
    for i in range(1, 101):
        sheet.cell(row=i + 2, column=1, value=str(i))
        sheet.cell(row=i + 2, column=2, value=f"name_{i}")
    buffer = io.BytesIO()
    workbook.save(buffer)

    with pytest.raises(FixtureAssertionError) as excinfo:
        validate_xlsx(buffer.getvalue(), "shifted.xlsx")

    assert excinfo.value.expected == "id"
    assert excinfo.value.actual is None
