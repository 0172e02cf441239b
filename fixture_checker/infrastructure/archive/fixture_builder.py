"""Builds the sample fixture archive the validator expects."""
from __future__ import annotations

import io
import json
import logging
import zipfile
from pathlib import Path
from typing import Mapping, Sequence

import pandas as pd
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from fixture_checker.config import SETTINGS, FixtureExpectations

logger = logging.getLogger(__name__)

PDF_NAME = "random_test_data.pdf"
CSV_NAME = "random_test_data.csv"
XLSX_NAME = "random_test_data.xlsx"
JSON_NAME = "library.json"


def sample_frame(rows: int, header: str = "id") -> pd.DataFrame:
    return pd.DataFrame(
        {
            header: [str(i) for i in range(1, rows + 1)],
            "Column_1": [f"value_{i}" for i in range(1, rows + 1)],
            "Column_2": [i * 10 for i in range(1, rows + 1)],
        }
    )


def render_csv(frame: pd.DataFrame) -> bytes:
    return frame.to_csv(index=False).encode("utf-8")


def render_xlsx(frame: pd.DataFrame) -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, index=False, sheet_name="Sheet1")
    return buffer.getvalue()


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _helvetica() -> DictionaryObject:
    return DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
            NameObject("/Encoding"): NameObject("/WinAnsiEncoding"),
        }
    )


def render_pdf(lines: Sequence[str]) -> bytes:
    """Single-page PDF with one Helvetica text line per item; latin-1 text only."""
    operations = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for line in lines:
        operations.append(f"({_escape_pdf_text(line)}) Tj T*")
    operations.append("ET")

    writer = PdfWriter()
    page = writer.add_blank_page(width=612, height=792)
    page[NameObject("/Resources")] = DictionaryObject(
        {NameObject("/Font"): DictionaryObject({NameObject("/F1"): _helvetica()})}
    )
    contents = DecodedStreamObject()
    contents.set_data("\n".join(operations).encode("latin-1"))
    page.replace_contents(contents)

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def library_document(expectations: FixtureExpectations | None = None) -> dict[str, object]:
    expected = expectations or SETTINGS.expectations
    return {
        "libraryName": expected.library_name,
        "books": [
            {"title": expected.book_title, "author": expected.book_author},
            {"title": "Война и мир", "author": "Лев Толстой"},
            {"title": "Преступление и наказание", "author": "Фёдор Достоевский"},
        ],
    }


def render_json(document: object) -> bytes:
    return json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")


def build_archive_bytes(files: Mapping[str, bytes]) -> bytes:
    """Zip the given name -> content mapping, keeping insertion order."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def fixture_files(
    expectations: FixtureExpectations | None = None,
    include_json: bool = False,
) -> dict[str, bytes]:
    expected = expectations or SETTINGS.expectations
    frame = sample_frame(expected.data_rows, header=expected.header)
    files = {
        PDF_NAME: render_pdf(["Random test data", f"{expected.pdf_marker} {expected.header}"]),
        CSV_NAME: render_csv(frame),
        XLSX_NAME: render_xlsx(frame),
    }
    if include_json:
        files[JSON_NAME] = render_json(library_document(expected))
    return files


def build_fixture_bytes(expectations: FixtureExpectations | None = None, include_json: bool = False) -> bytes:
    return build_archive_bytes(fixture_files(expectations, include_json=include_json))


def build_fixture_archive(
    target: Path,
    expectations: FixtureExpectations | None = None,
    include_json: bool = False,
) -> Path:
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(build_fixture_bytes(expectations, include_json=include_json))
    logger.info(f"Wrote fixture archive {target}")
    return target
