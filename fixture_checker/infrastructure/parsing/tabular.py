"""CSV and XLSX readers producing plain row lists."""
from __future__ import annotations

import csv
from dataclasses import dataclass
from io import BytesIO, StringIO
from zipfile import BadZipFile

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from fixture_checker.domain.errors import FixtureParseError
from fixture_checker.infrastructure.parsing.utils import is_blank

WORKBOOK_ERRORS = (BadZipFile, InvalidFileException, KeyError, ValueError, OSError)


@dataclass(frozen=True)
class SheetContent:
    """First sheet of a workbook: the A1 value and every populated row."""

    first_cell: object
    rows: list[list[object]]


def read_csv_rows(content: bytes, encoding: str = "utf-8-sig") -> list[list[str]]:
    """Parse CSV bytes into rows; blank lines come back as empty rows."""
    try:
        text = content.decode(encoding)
    except UnicodeDecodeError as exc:
        raise FixtureParseError("CSV", str(exc)) from exc
    try:
        with StringIO(text, newline="") as buffer:
            return [list(row) for row in csv.reader(buffer)]
    except csv.Error as exc:
        raise FixtureParseError("CSV", str(exc)) from exc


def read_first_sheet(content: bytes) -> pd.DataFrame:
    try:
        return pd.read_excel(
            BytesIO(content),
            sheet_name=0,
            engine="openpyxl",
            header=None,
            dtype=str,
        )
    except WORKBOOK_ERRORS as exc:
        raise FixtureParseError("XLSX", str(exc)) from exc


def read_first_cell(content: bytes) -> object:
    """Value of cell A1 on the first sheet, None when blank."""
    try:
        workbook = load_workbook(BytesIO(content), data_only=True)
    except WORKBOOK_ERRORS as exc:
        raise FixtureParseError("XLSX", str(exc)) from exc
    try:
        value = workbook.worksheets[0].cell(row=1, column=1).value
    finally:
        workbook.close()
    return None if is_blank(value) else value


def read_sheet_rows(content: bytes) -> list[list[object]]:
    """Rows of the first sheet that hold at least one populated cell."""
    frame = read_first_sheet(content)
    rows: list[list[object]] = []
    for _, row in frame.iterrows():
        values = [None if is_blank(value) else value for value in row.tolist()]
        if all(value is None for value in values):
            continue
        rows.append(values)
    return rows


def read_sheet(content: bytes) -> SheetContent:
    return SheetContent(first_cell=read_first_cell(content), rows=read_sheet_rows(content))
