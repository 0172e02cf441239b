"""Domain services implementing the fixture expectations."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from fixture_checker.config import SETTINGS, FixtureExpectations

from .errors import FixtureAssertionError


class ExpectationChecker:
    """Asserts parsed fixture content against the expected header, row counts and text."""

    def __init__(self, expectations: FixtureExpectations | None = None) -> None:
        if expectations is None:
            expectations = SETTINGS.expectations
        self._expectations = expectations

    @property
    def expectations(self) -> FixtureExpectations:
        return self._expectations

    def pdf_text_matches(self, text: str) -> bool:
        return self._expectations.pdf_marker in text

    def check_csv_rows(self, rows: Sequence[Sequence[str]]) -> None:
        first_cell = rows[0][0] if rows and len(rows[0]) > 0 else None
        self._check_table(first_cell, len(rows), "CSV")

    def check_sheet(self, first_cell: object, rows: Sequence[Sequence[object]]) -> None:
        """`first_cell` is A1 itself; `rows` are the populated rows only."""
        self._check_table(first_cell, len(rows), "XLSX")

    def check_library(self, document: Any) -> None:
        expected = self._expectations
        if not isinstance(document, Mapping):
            raise FixtureAssertionError("JSON root is not an object", "object", type(document).__name__)

        library_name = document.get("libraryName")
        if library_name != expected.library_name:
            raise FixtureAssertionError("Library name does not match", expected.library_name, library_name)

        books = document.get("books")
        if not isinstance(books, list):
            raise FixtureAssertionError("Field 'books' must be an array", "array", type(books).__name__)
        if len(books) != expected.book_count:
            raise FixtureAssertionError("Unexpected number of books", expected.book_count, len(books))

        found = False
        for book in books:
            if not isinstance(book, Mapping) or book.get("title") != expected.book_title:
                continue
            found = True
            author = book.get("author")
            if author != expected.book_author:
                raise FixtureAssertionError(f"Author of '{expected.book_title}' does not match", expected.book_author, author)
        if not found:
            raise FixtureAssertionError(f"Book '{expected.book_title}' not found", True, False)

    def _check_table(self, first_cell: object, row_count: int, label: str) -> None:
        expected = self._expectations
        if first_cell != expected.header:
            raise FixtureAssertionError(f"First {label} header is not '{expected.header}'", expected.header, first_cell)
        data_rows = row_count - 1
        if data_rows != expected.data_rows:
            raise FixtureAssertionError(f"{label} does not contain {expected.data_rows} data rows", expected.data_rows, data_rows)
