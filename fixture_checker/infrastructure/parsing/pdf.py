"""PDF text extraction backed by pypdf."""
from __future__ import annotations

from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from fixture_checker.domain.errors import FixtureParseError


def extract_text(content: bytes) -> str:
    """Return the text of every page, joined by newlines."""
    try:
        with BytesIO(content) as stream:
            reader = PdfReader(stream)
            return "\n".join(page.extract_text() or "" for page in reader.pages)
    except PyPdfError as exc:
        raise FixtureParseError("PDF", str(exc)) from exc
