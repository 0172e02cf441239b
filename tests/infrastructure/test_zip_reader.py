import io
import zipfile

import pytest

from fixture_checker.domain.errors import FixtureParseError
from fixture_checker.infrastructure.archive.fixture_builder import build_archive_bytes
from fixture_checker.infrastructure.archive.zip_reader import iter_entries


def test_entries_follow_archive_order():
    data = build_archive_bytes({"b.csv": b"id\n", "a.pdf": b"%PDF", "c.txt": b"notes"})

    entries = list(iter_entries(io.BytesIO(data)))

    assert [entry.name for entry in entries] == ["b.csv", "a.pdf", "c.txt"]
    assert entries[2].content == b"notes"


def test_directory_entries_are_skipped():
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("files/", b"")
        archive.writestr("files/data.csv", b"id\n")

    entries = list(iter_entries(io.BytesIO(buffer.getvalue())))

    assert [entry.name for entry in entries] == ["files/data.csv"]


def test_bad_archive_raises_parse_error():
    with pytest.raises(FixtureParseError, match="Malformed ZIP"):
        list(iter_entries(io.BytesIO(b"not a zip file")))
