"""Central configuration for the fixture checker package."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Relative roots are resolved against the working directory when a loader is built.
RESOURCES_DIR = Path("resources")

DEFAULT_ARCHIVE = "files/random_test_data.zip"


@dataclass(slots=True, frozen=True)
class FixtureExpectations:
    """Values the fixture files are expected to carry."""

    header: str = "id"
    data_rows: int = 100
    pdf_marker: str = "Column_1"
    library_name: str = "Центральная городская библиотека"
    book_count: int = 3
    book_title: str = "Мастер и Маргарита"
    book_author: str = "Михаил Булгаков"


@dataclass(slots=True, frozen=True)
class Settings:
    resources_dir: Path
    archive_resource: str
    expectations: FixtureExpectations = field(default_factory=FixtureExpectations)
    log_level: str = "INFO"


SETTINGS = Settings(
    resources_dir=RESOURCES_DIR,
    archive_resource=DEFAULT_ARCHIVE,
)
