from pathlib import Path

import pytest

from fixture_checker.config import FixtureExpectations
from fixture_checker.domain.services import ExpectationChecker
from fixture_checker.infrastructure.archive.fixture_builder import build_fixture_archive


@pytest.fixture
def checker() -> ExpectationChecker:
    return ExpectationChecker(FixtureExpectations())


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    root = tmp_path / "resources"
    build_fixture_archive(root / "files" / "random_test_data.zip")
    return root
