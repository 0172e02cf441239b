"""Resource loaders resolving logical paths to byte streams."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Mapping

from fixture_checker.domain.errors import ResourceNotFoundError
from fixture_checker.domain.repositories import ResourceLoader
from fixture_checker.infrastructure.parsing.utils import ensure_bytes

logger = logging.getLogger(__name__)


def _normalize_path(path: str) -> str:
    return path.replace("\\", "/").strip().lstrip("/")


class FileSystemResourceLoader(ResourceLoader):
    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: str) -> Path:
        candidate = (self._root / _normalize_path(path)).resolve()
        if not candidate.is_relative_to(self._root) or not candidate.is_file():
            raise ResourceNotFoundError(path)
        return candidate

    def open(self, path: str) -> BinaryIO:
        target = self.resolve(path)
        logger.debug(f"Opening resource {path} from {target}")
        return target.open("rb")


class InMemoryResourceLoader(ResourceLoader):
    def __init__(self, resources: Mapping[str, BytesIO | Path | bytes]) -> None:
        self._resources = {_normalize_path(name): ensure_bytes(source) for name, source in resources.items()}

    def open(self, path: str) -> BinaryIO:
        data = self._resources.get(_normalize_path(path))
        if data is None:
            raise ResourceNotFoundError(path)
        return BytesIO(data)
