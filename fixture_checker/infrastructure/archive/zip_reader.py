"""Sequential reader for ZIP archive entries."""
from __future__ import annotations

import logging
import zipfile
from typing import BinaryIO, Iterator

from fixture_checker.domain.errors import FixtureParseError
from fixture_checker.domain.models import ArchiveEntry

logger = logging.getLogger(__name__)


def iter_entries(stream: BinaryIO) -> Iterator[ArchiveEntry]:
    """Yield file entries in the order the archive lists them."""
    try:
        archive = zipfile.ZipFile(stream)
    except zipfile.BadZipFile as exc:
        raise FixtureParseError("ZIP", str(exc)) from exc

    with archive:
        for info in archive.infolist():
            if info.is_dir():
                logger.debug(f"Skipping directory entry {info.filename}")
                continue
            try:
                with archive.open(info) as handle:
                    content = handle.read()
            except (zipfile.BadZipFile, OSError) as exc:
                raise FixtureParseError("ZIP", str(exc), entry_name=info.filename) from exc
            yield ArchiveEntry(name=info.filename, content=content)
