"""Resource interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import BinaryIO, Protocol


class ResourceLoader(Protocol):
    """Opens a named resource by logical path."""

    def open(self, path: str) -> BinaryIO:
        ...
