"""Error taxonomy for fixture validation."""
from __future__ import annotations


class FixtureAssertionError(AssertionError):
    """A hard check failed; the run stops here."""

    def __init__(self, reason: str, expected: object, actual: object, entry_name: str | None = None) -> None:
        self.reason = reason
        self.expected = expected
        self.actual = actual
        self.entry_name = entry_name
        super().__init__(f"{reason}: expected {expected!r}, actual {actual!r}")

    def for_entry(self, entry_name: str) -> "FixtureAssertionError":
        return FixtureAssertionError(self.reason, self.expected, self.actual, entry_name=entry_name)


class ResourceNotFoundError(FileNotFoundError):
    """The named resource does not exist under the loader's root."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Resource not found: {path}")


class FixtureParseError(ValueError):
    """An entry could not be parsed by its format library."""

    def __init__(self, kind: str, detail: str, entry_name: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.entry_name = entry_name
        target = entry_name or f"<{kind}>"
        super().__init__(f"Malformed {kind} entry {target}: {detail}")
