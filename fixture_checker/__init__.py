"""Archive fixture validation toolkit."""
from fixture_checker.application.use_cases import (
    ArchiveValidationContext,
    ValidateArchiveUseCase,
    run_validation,
)
from fixture_checker.domain.errors import FixtureAssertionError, FixtureParseError, ResourceNotFoundError
from fixture_checker.domain.services import ExpectationChecker
from fixture_checker.infrastructure.resources.loaders import (
    FileSystemResourceLoader,
    InMemoryResourceLoader,
)

__all__ = [
    "ArchiveValidationContext",
    "ValidateArchiveUseCase",
    "run_validation",
    "ExpectationChecker",
    "FixtureAssertionError",
    "FixtureParseError",
    "ResourceNotFoundError",
    "FileSystemResourceLoader",
    "InMemoryResourceLoader",
]
