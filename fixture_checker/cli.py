"""Command-line entrypoint for fixture archive validation."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fixture_checker.application.use_cases import run_validation
from fixture_checker.config import SETTINGS
from fixture_checker.domain.errors import FixtureAssertionError, FixtureParseError, ResourceNotFoundError
from fixture_checker.infrastructure.archive.fixture_builder import build_fixture_archive
from fixture_checker.infrastructure.resources.loaders import FileSystemResourceLoader
from fixture_checker.presentation.report import render_text


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate the contents of a fixture ZIP archive")
    parser.add_argument("--log-level", default=SETTINGS.log_level, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check every PDF, CSV, XLSX and JSON entry of the archive")
    validate.add_argument("--resources", type=Path, default=SETTINGS.resources_dir, help="Resource root directory (default: ./resources)")
    validate.add_argument("--archive", default=SETTINGS.archive_resource, help="Archive path under the resource root")

    build = subparsers.add_parser("build-fixture", help="Write a sample fixture archive")
    build.add_argument("--resources", type=Path, default=SETTINGS.resources_dir, help="Resource root directory (default: ./resources)")
    build.add_argument("--archive", default=SETTINGS.archive_resource, help="Archive path under the resource root")
    build.add_argument("--with-json", action="store_true", help="Include the library JSON document")
    return parser.parse_args(argv)


def _validate(args: argparse.Namespace) -> int:
    loader = FileSystemResourceLoader(args.resources)
    try:
        report = run_validation(args.archive, loader=loader)
    except (ResourceNotFoundError, FixtureParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except FixtureAssertionError as exc:
        print(f"Check failed for {exc.entry_name}: {exc}")
        return 1
    print(render_text(report))
    return 0


def _build(args: argparse.Namespace) -> int:
    target = build_fixture_archive(Path(args.resources) / args.archive, include_json=args.with_json)
    print(f"Fixture archive written to {target}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.command == "build-fixture":
        return _build(args)
    return _validate(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
