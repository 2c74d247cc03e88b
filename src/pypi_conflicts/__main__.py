"""Print the conflicts a pyproject.toml declares, resolved to their lock form."""

import argparse
import json
import logging
import sys
import tomllib
from pathlib import Path

from pypi_conflicts.config import settings
from pypi_conflicts.models.names import PackageName
from pypi_conflicts.services.codec import dump_conflicts_json, schema_conflicts_json_schema
from pypi_conflicts.services.pyproject import load_pyproject_conflicts

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pypi-conflicts",
        description="Validate the conflicting extras and groups declared in a pyproject.toml.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help=f"pyproject.toml to read (default: {settings.pyproject_path})",
    )
    parser.add_argument(
        "--package",
        type=PackageName,
        default=None,
        help="package for entries that name none (default: project.name)",
    )
    parser.add_argument(
        "--schema",
        action="store_true",
        help="print the JSON Schema of the declaration format and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging()

    if args.schema:
        print(json.dumps(schema_conflicts_json_schema(), indent=settings.json_indent))
        return 0

    path = args.path or settings.pyproject_path
    try:
        conflicts = load_pyproject_conflicts(path, package=args.package)
    except (OSError, tomllib.TOMLDecodeError, ValueError) as exc:
        logger.debug("Failed to load conflicts from %s", path, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        for note in getattr(exc, "__notes__", ()):
            print(f"  {note}", file=sys.stderr)
        return 1

    print(dump_conflicts_json(conflicts, indent=settings.json_indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
