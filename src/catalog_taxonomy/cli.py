"""Command-line interface for Catalog Taxonomy.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from catalog_taxonomy import __version__
from catalog_taxonomy.classification import (
    area_name_from_value,
    classify,
    extract_area,
    extract_display_name,
    filter_applications_by_area,
)
from catalog_taxonomy.config import Settings, get_settings
from catalog_taxonomy.exceptions import (
    CatalogTaxonomyError,
    ConfigurationError,
    MalformedInputError,
)
from catalog_taxonomy.parsing import tokenize_payload
from catalog_taxonomy.report import generate_mapping_file

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-taxonomy", description="Catalog Taxonomy")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser(
        "report",
        help="Generate the area/application mapping report from a raw payload",
    )
    report_parser.add_argument(
        "payload",
        nargs="?",
        type=Path,
        default=None,
        help="File holding the raw custom field payload (default: read stdin)",
    )
    report_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Report path (default: settings report_path in the current directory)",
    )
    report_parser.add_argument(
        "--marker",
        default=None,
        help="Text preceding the catalog in the payload (default: settings payload_marker)",
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Show category, area and display name of catalog labels",
    )
    classify_parser.add_argument("labels", nargs="+", help="Catalog labels")

    filter_parser = subparsers.add_parser(
        "filter",
        help="List the applications offered for an area",
    )
    filter_parser.add_argument(
        "area",
        help='Area name or query value (e.g. "Demografia" or "Civilia Next - Area Demografia")',
    )
    filter_parser.add_argument(
        "payload",
        nargs="?",
        type=Path,
        default=None,
        help="File holding the raw custom field payload (default: read stdin)",
    )
    filter_parser.add_argument(
        "--marker",
        default=None,
        help="Text preceding the catalog in the payload (default: settings payload_marker)",
    )

    return parser


def _read_payload(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Payload file {path} is not valid UTF-8: {e}") from e


def _effective_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.marker is None:
        return settings
    if not args.marker:
        raise ConfigurationError("--marker must not be empty")
    return settings.model_copy(update={"payload_marker": args.marker})


def _cmd_report(args: argparse.Namespace) -> int:
    settings = _effective_settings(args)
    payload = _read_payload(args.payload)

    path, taxonomy = generate_mapping_file(payload, output_path=args.output, settings=settings)

    others = len(taxonomy.groups) - len(taxonomy.areas)
    print(f"Mapping report written to {path}")
    print(f"Total applications: {taxonomy.total}")
    print(f"Areas: {len(taxonomy.areas)}")
    print(f"Other groups: {others}")
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    for label in args.labels:
        area = extract_area(label) or "-"
        print(f"{classify(label).key}\t{area}\t{extract_display_name(label)}\t{label}")
    return 0


def _cmd_filter(args: argparse.Namespace) -> int:
    settings = _effective_settings(args)
    payload = _read_payload(args.payload)
    labels = tokenize_payload(payload, marker=settings.payload_marker)

    area = area_name_from_value(args.area)
    for choice in filter_applications_by_area(labels, area):
        tag = "AREA" if choice.area is not None else "NO-AREA"
        print(f"{tag}\t{choice.display_value}\t{choice.value}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Catalog Taxonomy CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level, logging.INFO)
        ),
    )

    logger.debug("catalog_taxonomy_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        if parsed.command == "report":
            return _cmd_report(parsed)
        if parsed.command == "classify":
            return _cmd_classify(parsed)
        if parsed.command == "filter":
            return _cmd_filter(parsed)
    except (CatalogTaxonomyError, OSError) as e:
        logger.error("command_failed", command=parsed.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
