"""Write rendered reports to disk."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import structlog

from catalog_taxonomy.classification.rules import DEFAULT_RULES, CatalogRules
from catalog_taxonomy.config import Settings, get_settings
from catalog_taxonomy.exceptions import ReportWriteError
from catalog_taxonomy.models import Taxonomy
from catalog_taxonomy.report.builder import build_taxonomy_from_payload
from catalog_taxonomy.report.renderer import render_report

logger = structlog.get_logger()

REPORT_ENCODING = "utf-8"


def write_report(text: str, path: Path) -> Path:
    """Write ``text`` to ``path`` as UTF-8, replacing any existing file.

    Raises:
        ReportWriteError: If the file cannot be written.
    """

    try:
        path.write_text(text, encoding=REPORT_ENCODING)
    except OSError as e:
        logger.error("report_write_failed", path=str(path), error=str(e))
        raise ReportWriteError(f"Cannot write report to {path}: {e}") from e
    return path


def generate_mapping_file(
    payload: str,
    output_path: Path | None = None,
    settings: Settings | None = None,
    rules: CatalogRules = DEFAULT_RULES,
    generated_at: datetime | None = None,
) -> tuple[Path, Taxonomy]:
    """Tokenize, classify and render a raw payload, then write the report.

    Args:
        payload: Raw custom field payload.
        output_path: Report destination. Defaults to ``settings.report_path``
            under the current working directory.
        settings: Application settings. If None, uses default settings.
        rules: Rule tables to apply.
        generated_at: Timestamp printed in the report header.

    Returns:
        The written path and the taxonomy it was rendered from.

    Raises:
        MalformedInputError: If the payload has no marker.
        ReportWriteError: If the report cannot be written.
    """

    settings = settings or get_settings()
    taxonomy = build_taxonomy_from_payload(payload, marker=settings.payload_marker, rules=rules)
    text = render_report(taxonomy, generated_at=generated_at)

    path = output_path or Path.cwd() / settings.report_path
    write_report(text, path)

    logger.info(
        "mapping_file_written",
        path=str(path),
        total=taxonomy.total,
        areas=len(taxonomy.areas),
        other_groups=len(taxonomy.groups) - len(taxonomy.areas),
    )
    return path, taxonomy
