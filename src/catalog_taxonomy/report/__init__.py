"""Taxonomy building and report generation."""

from .builder import build_taxonomy, build_taxonomy_from_payload
from .renderer import render_report
from .writer import generate_mapping_file, write_report

__all__ = [
    "build_taxonomy",
    "build_taxonomy_from_payload",
    "generate_mapping_file",
    "render_report",
    "write_report",
]
