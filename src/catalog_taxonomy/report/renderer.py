"""Plain-text rendering of a taxonomy.

The layout (Italian headers, emoji markers, tree glyphs, summary lines) is read
by people and by scripts that grep the summary, so it is kept stable.
"""

from __future__ import annotations

from datetime import datetime

from catalog_taxonomy.classification.areas import area_original_value
from catalog_taxonomy.classification.display import application_name
from catalog_taxonomy.models import Taxonomy, TaxonomyGroup

SEPARATOR = "=========================================="
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _render_members(lines: list[str], group: TaxonomyGroup) -> None:
    for label in group.labels:
        lines.append(f"   ├── {application_name(label)}")
        lines.append(f'   │   Valore originale: "{label}"')


def _close_section(lines: list[str]) -> None:
    lines.append(SEPARATOR)
    lines.append("")


def _render_groups(
    lines: list[str],
    title: str,
    groups: list[TaxonomyGroup],
    unit: str,
) -> None:
    if not groups:
        return
    lines.append(title)
    lines.append("")
    for group in groups:
        lines.append(f"📁 {group.name} ({len(group.labels)} {unit})")
        _render_members(lines, group)
        lines.append("")
    _close_section(lines)


def render_report(taxonomy: Taxonomy, generated_at: datetime | None = None) -> str:
    """Render the area/application mapping report.

    Args:
        taxonomy: Taxonomy to render.
        generated_at: Timestamp printed in the header. Defaults to now.

    Returns:
        Report text, one line per entry, newline-terminated.
    """

    generated_at = generated_at or datetime.now()
    lines: list[str] = [
        "🎯 MAPPATURA AREE E APPLICATIVI",
        f"📅 Generato: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"📊 Totale applicativi: {taxonomy.total}",
        "",
        SEPARATOR,
        "",
    ]

    areas = taxonomy.areas
    if areas:
        lines.append("🏢 AREE CIVILIA NEXT:")
        lines.append("")
        for group in areas:
            lines.append(f"📁 {group.name} ({len(group.labels)} applicativi)")
            lines.append(f'   Valore originale: "{area_original_value(group.name or "")}"')
            lines.append("   Applicativi:")
            _render_members(lines, group)
            lines.append("")
        _close_section(lines)

    _render_groups(lines, "🔧 SERVIZI CIVILIA NEXT:", taxonomy.services, "applicativi")
    _render_groups(lines, "🧩 COMPONENTI:", taxonomy.components, "componenti")
    _render_groups(lines, "📦 ALTRI PRODOTTI:", taxonomy.products, "componenti")

    standalone = taxonomy.standalone
    if standalone:
        lines.append(f"🔹 APPLICATIVI STANDALONE ({len(standalone)}):")
        lines.append("")
        lines.extend(f"   • {label}" for label in standalone)
        lines.append("")
        _close_section(lines)

    lines.extend(
        [
            "📈 STATISTICHE:",
            f"   • Aree Civilia Next: {len(areas)}",
            f"   • Servizi Civilia Next: {len(taxonomy.services)}",
            f"   • Componenti: {len(taxonomy.components)}",
            f"   • Altri prodotti: {len(taxonomy.products)}",
            f"   • Standalone: {len(standalone)}",
            f"   • TOTALE: {taxonomy.total} applicativi",
        ]
    )
    return "\n".join(lines) + "\n"
