"""Unit tests for the report renderer."""

from datetime import datetime

from catalog_taxonomy.report import build_taxonomy, build_taxonomy_from_payload, render_report

GENERATED_AT = datetime(2025, 1, 2, 3, 4, 5)


class TestRenderReport:
    """Test suite for render_report."""

    def test_sample_report_layout(self, sample_payload: str) -> None:
        """Test the full text of a small report."""
        report = render_report(build_taxonomy_from_payload(sample_payload), GENERATED_AT)

        expected = "\n".join(
            [
                "🎯 MAPPATURA AREE E APPLICATIVI",
                "📅 Generato: 2025-01-02 03:04:05",
                "📊 Totale applicativi: 3",
                "",
                "==========================================",
                "",
                "🏢 AREE CIVILIA NEXT:",
                "",
                "📁 Customer Care (1 applicativi)",
                '   Valore originale: "Customer Care"',
                "   Applicativi:",
                "   ├── Customer Care - Portale",
                '   │   Valore originale: "Customer Care - Portale"',
                "",
                "📁 Demografia (2 applicativi)",
                '   Valore originale: "Civilia Next - Area Demografia"',
                "   Applicativi:",
                "   ├── Anagrafe",
                '   │   Valore originale: "Civilia Next - Area Demografia -> Anagrafe"',
                "   ├── Stato Civile",
                '   │   Valore originale: "Civilia Next - Area Demografia -> Stato Civile"',
                "",
                "==========================================",
                "",
                "📈 STATISTICHE:",
                "   • Aree Civilia Next: 2",
                "   • Servizi Civilia Next: 0",
                "   • Componenti: 0",
                "   • Altri prodotti: 0",
                "   • Standalone: 0",
                "   • TOTALE: 3 applicativi",
            ]
        )
        assert report == expected + "\n"

    def test_sections_in_fixed_order(self, sample_labels: list[str]) -> None:
        """Test that every section appears once, in report order."""
        report = render_report(build_taxonomy(sample_labels), GENERATED_AT)

        headers = [
            "🏢 AREE CIVILIA NEXT:",
            "🔧 SERVIZI CIVILIA NEXT:",
            "🧩 COMPONENTI:",
            "📦 ALTRI PRODOTTI:",
            "🔹 APPLICATIVI STANDALONE (1):",
            "📈 STATISTICHE:",
        ]
        positions = [report.index(h) for h in headers]
        assert positions == sorted(positions)

    def test_group_entries(self, sample_labels: list[str]) -> None:
        """Test service, component, product and standalone entries."""
        report = render_report(build_taxonomy(sample_labels), GENERATED_AT)

        assert "📁 Servizi On-Line (1 applicativi)" in report
        assert "📁 Civilia Next (1 componenti)" in report
        assert "📁 Folium (1 componenti)" in report
        assert "   ├── Affari Generali" in report
        assert "   • Gestionale Legacy" in report
        assert '   Valore originale: "Civilia Next Area Comune"' in report
        assert '   Valore originale: "Sistema Informativo Territoriale"' in report
        assert "   • Aree Civilia Next: 4" in report
        assert "   • Standalone: 1" in report
        assert "   • TOTALE: 8 applicativi" in report

    def test_empty_sections_are_omitted(self) -> None:
        """Test that an empty taxonomy renders only header and statistics."""
        report = render_report(build_taxonomy([]), GENERATED_AT)

        assert "AREE CIVILIA NEXT" not in report
        assert "STANDALONE (" not in report
        assert "   • TOTALE: 0 applicativi" in report

    def test_default_timestamp(self) -> None:
        """Test that a timestamp is always printed."""
        report = render_report(build_taxonomy([]))

        assert report.splitlines()[1].startswith("📅 Generato: ")
