"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from catalog_taxonomy.models import (
    ApplicationChoice,
    Category,
    CategoryKind,
    Taxonomy,
    TaxonomyGroup,
)


class TestCategory:
    """Test suite for Category model."""

    @pytest.mark.parametrize(
        ("category", "key"),
        [
            (Category.area("Demografia"), "AREA: Demografia"),
            (Category.service("Servizi On-Line"), "SERVIZIO: Servizi On-Line"),
            (Category.component("Civilia Next"), "COMPONENTE: Civilia Next"),
            (Category.product("Folium"), "PRODOTTO: Folium"),
            (Category.standalone(), "STANDALONE"),
        ],
    )
    def test_key(self, category: Category, key: str) -> None:
        """Test grouping keys."""
        assert category.key == key

    def test_is_hashable(self) -> None:
        """Test that equal categories collapse in a dict."""
        grouped = {Category.area("Tecnica"): 1}
        grouped[Category.area("Tecnica")] = 2

        assert grouped == {Category.area("Tecnica"): 2}

    def test_is_frozen(self) -> None:
        """Test that categories cannot be mutated."""
        category = Category.area("Tecnica")

        with pytest.raises(ValidationError):
            category.name = "Demografia"

    def test_named_kinds_require_name(self) -> None:
        """Test that only standalone categories go without a name."""
        with pytest.raises(ValidationError):
            Category(kind=CategoryKind.AREA)
        with pytest.raises(ValidationError):
            Category(kind=CategoryKind.STANDALONE, name="Folium")

    def test_empty_name_is_allowed(self) -> None:
        """Test that named kinds accept an empty name."""
        category = Category(kind=CategoryKind.PRODUCT, name="")

        assert category.name == ""
        assert category.key == "PRODOTTO: "


class TestTaxonomy:
    """Test suite for Taxonomy model."""

    def test_accessors(self) -> None:
        """Test lookups by key and kind."""
        area = TaxonomyGroup(
            category=Category.area("Tecnica"),
            labels=("Civilia Next - Area Tecnica -> SUAP",),
        )
        loose = TaxonomyGroup(category=Category.standalone(), labels=("Gestionale Legacy",))
        taxonomy = Taxonomy(
            labels=("Civilia Next - Area Tecnica -> SUAP", "Gestionale Legacy"),
            groups=(area, loose),
        )

        assert taxonomy.total == 2
        assert taxonomy.group("AREA: Tecnica") == area
        assert taxonomy.group("AREA: Demografia") is None
        assert taxonomy.areas == [area]
        assert taxonomy.services == []
        assert taxonomy.standalone == ("Gestionale Legacy",)
        assert area.key == "AREA: Tecnica"
        assert area.name == "Tecnica"


class TestApplicationChoice:
    """Test suite for ApplicationChoice model."""

    def test_application_choice_creation(self) -> None:
        """Test creating an ApplicationChoice instance."""
        choice = ApplicationChoice(
            value="Civilia Next - Area Demografia -> Anagrafe",
            display_value="Anagrafe",
            area="Demografia",
        )

        assert choice.display_value == "Anagrafe"
        assert choice.area == "Demografia"
        assert ApplicationChoice(value="Folium -> A", display_value="A").area is None
