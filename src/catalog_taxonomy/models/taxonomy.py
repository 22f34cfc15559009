"""In-memory taxonomy produced by one run of the builder.

A taxonomy has no identity beyond the run that created it: it is built from one
batch of labels, rendered, and discarded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from catalog_taxonomy.models.category import Category, CategoryKind


class TaxonomyGroup(BaseModel):
    """All labels sharing one category, sorted."""

    model_config = ConfigDict(frozen=True)

    category: Category = Field(description="Category shared by every label in the group")
    labels: tuple[str, ...] = Field(default=(), description="Member labels, sorted")

    @property
    def key(self) -> str:
        return self.category.key

    @property
    def name(self) -> str | None:
        return self.category.name


class Taxonomy(BaseModel):
    """Grouped view of a tokenized catalog."""

    model_config = ConfigDict(frozen=True)

    labels: tuple[str, ...] = Field(
        default=(), description="Every tokenized label, in input order"
    )
    groups: tuple[TaxonomyGroup, ...] = Field(
        default=(), description="Groups ordered by category kind, then by name"
    )

    @property
    def total(self) -> int:
        return len(self.labels)

    def group(self, key: str) -> TaxonomyGroup | None:
        """Look up a group by its category key (e.g. ``"AREA: Demografia"``)."""
        for g in self.groups:
            if g.key == key:
                return g
        return None

    def groups_of(self, kind: CategoryKind) -> list[TaxonomyGroup]:
        return [g for g in self.groups if g.category.kind is kind]

    @property
    def areas(self) -> list[TaxonomyGroup]:
        return self.groups_of(CategoryKind.AREA)

    @property
    def services(self) -> list[TaxonomyGroup]:
        return self.groups_of(CategoryKind.SERVICE)

    @property
    def components(self) -> list[TaxonomyGroup]:
        return self.groups_of(CategoryKind.COMPONENT)

    @property
    def products(self) -> list[TaxonomyGroup]:
        return self.groups_of(CategoryKind.PRODUCT)

    @property
    def standalone(self) -> tuple[str, ...]:
        """Labels that matched no grouping rule, pooled together."""
        pooled = self.groups_of(CategoryKind.STANDALONE)
        return pooled[0].labels if pooled else ()
