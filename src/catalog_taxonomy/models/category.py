"""Category model assigned to catalog labels by the classifier."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CategoryKind(str, Enum):
    """Catalog category enumeration, in report order."""

    AREA = "area"
    SERVICE = "service"
    COMPONENT = "component"
    PRODUCT = "product"
    STANDALONE = "standalone"


# Grouping key prefixes, as they appear in generated mapping files.
_KEY_PREFIXES: dict[CategoryKind, str] = {
    CategoryKind.AREA: "AREA",
    CategoryKind.SERVICE: "SERVIZIO",
    CategoryKind.COMPONENT: "COMPONENTE",
    CategoryKind.PRODUCT: "PRODOTTO",
}


class Category(BaseModel):
    """Category of a single catalog label.

    Categories are derived on demand from the label text and are hashable, so
    they can be used directly as grouping keys.
    """

    model_config = ConfigDict(frozen=True)

    kind: CategoryKind = Field(description="Category kind")
    name: str | None = Field(
        default=None,
        description=(
            "Group name (area, service, component or product), possibly empty; "
            "None for standalone"
        ),
    )

    @model_validator(mode="after")
    def _check_name(self) -> Category:
        if self.kind is CategoryKind.STANDALONE:
            if self.name is not None:
                raise ValueError("standalone categories have no name")
        elif self.name is None:
            raise ValueError(f"{self.kind.value} categories require a name")
        return self

    @classmethod
    def area(cls, name: str) -> Category:
        return cls(kind=CategoryKind.AREA, name=name)

    @classmethod
    def service(cls, name: str) -> Category:
        return cls(kind=CategoryKind.SERVICE, name=name)

    @classmethod
    def component(cls, name: str) -> Category:
        return cls(kind=CategoryKind.COMPONENT, name=name)

    @classmethod
    def product(cls, name: str) -> Category:
        return cls(kind=CategoryKind.PRODUCT, name=name)

    @classmethod
    def standalone(cls) -> Category:
        return cls(kind=CategoryKind.STANDALONE)

    @property
    def key(self) -> str:
        """Grouping key, e.g. ``"AREA: Demografia"`` or ``"STANDALONE"``."""
        if self.kind is CategoryKind.STANDALONE:
            return "STANDALONE"
        return f"{_KEY_PREFIXES[self.kind]}: {self.name}"
