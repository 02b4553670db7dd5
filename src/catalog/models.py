"""
Catalog data models: products, site display fields and the loaded document.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

PRODUCT_TEXT_FIELDS = (
    "id",
    "category",
    "brand",
    "series",
    "code",
    "spec",
    "unit",
    "usage",
    "note",
    "image",
)


def clean_text(value: Any) -> str:
    """Return a display string for a raw JSON/spreadsheet cell ("" when blank)."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        # Spreadsheet codes like 1234 come back as 1234.0
        value = int(value)
    text = str(value)
    return text if text.strip() else ""


@dataclass(frozen=True)
class Product:
    """Product record."""

    id: str = ""
    category: str = ""
    brand: str = ""
    series: str = ""
    code: str = ""
    spec: str = ""
    unit: str = ""
    price: Any = None
    usage: str = ""
    note: str = ""
    image: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Product":
        values = {name: clean_text(raw.get(name)) for name in PRODUCT_TEXT_FIELDS}
        return cls(price=raw.get("price"), **values)

    @property
    def title(self) -> str:
        return f"{self.brand} {self.series} {self.code}".strip()

    @property
    def sort_label(self) -> str:
        return f"{self.brand} {self.series} {self.code}"


@dataclass(frozen=True)
class SiteDefaults:
    """Fallback values used when the document's site block leaves a field blank."""

    phone: str = "02-487-9775"
    hours: str = ""
    copyright: str = ""


@dataclass(frozen=True)
class Site:
    phone: str = ""
    hours: str = ""
    copyright: str = ""

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]], defaults: SiteDefaults) -> "Site":
        raw = raw or {}
        return cls(
            phone=clean_text(raw.get("phone")) or defaults.phone,
            hours=clean_text(raw.get("hours")) or defaults.hours,
            copyright=clean_text(raw.get("copyright")) or defaults.copyright,
        )

    def to_dict(self) -> Dict[str, str]:
        return {"phone": self.phone, "hours": self.hours, "copyright": self.copyright}


@dataclass(frozen=True)
class Catalog:
    site: Site
    products: Tuple[Product, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.products)
