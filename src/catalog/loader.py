"""Load products.json into a Catalog (read-only, no writes)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .errors import MalformedCatalogError, MissingInputError
from .models import Catalog, Product, Site, SiteDefaults

LOGGER = logging.getLogger(__name__)


def load_products_json(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise MissingInputError(p, "products json")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedCatalogError(f"Cannot parse {p}: {exc}") from exc
    return data


def parse_catalog(data: Any, site_defaults: SiteDefaults | None = None) -> Catalog:
    """Build a Catalog from a decoded document.

    Missing ``site`` falls back to ``site_defaults``; a missing or non-list
    ``products`` is read as an empty catalog. Entries that are not objects
    make the whole document malformed.
    """
    if not isinstance(data, dict):
        raise MalformedCatalogError("Root must be an object")
    site = Site.from_dict(data.get("site"), site_defaults or SiteDefaults())
    raw_products = data.get("products")
    if not isinstance(raw_products, list):
        if raw_products is not None:
            LOGGER.warning("'products' is not a list, treating catalog as empty")
        raw_products = []
    products = []
    for idx, entry in enumerate(raw_products):
        if not isinstance(entry, dict):
            raise MalformedCatalogError(f"Product at index {idx} is not an object")
        products.append(Product.from_dict(entry))
    return Catalog(site=site, products=tuple(products))


def load_catalog(path: str | Path, site_defaults: SiteDefaults | None = None) -> Catalog:
    catalog = parse_catalog(load_products_json(path), site_defaults)
    LOGGER.debug("Loaded %d products from %s", len(catalog), path)
    return catalog


__all__ = ["load_products_json", "parse_catalog", "load_catalog"]
