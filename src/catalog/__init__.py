"""Product catalog loading, validation & spreadsheet ingestion."""

from .errors import (  # noqa: F401
    CatalogError,
    IngestError,
    InvalidIdentifierError,
    MalformedCatalogError,
    MissingInputError,
    ProductValidationError,
)
from .loader import load_catalog, load_products_json, parse_catalog  # noqa: F401
from .models import Catalog, Product, Site, SiteDefaults  # noqa: F401
from .validator import normalize_id, validate_products  # noqa: F401

__all__ = [
    "CatalogError",
    "IngestError",
    "InvalidIdentifierError",
    "MalformedCatalogError",
    "MissingInputError",
    "ProductValidationError",
    "load_catalog",
    "load_products_json",
    "parse_catalog",
    "Catalog",
    "Product",
    "Site",
    "SiteDefaults",
    "normalize_id",
    "validate_products",
]
