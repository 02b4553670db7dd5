"""Static HTML generation for the product catalog."""

from .builder import CatalogIndexBuilder, group_by_category  # noqa: F401
from .generate import GenerationResult, generate_site  # noqa: F401
from .normalize import escape_html, format_price  # noqa: F401
from .render import UnresolvedPlaceholderError, render_template  # noqa: F401

__all__ = [
    "CatalogIndexBuilder",
    "group_by_category",
    "GenerationResult",
    "generate_site",
    "escape_html",
    "format_price",
    "UnresolvedPlaceholderError",
    "render_template",
]
