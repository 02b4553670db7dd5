"""
Per-product detail pages rendered from the shared material template.
"""

from typing import Dict

from catalog.models import Product, Site
from .constants import MISSING
from .normalize import escape_html, format_price
from .render import render_template


def _or_missing(value: str) -> str:
    return value if value else MISSING


def product_fields(product: Product, site: Site, config) -> Dict[str, str]:
    """Escaped template values for one product page."""
    title = product.title
    subtitle = f"{product.category} · {product.usage}".strip()
    raw = {
        "TITLE": title,
        "H1": title,
        "SUBTITLE": subtitle,
        "CATEGORY": _or_missing(product.category),
        "BRAND": _or_missing(product.brand),
        "SERIES": _or_missing(product.series),
        "CODE": _or_missing(product.code),
        "SPEC": _or_missing(product.spec),
        "UNIT": _or_missing(product.unit),
        "PRICE": format_price(product.price, config.currency_suffix),
        "USAGE": _or_missing(product.usage),
        "NOTE": _or_missing(product.note),
        "IMAGE": product.image or config.placeholder_image,
        "PHONE": site.phone or config.site_defaults.phone,
        "HOURS": site.hours or config.site_defaults.hours,
        "COPYRIGHT": site.copyright or config.site_defaults.copyright,
    }
    return {key: escape_html(value) for key, value in raw.items()}


def render_product_page(template: str, product: Product, site: Site, config) -> str:
    return render_template(
        template, product_fields(product, site, config), config.placeholder_policy
    )


def page_filename(product: Product) -> str:
    return f"{product.id}.html"


__all__ = ["product_fields", "render_product_page", "page_filename"]
