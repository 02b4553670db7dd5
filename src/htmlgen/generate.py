"""Site generation entrypoint: products.json + template -> materials/*.html."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from catalog.errors import MissingInputError
from catalog.loader import load_catalog
from catalog.validator import validate_products
from .builder import CatalogIndexBuilder
from .constants import TEMPLATE_FIELDS
from .pages import page_filename, render_product_page
from .render import find_placeholders

LOGGER = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


@dataclass
class GenerationResult:
    output_dir: Path
    product_count: int = 0
    written: List[Path] = field(default_factory=list)


def read_template(path: str | Path) -> str:
    p = Path(path)
    if not p.exists():
        raise MissingInputError(p, "template")
    return p.read_text(encoding="utf-8")


def _write(path: Path, html: str) -> None:
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(html)


def generate_site(config) -> GenerationResult:
    """Render every product page and the catalog index.

    All inputs are loaded and every product id is validated before the
    output directory is touched, so a fatal error leaves no new files.
    """
    catalog = load_catalog(config.data_path, config.site_defaults)
    template = read_template(config.template_path)
    products = validate_products(catalog.products, config.invalid_id_policy)

    unknown = find_placeholders(template) - set(TEMPLATE_FIELDS)
    if unknown and config.placeholder_policy == "passthrough":
        LOGGER.warning(
            "Template placeholders left unreplaced: %s", ", ".join(sorted(unknown))
        )

    pages = [
        (page_filename(p), render_product_page(template, p, catalog.site, config))
        for p in products
    ]
    index_html = CatalogIndexBuilder(config).build(products)

    if not products:
        LOGGER.info("No products found in %s", config.data_path)

    out_dir = Path(config.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    result = GenerationResult(output_dir=out_dir, product_count=len(products))
    for filename, html in pages:
        path = out_dir / filename
        _write(path, html)
        result.written.append(path)
    index_path = out_dir / INDEX_FILENAME
    _write(index_path, index_html)
    result.written.append(index_path)

    LOGGER.info("Generated %d product pages + %s", len(products), index_path)
    return result


__all__ = ["GenerationResult", "INDEX_FILENAME", "generate_site", "read_template"]
