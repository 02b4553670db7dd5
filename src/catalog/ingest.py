"""
Spreadsheet -> products.json conversion.

Reads the ``products`` sheet of an .xlsx workbook (or a .csv file) with pandas
and writes the canonical ``{"site": ..., "products": [...]}`` document.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from .errors import IngestError, MissingInputError
from .models import PRODUCT_TEXT_FIELDS, Site, clean_text

LOGGER = logging.getLogger(__name__)

SHEET_NAME = "products"


def read_rows(path: str | Path, sheet: str = SHEET_NAME) -> pd.DataFrame:
    p = Path(path)
    if not p.exists():
        raise MissingInputError(p, "spreadsheet")
    if p.suffix.lower() == ".csv":
        return pd.read_csv(p, encoding="utf-8", dtype=object)
    try:
        return pd.read_excel(p, sheet_name=sheet, dtype=object, engine="openpyxl")
    except ValueError as e:
        # pandas reports an unknown sheet name as ValueError
        raise IngestError(f"Sheet name must be '{sheet}' ({p})") from e


def _price(value: Any):
    if value is None or isinstance(value, bool):
        return None
    num = pd.to_numeric(value, errors="coerce")
    if pd.isna(num) or not np.isfinite(num):
        return None
    num = float(num)
    return int(num) if num.is_integer() else num


def rows_to_products(df: pd.DataFrame) -> List[Dict[str, Any]]:
    df = df.dropna(how="all")
    products: List[Dict[str, Any]] = []
    for _, row in df.iterrows():
        record: Dict[str, Any] = {}
        for name in PRODUCT_TEXT_FIELDS:
            record[name] = clean_text(row.get(name))
        record["id"] = record["id"].strip()
        price = row.get("price")
        record["price"] = _price(price)
        if record["price"] is None and clean_text(price):
            LOGGER.warning("Product %r has non-numeric price %r", record["id"], price)
        products.append(record)
    return products


def convert(source: str | Path, target: str | Path, site: Site) -> int:
    """Convert ``source`` spreadsheet into the JSON document at ``target``."""
    df = read_rows(source)
    products = rows_to_products(df)
    out = Path(target)
    out.parent.mkdir(parents=True, exist_ok=True)
    payload = {"site": site.to_dict(), "products": products}
    with out.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")
    LOGGER.info("Converted %d products -> %s", len(products), out)
    return len(products)


__all__ = ["SHEET_NAME", "read_rows", "rows_to_products", "convert"]
