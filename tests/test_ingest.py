import json

import pandas as pd
import pytest

from catalog.errors import IngestError, MissingInputError
from catalog.ingest import convert, read_rows, rows_to_products
from catalog.models import Site

COLUMNS = ["id", "category", "brand", "series", "code", "spec", "unit", "price", "usage", "note", "image"]


def sample_frame():
    return pd.DataFrame(
        [
            [" abc-1 ", "Tile", "B", "S", "C1", "600x600", "box", 10000, "floor", None, "images/a.jpg"],
            ["abc-2", "Tile", "B", "S", 1234, None, "box", "abc", None, None, None],
        ],
        columns=COLUMNS,
    )


def test_convert_xlsx(tmp_path):
    xlsx = tmp_path / "products.xlsx"
    sample_frame().to_excel(xlsx, sheet_name="products", index=False, engine="openpyxl")
    target = tmp_path / "out" / "products.json"
    site = Site(phone="02-000-0000", hours="9-18", copyright="(c) test")

    count = convert(xlsx, target, site)

    assert count == 2
    doc = json.loads(target.read_text(encoding="utf-8"))
    assert doc["site"] == {"phone": "02-000-0000", "hours": "9-18", "copyright": "(c) test"}
    first, second = doc["products"]
    assert first["id"] == "abc-1"
    assert first["price"] == 10000
    assert first["note"] == ""
    assert second["code"] == "1234"
    assert second["price"] is None
    assert second["spec"] == ""


def test_convert_csv(tmp_path):
    csv_path = tmp_path / "products.csv"
    sample_frame().to_csv(csv_path, index=False)
    target = tmp_path / "products.json"
    assert convert(csv_path, target, Site()) == 2
    doc = json.loads(target.read_text(encoding="utf-8"))
    assert doc["products"][0]["price"] == 10000
    assert doc["products"][1]["price"] is None


def test_blank_rows_skipped():
    df = pd.concat([sample_frame(), pd.DataFrame([[None] * len(COLUMNS)], columns=COLUMNS)])
    assert len(rows_to_products(df)) == 2


def test_fractional_price_kept():
    df = pd.DataFrame([["x-1", 1234.5]], columns=["id", "price"])
    [product] = rows_to_products(df)
    assert product["price"] == 1234.5
    assert product["brand"] == ""


def test_missing_spreadsheet(tmp_path):
    with pytest.raises(MissingInputError):
        read_rows(tmp_path / "nope.xlsx")


def test_wrong_sheet_name(tmp_path):
    xlsx = tmp_path / "products.xlsx"
    sample_frame().to_excel(xlsx, sheet_name="Sheet1", index=False, engine="openpyxl")
    with pytest.raises(IngestError, match="products"):
        read_rows(xlsx)
