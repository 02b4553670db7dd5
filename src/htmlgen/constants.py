"""
Shared constants for page and index generation.
"""

# Placeholder value for any missing product/site field
MISSING = "-"

# data-category value of the "show everything" filter button
ALL_CATEGORIES = "*"
ALL_LABEL = "전체"

META_LABELS = (("brand", "브랜드"), ("series", "시리즈"), ("code", "코드"))
META_SEPARATOR = " · "
USAGE_LABEL = "용도"

SORT_MODES = (
    ("default", "기본순"),
    ("price-asc", "가격 낮은순"),
    ("price-desc", "가격 높은순"),
)

TEMPLATE_FIELDS = (
    "TITLE",
    "H1",
    "SUBTITLE",
    "CATEGORY",
    "BRAND",
    "SERIES",
    "CODE",
    "SPEC",
    "UNIT",
    "PRICE",
    "USAGE",
    "NOTE",
    "IMAGE",
    "PHONE",
    "HOURS",
    "COPYRIGHT",
)
