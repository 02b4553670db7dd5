"""
HTML escaping, price formatting and Korean collation helpers.
"""

import math
import unicodedata
from functools import lru_cache

import pyuca

from .constants import MISSING

# Order matters: "&" first so entities introduced below are not escaped again
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value) -> str:
    s = "" if value is None else str(value)
    for char, entity in _HTML_ESCAPES:
        s = s.replace(char, entity)
    return s


def price_to_float(x):
    """Parse a raw price into a finite float, or None."""
    if x is None or isinstance(x, bool):
        return None
    s = x if isinstance(x, (int, float)) else str(x).strip()
    if s == "":
        return None
    try:
        num = float(s)
    except (OverflowError, ValueError):
        # ints beyond float range raise OverflowError
        return None
    return num if math.isfinite(num) else None


def format_price(value, suffix: str = "원") -> str:
    """Format ``value`` with thousands grouping and ``suffix``; "-" when not a number."""
    num = price_to_float(value)
    if num is None:
        return MISSING
    if num.is_integer():
        text = f"{int(num):,}"
    else:
        text = f"{num:,.3f}".rstrip("0").rstrip(".")
    return f"{text}{suffix}"


@lru_cache(maxsize=1)
def _collator():
    return pyuca.Collator()


def _script_rank(ch: str, previous: int) -> int:
    """0 for digits, spaces and punctuation, 1 Hangul, 2 Han, 3 other letters."""
    category = unicodedata.category(ch)
    if category.startswith("M"):
        return previous
    if not category.startswith("L"):
        return 0
    name = unicodedata.name(ch, "")
    if name.startswith("HANGUL"):
        return 1
    if name.startswith("CJK UNIFIED IDEOGRAPH") or name.startswith("CJK COMPATIBILITY IDEOGRAPH"):
        return 2
    return 3


def collation_key(text: str):
    """Sort key following the ko locale: Hangul and Han sort before other scripts.

    The text is split into runs of one script group; each run is keyed by
    (group rank, UCA key), so runs compare by group first and by the default
    Unicode collation within a group.
    """
    runs = []
    rank = 0
    for ch in text or "":
        ch_rank = _script_rank(ch, rank)
        if runs and ch_rank == rank:
            runs[-1][1].append(ch)
        else:
            runs.append((ch_rank, [ch]))
        rank = ch_rank
    collator = _collator()
    return tuple((r, collator.sort_key("".join(chars))) for r, chars in runs)
