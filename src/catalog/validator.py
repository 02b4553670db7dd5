"""Product id normalization and catalog-wide validation."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import List, Sequence

from .errors import InvalidIdentifierError
from .models import Product

LOGGER = logging.getLogger(__name__)

RE_SLUG = re.compile(r"^[a-z0-9-]+$")

ABORT = "abort"
SKIP = "skip"
INVALID_ID_POLICIES = (ABORT, SKIP)


def normalize_id(raw_id) -> str:
    """Trim and lowercase ``raw_id``; raise InvalidIdentifierError unless it is a slug."""
    s = "" if raw_id is None else str(raw_id).strip().lower()
    if not RE_SLUG.match(s):
        raise InvalidIdentifierError(raw_id)
    return s


def is_valid_id(raw_id) -> bool:
    try:
        normalize_id(raw_id)
    except InvalidIdentifierError:
        return False
    return True


def validate_products(products: Sequence[Product], policy: str = ABORT) -> List[Product]:
    """Return products with normalized ids.

    With the ``abort`` policy the first invalid id raises, so nothing downstream
    runs. With ``skip`` the offending product is dropped and logged.
    """
    if policy not in INVALID_ID_POLICIES:
        raise ValueError(f"Unknown invalid id policy: {policy!r}")
    valid: List[Product] = []
    seen = set()
    for product in products:
        try:
            pid = normalize_id(product.id)
        except InvalidIdentifierError as e:
            if policy == ABORT:
                raise
            LOGGER.warning("Skipping product: %s", e)
            continue
        if pid in seen:
            LOGGER.warning("Duplicate product id %r, later entry overwrites %s.html", pid, pid)
        seen.add(pid)
        valid.append(replace(product, id=pid))
    return valid


__all__ = [
    "RE_SLUG",
    "ABORT",
    "SKIP",
    "INVALID_ID_POLICIES",
    "normalize_id",
    "is_valid_id",
    "validate_products",
]
