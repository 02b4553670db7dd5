#!/usr/bin/env python3
"""Validate data/products.json structure before generating pages.
Exit non-zero if invalid."""
import json, sys, re, math, pathlib

RE_SLUG = re.compile(r"^[a-z0-9-]+$")


def validate(path):
    """Return (errors, product_count) for the document at ``path``; errors is a list of str."""
    if not path.exists():
        return [f"{path} missing"], 0
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        return [f"JSON parse error: {e}"], 0
    if not isinstance(data, dict):
        return ["Root must be an object"], 0
    site = data.get("site")
    errors = []
    if site is not None and not isinstance(site, dict):
        errors.append("site must be an object")
    products = data.get("products")
    if not isinstance(products, list):
        errors.append("products must be a list")
        return errors, 0
    seen = set()
    for idx, p in enumerate(products):
        if not isinstance(p, dict):
            errors.append(f"Product at index {idx} not object")
            continue
        raw_id = p.get("id")
        pid = "" if raw_id is None else str(raw_id).strip().lower()
        if not RE_SLUG.match(pid):
            errors.append(f'Product {idx} has invalid id "{raw_id}"')
        elif pid in seen:
            errors.append(f"Duplicate product id: {pid}")
        seen.add(pid)
        price = p.get("price")
        if price is not None and (
            isinstance(price, bool)
            or not isinstance(price, (int, float))
            or not math.isfinite(price)
        ):
            # Not fatal for generation, the page shows "-"
            print(f"Warning: product {pid or idx} has non-numeric price {price!r}", file=sys.stderr)
    return errors, len(products)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = pathlib.Path(argv[0] if argv else "data/products.json")
    errors, count = validate(path)
    for err in errors:
        print(err, file=sys.stderr)
    if errors:
        print(f"Validation failed with {len(errors)} error(s).", file=sys.stderr)
        return 1
    print(f"{path} valid: {count} products")
    return 0


if __name__ == "__main__":
    sys.exit(main())
