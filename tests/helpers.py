import json

from settings import BuildConfig

TEMPLATE = "<title>{{TITLE}}</title><h1>{{H1}}</h1><p>{{PRICE}}</p><footer>{{PHONE}}</footer>\n"


def make_product(**overrides):
    product = {
        "id": "abc-1",
        "category": "Tile",
        "brand": "B",
        "series": "S",
        "code": "C1",
        "spec": "600x600",
        "unit": "box",
        "price": 10000,
        "usage": "floor",
        "note": "",
        "image": "images/abc-1.jpg",
    }
    product.update(overrides)
    return product


def write_inputs(root, products, site=None, template=TEMPLATE):
    data_dir = root / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    doc = {"products": products}
    if site is not None:
        doc["site"] = site
    (data_dir / "products.json").write_text(json.dumps(doc, ensure_ascii=False), encoding="utf-8")
    tpl_dir = root / "templates"
    tpl_dir.mkdir(parents=True, exist_ok=True)
    (tpl_dir / "material.html").write_text(template, encoding="utf-8")


def make_config(root, **kwargs):
    return BuildConfig(root=str(root), **kwargs)
