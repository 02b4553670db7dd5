"""Catalog index page builder.

CatalogIndexBuilder.build() groups products by category, orders groups and
rows with Korean collation and returns one self-contained HTML document with
search, category filter and price sort controls. Output depends only on the
products and the config, so repeated runs give byte-identical files.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from catalog.models import Product
from .constants import (
    ALL_CATEGORIES,
    ALL_LABEL,
    META_LABELS,
    META_SEPARATOR,
    MISSING,
    SORT_MODES,
    USAGE_LABEL,
)
from .normalize import collation_key, escape_html, format_price

TH_STYLE = "text-align:left;padding:12px;border-bottom:1px solid #ddd;background:#fafafa;"
TD_STYLE = "padding:12px;border-bottom:1px solid #eee;"


def group_by_category(
    products: Sequence[Product], default_category: str = "기타"
) -> Dict[str, List[Product]]:
    """Map category -> products, both levels ordered by Korean collation."""
    groups: Dict[str, List[Product]] = {}
    for p in products:
        groups.setdefault(p.category or default_category, []).append(p)
    return {
        cat: sorted(groups[cat], key=lambda p: collation_key(p.sort_label))
        for cat in sorted(groups, key=collation_key)
    }


def meta_line(product: Product) -> str:
    parts = []
    for attr, label in META_LABELS:
        value = getattr(product, attr)
        if value:
            parts.append(f"{label}: {value}")
    return META_SEPARATOR.join(parts)


class CatalogIndexBuilder:
    def __init__(self, config):
        self.config = config

    def _row_html(self, product: Product, index: int) -> str:
        href = f"./{product.id}.html"
        price = format_price(product.price, self.config.currency_suffix)
        usage = ""
        if product.usage:
            usage = (
                '<div style="margin-top:6px;font-size:12px;color:#888;">'
                f"{USAGE_LABEL}: {escape_html(product.usage)}</div>"
            )
        return "\n".join(
            [
                f'<tr class="catalog-row" data-index="{index}">',
                f'  <td style="{TD_STYLE}">',
                f'    <div style="font-weight:700;">{escape_html(product.title)}</div>',
                '    <div style="margin-top:6px;font-size:12px;color:#666;line-height:1.4;">'
                f"{escape_html(meta_line(product))}</div>",
                f"    {usage}" if usage else "",
                "  </td>",
                f'  <td style="{TD_STYLE}color:#666;">{escape_html(product.spec or MISSING)}</td>',
                f'  <td class="price" style="{TD_STYLE}font-weight:700;">{escape_html(price)}</td>',
                f'  <td style="{TD_STYLE}"><a href="{escape_html(href)}" '
                'style="display:inline-block;border:1px solid #e5e5e5;background:#fff;'
                'padding:7px 10px;text-decoration:none;color:#222;">보기</a></td>',
                "</tr>",
            ]
        )

    def _section_html(self, category: str, items: List[Product]) -> str:
        rows = "\n".join(self._row_html(p, i) for i, p in enumerate(items))
        return "\n".join(
            [
                f'<section class="catalog-section" data-category="{escape_html(category)}">',
                f'<h2 style="margin:28px 0 10px;font-size:18px;">{escape_html(category)}</h2>',
                '<table style="width:100%;border-collapse:collapse;">',
                "<thead><tr>",
                f'  <th style="{TH_STYLE}width:45%;">제품</th>',
                f'  <th style="{TH_STYLE}width:30%;">규격</th>',
                f'  <th style="{TH_STYLE}width:15%;">가격</th>',
                f'  <th style="{TH_STYLE}width:10%;">링크</th>',
                "</tr></thead>",
                "<tbody>",
                rows,
                "</tbody>",
                "</table>",
                "</section>",
            ]
        )

    def _controls_html(self, categories: Sequence[str]) -> str:
        buttons = [
            f'<button type="button" class="filter-btn active" data-category="{ALL_CATEGORIES}">'
            f"{ALL_LABEL}</button>"
        ]
        for cat in categories:
            esc = escape_html(cat)
            buttons.append(
                f'<button type="button" class="filter-btn" data-category="{esc}">{esc}</button>'
            )
        options = "".join(
            f'<option value="{value}"{" selected" if value == "default" else ""}>{label}</option>'
            for value, label in SORT_MODES
        )
        return "\n".join(
            [
                '<div class="catalog-controls" style="display:flex;flex-wrap:wrap;gap:10px;align-items:center;margin:0 0 12px;">',
                '  <input id="catalog-search" type="search" placeholder="검색 (브랜드, 시리즈, 코드, 규격)" '
                'autocomplete="off" style="flex:1;min-width:220px;padding:9px 12px;border:1px solid #ddd;font-size:14px;">',
                f'  <select id="catalog-sort" style="padding:9px 10px;border:1px solid #ddd;font-size:14px;">{options}</select>',
                "</div>",
                '<div class="catalog-filters" style="display:flex;flex-wrap:wrap;gap:6px;margin:0 0 8px;">',
                "\n".join(buttons),
                "</div>",
            ]
        )

    def build(self, products: Sequence[Product]) -> str:
        """Render the index for products whose ids were already normalized by validate_products."""
        groups = group_by_category(products, self.config.default_category)
        sections = "\n\n".join(self._section_html(cat, items) for cat, items in groups.items())
        title = f"{self.config.index_title} | {self.config.site_name}"
        html_parts = [
            "<!DOCTYPE html>",
            '<html lang="ko">',
            "<head>",
            '  <meta charset="UTF-8" />',
            f"  <title>{escape_html(title)}</title>",
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0" />',
            "  <style>",
            "    .filter-btn { border:1px solid #e5e5e5; background:#fafafa; color:#444; padding:6px 10px; font-size:13px; cursor:pointer; }",
            "    .filter-btn.active { background:#222; border-color:#222; color:#fff; }",
            "  </style>",
            "</head>",
            "<body style=\"font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,'Noto Sans KR',Arial,sans-serif;margin:0;background:#fff;color:#222;\">",
            '<div style="max-width:960px;margin:0 auto;padding:32px 20px 80px;">',
            '<div style="display:flex;gap:12px;align-items:center;margin-bottom:18px;">',
            '  <a href="../index.html" style="font-size:13px;color:#444;text-decoration:none;border:1px solid #e5e5e5;padding:8px 10px;background:#fafafa;">← 홈</a>',
            "</div>",
            f'<h1 style="font-size:26px;margin:0 0 6px;">{escape_html(self.config.index_title)}</h1>',
            f'<div style="font-size:14px;color:#666;margin:0 0 18px;">{escape_html(self.config.index_subtitle)}</div>',
            self._controls_html(list(groups)),
            sections,
            '<div id="catalog-empty" style="display:none;margin-top:28px;font-size:14px;color:#888;">검색 결과가 없습니다.</div>',
            '<div style="margin-top:60px;font-size:13px;color:#888;">※ 가격/재고는 현장 상황에 따라 변동될 수 있습니다.</div>',
            "</div>",
            self._filter_js(),
            "</body>",
            "</html>",
        ]
        return "\n".join(html_parts) + "\n"

    def _filter_js(self) -> str:
        # Visible rows are a pure function of (query, category, sort mode)
        # over the rows captured at load time.
        return """
<script>
(function () {
  var search = document.getElementById('catalog-search');
  var sortSel = document.getElementById('catalog-sort');
  var empty = document.getElementById('catalog-empty');
  var buttons = Array.prototype.slice.call(document.querySelectorAll('.filter-btn'));
  var activeCategory = '*';

  function normalize(s) { return (s || '').replace(/\\s+/g, ' ').trim().toLowerCase(); }
  function parsePrice(row) {
    var cell = row.querySelector('td.price');
    var n = parseFloat(cell ? cell.textContent.replace(/[^0-9.\\-]/g, '') : '');
    return isFinite(n) ? n : NaN;
  }

  var sections = Array.prototype.slice.call(document.querySelectorAll('.catalog-section')).map(function (el) {
    var tbody = el.querySelector('tbody');
    var rows = Array.prototype.slice.call(tbody.querySelectorAll('tr.catalog-row')).map(function (row, i) {
      return { el: row, text: normalize(row.textContent), price: parsePrice(row), index: i };
    });
    return { el: el, tbody: tbody, category: el.getAttribute('data-category'), rows: rows };
  });

  function compare(mode) {
    return function (a, b) {
      if (mode === 'default') return a.index - b.index;
      var an = isNaN(a.price), bn = isNaN(b.price);
      if (an || bn) return an === bn ? a.index - b.index : (an ? 1 : -1);
      var d = mode === 'price-desc' ? b.price - a.price : a.price - b.price;
      return d !== 0 ? d : a.index - b.index;
    };
  }

  function apply() {
    var query = normalize(search.value);
    var mode = sortSel.value;
    var shown = 0;
    sections.forEach(function (section) {
      var inCategory = activeCategory === '*' || section.category === activeCategory;
      var visible = 0;
      section.rows.slice().sort(compare(mode)).forEach(function (row) {
        var match = inCategory && (!query || row.text.indexOf(query) !== -1);
        row.el.style.display = match ? '' : 'none';
        if (match) visible++;
        section.tbody.appendChild(row.el);
      });
      section.el.style.display = visible ? '' : 'none';
      shown += visible;
    });
    if (empty) empty.style.display = shown ? 'none' : '';
  }

  buttons.forEach(function (btn) {
    btn.addEventListener('click', function () {
      activeCategory = btn.getAttribute('data-category');
      buttons.forEach(function (b) { b.classList.toggle('active', b === btn); });
      apply();
    });
  });
  search.addEventListener('input', apply);
  sortSel.addEventListener('change', apply);
  apply();
})();
</script>
"""


__all__ = ["CatalogIndexBuilder", "group_by_category", "meta_line"]
