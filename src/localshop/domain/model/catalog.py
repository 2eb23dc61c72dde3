"""Catalog filtering.

A pure function of the product list and the current criteria. The client
recomputes the filtered view from scratch on every change instead of
maintaining it incrementally.
"""

from __future__ import annotations

from collections.abc import Iterable

from localshop.domain.model.product import Product

ALL_CATEGORIES = "All"


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def filter_products(
    products: Iterable[Product],
    category: str = ALL_CATEGORIES,
    query: str = "",
) -> list[Product]:
    """Return the products matching *category* and *query*.

    ``category == "All"`` matches everything. The query is a
    case-insensitive substring of the name or the description; an empty
    query matches everything.
    """
    q = normalize_query(query)
    return [
        p
        for p in products
        if (category == ALL_CATEGORIES or p.category == category)
        and (not q or q in p.name.lower() or q in p.description.lower())
    ]


def categories(products: Iterable[Product]) -> list[str]:
    """Distinct categories in first-seen order, preceded by ``All``."""
    seen: list[str] = [ALL_CATEGORIES]
    for p in products:
        if p.category and p.category not in seen:
            seen.append(p.category)
    return seen
