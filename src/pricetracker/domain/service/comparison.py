"""Domain service: cross-store price comparison.

For a given product only the latest observation at each store counts;
older observations at the same store are superseded. The surviving
records are ranked cheapest first.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

from pricetracker.domain.model.price_record import PriceRecord
from pricetracker.domain.model.store import Store
from pricetracker.domain.model.value_objects import DEFAULT_COLOR, ColorTag, Money
from pricetracker.domain.service.history import recency_key


def _collation_key(text: str) -> tuple[str, str]:
    # Primary: case and accents ignored ("açúcar" sorts with "acucar").
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, text)


def distinct_products(records: Iterable[PriceRecord]) -> list[str]:
    """Unique product names in alphabetical order."""
    return sorted({record.product for record in records}, key=_collation_key)


def latest_price_per_store(
    records: Iterable[PriceRecord], product: str
) -> list[PriceRecord]:
    """Most recent record per store for *product*, cheapest first.

    Matching is exact and case-sensitive. The result holds at most one
    record per store value; equal prices keep the order in which their
    stores were first seen.
    """
    latest: dict[str, PriceRecord] = {}
    for record in records:
        if record.product != product:
            continue
        current = latest.get(record.store)
        if current is None or recency_key(record) > recency_key(current):
            latest[record.store] = record

    return sorted(latest.values(), key=lambda r: r.price)


@dataclass(frozen=True)
class ProductComparison:
    """Latest price per store for one product.

    The derived figures are properties computed on each access.
    """

    product: str
    entries: tuple[PriceRecord, ...]

    @property
    def cheapest(self) -> PriceRecord | None:
        return self.entries[0] if self.entries else None

    @property
    def most_expensive(self) -> PriceRecord | None:
        return self.entries[-1] if self.entries else None

    @property
    def spread(self) -> Money:
        if not self.entries:
            return Money.zero()
        return self.entries[-1].price - self.entries[0].price

    @property
    def store_count(self) -> int:
        return len(self.entries)


def compare_product(records: Iterable[PriceRecord], product: str) -> ProductComparison:
    return ProductComparison(
        product=product,
        entries=tuple(latest_price_per_store(records, product)),
    )


def store_color(stores: Iterable[Store], store_name: str) -> ColorTag:
    """Colour of the store currently named *store_name*.

    Records keep the store name they were entered with, so a renamed or
    deleted store simply falls back to the default colour.
    """
    for store in stores:
        if store.name == store_name:
            return store.color_tag
    return DEFAULT_COLOR
