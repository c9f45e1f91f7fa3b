"""Domain service: product search."""

from __future__ import annotations

from collections.abc import Sequence

from pricetracker.domain.model.price_record import PriceRecord


def filter_by_product(records: Sequence[PriceRecord], term: str) -> list[PriceRecord]:
    """Records whose product name contains *term*, ignoring case.

    Plain substring match on lower-cased text; accents are not folded.
    Input order is preserved and an empty term keeps every record.
    """
    if not term:
        return list(records)
    needle = term.lower()
    return [record for record in records if needle in record.product.lower()]
