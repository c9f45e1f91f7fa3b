"""Domain service: global price statistics."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from pricetracker.domain.model.price_record import PriceRecord
from pricetracker.domain.model.value_objects import format_amount

ZERO_TEXT = "0.00"


@dataclass(frozen=True)
class PriceStats:
    """Count plus mean/min/max prices, already formatted to two decimals."""

    count: int
    mean: str
    min: str
    max: str


def aggregate(records: Iterable[PriceRecord]) -> PriceStats:
    """Summarize a snapshot of price records.

    An empty input is valid and yields a zero count with ``"0.00"``
    for every price figure.
    """
    prices = [record.price for record in records]
    if not prices:
        return PriceStats(count=0, mean=ZERO_TEXT, min=ZERO_TEXT, max=ZERO_TEXT)

    # The total may exceed what a single Money can hold.
    total = sum((price.amount for price in prices), Decimal("0"))
    return PriceStats(
        count=len(prices),
        mean=format_amount(total / len(prices)),
        min=format_amount(min(prices).amount),
        max=format_amount(max(prices).amount),
    )
