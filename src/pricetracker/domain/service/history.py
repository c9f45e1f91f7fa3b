"""Domain service: history ordering.

Records arrive unordered. "Most recent" means the greatest
``recorded_at``; records the store has not stamped yet count as the
oldest. Identical timestamps are broken by the highest id so the
outcome never depends on arrival order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from pricetracker.domain.model.price_record import PriceRecord

_UNSTAMPED = datetime.min.replace(tzinfo=timezone.utc)


def _id_key(record_id: str) -> tuple[int, int, str]:
    # Numeric ids compare as numbers ("10" after "9"), anything else as text.
    if record_id.isdigit():
        return (0, int(record_id), "")
    return (1, 0, record_id)


def recency_key(record: PriceRecord) -> tuple[datetime, tuple[int, int, str]]:
    """Sort key where a larger value means more recent."""
    recorded_at = record.recorded_at or _UNSTAMPED
    if recorded_at.tzinfo is None:
        recorded_at = recorded_at.replace(tzinfo=timezone.utc)
    return (recorded_at, _id_key(record.id))


def newest_first(records: Iterable[PriceRecord]) -> list[PriceRecord]:
    return sorted(records, key=recency_key, reverse=True)


def recent(records: Iterable[PriceRecord], limit: int = 4) -> list[PriceRecord]:
    """The ``limit`` most recent records, newest first."""
    if limit <= 0:
        return []
    return newest_first(records)[:limit]
