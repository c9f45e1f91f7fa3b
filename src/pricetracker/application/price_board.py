"""Live view over the record store.

The board subscribes once, keeps whichever snapshot arrived last and
answers queries by re-running the pure domain services against it. It
never caches a derived result, so two calls on the same snapshot always
agree.
"""

from __future__ import annotations

import logging

from pricetracker.domain.exceptions import BackendUnavailable
from pricetracker.domain.model.price_record import PriceRecord
from pricetracker.domain.model.snapshot import Snapshot, Subscription
from pricetracker.domain.model.store import Store
from pricetracker.domain.model.value_objects import ColorTag
from pricetracker.domain.repository.record_store import RecordStore
from pricetracker.domain.service.aggregation import PriceStats, aggregate
from pricetracker.domain.service.comparison import (
    ProductComparison,
    compare_product,
    distinct_products,
    store_color,
)
from pricetracker.domain.service.history import newest_first, recent
from pricetracker.domain.service.search import filter_by_product

logger = logging.getLogger(__name__)


class PriceBoard:

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store
        self._snapshot = Snapshot.empty()
        self._subscription: Subscription | None = None
        self.loading = True
        self.last_error: BackendUnavailable | None = None

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Subscribe to the record store. Calling twice is a no-op."""
        if self._subscription is not None and self._subscription.active:
            return
        self._subscription = self._record_store.subscribe(
            self._on_snapshot, self._on_error
        )

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    @property
    def running(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def __enter__(self) -> PriceBoard:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # --- Listeners ------------------------------------------------------------

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self.loading = False
        self.last_error = None
        logger.debug(
            "Snapshot received: %d records, %d stores",
            len(snapshot.records), len(snapshot.stores),
        )

    def _on_error(self, error: BackendUnavailable) -> None:
        # Keep the last good snapshot; the caller decides how to show this.
        logger.error("Record store unavailable: %s", error)
        self.last_error = error
        self.loading = False

    # --- Derived views --------------------------------------------------------

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def records(self) -> list[PriceRecord]:
        """All records, newest first."""
        return newest_first(self._snapshot.records)

    def stores(self) -> list[Store]:
        return sorted(self._snapshot.stores, key=lambda s: s.name.lower())

    def stats(self) -> PriceStats:
        return aggregate(self._snapshot.records)

    def recent(self, limit: int = 4) -> list[PriceRecord]:
        return recent(self._snapshot.records, limit)

    def search(self, term: str) -> list[PriceRecord]:
        return filter_by_product(self.records(), term)

    def products(self) -> list[str]:
        return distinct_products(self._snapshot.records)

    def compare(self, product: str) -> ProductComparison:
        return compare_product(self._snapshot.records, product)

    def store_color(self, store_name: str) -> ColorTag:
        return store_color(self._snapshot.stores, store_name)
