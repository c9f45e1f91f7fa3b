"""Snapshot and Subscription, what the record store pushes to its readers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pricetracker.domain.model.price_record import PriceRecord
from pricetracker.domain.model.store import Store


@dataclass(frozen=True)
class Snapshot:
    """The full, unordered contents of the record store at one moment.

    Readers always recompute from a whole snapshot; there is no diff.
    """

    records: tuple[PriceRecord, ...] = ()
    stores: tuple[Store, ...] = ()

    @staticmethod
    def empty() -> Snapshot:
        return Snapshot()

    def find_record(self, record_id: str) -> PriceRecord | None:
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def find_store(self, store_id: str) -> Store | None:
        for store in self.stores:
            if store.id == store_id:
                return store
        return None


class Subscription:
    """Cancel token returned by ``RecordStore.subscribe``.

    Cancelling more than once is a no-op.
    """

    def __init__(self, on_cancel: Callable[[], None]) -> None:
        self._on_cancel = on_cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._on_cancel()
