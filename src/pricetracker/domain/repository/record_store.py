"""Abstract record store: the backend that owns price records and stores.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, hosted backend,
in-memory) live elsewhere. Every failure to reach the backend is raised
as ``BackendUnavailable``; no implementation retries on its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from pricetracker.domain.exceptions import BackendUnavailable
from pricetracker.domain.model.price_record import NewPriceRecord, PriceRecord, RecordUpdate
from pricetracker.domain.model.snapshot import Snapshot, Subscription
from pricetracker.domain.model.store import NewStore, Store, StoreUpdate

SnapshotListener = Callable[[Snapshot], None]
ErrorListener = Callable[[BackendUnavailable], None]


class RecordStore(ABC):

    # --- Input feed -----------------------------------------------------------

    @abstractmethod
    def snapshot(self) -> Snapshot:
        """Return the current contents of the store."""

    @abstractmethod
    def subscribe(
        self,
        on_snapshot: SnapshotListener,
        on_error: ErrorListener | None = None,
    ) -> Subscription:
        """Deliver the current snapshot now and a new one after every change.

        Failures are passed to ``on_error`` instead of being raised.
        """

    # --- Write sink: price records --------------------------------------------

    @abstractmethod
    def get_record(self, record_id: str) -> PriceRecord | None:
        """Return a price record by its ID, or None if not found."""

    @abstractmethod
    def create_record(self, payload: NewPriceRecord) -> str:
        """Persist a new price record and return its assigned ID."""

    @abstractmethod
    def update_record(self, record_id: str, payload: RecordUpdate) -> None:
        """Overwrite the editable fields of an existing record."""

    @abstractmethod
    def delete_record(self, record_id: str) -> None:
        """Remove a price record permanently."""

    # --- Write sink: stores ---------------------------------------------------

    @abstractmethod
    def get_store(self, store_id: str) -> Store | None:
        """Return a store by its ID, or None if not found."""

    @abstractmethod
    def create_store(self, payload: NewStore) -> str:
        """Persist a new store and return its assigned ID."""

    @abstractmethod
    def update_store(self, store_id: str, payload: StoreUpdate) -> None:
        """Overwrite an existing store. Price records are not touched."""

    @abstractmethod
    def delete_store(self, store_id: str) -> None:
        """Remove a store. Price records naming it are left as they are."""
