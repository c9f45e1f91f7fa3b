"""JSON-file-backed implementation of RecordStore.

One file holds both collections plus the id counter::

    {"next_id": 3, "records": [...], "stores": [...]}

Ids are sequential strings. ``recorded_at`` is stamped here, never by the
caller, and never goes backwards even if the wall clock does.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pricetracker.domain.exceptions import (
    BackendUnavailable,
    EntityNotFoundError,
    ValidationError,
)
from pricetracker.domain.model.price_record import NewPriceRecord, PriceRecord, RecordUpdate
from pricetracker.domain.model.snapshot import Snapshot, Subscription
from pricetracker.domain.model.store import NewStore, Store, StoreUpdate
from pricetracker.domain.model.value_objects import ColorTag, Money, PromoFlag
from pricetracker.domain.repository.record_store import (
    ErrorListener,
    RecordStore,
    SnapshotListener,
)

logger = logging.getLogger(__name__)


def _as_utc(moment: datetime) -> datetime:
    # Hand-edited files may hold stamps without an offset; read them as UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class JsonRecordStore(RecordStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._listeners: dict[int, tuple[SnapshotListener, ErrorListener | None]] = {}
        self._next_token = 0
        self._ensure_file()

    # --- Input feed -----------------------------------------------------------

    def snapshot(self) -> Snapshot:
        data = self._load_raw()
        try:
            return Snapshot(
                records=tuple(self._record_to_domain(r) for r in data["records"]),
                stores=tuple(self._store_to_domain(s) for s in data["stores"]),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            raise BackendUnavailable(f"Corrupt data file {self._file_path}: {exc}") from exc

    def subscribe(
        self,
        on_snapshot: SnapshotListener,
        on_error: ErrorListener | None = None,
    ) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = (on_snapshot, on_error)
        self._deliver(on_snapshot, on_error)
        return Subscription(lambda: self._listeners.pop(token, None))

    # --- Write sink: price records --------------------------------------------

    def get_record(self, record_id: str) -> PriceRecord | None:
        return self.snapshot().find_record(record_id)

    def create_record(self, payload: NewPriceRecord) -> str:
        data = self._load_raw()
        try:
            recorded_at = self._stamp_time(data)
        except (TypeError, ValueError) as exc:
            raise BackendUnavailable(f"Corrupt data file {self._file_path}: {exc}") from exc
        record_id = self._take_id(data)
        record = payload.stamp(record_id, recorded_at)
        data["records"].append(self._record_to_raw(record))
        self._persist_raw(data)
        return record_id

    def update_record(self, record_id: str, payload: RecordUpdate) -> None:
        data = self._load_raw()
        index = self._index_of(data["records"], record_id, "Price record")
        current = self._record_to_domain(data["records"][index])
        data["records"][index] = self._record_to_raw(payload.apply_to(current))
        self._persist_raw(data)

    def delete_record(self, record_id: str) -> None:
        data = self._load_raw()
        index = self._index_of(data["records"], record_id, "Price record")
        del data["records"][index]
        self._persist_raw(data)

    # --- Write sink: stores ---------------------------------------------------

    def get_store(self, store_id: str) -> Store | None:
        return self.snapshot().find_store(store_id)

    def create_store(self, payload: NewStore) -> str:
        data = self._load_raw()
        store_id = self._take_id(data)
        store = payload.stamp(store_id, datetime.now(timezone.utc))
        data["stores"].append(self._store_to_raw(store))
        self._persist_raw(data)
        return store_id

    def update_store(self, store_id: str, payload: StoreUpdate) -> None:
        data = self._load_raw()
        index = self._index_of(data["stores"], store_id, "Store")
        current = self._store_to_domain(data["stores"][index])
        data["stores"][index] = self._store_to_raw(payload.apply_to(current))
        self._persist_raw(data)

    def delete_store(self, store_id: str) -> None:
        data = self._load_raw()
        index = self._index_of(data["stores"], store_id, "Store")
        del data["stores"][index]
        self._persist_raw(data)

    # --- Notification ---------------------------------------------------------

    def _deliver(self, on_snapshot: SnapshotListener, on_error: ErrorListener | None) -> None:
        try:
            snapshot = self.snapshot()
        except BackendUnavailable as exc:
            if on_error is None:
                logger.error("Snapshot delivery failed: %s", exc)
                return
            on_error(exc)
            return
        on_snapshot(snapshot)

    def _notify(self) -> None:
        for on_snapshot, on_error in list(self._listeners.values()):
            self._deliver(on_snapshot, on_error)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _record_to_raw(record: PriceRecord) -> dict:
        return {
            "id": record.id,
            "product": record.product,
            "store": record.store,
            "price": str(record.price.amount),
            "currency": record.price.currency,
            "promo_flag": record.promo_flag.value,
            "recorded_at": record.recorded_at.isoformat() if record.recorded_at else None,
            "display_date": record.display_date,
            "owner_id": record.owner_id,
        }

    @staticmethod
    def _record_to_domain(raw: dict) -> PriceRecord:
        recorded_at = raw.get("recorded_at")
        return PriceRecord(
            id=raw["id"],
            product=raw["product"],
            store=raw["store"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
            promo_flag=PromoFlag(raw.get("promo_flag", PromoFlag.WITHOUT_LOYALTY.value)),
            recorded_at=datetime.fromisoformat(recorded_at) if recorded_at else None,
            display_date=raw.get("display_date", ""),
            owner_id=raw.get("owner_id", ""),
        )

    @staticmethod
    def _store_to_raw(store: Store) -> dict:
        return {
            "id": store.id,
            "name": store.name,
            "address": store.address,
            "color_tag": store.color_tag.value,
            "owner_id": store.owner_id,
            "created_at": store.created_at.isoformat() if store.created_at else None,
        }

    @staticmethod
    def _store_to_domain(raw: dict) -> Store:
        created_at = raw.get("created_at")
        return Store(
            id=raw["id"],
            name=raw["name"],
            address=raw.get("address"),
            color_tag=ColorTag(raw.get("color_tag", ColorTag.BLUE.value)),
            owner_id=raw.get("owner_id", ""),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _take_id(data: dict) -> str:
        next_id = data.get("next_id", 1)
        data["next_id"] = next_id + 1
        return str(next_id)

    @staticmethod
    def _stamp_time(data: dict) -> datetime:
        now = datetime.now(timezone.utc)
        stamps = [
            _as_utc(datetime.fromisoformat(r["recorded_at"]))
            for r in data["records"]
            if r.get("recorded_at")
        ]
        if stamps:
            return max(now, *stamps)
        return now

    @staticmethod
    def _index_of(items: list[dict], item_id: str, label: str) -> int:
        for i, raw in enumerate(items):
            if raw["id"] == item_id:
                return i
        raise EntityNotFoundError(f"{label} '{item_id}' not found")

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise BackendUnavailable(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise BackendUnavailable(f"Corrupt data file {self._file_path}")
        data.setdefault("records", [])
        data.setdefault("stores", [])
        return data

    def _persist_raw(self, data: dict) -> None:
        try:
            self._file_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise BackendUnavailable(f"Cannot write {self._file_path}: {exc}") from exc
        self._notify()

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps({"next_id": 1, "records": [], "stores": []}) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise BackendUnavailable(f"Cannot create {self._file_path}: {exc}") from exc
        logger.info("Created empty data file %s", self._file_path)
