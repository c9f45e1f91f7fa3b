"""Application services: store management use cases.

Store changes never reach price records. Records keep the store name
they were entered with, so renaming or deleting a store leaves them
pointing at a name that may no longer exist.
"""

from __future__ import annotations

import logging

from pricetracker.application.dto import StoreDraft
from pricetracker.application.record_mapping import to_new_store, to_store_update
from pricetracker.domain.exceptions import EntityNotFoundError, ValidationError
from pricetracker.domain.model.value_objects import ColorTag
from pricetracker.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_STORES = (
    StoreDraft(name="Rede Vivo", color_tag=ColorTag.RED),
    StoreDraft(name="Rede Super", color_tag=ColorTag.ORANGE),
    StoreDraft(name="Nicolini", color_tag=ColorTag.GREEN),
    StoreDraft(name="Beltrame", color_tag=ColorTag.BLUE),
)


def _assert_name_free(record_store: RecordStore, name: str, store_id: str | None = None) -> None:
    wanted = name.strip().lower()
    for store in record_store.snapshot().stores:
        if store.name.lower() == wanted and store.id != store_id:
            raise ValidationError(f"Store '{store.name}' already exists")


class AddStoreHandler:

    def __init__(self, record_store: RecordStore, owner_id: str) -> None:
        self._record_store = record_store
        self._owner_id = owner_id

    def handle(self, draft: StoreDraft) -> str:
        payload = to_new_store(draft, owner_id=self._owner_id)
        _assert_name_free(self._record_store, payload.name)
        store_id = self._record_store.create_store(payload)
        logger.info("Added store %s (id=%s)", payload.name, store_id)
        return store_id


class EditStoreHandler:

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store

    def handle(self, store_id: str, draft: StoreDraft) -> None:
        if self._record_store.get_store(store_id) is None:
            raise EntityNotFoundError(f"Store '{store_id}' not found")

        payload = to_store_update(draft)
        _assert_name_free(self._record_store, payload.name, store_id=store_id)
        self._record_store.update_store(store_id, payload)
        logger.info("Updated store %s", store_id)


class DeleteStoreHandler:

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store

    def handle(self, store_id: str) -> None:
        if self._record_store.get_store(store_id) is None:
            raise EntityNotFoundError(f"Store '{store_id}' not found")
        self._record_store.delete_store(store_id)
        logger.info("Deleted store %s", store_id)


class SeedStoresHandler:
    """Create the default supermarkets when no store exists yet."""

    def __init__(self, record_store: RecordStore, owner_id: str) -> None:
        self._record_store = record_store
        self._owner_id = owner_id

    def handle(self) -> list[str]:
        if self._record_store.snapshot().stores:
            return []
        return [
            self._record_store.create_store(to_new_store(draft, owner_id=self._owner_id))
            for draft in DEFAULT_STORES
        ]
