"""Application service: Delete Price use case."""

from __future__ import annotations

import logging

from pricetracker.domain.exceptions import EntityNotFoundError
from pricetracker.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class DeletePriceHandler:

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store

    def handle(self, record_id: str) -> None:
        if self._record_store.get_record(record_id) is None:
            raise EntityNotFoundError(f"Price record '{record_id}' not found")
        self._record_store.delete_record(record_id)
        logger.info("Deleted price record %s", record_id)
