"""Application service: Add Price use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from pricetracker.application.dto import PriceDraft
from pricetracker.application.record_mapping import DEFAULT_DATE_FORMAT, to_new_record
from pricetracker.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class AddPriceHandler:

    def __init__(
        self,
        record_store: RecordStore,
        owner_id: str,
        date_format: str = DEFAULT_DATE_FORMAT,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._record_store = record_store
        self._owner_id = owner_id
        self._date_format = date_format
        self._today = today

    def handle(self, draft: PriceDraft) -> str:
        """Validate the draft and hand the new record to the store.

        Returns the id assigned by the store. The timestamp is stamped by
        the store too; only the display date is fixed here.
        """
        payload = to_new_record(
            draft,
            owner_id=self._owner_id,
            today=self._today(),
            date_format=self._date_format,
        )
        record_id = self._record_store.create_record(payload)
        logger.info(
            "Recorded %s at %s for %s (id=%s)",
            payload.product, payload.store, payload.price, record_id,
        )
        return record_id
