"""Application service: Edit Price use case.

Edits overwrite the record in place; the previous price is not kept.
The original timestamp and display date survive the edit.
"""

from __future__ import annotations

import logging

from pricetracker.application.dto import PriceDraft
from pricetracker.application.record_mapping import to_price_draft, to_record_update
from pricetracker.domain.exceptions import EntityNotFoundError
from pricetracker.domain.repository.record_store import RecordStore

logger = logging.getLogger(__name__)


class EditPriceHandler:

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store

    def load(self, record_id: str) -> PriceDraft:
        """Return the record as an editable draft."""
        record = self._record_store.get_record(record_id)
        if record is None:
            raise EntityNotFoundError(f"Price record '{record_id}' not found")
        return to_price_draft(record)

    def handle(self, record_id: str, draft: PriceDraft) -> None:
        record = self._record_store.get_record(record_id)
        if record is None:
            raise EntityNotFoundError(f"Price record '{record_id}' not found")

        payload = to_record_update(record, draft)
        self._record_store.update_record(record_id, payload)
        logger.info("Updated price record %s", record_id)
