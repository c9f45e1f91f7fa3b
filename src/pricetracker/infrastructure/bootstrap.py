"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pricetracker.application.context import AppContext
from pricetracker.infrastructure.persistence.json_record_store import JsonRecordStore
from pricetracker.infrastructure.settings import Settings


def record_store(settings: Settings) -> JsonRecordStore:
    return JsonRecordStore(settings.data_file)


def build_context(settings: Settings) -> AppContext:
    return AppContext(
        record_store=record_store(settings),
        owner_id=settings.owner_id,
        date_format=settings.date_format,
        recent_limit=settings.recent_limit,
    )
