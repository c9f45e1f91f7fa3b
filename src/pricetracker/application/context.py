"""Data access context handed to every command.

Built once by the composition root; nothing in the application reaches
for a process-wide client or identity on its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from pricetracker.application.record_mapping import DEFAULT_DATE_FORMAT
from pricetracker.domain.repository.record_store import RecordStore


@dataclass(frozen=True)
class AppContext:

    record_store: RecordStore
    owner_id: str
    date_format: str = DEFAULT_DATE_FORMAT
    recent_limit: int = 4
