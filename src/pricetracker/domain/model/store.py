"""Store entity.

Stores live independently of price records. They are created, renamed
and deleted on their own; nothing cascades to records that mention them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pricetracker.domain.exceptions import ValidationError
from pricetracker.domain.model.value_objects import DEFAULT_COLOR, ColorTag


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Store name is required")
    return name.strip()


def _clean_address(address: str | None) -> str | None:
    if address is None or not address.strip():
        return None
    return address.strip()


@dataclass(frozen=True)
class Store:

    id: str
    name: str
    address: str | None
    color_tag: ColorTag
    owner_id: str
    created_at: datetime | None


@dataclass(frozen=True)
class NewStore:
    """Create payload for a store."""

    name: str
    owner_id: str
    address: str | None = None
    color_tag: ColorTag = DEFAULT_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _clean_name(self.name))
        object.__setattr__(self, "address", _clean_address(self.address))

    def stamp(self, store_id: str, created_at: datetime) -> Store:
        return Store(
            id=store_id,
            name=self.name,
            address=self.address,
            color_tag=self.color_tag,
            owner_id=self.owner_id,
            created_at=created_at,
        )


@dataclass(frozen=True)
class StoreUpdate:
    """Edit payload for a store. Provenance fields are never touched."""

    name: str
    address: str | None = None
    color_tag: ColorTag = DEFAULT_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _clean_name(self.name))
        object.__setattr__(self, "address", _clean_address(self.address))

    def apply_to(self, store: Store) -> Store:
        return Store(
            id=store.id,
            name=self.name,
            address=self.address,
            color_tag=self.color_tag,
            owner_id=store.owner_id,
            created_at=store.created_at,
        )
