"""PriceRecord entity and the payloads the record store accepts for it.

A price record captures one observation: a product seen at a store for a
given price. The store is referenced by *name*, not by id, so renaming or
deleting a Store leaves historical records untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pricetracker.domain.exceptions import ValidationError
from pricetracker.domain.model.value_objects import Money, PromoFlag


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


@dataclass(frozen=True)
class PriceRecord:
    """A persisted price observation.

    The constructor does not validate so the record store can reconstitute
    whatever it holds. New records enter through ``NewPriceRecord``.
    """

    id: str
    product: str
    store: str
    price: Money
    promo_flag: PromoFlag
    recorded_at: datetime | None  # stamped by the record store
    display_date: str
    owner_id: str

    @property
    def has_loyalty_price(self) -> bool:
        return self.promo_flag is PromoFlag.WITH_LOYALTY


@dataclass(frozen=True)
class NewPriceRecord:
    """Create payload: everything except the store-assigned id and timestamp."""

    product: str
    store: str
    price: Money
    promo_flag: PromoFlag
    display_date: str
    owner_id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "product", _require_text(self.product, "Product"))
        object.__setattr__(self, "store", _require_text(self.store, "Store"))

    def stamp(self, record_id: str, recorded_at: datetime) -> PriceRecord:
        """Materialize the record once the store has assigned id and time."""
        return PriceRecord(
            id=record_id,
            product=self.product,
            store=self.store,
            price=self.price,
            promo_flag=self.promo_flag,
            recorded_at=recorded_at,
            display_date=self.display_date,
            owner_id=self.owner_id,
        )


@dataclass(frozen=True)
class RecordUpdate:
    """Edit payload. Full replace of the user-editable fields only.

    ``recorded_at``, ``display_date`` and ``owner_id`` are deliberately
    absent: an edit can never move a record in time.
    """

    product: str
    store: str
    price: Money
    promo_flag: PromoFlag

    def __post_init__(self) -> None:
        object.__setattr__(self, "product", _require_text(self.product, "Product"))
        object.__setattr__(self, "store", _require_text(self.store, "Store"))

    def apply_to(self, record: PriceRecord) -> PriceRecord:
        return PriceRecord(
            id=record.id,
            product=self.product,
            store=self.store,
            price=self.price,
            promo_flag=self.promo_flag,
            recorded_at=record.recorded_at,
            display_date=record.display_date,
            owner_id=record.owner_id,
        )
