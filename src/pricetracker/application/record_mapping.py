"""Form-to-record mapping.

Turns drafts into payloads the record store accepts, and persisted
entities back into drafts for edit mode. Every rejection is a
ValidationError; the caller keeps the user on the form and shows it.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from pricetracker.application.dto import PriceDraft, StoreDraft
from pricetracker.domain.exceptions import ValidationError
from pricetracker.domain.model.price_record import NewPriceRecord, PriceRecord, RecordUpdate
from pricetracker.domain.model.store import NewStore, Store, StoreUpdate
from pricetracker.domain.model.value_objects import DEFAULT_COLOR, MAX_AMOUNT, Money

DEFAULT_DATE_FORMAT = "%d/%m/%Y"


# --- Price text -------------------------------------------------------------


def parse_price(text: str) -> Decimal:
    """Parse user-entered price text into a non-negative Decimal."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Price is required")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValidationError(f"Price must be a number, got {text!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Price must be a number, got {text!r}")
    if amount < 0:
        raise ValidationError(f"Price cannot be negative, got {text!r}")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"Price is too large, got {text!r}")
    # "-0" is accepted as zero
    return abs(amount)


def price_to_text(amount: Decimal) -> str:
    """Editable text for a stored price: ``4.50 -> "4.5"``, ``100 -> "100"``."""
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")


def _required(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


# --- Price records ----------------------------------------------------------


def to_new_record(
    draft: PriceDraft,
    owner_id: str,
    today: date,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> NewPriceRecord:
    """Create path. ``display_date`` is captured here, once."""
    product = _required(draft.product, "Product")
    store = _required(draft.store, "Store")
    price = Money(parse_price(draft.price_text))
    return NewPriceRecord(
        product=product,
        store=store,
        price=price,
        promo_flag=draft.promo_flag,
        display_date=today.strftime(date_format),
        owner_id=owner_id,
    )


def to_record_update(record: PriceRecord, draft: PriceDraft) -> RecordUpdate:
    """Edit path: replaces product, price, store and promo flag only."""
    product = _required(draft.product, "Product")
    store = _required(draft.store, "Store")
    return RecordUpdate(
        product=product,
        store=store,
        price=Money(parse_price(draft.price_text), record.price.currency),
        promo_flag=draft.promo_flag,
    )


def to_price_draft(record: PriceRecord) -> PriceDraft:
    """Load a persisted record into edit mode."""
    return PriceDraft(
        product=record.product,
        store=record.store,
        price_text=price_to_text(record.price.amount),
        promo_flag=record.promo_flag,
    )


# --- Stores -----------------------------------------------------------------


def to_new_store(draft: StoreDraft, owner_id: str) -> NewStore:
    return NewStore(
        name=_required(draft.name, "Store name"),
        owner_id=owner_id,
        address=draft.address,
        color_tag=draft.color_tag or DEFAULT_COLOR,
    )


def to_store_update(draft: StoreDraft) -> StoreUpdate:
    return StoreUpdate(
        name=_required(draft.name, "Store name"),
        address=draft.address,
        color_tag=draft.color_tag or DEFAULT_COLOR,
    )


def to_store_draft(store: Store) -> StoreDraft:
    return StoreDraft(name=store.name, address=store.address, color_tag=store.color_tag)
