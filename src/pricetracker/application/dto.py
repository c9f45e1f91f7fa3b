"""Drafts: plain containers for what the user typed.

Drafts carry raw form input from the CLI into the application layer.
Nothing in a draft is validated yet; the mapping functions in
``record_mapping`` turn drafts into payloads or raise ValidationError.
"""

from __future__ import annotations

from dataclasses import dataclass

from pricetracker.domain.model.value_objects import ColorTag, PromoFlag


@dataclass(frozen=True)
class PriceDraft:
    """Input for creating or editing a price record.

    ``price_text`` is kept exactly as entered, e.g. ``"4.5"``.
    """

    product: str
    store: str
    price_text: str
    promo_flag: PromoFlag = PromoFlag.WITHOUT_LOYALTY


@dataclass(frozen=True)
class StoreDraft:
    """Input for creating or editing a store. Blank fields take defaults."""

    name: str
    address: str | None = None
    color_tag: ColorTag | None = None
