"""Unit tests for the form-to-record mapping."""

from datetime import date
from decimal import Decimal

import pytest

from pricetracker.application.dto import PriceDraft, StoreDraft
from pricetracker.application.record_mapping import (
    parse_price,
    price_to_text,
    to_new_record,
    to_new_store,
    to_price_draft,
    to_record_update,
    to_store_draft,
    to_store_update,
)
from pricetracker.domain.exceptions import ValidationError
from pricetracker.domain.model.value_objects import ColorTag, Money, PromoFlag
from tests.fakes import make_record, make_store

TODAY = date(2026, 10, 18)


class TestParsePrice:

    @pytest.mark.parametrize(
        "text, expected",
        [("4.5", "4.5"), (" 3.50 ", "3.50"), ("0", "0"), ("12", "12"), ("-0", "0")],
    )
    def test_valid(self, text, expected):
        assert parse_price(text) == Decimal(expected)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_missing(self, text):
        with pytest.raises(ValidationError, match="Price is required"):
            parse_price(text)

    @pytest.mark.parametrize("text", ["abc", "4,50", "1.2.3", "NaN", "Infinity"])
    def test_not_a_number(self, text):
        with pytest.raises(ValidationError, match="must be a number"):
            parse_price(text)

    def test_negative(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            parse_price("-1")

    @pytest.mark.parametrize("text", ["1e30", "100000000000000000000000000", "1000000000000"])
    def test_too_large(self, text):
        with pytest.raises(ValidationError, match="too large"):
            parse_price(text)

    def test_largest_accepted_price_still_formats(self):
        assert str(Money(parse_price("999999999999.99"))) == "R$ 999999999999.99"


class TestPriceToText:

    def test_examples(self):
        assert price_to_text(Decimal("4.5")) == "4.5"
        assert price_to_text(Decimal("4.50")) == "4.5"
        assert price_to_text(Decimal("100")) == "100"
        assert price_to_text(Decimal("100.00")) == "100"
        assert price_to_text(Decimal("0.00")) == "0"
        assert price_to_text(Decimal("0.05")) == "0.05"

    def test_round_trips_through_parser(self):
        for value in ("4.5", "0.01", "19.99", "250", "1000.1", "0"):
            amount = Decimal(value)
            assert parse_price(price_to_text(amount)) == amount


class TestCreatePath:

    def test_builds_payload(self):
        draft = PriceDraft(
            product=" Rice ", store="A", price_text="7.9", promo_flag=PromoFlag.WITH_LOYALTY
        )
        payload = to_new_record(draft, owner_id="u1", today=TODAY)

        assert payload.product == "Rice"
        assert payload.store == "A"
        assert payload.price == Money(Decimal("7.9"))
        assert payload.promo_flag is PromoFlag.WITH_LOYALTY
        assert payload.owner_id == "u1"
        assert payload.display_date == "18/10/2026"

    def test_custom_date_format(self):
        draft = PriceDraft(product="Rice", store="A", price_text="1")
        payload = to_new_record(draft, owner_id="u1", today=TODAY, date_format="%Y-%m-%d")
        assert payload.display_date == "2026-10-18"

    def test_oversized_price_rejected_before_payload(self):
        with pytest.raises(ValidationError, match="too large"):
            to_new_record(PriceDraft("Rice", "A", "1e30"), owner_id="u1", today=TODAY)

    def test_default_promo_flag(self):
        payload = to_new_record(PriceDraft("Rice", "A", "1"), owner_id="u1", today=TODAY)
        assert payload.promo_flag is PromoFlag.WITHOUT_LOYALTY

    def test_empty_product_rejected(self):
        with pytest.raises(ValidationError, match="Product is required"):
            to_new_record(PriceDraft("", "X", "3.50"), owner_id="u1", today=TODAY)

    def test_unselected_store_rejected(self):
        with pytest.raises(ValidationError, match="Store is required"):
            to_new_record(PriceDraft("Rice", "  ", "3.50"), owner_id="u1", today=TODAY)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            to_new_record(PriceDraft("Rice", "A", "-1"), owner_id="u1", today=TODAY)


class TestEditPath:

    def test_update_overwrites_editable_fields(self):
        record = make_record(product="Milk", store="A", price="5.00")
        draft = PriceDraft(
            product="Milk 1L", store="B", price_text="4.2", promo_flag=PromoFlag.WITH_LOYALTY
        )
        update = to_record_update(record, draft)

        assert update.product == "Milk 1L"
        assert update.store == "B"
        assert update.price == Money(Decimal("4.2"))
        assert update.promo_flag is PromoFlag.WITH_LOYALTY
        assert not hasattr(update, "recorded_at")
        assert not hasattr(update, "display_date")

    def test_update_validates_like_create(self):
        with pytest.raises(ValidationError):
            to_record_update(make_record(), PriceDraft("Milk", "A", "oops"))

    def test_load_into_edit_mode(self):
        record = make_record(product="Milk", store="A", price="4.50")
        draft = to_price_draft(record)
        assert draft == PriceDraft(
            product="Milk", store="A", price_text="4.5", promo_flag=record.promo_flag
        )

    def test_load_then_save_keeps_price(self):
        record = make_record(price="4.5")
        update = to_record_update(record, to_price_draft(record))
        assert update.price == record.price


class TestStoreMapping:

    def test_create_defaults(self):
        payload = to_new_store(StoreDraft(name="Beltrame"), owner_id="u1")
        assert payload.name == "Beltrame"
        assert payload.address is None
        assert payload.color_tag is ColorTag.BLUE
        assert payload.owner_id == "u1"

    def test_create_rejects_blank_name(self):
        with pytest.raises(ValidationError, match="Store name is required"):
            to_new_store(StoreDraft(name=""), owner_id="u1")

    def test_update(self):
        update = to_store_update(
            StoreDraft(name=" Rede Vivo ", address="Rua 1", color_tag=ColorTag.RED)
        )
        assert update.name == "Rede Vivo"
        assert update.address == "Rua 1"
        assert update.color_tag is ColorTag.RED

    def test_round_trip_through_draft(self):
        store = make_store(name="Nicolini", color_tag=ColorTag.GREEN, address="Av. 7")
        draft = to_store_draft(store)
        assert to_store_update(draft).apply_to(store) == store
