"""Unit tests for PriceRecord and Store payloads."""

from decimal import Decimal

import pytest

from pricetracker.domain.exceptions import ValidationError
from pricetracker.domain.model.price_record import NewPriceRecord, RecordUpdate
from pricetracker.domain.model.snapshot import Snapshot, Subscription
from pricetracker.domain.model.store import NewStore, StoreUpdate
from pricetracker.domain.model.value_objects import ColorTag, Money, PromoFlag
from tests.fakes import at, make_record, make_store


def _new_record(product="Rice", store="A") -> NewPriceRecord:
    return NewPriceRecord(
        product=product,
        store=store,
        price=Money(Decimal("7.90")),
        promo_flag=PromoFlag.WITH_LOYALTY,
        display_date="18/10/2026",
        owner_id="u1",
    )


class TestNewPriceRecord:

    def test_trims_text_fields(self):
        payload = _new_record(product="  Rice ", store=" A ")
        assert payload.product == "Rice"
        assert payload.store == "A"

    def test_empty_product_rejected(self):
        with pytest.raises(ValidationError, match="Product is required"):
            _new_record(product="   ")

    def test_empty_store_rejected(self):
        with pytest.raises(ValidationError, match="Store is required"):
            _new_record(store="")

    def test_stamp_assigns_id_and_time(self):
        record = _new_record().stamp("7", at(5))
        assert record.id == "7"
        assert record.recorded_at == at(5)
        assert record.display_date == "18/10/2026"
        assert record.has_loyalty_price


class TestRecordUpdate:

    def test_keeps_timestamps_and_owner(self):
        original = make_record(recorded_at=3)
        update = RecordUpdate(
            product="Oat Milk", store="B", price=Money(Decimal("6.10")),
            promo_flag=PromoFlag.WITH_LOYALTY,
        )
        edited = update.apply_to(original)

        assert edited.id == original.id
        assert edited.product == "Oat Milk"
        assert edited.store == "B"
        assert edited.price == Money(Decimal("6.10"))
        assert edited.recorded_at == original.recorded_at
        assert edited.display_date == original.display_date
        assert edited.owner_id == original.owner_id


class TestStorePayloads:

    def test_defaults(self):
        payload = NewStore(name="Nicolini", owner_id="u1")
        assert payload.color_tag is ColorTag.BLUE
        assert payload.address is None

    def test_blank_address_becomes_none(self):
        assert NewStore(name="X", owner_id="u1", address="  ").address is None

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Store name is required"):
            NewStore(name=" ", owner_id="u1")

    def test_update_keeps_provenance(self):
        store = make_store(name="Old", store_id="4")
        updated = StoreUpdate(name="New", color_tag=ColorTag.RED).apply_to(store)
        assert updated.id == "4"
        assert updated.name == "New"
        assert updated.color_tag is ColorTag.RED
        assert updated.owner_id == store.owner_id
        assert updated.created_at == store.created_at


class TestSnapshot:

    def test_empty(self):
        snap = Snapshot.empty()
        assert snap.records == ()
        assert snap.stores == ()

    def test_find(self):
        snap = Snapshot(records=(make_record(record_id="9"),), stores=(make_store(store_id="2"),))
        assert snap.find_record("9").id == "9"
        assert snap.find_record("1") is None
        assert snap.find_store("2").id == "2"


class TestSubscription:

    def test_cancel_runs_once(self):
        calls = []
        sub = Subscription(lambda: calls.append(1))
        assert sub.active
        sub.cancel()
        sub.cancel()
        assert not sub.active
        assert calls == [1]
