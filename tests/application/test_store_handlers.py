"""Integration tests for the store management use cases."""

import pytest

from pricetracker.application.dto import StoreDraft
from pricetracker.application.manage_stores import (
    DEFAULT_STORES,
    AddStoreHandler,
    DeleteStoreHandler,
    EditStoreHandler,
    SeedStoresHandler,
)
from pricetracker.domain.exceptions import EntityNotFoundError, ValidationError
from pricetracker.domain.model.value_objects import ColorTag
from pricetracker.domain.service.comparison import store_color
from tests.fakes import FakeRecordStore, make_record, make_store


class TestAddStore:

    def test_creates_with_defaults(self):
        store = FakeRecordStore()
        store_id = AddStoreHandler(store, owner_id="u1").handle(StoreDraft(name="Beltrame"))

        saved = store.get_store(store_id)
        assert saved.name == "Beltrame"
        assert saved.color_tag is ColorTag.BLUE
        assert saved.owner_id == "u1"

    def test_duplicate_name_rejected(self):
        store = FakeRecordStore(stores=[make_store(name="Beltrame")])
        with pytest.raises(ValidationError, match="already exists"):
            AddStoreHandler(store, owner_id="u1").handle(StoreDraft(name="beltrame"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            AddStoreHandler(FakeRecordStore(), owner_id="u1").handle(StoreDraft(name=" "))


class TestEditStore:

    def test_rename_does_not_touch_price_records(self):
        record = make_record(store="Old Name")
        store = FakeRecordStore(
            records=[record],
            stores=[make_store(name="Old Name", store_id="5", color_tag=ColorTag.RED)],
        )

        EditStoreHandler(store).handle("5", StoreDraft(name="New Name", color_tag=ColorTag.RED))

        snapshot = store.snapshot()
        assert snapshot.records[0].store == "Old Name"
        assert store_color(snapshot.stores, "Old Name") is ColorTag.BLUE
        assert store_color(snapshot.stores, "New Name") is ColorTag.RED

    def test_keeping_own_name_is_allowed(self):
        store = FakeRecordStore(stores=[make_store(name="A", store_id="5")])
        EditStoreHandler(store).handle("5", StoreDraft(name="A", address="Rua 2"))
        assert store.get_store("5").address == "Rua 2"

    def test_taking_another_stores_name_rejected(self):
        store = FakeRecordStore(
            stores=[make_store(name="A", store_id="5"), make_store(name="B", store_id="6")]
        )
        with pytest.raises(ValidationError, match="already exists"):
            EditStoreHandler(store).handle("5", StoreDraft(name="B"))

    def test_unknown_store(self):
        with pytest.raises(EntityNotFoundError):
            EditStoreHandler(FakeRecordStore()).handle("1", StoreDraft(name="X"))


class TestDeleteStore:

    def test_does_not_cascade(self):
        store = FakeRecordStore(
            records=[make_record(store="A")],
            stores=[make_store(name="A", store_id="5")],
        )
        DeleteStoreHandler(store).handle("5")

        snapshot = store.snapshot()
        assert snapshot.stores == ()
        assert len(snapshot.records) == 1

    def test_unknown_store(self):
        with pytest.raises(EntityNotFoundError):
            DeleteStoreHandler(FakeRecordStore()).handle("1")


class TestSeedStores:

    def test_seeds_defaults_into_empty_store(self):
        store = FakeRecordStore()
        created = SeedStoresHandler(store, owner_id="u1").handle()

        assert len(created) == len(DEFAULT_STORES)
        names = {s.name for s in store.snapshot().stores}
        assert names == {"Rede Vivo", "Rede Super", "Nicolini", "Beltrame"}

    def test_noop_when_stores_exist(self):
        store = FakeRecordStore(stores=[make_store()])
        assert SeedStoresHandler(store, owner_id="u1").handle() == []
        assert len(store.snapshot().stores) == 1
