"""Unit tests for infrastructure.persistence.memory.InMemoryKeyStore."""

import pytest

from infrastructure.persistence.errors import PersistenceError
from infrastructure.persistence.memory import InMemoryKeyStore
from infrastructure.persistence.models import TranslationKey


@pytest.mark.unit
class TestFindAndCreate:
    def test_find_missing_returns_none(self, store):
        assert store.find_one_by_key_and_domain("checkout", "cart") is None

    def test_create_then_find(self, store):
        created = store.create("checkout", "cart")

        found = store.find_one_by_key_and_domain("checkout", "cart")

        assert found is created
        assert found.translated is False
        assert found.messages == {}

    def test_lookup_is_exact_on_key_and_domain(self, store):
        store.create("checkout", "cart")

        assert store.find_one_by_key_and_domain("checkout", "admin") is None
        assert store.find_one_by_key_and_domain("Checkout", "cart") is None

    def test_create_with_initial_translated_flag(self, store):
        key = store.create("checkout", "cart", initially_translated=True)

        assert key.translated is True

    def test_create_duplicate_raises(self, store):
        store.create("checkout", "cart")

        with pytest.raises(PersistenceError) as exc_info:
            store.create("checkout", "cart")

        assert exc_info.value.operation == "create"


@pytest.mark.unit
class TestSetMessage:
    def test_writes_message_and_marks_translated(self, store):
        key = store.create("checkout", "cart")

        assert store.set_message(key, "en", "Checkout") is True

        stored = store.find_one_by_key_and_domain("checkout", "cart")
        assert stored.get_message("en") == "Checkout"
        assert stored.translated is True

    def test_empty_message_does_not_mark_translated(self, store):
        key = store.create("checkout", "cart")

        store.set_message(key, "en", "")

        assert key.get_message("en") == ""
        assert key.translated is False

    def test_overwrite_replaces_message(self, store):
        key = store.create("checkout", "cart")
        store.set_message(key, "en", "Checkout")

        store.set_message(key, "en", "Pay", overwrite=True)

        assert key.get_message("en") == "Pay"
        assert len(key.messages) == 1

    def test_without_overwrite_existing_message_is_kept(self, store):
        key = store.create("checkout", "cart")
        store.set_message(key, "en", "Checkout")

        assert store.set_message(key, "en", "Pay", overwrite=False) is False
        assert key.get_message("en") == "Checkout"

    def test_without_overwrite_new_locale_is_written(self, store):
        key = store.create("checkout", "cart")
        store.set_message(key, "en", "Checkout")

        assert store.set_message(key, "fr", "Commander", overwrite=False) is True
        assert key.locales() == ["en", "fr"]

    def test_detached_copy_is_synced(self, store):
        store.create("checkout", "cart")
        copy = TranslationKey(trans_key="checkout", domain="cart")

        store.set_message(copy, "en", "Checkout")

        assert copy.get_message("en") == "Checkout"
        assert store.find_one_by_key_and_domain("checkout", "cart").translated

    def test_unknown_key_raises(self, store):
        with pytest.raises(PersistenceError):
            store.set_message(TranslationKey("checkout", "cart"), "en", "Checkout")


@pytest.mark.unit
class TestBulkOperations:
    def test_delete_all_returns_count(self, store):
        store.create("checkout", "cart")
        store.create("save", "admin")

        assert store.delete_all() == 2
        assert store.find_all() == []
        assert len(store) == 0

    def test_find_all_sorted_by_domain_then_key(self, store):
        store.create("b", "cart")
        store.create("z", "admin")
        store.create("a", "cart")

        assert [key.identity for key in store.find_all()] == [
            ("admin", "z"),
            ("cart", "a"),
            ("cart", "b"),
        ]

    def test_flush_is_counted(self):
        store = InMemoryKeyStore()

        store.flush()
        store.flush()

        assert store.flush_count == 2
