"""Unit tests for modules.translations.reconciler.Reconciler."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n.models import MessageCatalogue
from infrastructure.persistence.errors import PersistenceError
from infrastructure.persistence.memory import InMemoryKeyStore
from modules.translations.reconciler import Reconciler


@pytest.mark.unit
class TestReconcileWithoutForce:
    def test_creates_missing_keys_without_messages(self, reconciler, store, cart_catalogues):
        report = reconciler.reconcile(cart_catalogues, force=False)

        key = store.find_one_by_key_and_domain("checkout", "cart")
        assert key is not None
        assert key.messages == {}
        assert key.translated is False
        assert report.created_keys == 1
        assert report.messages_written == 0
        assert report.processed == 2

    def test_existing_messages_untouched(self, reconciler, store, cart_catalogues):
        key = store.create("checkout", "cart")
        store.set_message(key, "en", "Edited")

        reconciler.reconcile(cart_catalogues, force=False)

        assert key.get_message("en") == "Edited"
        assert not key.has_locale("fr")

    def test_idempotent(self, reconciler, store, cart_catalogues):
        reconciler.reconcile(cart_catalogues, force=False)
        snapshot = [(k.identity, dict(k.messages)) for k in store.find_all()]

        report = reconciler.reconcile(cart_catalogues, force=False)

        assert [(k.identity, dict(k.messages)) for k in store.find_all()] == snapshot
        assert report.created_keys == 0


@pytest.mark.unit
class TestReconcileWithForce:
    def test_writes_every_locale(self, reconciler, store, cart_catalogues):
        report = reconciler.reconcile(cart_catalogues, force=True)

        key = store.find_one_by_key_and_domain("checkout", "cart")
        assert key.get_message("en") == "Checkout"
        assert key.get_message("fr") == "Commander"
        assert key.translated is True
        assert report.created_keys == 1
        assert report.messages_written == 2

    def test_overwrites_catalogue_locales_only(self, reconciler, store, cart_catalogues):
        key = store.create("checkout", "cart")
        store.set_message(key, "en", "Edited")
        store.set_message(key, "de", "Kasse")

        reconciler.reconcile(cart_catalogues, force=True)

        assert key.get_message("en") == "Checkout"
        assert key.get_message("de") == "Kasse"

    def test_idempotent(self, reconciler, store, cart_catalogues):
        reconciler.reconcile(cart_catalogues, force=True)
        first = [(k.identity, dict(k.messages), k.translated) for k in store.find_all()]

        reconciler.reconcile(cart_catalogues, force=True)

        assert [
            (k.identity, dict(k.messages), k.translated) for k in store.find_all()
        ] == first


@pytest.mark.unit
class TestReconcileEdgeCases:
    def test_empty_keys_are_skipped(self, reconciler, store):
        catalogues = {"en": MessageCatalogue("en", {"cart": {"": "Nothing", "ok": "OK"}})}

        report = reconciler.reconcile(catalogues, force=True)

        assert store.find_one_by_key_and_domain("", "cart") is None
        assert report.skipped_empty_keys == 1
        assert report.processed == 1

    def test_empty_message_is_written_with_force(self, reconciler, store):
        catalogues = {"en": MessageCatalogue("en", {"cart": {"checkout": ""}})}

        reconciler.reconcile(catalogues, force=True)

        key = store.find_one_by_key_and_domain("checkout", "cart")
        assert key.get_message("en") == ""
        assert key.translated is False

    def test_empty_catalogues(self, reconciler, store):
        report = reconciler.reconcile({}, force=True)

        assert report.processed == 0
        assert store.find_all() == []

    def test_flushes_after_each_domain(self, store):
        catalogues = {
            "en": MessageCatalogue("en", {"cart": {"a": "A"}, "admin": {"b": "B"}}),
            "fr": MessageCatalogue("fr", {"cart": {"a": "A"}}),
        }

        Reconciler(store).reconcile(catalogues)

        assert store.flush_count == 3

    def test_keys_per_locale(self, reconciler):
        catalogues = {
            "en": MessageCatalogue("en", {"cart": {"a": "A", "b": "B"}}),
            "fr": MessageCatalogue("fr", {"cart": {"a": "A"}}),
        }

        report = reconciler.reconcile(catalogues)

        assert report.keys_per_locale == {"en": 2, "fr": 1}


@pytest.mark.unit
class TestReconcileFailures:
    def test_failure_is_recorded_and_loop_continues(self):
        store = InMemoryKeyStore()
        original_create = store.create

        def flaky_create(trans_key, domain, initially_translated=False):
            if trans_key == "broken":
                raise PersistenceError("create", "throttled")
            return original_create(trans_key, domain, initially_translated)

        store.create = flaky_create
        catalogues = {
            "en": MessageCatalogue("en", {"cart": {"broken": "x", "checkout": "Checkout"}})
        }

        report = Reconciler(store).reconcile(catalogues, force=True)

        assert not report.is_clean
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert (failure.locale, failure.domain, failure.trans_key) == (
            "en",
            "cart",
            "broken",
        )
        assert "throttled" in failure.error
        assert store.find_one_by_key_and_domain("checkout", "cart").get_message("en") == (
            "Checkout"
        )

    def test_lookup_failure_is_recorded(self):
        store = MagicMock()
        store.find_one_by_key_and_domain.side_effect = PersistenceError(
            "find_one_by_key_and_domain", "denied"
        )
        catalogues = {"en": MessageCatalogue("en", {"cart": {"checkout": "Checkout"}})}

        report = Reconciler(store).reconcile(catalogues, force=True)

        assert len(report.failures) == 1
        store.create.assert_not_called()
        store.flush.assert_called_once()

    def test_flush_failure_is_recorded_and_next_domain_runs(self):
        store = InMemoryKeyStore()
        flushes = []

        def flaky_flush():
            flushes.append(len(flushes))
            if len(flushes) == 1:
                raise PersistenceError("flush", "throttled")

        store.flush = flaky_flush
        catalogues = {
            "en": MessageCatalogue("en", {"admin": {"a": "A"}, "cart": {"b": "B"}})
        }

        report = Reconciler(store).reconcile(catalogues, force=True)

        assert len(flushes) == 2
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert (failure.locale, failure.domain, failure.trans_key) == ("en", "admin", "")
        assert "flush failed" in failure.error
        assert store.find_one_by_key_and_domain("b", "cart").get_message("en") == "B"
