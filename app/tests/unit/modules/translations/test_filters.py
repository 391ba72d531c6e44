"""Unit tests for modules.translations.filters.TranslationFilter."""

import pytest

from infrastructure.persistence.models import LocalizedMessage, TranslationKey
from modules.translations.filters import TranslationFilter


def _key(trans_key, domain, **messages):
    return TranslationKey(
        trans_key=trans_key,
        domain=domain,
        translated=any(messages.values()),
        messages={
            locale: LocalizedMessage(locale=locale, message=message)
            for locale, message in messages.items()
        },
    )


@pytest.fixture
def keys():
    return [
        _key("checkout", "cart", en="Checkout", fr="Commander"),
        _key("remove", "cart", en="Remove", fr=""),
        _key("save", "admin", en="Save", fr="__Save"),
        _key("title", "admin", en="Admin"),
    ]


@pytest.fixture
def translation_filter():
    return TranslationFilter(["en", "fr"], ["", "__"])


@pytest.mark.unit
class TestChoices:
    def test_locale_choices(self, translation_filter):
        assert translation_filter.locale_choices() == {"en": "en", "fr": "fr"}

    def test_domain_choices_sorted_distinct(self, translation_filter, keys):
        assert translation_filter.domain_choices(keys) == ["admin", "cart"]

    def test_unmanaged_locales_ignored(self, translation_filter):
        assert translation_filter.selected_locales(["fr", "de"]) == ["fr"]

    def test_no_locales_selects_all_managed(self, translation_filter):
        assert translation_filter.selected_locales() == ["en", "fr"]


@pytest.mark.unit
class TestApply:
    def test_no_criteria_returns_everything(self, translation_filter, keys):
        assert translation_filter.apply(keys) == keys

    def test_domain(self, translation_filter, keys):
        result = translation_filter.apply(keys, domain="cart")

        assert [k.trans_key for k in result] == ["checkout", "remove"]

    def test_domain_all_disables_filter(self, translation_filter, keys):
        assert translation_filter.apply(keys, domain="all") == keys

    def test_trans_key_substring(self, translation_filter, keys):
        result = translation_filter.apply(keys, trans_key="eck")

        assert [k.trans_key for k in result] == ["checkout"]

    def test_label_in_selected_locales(self, translation_filter, keys):
        assert [k.trans_key for k in translation_filter.apply(keys, label="Comm")] == [
            "checkout"
        ]
        assert translation_filter.apply(keys, locales=["en"], label="Comm") == []

    def test_untranslated_only(self, translation_filter, keys):
        result = translation_filter.apply(keys, untranslated_only=True)

        assert [k.trans_key for k in result] == ["remove", "save", "title"]

    def test_untranslated_in_selected_locale(self, translation_filter, keys):
        result = translation_filter.apply(keys, locales=["en"], untranslated_only=True)

        assert result == []

    def test_prefix_only_with_empty_prefix_configured(self, keys):
        translation_filter = TranslationFilter(["en", "fr"], [""])

        result = translation_filter.apply(keys, untranslated_only=True)

        assert [k.trans_key for k in result] == ["remove", "title"]

    def test_criteria_combine(self, translation_filter, keys):
        result = translation_filter.apply(
            keys, domain="admin", untranslated_only=True, trans_key="sa"
        )

        assert [k.trans_key for k in result] == ["save"]
