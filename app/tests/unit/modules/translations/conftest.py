"""Fixtures for modules.translations tests."""

import pytest

from infrastructure.i18n.models import MessageCatalogue
from modules.translations.builder import CatalogueBuilder
from modules.translations.reconciler import Reconciler


@pytest.fixture
def builder(registry):
    return CatalogueBuilder(registry)


@pytest.fixture
def reconciler(store):
    return Reconciler(store)


@pytest.fixture
def cart_catalogues():
    """Catalogues built from cart.en.yml and cart.fr.yml."""
    return {
        "en": MessageCatalogue("en", {"cart": {"checkout": "Checkout"}}),
        "fr": MessageCatalogue("fr", {"cart": {"checkout": "Commander"}}),
    }
