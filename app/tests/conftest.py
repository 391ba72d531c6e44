"""Shared fixtures for the translation importer test suite."""

from pathlib import Path
from typing import Callable, Dict

import pytest
import structlog
from botocore.exceptions import ClientError

from infrastructure.i18n import create_default_registry
from infrastructure.persistence import InMemoryKeyStore
from infrastructure.services import providers


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Clear run context between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Providers are lru_cached singletons; start every test fresh."""
    providers.get_settings.cache_clear()
    providers.get_loader_registry.cache_clear()
    providers.get_key_store.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_loader_registry.cache_clear()
    providers.get_key_store.cache_clear()


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def store():
    return InMemoryKeyStore()


@pytest.fixture
def write_files(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Write a tree of text files under tmp_path and return its root.

    Usage:
        root = write_files({"cart.en.yml": "checkout: Checkout"})
    """

    def _write(files: Dict[str, str], root: str = "translations") -> Path:
        base = tmp_path / root
        base.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return base

    return _write


@pytest.fixture
def make_client_error() -> Callable[..., ClientError]:
    def _make(code: str, operation: str = "PutItem", message: str = "error"):
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)

    return _make
