"""
Factory functions for application-scoped services.

Provides cached singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LoaderRegistry, create_default_registry
from infrastructure.persistence import KeyStore, create_key_store


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Usage:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_loader_registry() -> LoaderRegistry:
    """
    Get application-scoped loader registry singleton.

    Returns:
        LoaderRegistry: Built-in loaders restricted to TRANSLATIONS_FORMATS
        when configured.
    """
    settings = get_settings()
    return create_default_registry(settings.translations.formats or None)


@lru_cache
def get_key_store() -> KeyStore:
    """
    Get application-scoped key store singleton.

    Returns:
        KeyStore: Backend selected by TRANSLATIONS_STORE_BACKEND.
    """
    return create_key_store(get_settings())
