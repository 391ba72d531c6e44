"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the translation
importer using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslationsSettings: Translation feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    roots = settings.translations.resource_roots
    backend = settings.translations.store_backend
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features.translations import TranslationsSettings

__all__ = ["Settings", "TranslationsSettings", "settings"]
