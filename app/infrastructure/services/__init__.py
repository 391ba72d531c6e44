"""
Application-scoped services.

Provides cached provider functions for settings, loader registry and key store.
"""

from infrastructure.services.providers import (
    get_settings,
    get_loader_registry,
    get_key_store,
)

__all__ = [
    "get_settings",
    "get_loader_registry",
    "get_key_store",
]
