"""Persistence layer for translation keys.

Provides the KeyStore contract used by the import engine and its storage
backends (in-memory and DynamoDB).
"""

from infrastructure.persistence.errors import PersistenceError
from infrastructure.persistence.factory import create_key_store
from infrastructure.persistence.memory import InMemoryKeyStore
from infrastructure.persistence.models import LocalizedMessage, TranslationKey
from infrastructure.persistence.store import KeyStore

__all__ = [
    "KeyStore",
    "InMemoryKeyStore",
    "TranslationKey",
    "LocalizedMessage",
    "PersistenceError",
    "create_key_store",
]
