"""Key store factory."""

from typing import TYPE_CHECKING, Optional

from infrastructure.logging import get_module_logger
from infrastructure.persistence.memory import InMemoryKeyStore
from infrastructure.persistence.store import KeyStore

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def create_key_store(
    settings: "Settings", backend: Optional[str] = None
) -> KeyStore:
    """Create the key store selected by configuration.

    Args:
        settings: Settings instance.
        backend: Optional override of TRANSLATIONS_STORE_BACKEND
            ('memory' or 'dynamodb').

    Returns:
        KeyStore implementation for the backend.

    Raises:
        ValueError: If the backend is unknown.
    """
    backend = (backend or settings.translations.store_backend).lower()

    if backend == "memory":
        store: KeyStore = InMemoryKeyStore()
    elif backend == "dynamodb":
        # pulls in boto3
        from infrastructure.persistence.dynamodb_translations import DynamoDBKeyStore

        store = DynamoDBKeyStore(table_name=settings.translations.dynamodb_table_name)
    else:
        raise ValueError(f"Unknown key store backend: {backend}")

    logger.info("initialized_key_store", backend=backend)
    return store
