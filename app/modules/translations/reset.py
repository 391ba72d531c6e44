"""Destructive pre-import reset of the key store."""

from infrastructure.logging import get_module_logger
from infrastructure.persistence.store import KeyStore
from modules.translations.errors import ResetError

logger = get_module_logger()


def reset_all(store: KeyStore) -> int:
    """Delete every stored translation key and its messages.

    Must complete before building and reconciling; a partial reset followed
    by an import would mix old and new data.

    Args:
        store: KeyStore to clear.

    Returns:
        Number of translation keys deleted.

    Raises:
        ResetError: If the store could not be cleared.
    """
    logger.warning("deleting_all_translations")
    try:
        deleted = store.delete_all()
    except Exception as e:  # pylint: disable=broad-except
        logger.error("translation_reset_failed", error=str(e), exc_info=True)
        raise ResetError(f"could not delete stored translations: {e}") from e

    logger.info("translations_deleted", keys_deleted=deleted)
    return deleted
