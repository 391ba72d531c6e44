"""Key store abstract base class."""

from abc import ABC, abstractmethod
from typing import List, Optional

from infrastructure.persistence.models import TranslationKey


class KeyStore(ABC):
    """Abstract base class for translation key persistence.

    Defines the operations the import engine needs to look up, create and
    update stored translation keys. Implementations raise PersistenceError
    when an operation cannot complete.
    """

    @abstractmethod
    def find_one_by_key_and_domain(
        self, trans_key: str, domain: str
    ) -> Optional[TranslationKey]:
        """Look up a translation key by exact (trans_key, domain) match.

        Returns:
            The stored TranslationKey or None if absent.
        """
        pass

    @abstractmethod
    def create(
        self, trans_key: str, domain: str, initially_translated: bool = False
    ) -> TranslationKey:
        """Create and persist a translation key with no messages.

        Returns:
            The created TranslationKey.
        """
        pass

    @abstractmethod
    def set_message(
        self,
        translation_key: TranslationKey,
        locale: str,
        message: str,
        overwrite: bool = True,
    ) -> bool:
        """Write the message of a translation key for a locale.

        Args:
            translation_key: Key to update (found or created earlier).
            locale: Locale of the message.
            message: Message body.
            overwrite: Replace an existing message for the locale. When False,
                an existing message is left untouched.

        Returns:
            True if the message was written, False if an existing message
            was kept.
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every translation key and its messages.

        Returns:
            Number of translation keys deleted.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[TranslationKey]:
        """Return every stored translation key."""
        pass

    def flush(self) -> None:
        """Push buffered writes to the backend.

        Called by the reconciler after each domain. Backends that write
        through on every call have nothing to flush.
        """
