"""In-memory key store implementation."""

from typing import Dict, List, Optional, Tuple

import structlog

from infrastructure.persistence.errors import PersistenceError
from infrastructure.persistence.models import LocalizedMessage, TranslationKey
from infrastructure.persistence.store import KeyStore

logger = structlog.get_logger()


class InMemoryKeyStore(KeyStore):
    """Process-local key store.

    Suitable for tests and dry runs; nothing survives the process.
    """

    def __init__(self):
        self._keys: Dict[Tuple[str, str], TranslationKey] = {}
        self.flush_count = 0

    def find_one_by_key_and_domain(
        self, trans_key: str, domain: str
    ) -> Optional[TranslationKey]:
        return self._keys.get((domain, trans_key))

    def create(
        self, trans_key: str, domain: str, initially_translated: bool = False
    ) -> TranslationKey:
        identity = (domain, trans_key)
        if identity in self._keys:
            raise PersistenceError(
                "create", f"translation key {domain}/{trans_key} already exists"
            )
        key = TranslationKey(
            trans_key=trans_key, domain=domain, translated=initially_translated
        )
        self._keys[identity] = key
        return key

    def set_message(
        self,
        translation_key: TranslationKey,
        locale: str,
        message: str,
        overwrite: bool = True,
    ) -> bool:
        stored = self._keys.get(translation_key.identity)
        if stored is None:
            raise PersistenceError(
                "set_message",
                f"translation key {translation_key.domain}/"
                f"{translation_key.trans_key} is not stored",
            )
        if stored.has_locale(locale) and not overwrite:
            return False

        stored.messages[locale] = LocalizedMessage(locale=locale, message=message)
        if message:
            stored.translated = True
        if translation_key is not stored:
            translation_key.messages = dict(stored.messages)
            translation_key.translated = stored.translated
        return True

    def delete_all(self) -> int:
        deleted = len(self._keys)
        self._keys.clear()
        logger.info("memory_key_store_cleared", keys_deleted=deleted)
        return deleted

    def find_all(self) -> List[TranslationKey]:
        return [self._keys[identity] for identity in sorted(self._keys)]

    def flush(self) -> None:
        self.flush_count += 1
        logger.debug("memory_key_store_flush", key_count=len(self._keys))

    def __len__(self) -> int:
        return len(self._keys)
