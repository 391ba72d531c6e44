"""Persisted translation entities."""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class LocalizedMessage:
    """Message body of a translation key for one locale.

    An empty message means the key is not translated for the locale yet.
    """

    locale: str
    message: str = ""


@dataclass
class TranslationKey:
    """A stored translation key, unique per (domain, trans_key).

    Attributes:
        trans_key: Message key (e.g. "checkout").
        domain: Domain the key belongs to (e.g. "cart").
        translated: Set at creation, and once a non-empty message is written.
        messages: At most one LocalizedMessage per locale.
    """

    trans_key: str
    domain: str
    translated: bool = False
    messages: Dict[str, LocalizedMessage] = field(default_factory=dict)

    @property
    def identity(self) -> tuple[str, str]:
        return (self.domain, self.trans_key)

    def get_message(self, locale: str) -> Optional[str]:
        """Return the message for a locale, or None when absent."""
        localized = self.messages.get(locale)
        return localized.message if localized is not None else None

    def has_locale(self, locale: str) -> bool:
        return locale in self.messages

    def locales(self) -> list[str]:
        return sorted(self.messages)
