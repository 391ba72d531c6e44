"""Message catalogue model.

Defines the in-memory, per-locale aggregate of translation messages that
loaders produce and the import engine merges.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple


class MessageCatalogue:
    """Messages for a single locale, organized by domain.

    Merging is first-writer-wins: once a (domain, key) pair holds a message,
    later additions for the same pair are ignored. When several files define
    the same key for one locale, the file merged first keeps its message.

    Attributes:
        locale: Locale identifier this catalogue holds messages for.
    """

    def __init__(
        self,
        locale: str,
        messages: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        self.locale = locale
        self._messages: Dict[str, Dict[str, str]] = {}
        for domain, entries in (messages or {}).items():
            self.add(entries, domain)

    def add_message(self, domain: str, key: str, message: str) -> bool:
        """Insert a message unless the key already exists in the domain.

        Args:
            domain: Domain the key belongs to.
            key: Message key.
            message: Message body, possibly empty.

        Returns:
            True if the message was inserted, False if an earlier message
            for the same (domain, key) was kept.
        """
        entries = self._messages.setdefault(domain, {})
        if key in entries:
            return False
        entries[key] = message
        return True

    def add(self, messages: Mapping[str, str], domain: str) -> None:
        """Insert every (key, message) pair of a mapping into a domain."""
        # an empty file still registers its domain
        self._messages.setdefault(domain, {})
        for key, message in messages.items():
            self.add_message(domain, key, message)

    def merge_from(self, other: "MessageCatalogue") -> int:
        """Merge another catalogue into this one without overwriting.

        Args:
            other: Catalogue (typically a single-file fragment) to merge.

        Returns:
            Number of messages that were inserted.
        """
        inserted = 0
        for domain in other.domains():
            self._messages.setdefault(domain, {})
            for key, message in other.entries(domain):
                if self.add_message(domain, key, message):
                    inserted += 1
        return inserted

    def domains(self) -> Iterator[str]:
        """Iterate domain names in first-seen order."""
        yield from list(self._messages)

    def entries(self, domain: str) -> Iterator[Tuple[str, str]]:
        """Iterate (key, message) pairs of a domain in insertion order."""
        yield from list(self._messages.get(domain, {}).items())

    def all(self, domain: str) -> Dict[str, str]:
        """Return a copy of all messages of a domain."""
        return dict(self._messages.get(domain, {}))

    def get(self, domain: str, key: str) -> Optional[str]:
        return self._messages.get(domain, {}).get(key)

    def has(self, domain: str, key: str) -> bool:
        return key in self._messages.get(domain, {})

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._messages.values())

    def __repr__(self) -> str:
        return (
            f"MessageCatalogue(locale={self.locale!r}, "
            f"domains={list(self._messages)!r}, messages={len(self)})"
        )
