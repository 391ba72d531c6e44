"""Query filters over stored translation keys.

Used by the `list` command to browse what an import produced: restrict to
managed locales, a domain, a key or label substring, or keys still waiting
for a translation.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from infrastructure.persistence.models import TranslationKey

ALL_DOMAINS = "all"


class TranslationFilter:
    """Filters TranslationKeys by locale, domain, key, label and state.

    Args:
        managed_locales: Locales that can be selected; others are ignored.
        empty_prefixes: Message prefixes marking a placeholder translation.
            An empty prefix only matches empty or missing messages.
    """

    def __init__(
        self,
        managed_locales: Sequence[str],
        empty_prefixes: Optional[Sequence[str]] = None,
    ):
        self.managed_locales = list(dict.fromkeys(managed_locales))
        self.empty_prefixes = [p for p in (empty_prefixes or [""]) if p]

    def locale_choices(self) -> Dict[str, str]:
        return {locale: locale for locale in self.managed_locales}

    def domain_choices(self, keys: Iterable[TranslationKey]) -> List[str]:
        return sorted({key.domain for key in keys})

    def selected_locales(self, locales: Optional[Sequence[str]] = None) -> List[str]:
        """Return the requested locales that are managed, or all managed ones."""
        if not locales:
            return list(self.managed_locales)
        return [locale for locale in self.managed_locales if locale in locales]

    def is_untranslated(self, key: TranslationKey, locales: Sequence[str]) -> bool:
        for locale in locales:
            message = key.get_message(locale)
            if not message:
                return True
            if any(message.startswith(prefix) for prefix in self.empty_prefixes):
                return True
        return False

    def apply(
        self,
        keys: Iterable[TranslationKey],
        locales: Optional[Sequence[str]] = None,
        domain: Optional[str] = None,
        trans_key: Optional[str] = None,
        label: Optional[str] = None,
        untranslated_only: bool = False,
    ) -> List[TranslationKey]:
        """Return the keys matching every given criterion, in input order.

        Args:
            keys: Keys to filter, typically KeyStore.find_all().
            locales: Locales to consider for label and untranslated checks.
            domain: Exact domain; None or "all" disables the filter.
            trans_key: Case-sensitive substring of the key.
            label: Case-sensitive substring of a message in a selected locale.
            untranslated_only: Keep only keys missing a real translation in
                a selected locale.
        """
        selected = self.selected_locales(locales)
        matched = []
        for key in keys:
            if domain and domain != ALL_DOMAINS and key.domain != domain:
                continue
            if trans_key and trans_key not in key.trans_key:
                continue
            if label and not any(
                label in (key.get_message(locale) or "") for locale in selected
            ):
                continue
            if untranslated_only and not self.is_untranslated(key, selected):
                continue
            matched.append(key)
        return matched
