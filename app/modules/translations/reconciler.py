"""Reconcile built message catalogues against the key store.

For every (locale, domain, key, message) in the catalogues:

- empty keys are skipped;
- the stored TranslationKey is looked up by exact (key, domain) and created
  when absent, whatever the force policy;
- only with force is the locale's message written, replacing any stored
  message. Without force, stored messages are never touched, so a default
  run registers new keys without clobbering edited translations.

Each entry is written independently: a failure is recorded and the loop
moves on to the next entry. A failed flush is recorded against its domain
with an empty key.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from infrastructure.i18n.models import MessageCatalogue
from infrastructure.logging import get_module_logger
from infrastructure.persistence.store import KeyStore

logger = get_module_logger()


@dataclass(frozen=True)
class RecordFailure:
    """A catalogue entry that could not be reconciled."""

    locale: str
    domain: str
    trans_key: str
    error: str


@dataclass
class ReconcileReport:
    """Counters collected while reconciling.

    Attributes:
        processed: Entries with a non-empty key.
        skipped_empty_keys: Entries skipped because their key is empty.
        created_keys: TranslationKeys created because they were absent.
        messages_written: Messages written (force only).
        failures: Entries whose lookup, creation or write failed.
        keys_per_locale: Processed entries per locale.
    """

    processed: int = 0
    skipped_empty_keys: int = 0
    created_keys: int = 0
    messages_written: int = 0
    failures: List[RecordFailure] = field(default_factory=list)
    keys_per_locale: Dict[str, int] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not self.failures


class Reconciler:
    """Writes catalogue entries into a KeyStore under a force policy."""

    def __init__(self, store: KeyStore):
        self.store = store

    def reconcile(
        self, catalogues: Mapping[str, MessageCatalogue], force: bool = False
    ) -> ReconcileReport:
        """Reconcile every catalogue entry against the store.

        Args:
            catalogues: Locale -> MessageCatalogue, read-only here.
            force: Overwrite stored messages for the catalogue locales.

        Returns:
            ReconcileReport with counts and per-record failures.
        """
        report = ReconcileReport()

        for locale, catalogue in catalogues.items():
            locale_count = 0
            for domain in catalogue.domains():
                domain_count = 0
                for key, message in catalogue.entries(domain):
                    if key == "":
                        report.skipped_empty_keys += 1
                        continue
                    self._reconcile_entry(report, locale, domain, key, message, force)
                    domain_count += 1

                self._flush(report, locale, domain)
                locale_count += domain_count
                logger.info(
                    "reconcile_domain_completed",
                    locale=locale,
                    domain=domain,
                    keys=domain_count,
                )

            report.keys_per_locale[locale] = locale_count
            logger.info("reconcile_locale_completed", locale=locale, keys=locale_count)

        logger.info(
            "reconcile_completed",
            processed=report.processed,
            created_keys=report.created_keys,
            messages_written=report.messages_written,
            skipped_empty_keys=report.skipped_empty_keys,
            failures=len(report.failures),
        )
        return report

    def _flush(self, report: ReconcileReport, locale: str, domain: str) -> None:
        try:
            self.store.flush()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "reconcile_flush_failed",
                locale=locale,
                domain=domain,
                error=str(e),
                exc_info=True,
            )
            report.failures.append(
                RecordFailure(
                    locale=locale, domain=domain, trans_key="", error=f"flush failed: {e}"
                )
            )

    def _reconcile_entry(
        self,
        report: ReconcileReport,
        locale: str,
        domain: str,
        key: str,
        message: str,
        force: bool,
    ) -> None:
        report.processed += 1
        try:
            translation_key = self.store.find_one_by_key_and_domain(key, domain)
            if translation_key is None:
                translation_key = self.store.create(key, domain, False)
                report.created_keys += 1

            if force:
                logger.debug(
                    "overwriting_translation", trans_key=key, domain=domain, locale=locale
                )
                if self.store.set_message(translation_key, locale, message, True):
                    report.messages_written += 1
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "reconcile_record_failed",
                locale=locale,
                domain=domain,
                trans_key=key,
                error=str(e),
                exc_info=True,
            )
            report.failures.append(
                RecordFailure(locale=locale, domain=domain, trans_key=key, error=str(e))
            )
