"""Translation import service.

Orchestrates one import run:

1. classify the resource roots (resolves loaders, fails fast on
   configuration errors);
2. reset the store when `clear` is set;
3. load the classified files into per-locale catalogues;
4. reconcile the catalogues against the store under the force policy.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from infrastructure.i18n.registry import LoaderRegistry
from infrastructure.logging import bind_import_context, get_module_logger
from infrastructure.persistence.store import KeyStore
from modules.translations.builder import CatalogueBuilder
from modules.translations.reconciler import Reconciler, ReconcileReport
from modules.translations.reset import reset_all

logger = get_module_logger()


@dataclass
class ImportReport:
    """Outcome of an import run."""

    run_id: str
    clear: bool
    force: bool
    files_loaded: int = 0
    files_skipped: int = 0
    locales: List[str] = field(default_factory=list)
    keys_deleted: Optional[int] = None
    reconcile: ReconcileReport = field(default_factory=ReconcileReport)

    @property
    def is_clean(self) -> bool:
        return self.reconcile.is_clean

    def summary(self) -> str:
        lines = []
        if self.keys_deleted is not None:
            lines.append(f"deleted {self.keys_deleted} translation keys")
        lines.append(
            f"loaded {self.files_loaded} files ({self.files_skipped} skipped)"
        )
        for locale in self.locales:
            lines.append(
                f"{locale}: {self.reconcile.keys_per_locale.get(locale, 0)} keys"
            )
        lines.append(
            f"created {self.reconcile.created_keys} keys, "
            f"wrote {self.reconcile.messages_written} messages, "
            f"skipped {self.reconcile.skipped_empty_keys} empty keys"
        )
        for failure in self.reconcile.failures:
            lines.append(
                f"failed {failure.domain}.{failure.locale} "
                f"{failure.trans_key}: {failure.error}"
            )
        lines.append("finished!" if self.is_clean else "finished with errors")
        return "\n".join(lines)


class TranslationImporter:
    """Imports translation files into a KeyStore."""

    def __init__(
        self,
        registry: LoaderRegistry,
        store: KeyStore,
        builder: Optional[CatalogueBuilder] = None,
    ):
        self.store = store
        self.builder = builder or CatalogueBuilder(registry)
        self.reconciler = Reconciler(store)

    def run(
        self,
        roots: Sequence[Union[str, Path]],
        clear: bool = False,
        force: bool = False,
    ) -> ImportReport:
        """Run an import over the resource roots.

        Args:
            roots: Resource roots, in scan order.
            clear: Delete every stored key before importing.
            force: Overwrite stored messages with the imported ones.

        Returns:
            ImportReport; per-record failures are listed, not raised.

        Raises:
            ConfigurationError: A supported format has no loader.
            ResetError: The reset could not complete.
            InvalidResourceError: A translation file could not be parsed.
        """
        with bind_import_context(clear=clear, force=force) as run_id:
            logger.info("import_started", roots=[str(root) for root in roots])
            report = ImportReport(run_id=run_id, clear=clear, force=force)

            plan = self.builder.classify(roots)
            report.files_skipped = len(plan.skipped)

            if clear:
                report.keys_deleted = reset_all(self.store)

            catalogues = self.builder.load(plan)
            report.files_loaded = len(plan.resources)
            report.locales = list(catalogues)

            report.reconcile = self.reconciler.reconcile(catalogues, force)

            logger.info(
                "import_finished",
                files_loaded=report.files_loaded,
                files_skipped=report.files_skipped,
                locales=report.locales,
                clean=report.is_clean,
            )
            return report
