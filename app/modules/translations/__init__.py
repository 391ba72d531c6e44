"""Translation import module.

Loads translation files named `<domain>.<locale>.<extension>` from resource
roots into per-locale message catalogues and reconciles them with the
translation key store.

Features:
- Format dispatch through the loader registry (yml, json, xliff, po, mo, ini, csv)
- First-writer-wins merge of files sharing a locale
- Additive imports by default, overwriting only with force
- Optional destructive reset before importing
- Query filters over stored keys
"""

from modules.translations.builder import CatalogueBuilder, ResourcePlan
from modules.translations.discovery import (
    ResourceFile,
    discover_files,
    parse_resource_name,
    resolve_resource_roots,
)
from modules.translations.errors import ResetError
from modules.translations.filters import TranslationFilter
from modules.translations.reconciler import (
    Reconciler,
    ReconcileReport,
    RecordFailure,
)
from modules.translations.reset import reset_all
from modules.translations.service import ImportReport, TranslationImporter

__all__ = [
    "CatalogueBuilder",
    "ResourcePlan",
    "ResourceFile",
    "discover_files",
    "parse_resource_name",
    "resolve_resource_roots",
    "ResetError",
    "TranslationFilter",
    "Reconciler",
    "ReconcileReport",
    "RecordFailure",
    "reset_all",
    "ImportReport",
    "TranslationImporter",
]
