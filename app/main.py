"""Translation importer command line.

Usage:
    python app/main.py import [--clear] [--force] [--store memory|dynamodb] [roots ...]
    python app/main.py list [--locale L ...] [--domain D] [--key K] [--label T] [--untranslated]

Exit codes: 0 clean run, 1 completed with per-record failures, 2 fatal error.
"""

import argparse
import sys
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from infrastructure.configuration import Settings
from infrastructure.i18n.errors import ConfigurationError, InvalidResourceError
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.persistence import KeyStore, PersistenceError, create_key_store
from infrastructure.services import get_key_store, get_loader_registry, get_settings
from modules.translations import (
    ResetError,
    TranslationFilter,
    TranslationImporter,
    resolve_resource_roots,
)

logger = get_module_logger()

EXIT_OK = 0
EXIT_RECORD_FAILURES = 1
EXIT_FATAL = 2


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="translations",
        description="Import translation files into the translation key store.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser(
        "import", help="Import translation files from resource roots"
    )
    import_parser.add_argument(
        "--clear",
        "-c",
        action="store_true",
        help="delete all translations before importing",
    )
    import_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="overwrite if find a key and locale matching",
    )
    import_parser.add_argument(
        "--store",
        choices=["memory", "dynamodb"],
        help="key store backend (default: TRANSLATIONS_STORE_BACKEND)",
    )
    import_parser.add_argument(
        "roots",
        nargs="*",
        help="resource roots to scan (default: TRANSLATIONS_RESOURCE_ROOTS)",
    )

    list_parser = subparsers.add_parser("list", help="List stored translation keys")
    list_parser.add_argument(
        "--locale", action="append", default=[], help="managed locale to show"
    )
    list_parser.add_argument("--domain", default="all", help="domain (default: all)")
    list_parser.add_argument("--key", help="translation key substring")
    list_parser.add_argument("--label", help="message substring")
    list_parser.add_argument(
        "--untranslated", action="store_true", help="show non translated keys only"
    )
    list_parser.add_argument(
        "--store",
        choices=["memory", "dynamodb"],
        help="key store backend (default: TRANSLATIONS_STORE_BACKEND)",
    )

    return parser.parse_args(argv)


def _select_store(settings: Settings, backend: Optional[str]) -> KeyStore:
    if backend:
        return create_key_store(settings, backend=backend)
    return get_key_store()


def _resource_roots(settings: Settings, cli_roots: List[str]) -> List:
    if cli_roots:
        return resolve_resource_roots(cli_roots)
    return resolve_resource_roots(
        settings.translations.resource_roots, settings.translations.resource_subdir
    )


def run_import(args: argparse.Namespace, settings: Settings) -> int:
    roots = _resource_roots(settings, args.roots)
    if not roots:
        print("no resource roots given or configured", file=sys.stderr)
        return EXIT_FATAL

    try:
        store = _select_store(settings, args.store)
        importer = TranslationImporter(get_loader_registry(), store)
        report = importer.run(roots, clear=args.clear, force=args.force)
    except (
        ConfigurationError,
        InvalidResourceError,
        ResetError,
        PersistenceError,
        ValueError,
    ) as e:
        logger.error("import_aborted", error=str(e), error_type=type(e).__name__)
        print(f"import aborted: {e}", file=sys.stderr)
        return EXIT_FATAL

    print(report.summary())
    return EXIT_OK if report.is_clean else EXIT_RECORD_FAILURES


def run_list(args: argparse.Namespace, settings: Settings) -> int:
    translation_filter = TranslationFilter(
        settings.translations.managed_locales, settings.translations.empty_prefixes
    )
    try:
        store = _select_store(settings, args.store)
        keys = store.find_all()
    except (PersistenceError, ValueError) as e:
        logger.error("list_aborted", error=str(e), error_type=type(e).__name__)
        print(f"list aborted: {e}", file=sys.stderr)
        return EXIT_FATAL

    locales = translation_filter.selected_locales(args.locale)
    matched = translation_filter.apply(
        keys,
        locales=args.locale,
        domain=args.domain,
        trans_key=args.key,
        label=args.label,
        untranslated_only=args.untranslated,
    )
    for key in matched:
        messages = "  ".join(
            f"{locale}={key.get_message(locale) or ''}" for locale in locales
        )
        print(f"{key.domain}  {key.trans_key}  {messages}".rstrip())
    print(f"{len(matched)} keys")
    return EXIT_OK


def list_configs(settings: Settings) -> None:
    """List all configuration settings keys"""
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function of the translation importer."""
    load_dotenv()
    args = _parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    list_configs(settings)

    if args.command == "import":
        return run_import(args, settings)
    return run_list(args, settings)


if __name__ == "__main__":
    sys.exit(main())
