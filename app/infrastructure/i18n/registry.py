"""Loader registry: file extension -> translation loader.

The registry answers two questions for the import engine: which file
extensions are candidates for import (`supported_formats`), and which loader
parses a given extension (`resolve`). A format can be declared supported
without a loader; resolving it is then a configuration error.
"""

from typing import Dict, Iterable, Optional

import structlog

from infrastructure.i18n.errors import LoaderNotFoundError
from infrastructure.i18n.loader import (
    CsvFileLoader,
    IniFileLoader,
    JsonFileLoader,
    MoFileLoader,
    PoFileLoader,
    TranslationLoader,
    XliffFileLoader,
    YamlFileLoader,
)

logger = structlog.get_logger()


class LoaderRegistry:
    """Maps file extensions to translation loaders."""

    def __init__(self):
        self._loaders: Dict[str, TranslationLoader] = {}
        self._declared: set[str] = set()

    def register(self, format: str, loader: TranslationLoader) -> None:
        """Register a loader for an extension and declare it supported."""
        format = _normalize(format)
        self._loaders[format] = loader
        self._declared.add(format)

    def declare(self, format: str) -> None:
        """Declare an extension supported without registering a loader."""
        self._declared.add(_normalize(format))

    def supported_formats(self) -> frozenset[str]:
        return frozenset(self._declared)

    def resolve(self, format: str) -> TranslationLoader:
        """Return the loader for an extension.

        Raises:
            LoaderNotFoundError: If no loader is registered for the extension.
        """
        loader = self._loaders.get(_normalize(format))
        if loader is None:
            raise LoaderNotFoundError(format)
        return loader


def _normalize(format: str) -> str:
    return format.lstrip(".")


def _builtin_loaders() -> Dict[str, TranslationLoader]:
    yaml_loader = YamlFileLoader()
    xliff_loader = XliffFileLoader()
    return {
        "yml": yaml_loader,
        "yaml": yaml_loader,
        "json": JsonFileLoader(),
        "xlf": xliff_loader,
        "xliff": xliff_loader,
        "po": PoFileLoader(),
        "mo": MoFileLoader(),
        "ini": IniFileLoader(),
        "csv": CsvFileLoader(),
    }


def create_default_registry(formats: Optional[Iterable[str]] = None) -> LoaderRegistry:
    """Create a registry populated with the built-in loaders.

    Args:
        formats: Extensions to declare supported. When omitted (or empty),
            every built-in loader format is supported. An extension listed
            here without a built-in loader stays declared, so classifying a
            matching file raises LoaderNotFoundError.

    Returns:
        LoaderRegistry ready for the catalogue builder.
    """
    builtins = _builtin_loaders()
    registry = LoaderRegistry()
    wanted = [_normalize(fmt) for fmt in formats] if formats else list(builtins)

    for fmt in wanted:
        if fmt in builtins:
            registry.register(fmt, builtins[fmt])
        else:
            logger.warning("translation_format_without_loader", format=fmt)
            registry.declare(fmt)

    logger.info(
        "initialized_loader_registry",
        formats=sorted(registry.supported_formats()),
    )
    return registry
