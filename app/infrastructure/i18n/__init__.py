"""i18n system - translation file loading and message catalogues.

Main components:
- models: MessageCatalogue (per-locale domain -> key -> message table)
- loader: TranslationLoader and the per-format file loaders
- registry: LoaderRegistry mapping file extensions to loaders
- errors: ConfigurationError, LoaderNotFoundError, InvalidResourceError
"""

from infrastructure.i18n.errors import (
    ConfigurationError,
    InvalidResourceError,
    LoaderNotFoundError,
)
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
from infrastructure.i18n.models import MessageCatalogue
from infrastructure.i18n.registry import LoaderRegistry, create_default_registry

__all__ = [
    "MessageCatalogue",
    "TranslationLoader",
    "YamlFileLoader",
    "JsonFileLoader",
    "XliffFileLoader",
    "PoFileLoader",
    "MoFileLoader",
    "IniFileLoader",
    "CsvFileLoader",
    "LoaderRegistry",
    "create_default_registry",
    "ConfigurationError",
    "LoaderNotFoundError",
    "InvalidResourceError",
]
