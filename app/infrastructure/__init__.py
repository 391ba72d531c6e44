"""Infrastructure modules for the translation importer.

Centralized infrastructure components:
- configuration: Settings management (settings, TranslationsSettings)
- logging: Structured logging setup and run context (configure_logging, get_module_logger)
- i18n: Message catalogues, file loaders and the loader registry
- operations: Operation results and error classification
- persistence: Translation key store backends
- services: Application-scoped providers (get_settings, get_key_store)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Services
from infrastructure.services import get_settings, get_loader_registry, get_key_store

__all__ = [
    "settings",
    "configure_logging",
    "get_module_logger",
    "OperationResult",
    "OperationStatus",
    "get_settings",
    "get_loader_registry",
    "get_key_store",
]
