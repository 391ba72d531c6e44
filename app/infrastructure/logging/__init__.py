"""Structured logging for the translation importer.

Public API:
    - configure_logging(): Initialize logging at CLI startup
    - get_module_logger(): Get a logger bound to the calling module
    - bind_import_context(): Bind run-scoped context around an import
    - get_correlation_id(): Current run correlation ID
    - clear_import_context(): Drop all run context

Example:
    from infrastructure.logging import bind_import_context, get_module_logger

    logger = get_module_logger()

    with bind_import_context(clear=False, force=True):
        logger.info("import_started")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger
from infrastructure.logging.context import (
    bind_import_context,
    clear_import_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_import_context",
    "get_correlation_id",
    "clear_import_context",
]
