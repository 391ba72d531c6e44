"""Structlog configuration for the translation importer.

The CLI calls configure_logging() once at startup. Library modules only ask
for loggers; they never configure logging themselves.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(settings)

    logger = get_module_logger()
    logger.info("catalogue_loaded_file", file="cart.en.yml")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        # correlation_id, clear and force from bind_import_context
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _silence() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Output goes to stderr so stdout stays reserved for command output.
    Under pytest every log call is swallowed.

    Args:
        settings: Settings providing LOG_LEVEL and is_production. The
            configuration singleton is used when omitted and an override
            below is missing.
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: JSON output when True, console output when False.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        return _silence()

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.configuration import settings as default_settings

        settings = default_settings

    prod_mode = is_production if is_production is not None else settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        stream=sys.stderr,
        force=True,
    )
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds `component` (last dotted segment) and `module_path`, e.g.
    component="reconciler", module_path="modules.translations.reconciler".
    """
    logger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1], module_path=module.__name__
    )
