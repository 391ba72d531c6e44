"""Translations import feature settings."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.translations")

STORE_BACKENDS = ("memory", "dynamodb")


class TranslationsSettings(FeatureSettings):
    """Configuration for the translation import feature.

    Environment Variables:
        TRANSLATIONS_RESOURCE_ROOTS: Ordered directories scanned for translation
            files (JSON list or comma-separated)
        TRANSLATIONS_RESOURCE_SUBDIR: Subdirectory appended to each root when
            the roots are application units (e.g. 'Resources/translations');
            empty means the roots are scanned as-is
        TRANSLATIONS_FORMATS: File extensions declared as supported; empty
            means every built-in loader format
        TRANSLATIONS_MANAGED_LOCALES: Locales offered by the query filter
        TRANSLATIONS_EMPTY_PREFIXES: Message prefixes treated as untranslated
            ('' matches empty messages)
        TRANSLATIONS_STORE_BACKEND: Key store backend, 'memory' or 'dynamodb'
        TRANSLATIONS_DYNAMODB_TABLE_NAME: DynamoDB table holding translation keys

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        roots = settings.translations.resource_roots
        if settings.translations.store_backend == "dynamodb":
            table = settings.translations.dynamodb_table_name
        ```
    """

    resource_roots: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="TRANSLATIONS_RESOURCE_ROOTS",
        description="Ordered directories scanned for translation files",
    )
    resource_subdir: str = Field(
        default="",
        alias="TRANSLATIONS_RESOURCE_SUBDIR",
        description="Subdirectory of each root holding translation files",
    )
    formats: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="TRANSLATIONS_FORMATS",
        description="Supported file extensions (empty: all built-in loaders)",
    )
    managed_locales: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="TRANSLATIONS_MANAGED_LOCALES",
        description="Locales offered by the translation query filter",
    )
    empty_prefixes: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [""],
        alias="TRANSLATIONS_EMPTY_PREFIXES",
        description="Message prefixes that mark a message as untranslated",
    )
    store_backend: str = Field(
        default="dynamodb",
        alias="TRANSLATIONS_STORE_BACKEND",
        description="Key store backend: 'memory' or 'dynamodb'",
    )
    dynamodb_table_name: str = Field(
        default="translation_keys",
        alias="TRANSLATIONS_DYNAMODB_TABLE_NAME",
        description="DynamoDB table name for translation keys",
    )

    @field_validator(
        "resource_roots", "formats", "managed_locales", "empty_prefixes", mode="before"
    )
    @classmethod
    def _parse_list(cls, v: Optional[Any]) -> Any:
        """Parse list settings from a JSON array or a comma-separated string."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(f"Invalid JSON list: {e} (value: {s[:80]})") from e
            return [item.strip() for item in s.split(",") if item.strip()]
        raise ValueError("expected a JSON list or a comma-separated string")

    @field_validator("store_backend", mode="after")
    @classmethod
    def _validate_store_backend(cls, v: str) -> str:
        backend = v.strip().lower()
        if backend not in STORE_BACKENDS:
            raise ValueError(
                f"TRANSLATIONS_STORE_BACKEND must be one of {STORE_BACKENDS}, got '{v}'"
            )
        return backend

    @field_validator("formats", mode="after")
    @classmethod
    def _normalize_formats(cls, v: list[str]) -> list[str]:
        formats = [fmt.strip().lstrip(".").lower() for fmt in v if fmt.strip()]
        if len(set(formats)) != len(formats):
            logger.warning("duplicate_translation_formats", formats=formats)
        return list(dict.fromkeys(formats))
