"""Translation loading interface and format implementations.

Defines the contract for turning one translation file into a message
catalogue fragment for a single (locale, domain) pair, plus loaders for the
supported file formats.
"""

import csv
import json
import struct
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union

import polib
import structlog
import yaml

from infrastructure.i18n.errors import InvalidResourceError
from infrastructure.i18n.models import MessageCatalogue

logger = structlog.get_logger()

PathLike = Union[str, Path]


def _to_message(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_messages(data: Dict[Any, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dot-joined keys.

    Example:
        {"cart": {"checkout": "Checkout"}} -> {"cart.checkout": "Checkout"}

    Lists are flattened with their index as the key segment.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten_messages(value, full_key))
        elif isinstance(value, list):
            flat.update(
                flatten_messages(
                    {str(index): item for index, item in enumerate(value)}, full_key
                )
            )
        else:
            flat[full_key] = _to_message(value)
    return flat


class TranslationLoader(ABC):
    """Abstract base for translation file loaders.

    Implementations parse one file and return a catalogue fragment that
    holds exactly one domain for one locale.
    """

    def load(self, path: PathLike, locale: str, domain: str) -> MessageCatalogue:
        """Load a translation file into a catalogue fragment.

        Args:
            path: File to parse.
            locale: Locale the file provides messages for.
            domain: Domain the messages belong to.

        Returns:
            MessageCatalogue holding the file's messages under `domain`.

        Raises:
            InvalidResourceError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            messages = self.parse(path)
        except InvalidResourceError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_file_unreadable", file=str(path), error=str(e))
            raise InvalidResourceError(path, str(e)) from e

        fragment = MessageCatalogue(locale)
        fragment.add(messages, domain)
        logger.debug(
            "translation_file_parsed",
            file=str(path),
            locale=locale,
            domain=domain,
            message_count=len(messages),
        )
        return fragment

    @abstractmethod
    def parse(self, path: Path) -> Dict[str, str]:
        """Parse a file into a flat key -> message mapping.

        Raises:
            InvalidResourceError: If the file content is invalid.
            OSError: If the file cannot be read.
        """
        pass


class YamlFileLoader(TranslationLoader):
    """Loader for YAML translation files (nested keys are dot-joined)."""

    def parse(self, path: Path) -> Dict[str, str]:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise InvalidResourceError(path, str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidResourceError(path, "expected a mapping at the top level")
        return flatten_messages(data)


class JsonFileLoader(TranslationLoader):
    """Loader for JSON translation files (nested keys are dot-joined)."""

    def parse(self, path: Path) -> Dict[str, str]:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise InvalidResourceError(path, str(e)) from e

        if not isinstance(data, dict):
            raise InvalidResourceError(path, "expected an object at the top level")
        return flatten_messages(data)


class XliffFileLoader(TranslationLoader):
    """Loader for XLIFF 1.2 and 2.0 files.

    XLIFF 1.2: the key is the trans-unit `resname` attribute, falling back to
    its source text. XLIFF 2.0: the key is the unit `name` attribute, falling
    back to the segment source. The message is the target, falling back to
    the source.
    """

    def parse(self, path: Path) -> Dict[str, str]:
        with open(path, "rb") as f:
            content = f.read()

        if not content.strip():
            return {}
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            logger.error("xliff_parse_error", file=str(path), error=str(e))
            raise InvalidResourceError(path, str(e)) from e

        messages: Dict[str, str] = {}
        for element in root.iter():
            tag = _local_name(element.tag)
            if tag == "trans-unit":
                key, message = self._unit_entry(element, element.get("resname"))
            elif tag == "unit":
                key, message = self._unit_entry(element, element.get("name"))
            else:
                continue
            if key is not None:
                messages.setdefault(key, message)
        return messages

    def _unit_entry(self, unit: ET.Element, name: Any) -> Tuple[Any, str]:
        source = _child_text(unit, "source")
        target = _child_text(unit, "target")
        key = name if name is not None else source
        message = target if target is not None else source
        return key, _to_message(message)


def _local_name(tag: Any) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> Any:
    for child in element.iter():
        if child is not element and _local_name(child.tag) == name:
            return "".join(child.itertext())
    return None


class _GettextFileLoader(TranslationLoader):
    """Shared entry handling for gettext catalogues read with polib."""

    def parse(self, path: Path) -> Dict[str, str]:
        if path.stat().st_size == 0:
            return {}
        try:
            entries = self.read_entries(path)
        except (OSError, ValueError, struct.error) as e:
            logger.error("gettext_parse_error", file=str(path), error=str(e))
            raise InvalidResourceError(path, str(e)) from e

        messages: Dict[str, str] = {}
        for entry in entries:
            if entry.obsolete or "fuzzy" in getattr(entry, "flags", ()):
                continue
            key = entry.msgid
            if entry.msgctxt:
                key = f"{entry.msgctxt}\x04{entry.msgid}"
            if entry.msgstr_plural:
                message = "|".join(
                    entry.msgstr_plural[index]
                    for index in sorted(entry.msgstr_plural, key=int)
                )
            else:
                message = entry.msgstr
            messages.setdefault(key, message)
        return messages

    @abstractmethod
    def read_entries(self, path: Path) -> Iterable[polib.POEntry]:
        pass


class PoFileLoader(_GettextFileLoader):
    """Loader for gettext `.po` files."""

    def read_entries(self, path: Path) -> Iterable[polib.POEntry]:
        return polib.pofile(str(path))


class MoFileLoader(_GettextFileLoader):
    """Loader for compiled gettext `.mo` files."""

    def read_entries(self, path: Path) -> Iterable[polib.MOEntry]:
        return polib.mofile(str(path))


class IniFileLoader(TranslationLoader):
    """Loader for flat `key = value` files.

    Blank lines, `#`/`;` comments and section headers are ignored; values
    lose surrounding quotes.
    """

    def parse(self, path: Path) -> Dict[str, str]:
        messages: Dict[str, str] = {}
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line[0] in "#;[":
                    continue
                key, sep, value = line.partition("=")
                if not sep:
                    continue
                value = value.strip()
                if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                    value = value[1:-1]
                messages.setdefault(key.strip(), value)
        return messages


class CsvFileLoader(TranslationLoader):
    """Loader for `key;message` CSV files.

    Rows with fewer than two cells and rows starting with `#` are ignored.
    """

    def __init__(self, delimiter: str = ";", quotechar: str = '"'):
        self.delimiter = delimiter
        self.quotechar = quotechar

    def parse(self, path: Path) -> Dict[str, str]:
        messages: Dict[str, str] = {}
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, delimiter=self.delimiter, quotechar=self.quotechar)
            try:
                for row in reader:
                    if len(row) < 2 or row[0].startswith("#"):
                        continue
                    messages.setdefault(row[0], row[1])
            except csv.Error as e:
                raise InvalidResourceError(path, str(e)) from e
        return messages
