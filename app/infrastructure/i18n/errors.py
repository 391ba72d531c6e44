"""Errors raised while resolving and running translation loaders."""

from pathlib import Path
from typing import Union


class ConfigurationError(Exception):
    """Raised when the import is configured in a way that cannot run."""


class LoaderNotFoundError(ConfigurationError):
    """Raised when a format declared as supported has no registered loader.

    Attributes:
        format: the file extension that could not be resolved
    """

    def __init__(self, format: str):
        super().__init__(f"could not find loader for {format} files")
        self.format = format


class InvalidResourceError(Exception):
    """Raised when a translation file cannot be parsed by its loader.

    Attributes:
        path: the offending file
        reason: parser error message
    """

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
