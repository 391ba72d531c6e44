"""Translation file discovery and classification.

Files are named `<domain>.<locale>.<extension>`: exactly three dot-separated
segments. Anything else is not a translation resource and is skipped.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import structlog

logger = structlog.get_logger()

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ResourceFile:
    """A translation file classified from its name.

    Attributes:
        path: File location.
        domain: First name segment (e.g. "cart").
        locale: Second name segment (e.g. "en").
        format: Extension, the third segment (e.g. "yml").
    """

    path: Path
    domain: str
    locale: str
    format: str


def parse_resource_name(path: PathLike) -> Optional[ResourceFile]:
    """Classify a file from its name.

    Args:
        path: File path; only the base name is inspected.

    Returns:
        ResourceFile, or None when the name does not have exactly three
        dot-separated segments. Segment contents are not validated.
    """
    path = Path(path)
    segments = path.name.split(".")
    if len(segments) != 3:
        return None
    domain, locale, extension = segments
    return ResourceFile(path=path, domain=domain, locale=locale, format=extension)


def discover_files(root: PathLike) -> Iterator[Path]:
    """Yield every file under a root, recursively, in sorted path order.

    Paths are ordered with pathlib ordering (component-wise lexicographic)
    so the merge order of files is reproducible across platforms. A missing
    root yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("resource_root_missing", root=str(root))
        return
    yield from sorted(path for path in root.rglob("*") if path.is_file())


def resolve_resource_roots(
    units: Iterable[PathLike], subdirectory: str = ""
) -> List[Path]:
    """Build the ordered list of resource roots to scan.

    Args:
        units: Application unit directories, in scan order.
        subdirectory: Optional path appended to each unit
            (e.g. "Resources/translations"). Empty means each unit is a root.

    Returns:
        Roots in unit order, duplicates removed. Roots are not required to
        exist; missing ones contribute no files.
    """
    roots: List[Path] = []
    for unit in units:
        root = Path(unit) / subdirectory if subdirectory else Path(unit)
        if root not in roots:
            roots.append(root)
    return roots
