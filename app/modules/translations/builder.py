"""Catalogue builder: translation files -> per-locale message catalogues.

Building runs in two passes:

1. classify(): walk the resource roots, keep files named
   `<domain>.<locale>.<extension>` whose extension is supported, and resolve
   a loader for each. Nothing is parsed yet, so a missing loader (a
   configuration error) surfaces before any store is touched.
2. load(): parse each classified file and merge it into the catalogue of
   its locale.

Roots are processed in the given order and files within a root in sorted
path order. Because catalogue merges keep the first message seen for a
(domain, key), that order decides which file wins when two files of the
same locale define the same key.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import MessageCatalogue
from infrastructure.i18n.registry import LoaderRegistry
from infrastructure.logging import get_module_logger
from modules.translations.discovery import (
    ResourceFile,
    discover_files,
    parse_resource_name,
)

logger = get_module_logger()


@dataclass
class ResourcePlan:
    """Outcome of the classification pass.

    Attributes:
        resources: Candidate files with their resolved loaders, in load order.
        skipped: Files ignored because of their name or extension.
    """

    resources: List[Tuple[ResourceFile, TranslationLoader]] = field(
        default_factory=list
    )
    skipped: List[Path] = field(default_factory=list)

    @property
    def locales(self) -> List[str]:
        return list(dict.fromkeys(resource.locale for resource, _ in self.resources))


class CatalogueBuilder:
    """Builds per-locale MessageCatalogues from resource roots."""

    def __init__(self, registry: LoaderRegistry):
        self.registry = registry

    def classify(self, roots: Iterable[Union[str, Path]]) -> ResourcePlan:
        """Find and classify translation files without parsing them.

        Args:
            roots: Resource root directories, in scan order.

        Returns:
            ResourcePlan with the candidate files and the skipped ones.

        Raises:
            LoaderNotFoundError: If a supported extension has no loader.
        """
        supported = self.registry.supported_formats()
        plan = ResourcePlan()

        for root in roots:
            root_candidates = 0
            for path in discover_files(root):
                resource = parse_resource_name(path)
                if resource is None or resource.format not in supported:
                    plan.skipped.append(path)
                    continue
                loader = self.registry.resolve(resource.format)
                plan.resources.append((resource, loader))
                root_candidates += 1

            logger.info(
                "resource_root_classified",
                root=str(root),
                candidate_files=root_candidates,
            )

        logger.info(
            "translation_files_classified",
            candidate_files=len(plan.resources),
            skipped_files=len(plan.skipped),
        )
        return plan

    def load(self, plan: ResourcePlan) -> Dict[str, MessageCatalogue]:
        """Parse classified files and merge them per locale.

        Returns:
            Mapping of locale to its MessageCatalogue, in first-seen locale
            order.

        Raises:
            InvalidResourceError: If a file cannot be parsed.
        """
        catalogues: Dict[str, MessageCatalogue] = {}

        for resource, loader in plan.resources:
            catalogue = catalogues.get(resource.locale)
            if catalogue is None:
                catalogue = MessageCatalogue(resource.locale)
                catalogues[resource.locale] = catalogue

            fragment = loader.load(resource.path, resource.locale, resource.domain)
            inserted = catalogue.merge_from(fragment)
            logger.info(
                "catalogue_loaded_file",
                file=resource.path.name,
                locale=resource.locale,
                domain=resource.domain,
                messages=len(fragment),
                shadowed=len(fragment) - inserted,
            )

        return catalogues

    def build(self, roots: Iterable[Union[str, Path]]) -> Dict[str, MessageCatalogue]:
        """Classify and load every translation file under the roots."""
        return self.load(self.classify(roots))
