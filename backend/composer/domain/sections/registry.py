from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Union

from .types import SectionCategory, SectionDefinition

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES = {"overwrite", "strict"}


class DuplicateSectionError(ValueError):
    """Raised by a strict builder when two definitions share an id."""


class RegistryBuilder:
    """
    Collects section definitions from the catalog packs before startup.

    Duplicate ids:
    - "overwrite" (default): last write wins, keeping the first position
    - "strict": raise DuplicateSectionError
    """

    def __init__(self, duplicate_policy: str = "overwrite"):
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy: {duplicate_policy}")

        self.duplicate_policy = duplicate_policy
        self._definitions: Dict[str, SectionDefinition] = {}

    def register(self, definitions: Iterable[SectionDefinition]) -> "RegistryBuilder":
        for definition in definitions:
            if definition.id in self._definitions:
                if self.duplicate_policy == "strict":
                    raise DuplicateSectionError(
                        f"Section '{definition.id}' is already registered"
                    )
                logger.warning(
                    "Section %s registered twice; later definition wins",
                    definition.id,
                )

            # dict assignment keeps the first insertion slot on overwrite
            self._definitions[definition.id] = definition

        return self

    def build(self) -> "SectionRegistry":
        return SectionRegistry(self._definitions.values())


class SectionRegistry:
    """Read-only catalog of section definitions, in registration order."""

    def __init__(self, definitions: Iterable[SectionDefinition] = ()):
        self._by_id: Dict[str, SectionDefinition] = {}
        for definition in definitions:
            self._by_id[definition.id] = definition
        self._ordered = tuple(self._by_id.values())

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, section_id: object) -> bool:
        return section_id in self._by_id

    def get_by_id(self, section_id: str) -> Optional[SectionDefinition]:
        if not isinstance(section_id, str):
            return None
        return self._by_id.get(section_id)

    def get_all_sections(self) -> List[SectionDefinition]:
        return list(self._ordered)

    def get_by_category(
        self, category: Union[SectionCategory, str]
    ) -> List[SectionDefinition]:
        try:
            category = SectionCategory(category)
        except ValueError:
            return []

        return [d for d in self._ordered if d.category is category]

    def search(self, query: str) -> List[SectionDefinition]:
        """
        Case-insensitive substring search over name, description and tags.

        No ranking: results keep registration order.
        """
        q = (query or "").lower()

        return [
            d
            for d in self._ordered
            if q in d.name.lower()
            or q in d.description.lower()
            or any(q in tag.lower() for tag in d.tags)
        ]

    def label_for(self, section_id: str) -> str:
        definition = self.get_by_id(section_id)
        return definition.name if definition else section_id


def build_registry(
    packs: Iterable[Iterable[SectionDefinition]],
    *,
    duplicate_policy: str = "overwrite",
) -> SectionRegistry:
    """Single initialization step: every pack, one builder, one registry."""
    builder = RegistryBuilder(duplicate_policy=duplicate_policy)
    for pack in packs:
        builder.register(pack)

    registry = builder.build()
    logger.info("Section registry built with %d definitions", len(registry))
    return registry
