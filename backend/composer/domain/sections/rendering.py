from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from .registry import SectionRegistry


class SectionRenderer(Protocol):
    def render(self, props: Mapping[str, Any], custom_classes: Optional[str]) -> Any:
        ...


class HandoffRenderer:
    """Hands (sectionId, props, customClasses) to whatever draws the page."""

    def __init__(self, section_id: str):
        self.section_id = section_id

    def render(self, props, custom_classes):
        return {
            "sectionId": self.section_id,
            "props": dict(props),
            "customClasses": custom_classes or "",
        }


class RendererTable:
    """
    Renderers resolved by section id.

    Ids without an explicit entry fall back to a HandoffRenderer.
    """

    def __init__(self, renderers: Optional[Mapping[str, SectionRenderer]] = None):
        self._renderers: Dict[str, SectionRenderer] = dict(renderers or {})

    def resolve(self, section_id: str) -> SectionRenderer:
        renderer = self._renderers.get(section_id)
        if renderer is None:
            return HandoffRenderer(section_id)
        return renderer


@dataclass(frozen=True)
class RenderedSection:
    id: str
    section_id: str
    missing: bool
    output: Any


def render_page(
    sections: Iterable[Any],
    registry: SectionRegistry,
    renderers: Optional[RendererTable] = None,
) -> List[RenderedSection]:
    """
    Render every section top to bottom.

    A dangling section id yields a placeholder instead of failing the page.
    """
    renderers = renderers or RendererTable()
    rendered: List[RenderedSection] = []

    for section in sections:
        definition = registry.get_by_id(section.section_id)

        if definition is None:
            rendered.append(
                RenderedSection(
                    id=section.id,
                    section_id=section.section_id,
                    missing=True,
                    output={"message": f"Section not found: {section.section_id}"},
                )
            )
            continue

        merged = copy.deepcopy(dict(definition.default_props))
        merged.update(section.props)

        output = renderers.resolve(section.section_id).render(merged, section.custom_classes)
        rendered.append(
            RenderedSection(
                id=section.id,
                section_id=section.section_id,
                missing=False,
                output=output,
            )
        )

    return rendered
