from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from ..sections.registry import SectionRegistry
from .state import Composition, IdFactory, PageSection, fresh_id, generate_section_id

logger = logging.getLogger(__name__)


class TemplateCategory(str, Enum):
    CREATOR = "creator"
    CONTENT_CREATOR = "content-creator"
    COACH = "coach"
    COURSE_CREATOR = "course-creator"
    AUTHOR = "author"
    MUSICIAN = "musician"
    SAAS = "saas"
    AGENCY = "agency"
    BUSINESS = "business"
    PORTFOLIO = "portfolio"
    LANDING = "landing"
    ECOMMERCE = "ecommerce"
    BLOG = "blog"
    PERSONAL = "personal"
    RESTAURANT = "restaurant"
    REALESTATE = "realestate"
    HEALTH = "health"
    EDUCATION = "education"
    EVENT = "event"


@dataclass(frozen=True)
class TemplateSectionRef:
    section_id: str
    props: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["TemplateSectionRef"]:
        """Wire shape {"sectionId", "props"?}; None when malformed."""
        if not isinstance(data, Mapping):
            return None

        section_id = data.get("sectionId")
        props = data.get("props")
        if not isinstance(section_id, str):
            return None
        if props is not None and not isinstance(props, Mapping):
            return None

        return cls(section_id=section_id, props=props)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"sectionId": self.section_id}
        if self.props is not None:
            data["props"] = dict(self.props)
        return data


@dataclass(frozen=True)
class PageTemplate:
    id: str
    category: TemplateCategory
    name: str
    description: str
    tags: Tuple[str, ...] = ()
    sections: Tuple[TemplateSectionRef, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "category", TemplateCategory(self.category))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "sections", tuple(self.sections))


class TemplateCatalog:
    """Read-only lookup of page templates, in registration order."""

    def __init__(self, templates: Iterable[PageTemplate] = ()):
        self._by_id: Dict[str, PageTemplate] = {}
        for template in templates:
            self._by_id[template.id] = template

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, template_id: str) -> Optional[PageTemplate]:
        return self._by_id.get(template_id)

    def get_all(self) -> List[PageTemplate]:
        return list(self._by_id.values())

    def get_by_category(self, category: Union[TemplateCategory, str]) -> List[PageTemplate]:
        try:
            category = TemplateCategory(category)
        except ValueError:
            return []
        return [t for t in self._by_id.values() if t.category is category]


RefLike = Union[TemplateSectionRef, Mapping[str, Any]]


def expand_template(
    refs: Iterable[RefLike],
    registry: SectionRegistry,
    id_factory: IdFactory = generate_section_id,
) -> Composition:
    """
    Resolve section refs into a fresh composition.

    Rules:
    - Refs whose definition is missing (or that are malformed) are dropped
    - props = defaults, overridden key by key by the ref's props
    - Relative order of the surviving refs is preserved
    """
    sections: List[PageSection] = []
    taken: Set[str] = set()

    for raw in refs:
        ref = raw if isinstance(raw, TemplateSectionRef) else TemplateSectionRef.from_dict(raw)
        if ref is None:
            logger.debug("Dropping malformed template ref: %r", raw)
            continue

        definition = registry.get_by_id(ref.section_id)
        if definition is None:
            logger.info("Dropping template ref to unknown section %s", ref.section_id)
            continue

        props = copy.deepcopy(dict(definition.default_props))
        props.update(copy.deepcopy(dict(ref.props or {})))

        section_uid = fresh_id(taken, id_factory)
        taken.add(section_uid)
        sections.append(PageSection(id=section_uid, section_id=ref.section_id, props=props))

    return tuple(sections)
