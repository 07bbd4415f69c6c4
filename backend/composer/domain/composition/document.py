from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Set

from .state import Composition, IdFactory, PageSection, fresh_id, generate_section_id


def encode_section(section: PageSection) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": section.id,
        "sectionId": section.section_id,
        "props": dict(section.props),
    }
    if section.custom_classes is not None:
        data["customClasses"] = section.custom_classes
    return data


def encode_sections(sections: Iterable[PageSection]) -> List[Dict[str, Any]]:
    return [encode_section(s) for s in sections]


def decode_sections(raw: Any, id_factory: IdFactory = generate_section_id) -> Composition:
    """
    Decode a stored page's sections list.

    Edge cases:
    - Not a list, empty, or first entry without sectionId: legacy content,
      decodes to an empty composition
    - Entries that are not objects or lack a string sectionId are dropped
    - Missing or duplicate instance ids are regenerated
    """
    if not isinstance(raw, list) or not raw:
        return ()

    first = raw[0]
    if not isinstance(first, Mapping) or not first.get("sectionId"):
        return ()

    sections: List[PageSection] = []
    taken: Set[str] = set()

    for entry in raw:
        if not isinstance(entry, Mapping):
            continue

        section_id = entry.get("sectionId")
        if not isinstance(section_id, str) or not section_id:
            continue

        section_uid = entry.get("id")
        if not isinstance(section_uid, str) or not section_uid or section_uid in taken:
            section_uid = fresh_id(taken, id_factory)
        taken.add(section_uid)

        props = entry.get("props")
        custom_classes = entry.get("customClasses")

        sections.append(
            PageSection(
                id=section_uid,
                section_id=section_id,
                props=dict(props) if isinstance(props, Mapping) else {},
                custom_classes=custom_classes if isinstance(custom_classes, str) else None,
            )
        )

    return tuple(sections)
