from collections.abc import Mapping

from .exceptions import InvariantViolation


def assert_section_entry(entry, position):
    if not isinstance(entry, Mapping):
        raise InvariantViolation(f"Section #{position} must be an object.")

    if not isinstance(entry.get("id"), str) or not entry["id"]:
        raise InvariantViolation(f"Section #{position} must have a string id.")

    if not isinstance(entry.get("sectionId"), str) or not entry["sectionId"]:
        raise InvariantViolation(f"Section #{position} must have a string sectionId.")

    if not isinstance(entry.get("props", {}), Mapping):
        raise InvariantViolation(f"Section #{position} props must be an object.")

    classes = entry.get("customClasses")
    if classes is not None and not isinstance(classes, str):
        raise InvariantViolation(f"Section #{position} customClasses must be a string.")


def assert_composition(sections):
    """Client-supplied sections list, checked before it is persisted."""
    if not isinstance(sections, list):
        raise InvariantViolation("Sections must be a list.")

    for position, entry in enumerate(sections, start=1):
        assert_section_entry(entry, position)

    ids = [entry["id"] for entry in sections]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise InvariantViolation(
            f"Section ids must be unique within a page: {duplicates}"
        )
