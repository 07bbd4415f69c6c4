from typing import Any, Dict, Iterable, List, Mapping

from .types import PropField, PropFieldType, SectionDefinition


def blank_item(item_fields: Iterable[PropField]) -> Dict[str, Any]:
    """New row for an items field, as the editor's "add item" button creates it."""
    blank: Dict[str, Any] = {}
    for item_field in item_fields:
        if item_field.type is PropFieldType.TOGGLE:
            blank[item_field.key] = False
        elif item_field.type is PropFieldType.NUMBER:
            blank[item_field.key] = 0
        else:
            blank[item_field.key] = ""
    return blank


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def validate_props(definition: SectionDefinition, props: Mapping[str, Any]) -> List[str]:
    """
    Editor-side checks of props against a definition's schema.

    Notes:
    - Returns human-readable issues, never raises
    - The composition store does not enforce any of this
    """
    issues: List[str] = []

    for prop_field in definition.props_schema:
        value = props.get(prop_field.key)

        if prop_field.required and _is_empty(value):
            issues.append(f"{prop_field.label} is required")
            continue

        if prop_field.type is PropFieldType.SELECT and prop_field.options and value is not None:
            allowed = {o.value for o in prop_field.options}
            if not isinstance(value, str) or value not in allowed:
                issues.append(f"{prop_field.label} must be one of: {', '.join(sorted(allowed))}")

        if prop_field.type is PropFieldType.ITEMS and value is not None:
            if not isinstance(value, list):
                issues.append(f"{prop_field.label} must be a list")
                continue

            for position, item in enumerate(value, start=1):
                if not isinstance(item, Mapping):
                    issues.append(f"{prop_field.label} #{position} must be an object")
                    continue
                for item_field in prop_field.item_fields:
                    if item_field.required and _is_empty(item.get(item_field.key)):
                        issues.append(
                            f"{prop_field.label} #{position}: {item_field.label} is required"
                        )

    return issues
