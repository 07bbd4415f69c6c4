from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .templates import RefLike


@dataclass(frozen=True)
class AddSection:
    section_id: str


@dataclass(frozen=True)
class RemoveSection:
    index: Any


@dataclass(frozen=True)
class SetProps:
    index: Any
    props: Mapping[str, Any]


@dataclass(frozen=True)
class SetClasses:
    index: Any
    classes: str


@dataclass(frozen=True)
class ReorderSections:
    from_index: Any
    to_index: Any


@dataclass(frozen=True)
class ApplyTemplate:
    refs: Tuple[RefLike, ...] = ()


@dataclass(frozen=True)
class SelectSection:
    index: Any


@dataclass(frozen=True)
class ApplyAIPatch:
    """accepted_keys None means every changed key."""

    target_id: str
    proposed: Mapping[str, Any] = field(default_factory=dict)
    accepted_keys: Optional[Tuple[str, ...]] = None


Action = Union[
    AddSection,
    RemoveSection,
    SetProps,
    SetClasses,
    ReorderSections,
    ApplyTemplate,
    SelectSection,
    ApplyAIPatch,
]


def action_from_dict(data: Mapping[str, Any]) -> Action:
    """
    Build an action from its JSON shape, e.g. {"type": "reorder", "from": 0, "to": 2}.

    Raises ValueError for an unknown type. Bad payload values are passed
    through; the reducer treats them as no-ops.
    """
    if not isinstance(data, Mapping):
        raise ValueError("Action must be an object")

    action_type = data.get("type")

    if action_type == "add":
        return AddSection(section_id=data.get("sectionId"))
    if action_type == "remove":
        return RemoveSection(index=data.get("index"))
    if action_type == "set_props":
        return SetProps(index=data.get("index"), props=data.get("props"))
    if action_type == "set_classes":
        return SetClasses(index=data.get("index"), classes=data.get("classes"))
    if action_type == "reorder":
        return ReorderSections(from_index=data.get("from"), to_index=data.get("to"))
    if action_type == "apply_template":
        refs = data.get("refs") or []
        return ApplyTemplate(refs=tuple(refs) if isinstance(refs, list) else ())
    if action_type == "select":
        return SelectSection(index=data.get("index"))
    if action_type == "apply_ai_patch":
        accepted = data.get("acceptedKeys")
        return ApplyAIPatch(
            target_id=data.get("targetId"),
            proposed=data.get("proposed") or {},
            accepted_keys=(
                tuple(k for k in accepted if isinstance(k, str))
                if isinstance(accepted, list)
                else None
            ),
        )

    raise ValueError(f"Unknown action type: {action_type}")


def action_payload(action: Action) -> Dict[str, Any]:
    """Compact description of an action for logs."""
    return {"type": type(action).__name__, **{
        k: v for k, v in vars(action).items() if k not in ("props", "proposed", "refs")
    }}
