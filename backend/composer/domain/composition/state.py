from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Container, Dict, Optional, Tuple

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_section_id() -> str:
    """Instance id shaped like s_<base36 millis>_<7 random base36 chars>."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(7))
    return f"s_{_to_base36(millis)}_{suffix}"


IdFactory = Callable[[], str]


def fresh_id(taken: Container[str], id_factory: IdFactory = generate_section_id) -> str:
    section_uid = id_factory()
    while section_uid in taken:
        section_uid = id_factory()
    return section_uid


@dataclass(frozen=True)
class PageSection:
    id: str
    section_id: str
    props: Dict[str, Any] = field(default_factory=dict)
    custom_classes: Optional[str] = None


Composition = Tuple[PageSection, ...]


@dataclass(frozen=True)
class EditorState:
    """
    One immutable snapshot of the editor.

    selection is a position, never a section reference: it is either None
    or a valid index into sections.
    """

    sections: Composition = ()
    selection: Optional[int] = None

    @property
    def section_ids(self) -> Tuple[str, ...]:
        return tuple(s.id for s in self.sections)

    @property
    def selected_section(self) -> Optional[PageSection]:
        if self.selection is None:
            return None
        return self.sections[self.selection]

    def in_range(self, index: Any) -> bool:
        # bool is an int subclass but never a position
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self.sections)
        )
