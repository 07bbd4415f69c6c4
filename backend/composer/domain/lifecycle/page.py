from typing import Dict, Set

# Explicit allowed state transitions
ALLOWED_PAGE_TRANSITIONS: Dict[str, Set[str]] = {
    "draft": {"published", "archived"},
    "published": {"draft", "archived"},
    "archived": {"draft"},
}


def assert_page_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards page lifecycle transitions.
    Single source of truth for status changes.
    """
    if from_status == to_status:
        return

    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal page transition: {from_status} → {to_status}"
        )
