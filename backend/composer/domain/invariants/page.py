from .composition import assert_composition
from .exceptions import InvariantViolation

PAGE_STATUSES = {"draft", "published", "archived"}


def assert_page(page, publish=False):
    if not page.title or not page.slug:
        raise InvariantViolation("Page must have a title and a slug.")

    if page.status not in PAGE_STATUSES:
        raise InvariantViolation(f"Unknown page status: {page.status}")

    sections = page.sections or []

    if publish and not sections:
        raise InvariantViolation("Cannot publish page without sections.")

    assert_composition(sections)
