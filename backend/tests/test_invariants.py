from types import SimpleNamespace

import pytest

from composer.domain.invariants.composition import assert_composition
from composer.domain.invariants.exceptions import InvariantViolation
from composer.domain.invariants.page import assert_page
from composer.domain.lifecycle.page import assert_page_transition


def _page(**overrides):
    data = {"title": "Home", "slug": "home", "status": "draft", "sections": []}
    data.update(overrides)
    return SimpleNamespace(**data)


def test_valid_composition_passes():
    assert_composition([
        {"id": "u1", "sectionId": "hero-001", "props": {}},
        {"id": "u2", "sectionId": "cta-001", "props": {}, "customClasses": "x"},
    ])


@pytest.mark.parametrize(
    "sections",
    [
        "not a list",
        [{"sectionId": "hero-001", "props": {}}],
        [{"id": "u1", "sectionId": 7, "props": {}}],
        [{"id": "u1", "sectionId": "hero-001", "props": []}],
        [{"id": "u1", "sectionId": "hero-001", "props": {}, "customClasses": 3}],
        [
            {"id": "u1", "sectionId": "hero-001", "props": {}},
            {"id": "u1", "sectionId": "cta-001", "props": {}},
        ],
    ],
)
def test_bad_compositions_are_rejected(sections):
    with pytest.raises(InvariantViolation):
        assert_composition(sections)


def test_page_needs_title_slug_and_known_status():
    assert_page(_page())

    with pytest.raises(InvariantViolation):
        assert_page(_page(title=""))
    with pytest.raises(InvariantViolation):
        assert_page(_page(status="deleted"))


def test_publishing_requires_sections():
    with pytest.raises(InvariantViolation):
        assert_page(_page(status="published"), publish=True)

    assert_page(
        _page(status="published", sections=[{"id": "u1", "sectionId": "hero-001", "props": {}}]),
        publish=True,
    )


def test_page_lifecycle():
    assert_page_transition(from_status="draft", to_status="published")
    assert_page_transition(from_status="archived", to_status="archived")

    with pytest.raises(ValueError):
        assert_page_transition(from_status="archived", to_status="published")
