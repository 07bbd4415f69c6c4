import pytest

from composer.domain.ai.patch import (
    MalformedResponse,
    PatchProposal,
    TransportFailure,
    changed_keys,
    describe_changes,
    merge_props,
    parse_completion,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ('```json\n{"a":1}\n```', {"a": 1}),
        ('Here you go:\n```\n{"heading": "Hi"}\n```\nEnjoy', {"heading": "Hi"}),
        ('noise {"a":1} trailing', {"a": 1}),
        ('  {"a": {"b": [1, 2]}}  ', {"a": {"b": [1, 2]}}),
    ],
)
def test_parse_completion(text, expected):
    assert parse_completion(text) == expected


@pytest.mark.parametrize("text", ["no json here", "[1, 2, 3]", '"just a string"', "{broken", "{a:1}"])
def test_parse_completion_requires_an_object(text):
    with pytest.raises(MalformedResponse):
        parse_completion(text)


def test_fenced_block_wins_over_surrounding_braces():
    text = 'prefix {"ignored": true} ```json\n{"used": 1}\n``` suffix'

    assert parse_completion(text) == {"used": 1}


def test_changed_keys_and_merge():
    current = {"heading": "Old"}
    proposed = {"heading": "New", "items": [1, 2]}

    keys = changed_keys(current, proposed)

    assert keys == ["heading", "items"]
    assert merge_props(current, proposed, keys) == {"heading": "New", "items": [1, 2]}
    assert merge_props(current, proposed, []) == current
    assert current == {"heading": "Old"}


def test_changed_keys_compares_structure_not_identity():
    current = {"items": [{"a": 1, "b": 2}], "empty": None}
    proposed = {"items": [{"b": 2, "a": 1}], "empty": None, "fresh": None}

    assert changed_keys(current, proposed) == ["fresh"]


def test_merge_ignores_accepted_keys_missing_from_proposal():
    assert merge_props({"a": 1}, {"b": 2}, ["a", "b", "c"]) == {"a": 1, "b": 2}


def test_proposal_apply_and_preview():
    proposal = PatchProposal(
        target_id="uid-0",
        current={"heading": "Old", "count": 1},
        proposed={"heading": "New", "count": 1, "items": [1]},
    )

    assert proposal.changed_keys == ["heading", "items"]
    assert proposal.apply() == {"heading": "New", "count": 1, "items": [1]}
    assert proposal.apply(["items"]) == {"heading": "Old", "count": 1, "items": [1]}
    assert describe_changes(proposal) == [
        {"key": "heading", "before": "Old", "after": "New", "isText": True},
        {"key": "items", "before": None, "after": [1], "isText": False},
    ]


def test_error_messages_are_distinct():
    assert MalformedResponse().user_message != TransportFailure().user_message
    assert str(TransportFailure()) == "Failed to generate content. Please try again."
    assert "simpler prompt" in str(MalformedResponse())


def test_merge_skips_keys_that_are_not_strings():
    assert merge_props({"a": 1}, {"a": 2}, [[1], {"x": 1}, None]) == {"a": 1}
