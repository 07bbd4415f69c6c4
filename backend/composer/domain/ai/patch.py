from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
_BARE_OBJECT = re.compile(r"\{[\s\S]*\}")


class AIPatchError(Exception):
    user_message = "Failed to generate content. Please try again."

    def __str__(self):
        return self.args[0] if self.args else self.user_message


class MalformedResponse(AIPatchError):
    """The completion did not contain a JSON object."""

    user_message = "AI returned an invalid response. Try again with a simpler prompt."


class TransportFailure(AIPatchError):
    """The completion request itself failed."""

    user_message = "Failed to generate content. Please try again."


def _load_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(candidate.strip())
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_completion(text: str) -> Dict[str, Any]:
    """
    Extract the proposed props object from free-form completion text.

    Strategies, first valid JSON object wins:
    1. fenced code block (```json optional)
    2. bare object, first "{" through last "}"
    3. the whole trimmed text
    """
    if not isinstance(text, str):
        raise MalformedResponse("Completion content is not text")

    strategies = (
        ("fenced", _FENCED_BLOCK.search(text)),
        ("bare-object", _BARE_OBJECT.search(text)),
    )
    for name, match in strategies:
        if match is None:
            continue
        parsed = _load_object(match.group(1) if match.groups() else match.group(0))
        if parsed is not None:
            logger.debug("Parsed completion via %s strategy", name)
            return parsed

    parsed = _load_object(text.strip())
    if parsed is not None:
        return parsed

    logger.warning("Completion did not contain a JSON object (%d chars)", len(text))
    raise MalformedResponse("Completion did not contain a JSON object")


def _canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


# a key absent from current differs from an explicit null
_MISSING = object()


def changed_keys(current: Mapping[str, Any], proposed: Mapping[str, Any]) -> List[str]:
    """Keys of proposed whose value differs structurally from current."""
    keys = []
    for key in proposed:
        old = current.get(key, _MISSING)
        if old is _MISSING or _canonical(old) != _canonical(proposed[key]):
            keys.append(key)
    return keys


def merge_props(
    current: Mapping[str, Any],
    proposed: Mapping[str, Any],
    accepted_keys: Iterable[str],
) -> Dict[str, Any]:
    """Merge, not replace: only accepted keys present in proposed change."""
    merged = dict(current)
    for key in accepted_keys:
        if isinstance(key, str) and key in proposed:
            merged[key] = proposed[key]
    return merged


@dataclass(frozen=True)
class PatchProposal:
    """An AI rewrite of one section's props, bound to that section's id."""

    target_id: str
    current: Mapping[str, Any]
    proposed: Mapping[str, Any]

    @property
    def changed_keys(self) -> List[str]:
        return changed_keys(self.current, self.proposed)

    def apply(self, accepted_keys: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        if accepted_keys is None:
            accepted_keys = self.changed_keys
        return merge_props(self.current, self.proposed, accepted_keys)


def describe_changes(proposal: PatchProposal) -> List[Dict[str, Any]]:
    """Before/after entries for the proposal preview."""
    entries = []
    for key in proposal.changed_keys:
        before = proposal.current.get(key)
        after = proposal.proposed[key]
        entries.append(
            {
                "key": key,
                "before": before,
                "after": after,
                "isText": isinstance(before, str) and isinstance(after, str),
            }
        )
    return entries
