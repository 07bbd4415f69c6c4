from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Protocol

from .patch import MalformedResponse, PatchProposal, TransportFailure, parse_completion

logger = logging.getLogger(__name__)

PRESET_PROMPTS = (
    "Make it more professional",
    "Rewrite for tech audience",
    "Add more urgency",
    "Make it more casual",
    "Shorten the text",
    "Make it more persuasive",
)


@dataclass(frozen=True)
class CompletionRequest:
    prompt: str
    max_tokens: int = 2000
    temperature: float = 0.7

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt": self.prompt,
            "maxTokens": self.max_tokens,
            "temperature": self.temperature,
        }


@dataclass(frozen=True)
class CompletionResponse:
    content: str


class CompletionTransport(Protocol):
    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        ...


async def request_patch(
    transport: CompletionTransport,
    request: CompletionRequest,
    *,
    target_id: str,
    current_props: Mapping[str, Any],
) -> PatchProposal:
    """
    Ask the transport for a rewrite of one section's props.

    Raises:
    - TransportFailure when the transport call fails
    - MalformedResponse when the content holds no JSON object
    """
    try:
        response = await transport.complete(request)
    except Exception as exc:
        logger.warning("Completion request for section %s failed: %s", target_id, exc)
        raise TransportFailure(str(exc) or TransportFailure.user_message) from exc

    content = getattr(response, "content", None)
    if not isinstance(content, str):
        raise MalformedResponse("Completion response has no text content")

    proposed = parse_completion(content)

    return PatchProposal(
        target_id=target_id,
        current=dict(current_props),
        proposed=proposed,
    )
