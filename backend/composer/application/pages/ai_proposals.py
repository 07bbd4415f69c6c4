import asyncio
from typing import Any
from flask import current_app
from werkzeug.exceptions import NotFound, ServiceUnavailable
from composer.models.page import Page
from composer.domain.ai.patch import MalformedResponse, PatchProposal, parse_completion
from composer.domain.ai.transport import CompletionRequest, request_patch
from composer.domain.composition.document import decode_sections
from composer.registry import current_transport


def _find_section(page: Page, section_uid: Any):
    for section in decode_sections(page.sections):
        if section.id == section_uid:
            return section
    raise NotFound(f"Section {section_uid} is not part of page {page.id}")


def propose_patch(*, page: Page, section_uid: str, content: Any) -> PatchProposal:
    """
    Parse a completion produced elsewhere into a proposal for one section.

    Raises:
    - NotFound when the section is not on the page
    - MalformedResponse when the content holds no JSON object
    """
    section = _find_section(page, section_uid)

    if not isinstance(content, str):
        raise MalformedResponse("Completion content must be a string")

    return PatchProposal(
        target_id=section.id,
        current=dict(section.props),
        proposed=parse_completion(content),
    )


def request_completion(*, page: Page, section_uid: str, prompt: str) -> PatchProposal:
    """
    Ask the configured transport for a rewrite of one section.

    Responsibilities:
    - refuse when no transport is configured (503)
    - build the request from AI_MAX_TOKENS / AI_TEMPERATURE
    - surface TransportFailure and MalformedResponse unchanged
    """
    transport = current_transport()
    if transport is None:
        raise ServiceUnavailable("No AI transport configured")

    section = _find_section(page, section_uid)

    request = CompletionRequest(
        prompt=prompt,
        max_tokens=current_app.config["AI_MAX_TOKENS"],
        temperature=current_app.config["AI_TEMPERATURE"],
    )

    current_app.logger.info(f"Requesting AI completion for section {section.id} on page {page.id}")

    return asyncio.run(
        request_patch(
            transport,
            request,
            target_id=section.id,
            current_props=section.props,
        )
    )
