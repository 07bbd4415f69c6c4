from typing import Any, Dict, Optional
from flask import current_app
from composer.models.page import Page
from composer.domain.composition.actions import action_from_dict, action_payload
from composer.domain.composition.document import decode_sections, encode_sections
from composer.domain.composition.state import EditorState
from composer.domain.composition.store import transition
from composer.registry import current_registry, current_templates
from composer.utils.transaction import transactional


def _resolve_template_refs(action_data: Dict[str, Any]) -> Dict[str, Any]:
    # {"type": "apply_template", "template_id": ...} is shorthand for that template's refs
    if action_data.get("type") != "apply_template" or "template_id" not in action_data:
        return action_data

    template_id = action_data["template_id"]
    template = current_templates().get(template_id) if isinstance(template_id, str) else None
    if template is None:
        raise ValueError(f"Unknown page template: {template_id}")

    return {**action_data, "refs": [ref.to_dict() for ref in template.sections]}


def apply_action(
    *,
    page: Page,
    selection: Optional[Any],
    action_data: Dict[str, Any],
) -> EditorState:
    """
    Run one editor action against a stored page.

    Responsibilities:
    - rebuild the editor snapshot from the stored composition
    - run the reducer (unknown ids and bad indices are no-ops)
    - persist the new composition inside a transaction
    - return the new snapshot, selection included

    Raises:
    - ValueError for an unknown action type or page template
    """

    # 1️⃣ Decode action (template ids resolved against the catalog)
    action = action_from_dict(_resolve_template_refs(action_data))

    # 2️⃣ Rebuild snapshot; a selection the page cannot hold is dropped
    sections = decode_sections(page.sections)
    state = EditorState(sections=sections)
    if state.in_range(selection):
        state = EditorState(sections=sections, selection=selection)

    # 3️⃣ Reduce
    new_state = transition(state, action, current_registry())

    # 4️⃣ Persist only when the stored document differs
    encoded = encode_sections(new_state.sections)
    if encoded != page.sections:
        with transactional():
            page.sections = encoded

    current_app.logger.info(
        f"Page {page.id} action {action_payload(action)} -> "
        f"{len(new_state.sections)} sections, selection={new_state.selection}"
    )

    return new_state
