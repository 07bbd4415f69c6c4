from flask import request, jsonify
from composer.application.pages.ai_proposals import propose_patch, request_completion
from composer.application.pages.apply_action import apply_action
from composer.application.pages.create_page import create_page
from composer.application.pages.delete_page import delete_page
from composer.application.pages.update_page import update_page
from composer.domain.composition.document import decode_sections
from composer.domain.sections.rendering import render_page
from composer.models.page import Page
from composer.normalizers.page import normalize_editor_state, normalize_page
from composer.normalizers.pagination import normalize_pagination
from composer.normalizers.proposal import normalize_proposal
from composer.normalizers.section import normalize_rendered_section
from composer.registry import current_registry
from composer.utils.optimistic_lock import enforce_optimistic_lock, last_modified
from composer.utils.pagination import page_args
from . import v1_bp


def _with_last_modified(payload, page, status=200):
    response = jsonify(payload)
    response.status_code = status
    stamp = last_modified(page)
    if stamp:
        response.headers["Last-Modified"] = stamp
    return response

# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["POST"])
def create_page_route():
    data = request.get_json(silent=True) or {}

    try:
        page = create_page(data=data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return _with_last_modified(
        normalize_page(page, registry=current_registry()), page, status=201
    )


@v1_bp.route("/pages", methods=["GET"])
def list_pages():
    page_number, per_page = page_args()

    query = Page.query
    status = request.args.get("status")
    if status:
        query = query.filter_by(status=status)

    pagination = query.order_by(Page.created_at.desc()).paginate(
        page=page_number, per_page=per_page, error_out=False
    )

    return jsonify(
        normalize_pagination(
            pagination.items,
            lambda p: normalize_page(p, include_sections=False),
            page=page_number,
            per_page=per_page,
            total=pagination.total,
        )
    )


@v1_bp.route("/pages/<page_id>", methods=["GET"])
def get_page(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()

    return _with_last_modified(normalize_page(page, registry=current_registry()), page)


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
def update_page_route(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(page)

    data = request.get_json(silent=True) or {}

    try:
        page = update_page(page=page, data=data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return _with_last_modified(normalize_page(page, registry=current_registry()), page)


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
def delete_page_route(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()

    delete_page(page=page)

    return jsonify({"message": "Page deleted successfully"}), 200


@v1_bp.route("/pages/<page_id>/preview", methods=["GET"])
def preview_page(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()

    rendered = render_page(decode_sections(page.sections), current_registry())

    return jsonify({
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "sections": [normalize_rendered_section(r) for r in rendered],
    })

# ------------------------
# Editor actions
# ------------------------

@v1_bp.route("/pages/<page_id>/actions", methods=["POST"])
def page_action(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()
    data = request.get_json(silent=True) or {}

    action = data.get("action")
    if not isinstance(action, dict) or not action.get("type"):
        return jsonify({"error": "action with a type is required"}), 400

    try:
        state = apply_action(
            page=page,
            selection=data.get("selection"),
            action_data=action,
        )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return _with_last_modified(
        normalize_editor_state(state, registry=current_registry()), page
    )

# ------------------------
# AI proposals
# ------------------------

@v1_bp.route("/pages/<page_id>/ai/proposals", methods=["POST"])
def ai_proposal(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()
    data = request.get_json(silent=True) or {}

    if not data.get("section_id") or "content" not in data:
        return jsonify({"error": "section_id and content are required"}), 400

    proposal = propose_patch(
        page=page,
        section_uid=data["section_id"],
        content=data["content"],
    )

    return jsonify(normalize_proposal(proposal))


@v1_bp.route("/pages/<page_id>/ai/completions", methods=["POST"])
def ai_completion(page_id):
    page = Page.query.filter_by(id=page_id).first_or_404()
    data = request.get_json(silent=True) or {}

    prompt = data.get("prompt")
    if not data.get("section_id") or not isinstance(prompt, str) or not prompt.strip():
        return jsonify({"error": "section_id and prompt are required"}), 400

    proposal = request_completion(
        page=page,
        section_uid=data["section_id"],
        prompt=prompt,
    )

    return jsonify(normalize_proposal(proposal))
