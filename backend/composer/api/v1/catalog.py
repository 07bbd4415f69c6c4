from flask import request, jsonify, abort
from composer.domain.sections.types import SECTION_CATEGORIES
from composer.normalizers.catalog import normalize_definition, normalize_template
from composer.registry import current_registry, current_templates
from . import v1_bp

# ------------------------
# Section library
# ------------------------

@v1_bp.route("/sections", methods=["GET"])
def list_sections():
    registry = current_registry()
    category = request.args.get("category")
    query = request.args.get("q")

    definitions = registry.get_all_sections()

    if category:
        in_category = {d.id for d in registry.get_by_category(category)}
        definitions = [d for d in definitions if d.id in in_category]

    if query:
        matches = {d.id for d in registry.search(query)}
        definitions = [d for d in definitions if d.id in matches]

    return jsonify({
        "items": [normalize_definition(d, include_schema=False) for d in definitions],
        "total": len(definitions),
    })


@v1_bp.route("/sections/<section_id>", methods=["GET"])
def get_section(section_id):
    definition = current_registry().get_by_id(section_id)
    if definition is None:
        abort(404, description=f"Section not found: {section_id}")

    return jsonify(normalize_definition(definition))


@v1_bp.route("/categories", methods=["GET"])
def list_categories():
    registry = current_registry()

    return jsonify([
        {
            "id": category.value,
            "label": label,
            "description": description,
            "count": len(registry.get_by_category(category)),
        }
        for category, label, description in SECTION_CATEGORIES
    ])

# ------------------------
# Page templates
# ------------------------

@v1_bp.route("/templates", methods=["GET"])
def list_templates():
    catalog = current_templates()
    category = request.args.get("category")

    templates = catalog.get_by_category(category) if category else catalog.get_all()

    return jsonify([
        normalize_template(t, registry=current_registry()) for t in templates
    ])


@v1_bp.route("/templates/<template_id>", methods=["GET"])
def get_template(template_id):
    template = current_templates().get(template_id)
    if template is None:
        abort(404, description=f"Page template not found: {template_id}")

    return jsonify(normalize_template(template, registry=current_registry()))
