from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import Conflict
from composer.extensions import db
from composer.models.page import Page
from composer.domain.composition.document import encode_sections
from composer.domain.composition.templates import expand_template
from composer.domain.invariants.page import assert_page
from composer.registry import current_registry, current_templates
from composer.utils.transaction import transactional


def create_page(*, data: Dict[str, Any]) -> Page:
    """
    Create a new page, optionally seeded from a page template.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug
    - Unknown template id (page starts empty, template name still stored)
    - Invariant violations
    """

    title = data.get("title")
    slug = data.get("slug")

    if not title or not slug:
        raise ValueError("Both title and slug are required")

    if Page.query.filter_by(slug=slug).first():
        raise Conflict("Slug already exists")

    page = Page()
    page.title = title
    page.slug = slug
    page.status = data.get("status", "draft")
    page.template = data.get("template") or "default"
    if not isinstance(page.template, str):
        raise ValueError("template must be a template id")
    page.seo = data.get("seo") or {}
    page.sections = []

    template = current_templates().get(page.template)
    if template is not None:
        page.sections = encode_sections(
            expand_template(template.sections, current_registry())
        )

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            # 🔒 Domain invariants
            assert_page(page, publish=page.status == "published")

    except IntegrityError as exc:
        raise Conflict("Slug already exists") from exc

    current_app.logger.info(
        f"Page created: {page.id} ({page.slug}) with {len(page.sections)} sections"
    )
    return page
