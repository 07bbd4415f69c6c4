from typing import Any, Dict
from flask import current_app
from werkzeug.exceptions import Conflict
from composer.extensions import db
from composer.models.page import Page
from composer.domain.composition.document import decode_sections, encode_sections
from composer.domain.invariants.composition import assert_composition
from composer.domain.invariants.page import assert_page
from composer.domain.lifecycle.page import assert_page_transition
from composer.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("title", "slug", "template", "seo", "status", "sections")


def update_page(*, page: Page, data: Dict[str, Any]) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - A request naming none of them is rejected
    - Status changes follow the page lifecycle
    - A client-supplied composition is checked before it is stored
    - Invariants always revalidated
    """

    if not any(field in data for field in ALLOWED_UPDATE_FIELDS):
        raise ValueError("No valid fields provided for update")

    # 1️⃣ Slug collision check
    if "slug" in data and data["slug"] != page.slug:
        exists = Page.query.filter(Page.slug == data["slug"], Page.id != page.id).first()
        if exists:
            raise Conflict("Slug already exists")

    # 2️⃣ Lifecycle transition enforcement
    if "status" in data:
        assert_page_transition(from_status=page.status, to_status=data["status"])

    # 3️⃣ Full composition replacement
    if "sections" in data:
        assert_composition(data["sections"])
        data = {**data, "sections": encode_sections(decode_sections(data["sections"]))}

    changed_fields = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(page, field) != data[field]:
                setattr(page, field, data[field])
                changed_fields.append(field)

        # 4️⃣ Domain invariant enforcement
        assert_page(page, publish="status" in changed_fields and page.status == "published")

        if changed_fields:
            db.session.add(page)

    if changed_fields:
        current_app.logger.info(f"Page {page.id} updated: {', '.join(changed_fields)}")

    return page
