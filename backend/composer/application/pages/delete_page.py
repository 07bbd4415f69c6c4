from flask import current_app
from composer.extensions import db
from composer.models.page import Page
from composer.utils.transaction import transactional


def delete_page(*, page: Page) -> None:
    """Hard-delete a page together with its stored composition."""

    page_id = page.id

    with transactional():
        db.session.delete(page)

    current_app.logger.info(f"Page deleted: {page_id}")
