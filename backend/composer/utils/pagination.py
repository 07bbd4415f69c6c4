from flask import current_app, request
from werkzeug.exceptions import BadRequest

MAX_PER_PAGE = 100


def page_args():
    """
    Read ?page=&per_page= from the request.

    Raises:
    - BadRequest for non-integer or non-positive values
    """
    try:
        page = int(request.args.get("page", 1))
        per_page = int(
            request.args.get("per_page", current_app.config["PAGES_PER_PAGE"])
        )
    except (TypeError, ValueError) as exc:
        raise BadRequest("page and per_page must be integers") from exc

    if page < 1 or per_page < 1:
        raise BadRequest("page and per_page must be positive")

    return page, min(per_page, MAX_PER_PAGE)
