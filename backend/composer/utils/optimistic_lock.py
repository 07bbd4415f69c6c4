from flask import request, abort
from datetime import timezone
from dateutil.parser import parse, ParserError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware and at HTTP-date resolution.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.replace(microsecond=0)


def last_modified(entity):
    """HTTP-date for the entity's updated_at, the value clients send back."""
    if entity.updated_at is None:
        return None
    ts = normalize_ts(entity.updated_at).astimezone(timezone.utc)
    return ts.strftime("%a, %d %b %Y %H:%M:%S GMT")


def enforce_optimistic_lock(entity):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.
    Raises 409 Conflict if the entity has been modified since.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError):
        abort(400, description="Invalid If-Unmodified-Since header")

    if entity.updated_at is None:
        return

    server_ts = normalize_ts(entity.updated_at)

    if server_ts > client_ts:
        abort(
            409,
            description="Conflict detected. Resource has been modified."
        )
