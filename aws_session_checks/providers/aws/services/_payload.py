"""Helpers for pulling record lists out of AWS JSON responses."""

from aws_session_checks.checks.common.errors import ParseError


def require_list(payload, key, operation):
    """Return ``payload[key]`` as a list, or raise ParseError.

    A missing key means the response is not what we asked for, which is a
    different thing from an empty list.
    """
    items = payload.get(key) if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise ParseError(f"{operation} response has no '{key}' list")
    return items


def require_object(item, operation):
    if not isinstance(item, dict):
        raise ParseError(f"{operation} response contains a non-object entry")
    return item
