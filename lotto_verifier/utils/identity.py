"""Caller identity as handed over by the upstream auth layer."""

from __future__ import annotations

from flask import request

from lotto_verifier.errors import ForbiddenError, UnauthorizedError

USER_ID_HEADER = "X-User-Id"
ADMIN_HEADER = "X-User-Is-Admin"

_TRUTHY = {"1", "true", "yes"}


def current_user_id() -> int:
    """Return the authenticated user id from the request header."""

    raw = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not raw:
        raise UnauthorizedError(message=f"Missing {USER_ID_HEADER} header")
    try:
        user_id = int(raw)
    except ValueError as e:
        raise UnauthorizedError(message=f"Invalid {USER_ID_HEADER} header") from e
    if user_id <= 0:
        raise UnauthorizedError(message=f"Invalid {USER_ID_HEADER} header")
    return user_id


def current_user_is_admin() -> bool:
    return (request.headers.get(ADMIN_HEADER) or "").strip().lower() in _TRUTHY


def require_admin() -> int:
    """Return the caller's id, or raise unless the auth layer marked them admin."""

    user_id = current_user_id()
    if not current_user_is_admin():
        raise ForbiddenError(message="Administrator rights required")
    return user_id
