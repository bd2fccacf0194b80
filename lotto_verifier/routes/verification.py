"""Verification routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotto_verifier.db import get_session
from lotto_verifier.schemas.verification import VerificationRequestSchema, VerificationResponseSchema
from lotto_verifier.services.verification_service import VerificationService
from lotto_verifier.utils.identity import current_user_id
from lotto_verifier.utils.responses import ok

verification_bp = Blueprint("verification", __name__)

_request_schema = VerificationRequestSchema()
_response_schema = VerificationResponseSchema()
_service = VerificationService()


@verification_bp.post("/verification/check")
def check():
    """Match the caller's tickets against the draws of a date window.

    Winners are tickets with 3 or more numbers in common with a draw.
    """

    user_id = current_user_id()
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    outcome = _service.verify(
        get_session(),
        user_id,
        date_from=data["date_from"],
        date_to=data["date_to"],
        group_name=data.get("group_name"),
        max_days=int(current_app.config["VERIFICATION_MAX_DAYS"]),
    )
    return ok(_response_schema.dump(outcome))
