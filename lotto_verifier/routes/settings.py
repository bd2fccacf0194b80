"""Public client settings."""

from __future__ import annotations

from flask import Blueprint, current_app

from lotto_verifier.utils.responses import ok

settings_bp = Blueprint("settings", __name__)


@settings_bp.get("/config")
def get_config():
    """Limits the client needs before calling the API."""

    return ok(
        {
            "verification_max_days": int(current_app.config["VERIFICATION_MAX_DAYS"]),
            "max_tickets_per_user": int(current_app.config["MAX_TICKETS_PER_USER"]),
        }
    )
