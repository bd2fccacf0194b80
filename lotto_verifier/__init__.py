"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied on top of the environment config
            (used by tests).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotto_verifier.config import get_config
    from lotto_verifier.db import init_db
    from lotto_verifier.error_handlers import register_error_handlers
    from lotto_verifier.logging_config import configure_logging
    from lotto_verifier.routes.draws import draws_bp
    from lotto_verifier.routes.health import health_bp
    from lotto_verifier.routes.settings import settings_bp
    from lotto_verifier.routes.tickets import tickets_bp
    from lotto_verifier.routes.verification import verification_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(settings_bp, url_prefix="/api")
    app.register_blueprint(tickets_bp, url_prefix="/api")
    app.register_blueprint(draws_bp, url_prefix="/api")
    app.register_blueprint(verification_bp, url_prefix="/api")

    return app
