from __future__ import annotations

import pytest

from lotto_verifier import create_app


@pytest.fixture()
def app():
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": "sqlite:///:memory:",
            "VERIFICATION_MAX_DAYS": 31,
            "MAX_TICKETS_PER_USER": 100,
        }
    )
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth():
    return {"X-User-Id": "1"}


@pytest.fixture()
def admin():
    return {"X-User-Id": "1", "X-User-Is-Admin": "true"}
