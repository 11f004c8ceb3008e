"""
Shared fixtures: an app bound to an in-memory SQLite database, its test
client and a factory that stores logic scripts through the service layer.
"""

import os

# Read by decouple when feather.base.constants is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("AI_PROVIDER", "anthropic")

import pytest

from feather.app import create_app
from feather.config.database import db
from feather.logic_scripts.services import AddScriptService


TENANT = "t1"


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "LOGIC_SCRIPTS_FAIL_OPEN": True,
        "LOGIC_SCRIPTS_CACHE_TTL": 300,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_script(app):
    """
    make_script("deny when true", trigger_point="submit") -> stored dict
    """

    def _make(
        script_content,
        trigger_point = "add_to_cart",
        distributor_id = TENANT,
        description = "",
        active = True
    ):
        return AddScriptService().create_script(distributor_id, {
            "trigger_point": trigger_point,
            "script_content": script_content,
            "description": description,
            "active": active,
        })

    return _make


@pytest.fixture
def tenant_headers():
    return {"X-Distributor-Id": TENANT}
