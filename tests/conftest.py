"""Shared test fixtures."""

import os
import tempfile

import pytest

# app.py reads the environment at import time
_db_dir = tempfile.mkdtemp(prefix="festivos-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'festivos.db')}"
os.environ["SEED_DEFAULT_RULES"] = "true"

from holiday_engine import HolidayQueryService, HolidayRule, RuleType  # noqa: E402
import public_holidays  # noqa: E402


@pytest.fixture
def default_rules():
    return list(public_holidays.DEFAULT_RULES)


@pytest.fixture
def service(default_rules):
    return HolidayQueryService(lambda: default_rules)


@pytest.fixture
def flask_app():
    from app import app
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def broken_rule(flask_app):
    """Temporarily add a rule with an unknown type to the rule table."""
    from app import db, Holiday

    with flask_app.app_context():
        row = Holiday(name="Regla rota", rule_type=9)
        db.session.add(row)
        db.session.commit()
        row_id = row.id

    yield row_id

    with flask_app.app_context():
        db.session.delete(db.session.get(Holiday, row_id))
        db.session.commit()


@pytest.fixture
def make_rule():
    def _make(name="Regla", rule_type=RuleType.FIXED, **kwargs):
        return HolidayRule(name, rule_type, **kwargs)
    return _make
