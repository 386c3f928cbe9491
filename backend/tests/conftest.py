"""
Pytest configuration: app and client fixtures, reading factories.
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.pop("FLASK_ENV", None)

from cvrtracker import create_app  # noqa: E402
from cvrtracker.models import BloodPressureReading  # noqa: E402

BASE_TIME = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'AUDIT_LOG_FILE': str(tmp_path / 'audit.log'),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_readings():
    """Build oldest-first readings one day apart from (systolic, diastolic) pairs."""
    def _make(pairs, start=BASE_TIME):
        return [
            BloodPressureReading(systolic=s, diastolic=d, timestamp=start + timedelta(days=i))
            for i, (s, d) in enumerate(pairs)
        ]
    return _make
