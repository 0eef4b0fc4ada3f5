"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import json
from decimal import Decimal
from typing import Any, Dict

import pytest
from click.testing import CliRunner

from chantier_tracker.config.logging_config import reset_logging
from chantier_tracker.config.settings import reload_config
from chantier_tracker.models import Expense, Site, TimeEntry
from chantier_tracker.readers.record_source import InMemoryRecordSource


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "DATA_FILE": "test-chantiers.json",
        "CURRENCY_SYMBOL": "€",
        "ENVIRONMENT": "testing",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("USER_ID", raising=False)

    # Clear the global config to force reload with test values
    import chantier_tracker.config.settings
    chantier_tracker.config.settings._config = None

    yield test_env_vars

    chantier_tracker.config.settings._config = None


@pytest.fixture
def test_config(mock_env):
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def site() -> Site:
    """A site owned by user u-1 with a current rate of 25."""
    return Site(id=1, name="Villa Rose", current_rate=Decimal("25"), user_id="u-1")


@pytest.fixture
def time_entries():
    """Two entries: 8h at 20 and 4h at 15 (on two different days)."""
    return [
        TimeEntry(
            id=10,
            chantier_id=1,
            date=dt.date(2024, 5, 2),
            arrived_at="08:00",
            departed_at="16:00",
            hourly_rate=Decimal("20"),
        ),
        TimeEntry(
            id=11,
            chantier_id=1,
            date=dt.date(2024, 5, 3),
            arrived_at="13:00",
            departed_at="17:00",
            hourly_rate=Decimal("15"),
        ),
    ]


@pytest.fixture
def expenses():
    """One flat expense of 50 with no margin."""
    return [
        Expense(
            id=20,
            chantier_id=1,
            date=dt.date(2024, 5, 2),
            description="Ciment",
            base_amount=Decimal("50"),
        )
    ]


@pytest.fixture
def record_source(site, time_entries, expenses) -> InMemoryRecordSource:
    """In-memory source holding the sample site and its records."""
    other_site = Site(id=2, name="Garage Martin", current_rate=30, user_id="u-2")
    other_entry = TimeEntry(
        id=30,
        chantier_id=2,
        date=dt.date(2024, 5, 2),
        arrived_at="07:00",
        departed_at="12:00",
        hourly_rate=30,
    )
    return InMemoryRecordSource(
        sites=[site, other_site],
        time_entries=time_entries + [other_entry],
        expenses=expenses,
    )


@pytest.fixture
def raw_dump() -> Dict[str, Any]:
    """Backend-shaped JSON dump, including legacy and malformed rows."""
    return {
        "chantiers": [
            {"id": 1, "name": "Villa Rose", "current_rate": 25, "user_id": "u-1"},
            {"id": 2, "name": "Garage Martin", "current_rate": "30", "user_id": "u-2"},
            {"name": "No id"},
        ],
        "daily_hours": [
            {
                "id": 10,
                "chantier_id": 1,
                "date": "2024-05-02",
                "arrived_at": "08:00:00",
                "departed_at": "16:00:00",
                "hourly_rate": 20,
            },
            {
                "id": 11,
                "chantier_id": 1,
                "date": "2024-05-03",
                "arrived_at": "13:00",
                "departed_at": "17:00",
                "hourly_rate": "15",
            },
            {"id": 12, "chantier_id": 1, "date": "not-a-date"},
        ],
        "expenses": [
            {
                "id": 20,
                "chantier_id": 1,
                "date": "2024-05-02",
                "description": "Ciment",
                "amount": 50,
                "file_url": "https://example.invalid/signed",
            },
        ],
    }


@pytest.fixture
def data_file(tmp_path, raw_dump):
    """The raw dump written to a temporary JSON file."""
    path = tmp_path / "chantiers.json"
    path.write_text(json.dumps(raw_dump), encoding="utf-8")
    return path


@pytest.fixture
def cli_env(mock_env, monkeypatch):
    """Environment for CLI runs: test settings, quiet logs."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.delenv("EXPORT_DELIMITER", raising=False)
    return mock_env


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    reset_logging()


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
