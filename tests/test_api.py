"""Tests for API endpoints."""
import importlib
import logging
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
import today_api.config
import today_api.main
from today_api.exceptions import TimezoneResolutionError
from today_api.main import app, get_date_info_service
from today_api.services.date_info import DateInfoService
from today_api.services.date_resolver import DateResolver
from today_api.sources.in_memory import InMemoryEventDataSource

client = TestClient(app)


@pytest.fixture
def frozen_at():
    """Freeze the service clock at a given UTC instant."""
    def _freeze(instant: datetime):
        resolver = DateResolver("America/New_York", clock=lambda: instant)
        service = DateInfoService(InMemoryEventDataSource(), resolver)
        app.dependency_overrides[get_date_info_service] = lambda: service

    yield _freeze
    app.dependency_overrides.clear()


def test_root_endpoint():
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()
    assert "version" in response.json()


def test_today_shape():
    """Test that /today returns every field with camelCase keys."""
    response = client.get("/today")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"date", "dayOfWeek", "timezone", "isDaylightSavingTime", "events", "message"}
    assert len(data["date"]) == 10
    assert isinstance(data["isDaylightSavingTime"], bool)
    assert data["timezone"].startswith("America/New_York")


def test_today_new_years_day(frozen_at):
    frozen_at(datetime(2024, 1, 1, 17, 0, tzinfo=timezone.utc))

    response = client.get("/today")

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-01-01"
    assert data["dayOfWeek"] == "Monday"
    assert data["timezone"] == "America/New_York (EST, UTC-5)"
    assert data["isDaylightSavingTime"] is False
    assert data["events"] == [
        {
            "name": "New Year's Day",
            "type": "PublicHoliday",
            "description": "Federal holiday celebrating the first day of the year",
            "region": "US",
        },
        {
            "name": "World Day of Peace",
            "type": "InternationalDay",
            "description": "UN-recognized day promoting peace worldwide",
            "region": None,
        },
    ]
    assert data["message"] == "Today is New Year's Day! It's also World Day of Peace."


def test_today_thanksgiving(frozen_at):
    frozen_at(datetime(2024, 11, 28, 18, 0, tzinfo=timezone.utc))

    data = client.get("/today").json()

    assert data["date"] == "2024-11-28"
    assert [e["name"] for e in data["events"]] == ["Thanksgiving Day"]
    assert data["message"] == "Today is Thanksgiving Day!"


def test_today_is_stable_for_frozen_clock(frozen_at):
    frozen_at(datetime(2024, 3, 10, 7, 30, tzinfo=timezone.utc))

    first = client.get("/today")
    second = client.get("/today")

    assert first.content == second.content
    assert first.json()["isDaylightSavingTime"] is True


def test_health_endpoint():
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Healthy"
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed.tzinfo is not None


def test_health_not_in_openapi_schema():
    schema = client.get("/openapi.json").json()

    assert "/today" in schema["paths"]
    assert "/health" not in schema["paths"]


def test_unknown_timezone_stops_startup(monkeypatch, caplog):
    """Test that an unresolvable TIMEZONE_ID fails the app import and logs CRITICAL."""
    monkeypatch.setenv("TIMEZONE_ID", "Atlantis/Capital")
    try:
        importlib.reload(today_api.config)
        with caplog.at_level(logging.CRITICAL, logger="today_api.main"):
            with pytest.raises(TimezoneResolutionError) as exc_info:
                importlib.reload(today_api.main)
    finally:
        monkeypatch.undo()
        importlib.reload(today_api.config)
        importlib.reload(today_api.main)

    assert exc_info.value.timezone_id == "Atlantis/Capital"
    critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert any("Atlantis/Capital" in r.getMessage() for r in critical)
