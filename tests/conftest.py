"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from yeargrid import configuration  # noqa: E402
from yeargrid.model.category import MatchMode  # noqa: E402
from yeargrid.repository.configuration import CONFIGURATION_REPO  # noqa: E402
from yeargrid.service.normalize import normalize_event  # noqa: E402
from yeargrid.time import shift_date_key  # noqa: E402


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Point the configuration at a throwaway file for every test."""
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    CONFIGURATION_REPO.reset()
    yield config_path
    CONFIGURATION_REPO.reset()


@pytest.fixture
def trip_rules():
    """Three any-mode rules in alphabetical order."""
    return [
        {
            "id": "birthdays",
            "label": "Birthdays",
            "color": "#F59E0B",
            "keywords": ["birthday"],
            "match_mode": MatchMode.ANY,
        },
        {
            "id": "family",
            "label": "Family",
            "color": "#3B82F6",
            "keywords": ["family"],
            "match_mode": MatchMode.ANY,
        },
        {
            "id": "holidays",
            "label": "Holidays",
            "color": "#F97316",
            "keywords": ["flight", "trip"],
            "match_mode": MatchMode.ANY,
        },
    ]


def _all_day_raw(event_id, summary, start, exclusive_end, **extra):
    return {
        "id": event_id,
        "summary": summary,
        "start": {"date": start},
        "end": {"date": exclusive_end},
        **extra,
    }


def _timed_raw(event_id, summary, start, end, tz=None, **extra):
    start_time = {"dateTime": start}
    end_time = {"dateTime": end}
    if tz is not None:
        start_time["timeZone"] = tz
        end_time["timeZone"] = tz
    return {
        "id": event_id,
        "summary": summary,
        "start": start_time,
        "end": end_time,
        **extra,
    }


@pytest.fixture
def make_all_day_event():
    """Factory for normalized all-day events; exclusive_end defaults to the next day."""

    def _make(summary, start, exclusive_end=None, event_id=None, rules=None):
        event = normalize_event(
            _all_day_raw(
                event_id or summary.lower().replace(" ", "-"),
                summary,
                start,
                exclusive_end or shift_date_key(start, 1),
            ),
            rules,
        )
        assert event is not None
        return event

    return _make


@pytest.fixture
def make_timed_event():
    """Factory for normalized timed events from 'YYYY-MM-DDTHH:MM' strings."""

    def _make(summary, start, end, event_id=None, rules=None):
        event = normalize_event(
            _timed_raw(
                event_id or summary.lower().replace(" ", "-"),
                summary,
                f"{start}:00",
                f"{end}:00",
            ),
            rules,
        )
        assert event is not None
        return event

    return _make


@pytest.fixture
def all_day_raw():
    """Factory for provider all-day events (end date exclusive)."""
    return _all_day_raw


@pytest.fixture
def timed_raw():
    """Factory for provider timed events."""
    return _timed_raw
