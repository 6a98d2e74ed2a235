import datetime

import pytest

from yeargrid.service.normalize import (
    UNTITLED_EVENT,
    normalize_event,
    normalize_events,
    resolve_calendar_id,
)


def test_all_day_end_date_is_made_inclusive(all_day_raw):
    event = normalize_event(all_day_raw("e1", "Trip", "2025-03-10", "2025-03-13"))

    assert event is not None
    assert event["start_date"] == "2025-03-10"
    assert event["end_date"] == "2025-03-12"
    assert event["duration_days"] == 3
    assert event["all_day"] is True
    assert event["multi_day"] is True
    assert event["single_day_timed"] is False


def test_single_all_day_event(all_day_raw):
    event = normalize_event(all_day_raw("e1", "Holiday", "2025-12-25", "2025-12-26"))

    assert event is not None
    assert event["end_date"] == "2025-12-25"
    assert event["duration_days"] == 1
    assert event["multi_day"] is False


def test_all_day_end_equal_to_start_stays_on_start_day(all_day_raw):
    event = normalize_event(all_day_raw("e1", "Holiday", "2025-12-25", "2025-12-25"))

    assert event is not None
    assert event["end_date"] == "2025-12-25"
    assert event["duration_days"] == 1


def test_timed_event_in_its_own_timezone(timed_raw):
    event = normalize_event(
        timed_raw(
            "e1",
            "Late call",
            "2025-03-10T02:30:00+00:00",
            "2025-03-10T03:30:00+00:00",
            tz="America/New_York",
        )
    )

    assert event is not None
    assert event["start_date"] == "2025-03-09"
    assert event["end_date"] == "2025-03-09"
    assert event["start_time"] == "22:30"
    assert event["start_time_minutes"] == 22 * 60 + 30
    assert event["single_day_timed"] is True


def test_timed_event_without_timezone_keeps_written_date(timed_raw):
    event = normalize_event(
        timed_raw("e1", "Lunch", "2025-06-01T12:00:00+02:00", "2025-06-01T13:15:00+02:00")
    )

    assert event is not None
    assert event["start_date"] == "2025-06-01"
    assert event["start_time"] == "12:00"
    assert event["end_time"] == "13:15"
    assert event["end_time_minutes"] == 13 * 60 + 15
    assert event["duration_days"] == 1


def test_timed_event_over_midnight_is_multi_day(timed_raw):
    event = normalize_event(
        timed_raw("e1", "Night hike", "2025-06-01T22:00:00", "2025-06-02T04:00:00")
    )

    assert event is not None
    assert event["duration_days"] == 2
    assert event["multi_day"] is True
    assert event["single_day_timed"] is False


@pytest.mark.parametrize(
    "raw_event",
    [
        {"id": "a", "summary": "No end", "start": {"date": "2025-01-01"}, "end": {}},
        {"id": "b", "summary": "No start", "start": {}, "end": {}},
        {
            "id": "c",
            "summary": "Bad date",
            "start": {"date": "2025-02-30"},
            "end": {"date": "2025-03-01"},
        },
        {
            "id": "d",
            "summary": "Backwards",
            "start": {"date": "2025-03-05"},
            "end": {"date": "2025-03-01"},
        },
        {
            "id": "e",
            "summary": "Bad zone",
            "start": {"dateTime": "2025-03-05T10:00:00Z", "timeZone": "Mars/Base"},
            "end": {"dateTime": "2025-03-05T11:00:00Z", "timeZone": "Mars/Base"},
        },
        {
            "id": "f",
            "summary": "Garbage",
            "start": {"dateTime": "not a date"},
            "end": {"dateTime": "2025-03-05T11:00:00Z"},
        },
        {"id": "g", "summary": "Flat", "start": "2025-03-01", "end": "2025-03-02"},
        {
            "id": "h",
            "summary": "Numbers",
            "start": {"date": 20250301},
            "end": {"date": 20250302},
        },
        {
            "id": "i",
            "summary": "Date as date-time",
            "start": {"dateTime": datetime.date(2025, 3, 1)},
            "end": {"dateTime": datetime.date(2025, 3, 2)},
        },
        "not an event",
    ],
)
def test_malformed_events_are_dropped(raw_event):
    assert normalize_event(raw_event) is None


def test_cancelled_events_are_dropped(all_day_raw):
    raw_event = all_day_raw(
        "e1", "Trip", "2025-03-10", "2025-03-13", status="cancelled"
    )

    assert normalize_event(raw_event) is None


def test_untitled_and_blank_fields(all_day_raw):
    event = normalize_event(
        all_day_raw("e1", "   ", "2025-03-10", "2025-03-11", description="  ")
    )

    assert event is not None
    assert event["title"] == UNTITLED_EVENT
    assert event["description"] is None
    assert event["link"] == ""


def test_title_is_trimmed_and_classified(all_day_raw, trip_rules):
    event = normalize_event(
        all_day_raw(
            "e1",
            "  Family trip to NYC ",
            "2025-03-10",
            "2025-03-12",
            htmlLink="https://calendar.example/e1",
        ),
        trip_rules,
    )

    assert event is not None
    assert event["title"] == "Family trip to NYC"
    assert event["category"] == "family"
    assert event["color"] == "#3B82F6"
    assert event["link"] == "https://calendar.example/e1"


def test_calendar_id_namespaces_event_id(all_day_raw):
    event = normalize_event(
        all_day_raw("e1", "Trip", "2025-03-10", "2025-03-11"),
        calendar_id="work@example.com",
        calendar_name="Work",
        calendar_color="#123456",
    )

    assert event is not None
    assert event["id"] == "work@example.com:e1"
    assert event["calendar_id"] == "work@example.com"
    assert event["calendar_name"] == "Work"
    assert event["calendar_color"] == "#123456"


def test_normalize_events_drops_bad_records(all_day_raw):
    events = normalize_events(
        [
            all_day_raw("e1", "Trip", "2025-03-10", "2025-03-11"),
            {"id": "e2", "start": {}, "end": {}},
        ]
    )

    assert [event["id"] for event in events] == ["e1"]


def test_duration_and_order_invariants(all_day_raw, timed_raw):
    raw_events = [
        all_day_raw("a", "A", "2025-01-01", "2025-01-02"),
        all_day_raw("b", "B", "2025-01-01", "2025-01-01"),
        all_day_raw("c", "C", "2025-01-30", "2025-02-03"),
        timed_raw("d", "D", "2025-01-01T09:00:00", "2025-01-01T09:00:00"),
    ]

    for event in normalize_events(raw_events):
        assert event["duration_days"] >= 1
        assert event["end_date"] >= event["start_date"]


def test_resolve_calendar_id(all_day_raw):
    namespaced = normalize_event(all_day_raw("e1", "Trip", "2025-03-10", "2025-03-11"))
    assert namespaced is not None
    namespaced["id"] = "family:e1"

    assert resolve_calendar_id(namespaced, {"family"}) == "family"
    assert resolve_calendar_id(namespaced, {"work"}) is None

    namespaced["calendar_id"] = "work"
    assert resolve_calendar_id(namespaced, set()) == "work"


def test_dates_loaded_as_date_objects(all_day_raw):
    event = normalize_event(
        all_day_raw(
            "e1", "Conference", datetime.date(2025, 1, 30), datetime.date(2025, 2, 3)
        )
    )

    assert event is not None
    assert event["start_date"] == "2025-01-30"
    assert event["end_date"] == "2025-02-02"
    assert event["duration_days"] == 4


def test_date_times_loaded_as_datetime_objects(timed_raw):
    event = normalize_event(
        timed_raw(
            "e1",
            "Late call",
            datetime.datetime(2025, 3, 10, 2, 30, tzinfo=datetime.timezone.utc),
            datetime.datetime(2025, 3, 10, 3, 30, tzinfo=datetime.timezone.utc),
            tz="America/New_York",
        )
    )

    assert event is not None
    assert event["start_date"] == "2025-03-09"
    assert event["start_time"] == "22:30"
    assert event["end_time"] == "23:30"


def test_naive_datetime_objects_keep_their_wall_clock(timed_raw):
    event = normalize_event(
        timed_raw(
            "e1",
            "Lunch",
            datetime.datetime(2025, 6, 1, 12, 0),
            datetime.datetime(2025, 6, 1, 13, 0),
        )
    )

    assert event is not None
    assert (event["start_time"], event["end_time"]) == ("12:00", "13:00")


def test_one_bad_record_does_not_abort_the_batch(all_day_raw):
    events = normalize_events(
        [
            {"id": "flat", "start": "2025-03-01", "end": "2025-03-02"},
            all_day_raw("e1", "Trip", datetime.date(2025, 3, 10), "2025-03-11"),
        ]
    )

    assert [event["id"] for event in events] == ["e1"]
