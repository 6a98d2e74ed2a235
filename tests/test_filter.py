from yeargrid.service.filter import (
    filter_events,
    filter_short_timed_events,
    filters_from_patterns,
    is_event_filtered,
    normalize_calendar_ids,
)


def test_filters_from_patterns_skips_blanks_and_repeats():
    filters = filters_from_patterns(["Gym", " gym ", "", "Standup"])

    assert [event_filter["pattern"] for event_filter in filters] == ["Gym", "Standup"]
    assert len({event_filter["id"] for event_filter in filters}) == 2


def test_is_event_filtered_matches_substring_case_insensitively():
    filters = filters_from_patterns(["standup"])

    assert is_event_filtered("Daily STANDUP", filters) is True
    assert is_event_filtered("Dentist", filters) is False
    assert is_event_filtered("anything", []) is False


def test_filter_events(make_all_day_event):
    events = [
        make_all_day_event("Gym", "2025-03-03"),
        make_all_day_event("Holiday", "2025-03-03"),
    ]

    kept = filter_events(events, filters_from_patterns(["gym"]))

    assert [event["title"] for event in kept] == ["Holiday"]


def test_filter_short_timed_events(make_timed_event, make_all_day_event):
    events = [
        make_timed_event("Coffee", "2025-03-03T09:00", "2025-03-03T09:30"),
        make_timed_event("Workshop", "2025-03-03T09:00", "2025-03-03T13:00"),
        make_timed_event("Overnight", "2025-03-03T23:00", "2025-03-04T01:00"),
        make_all_day_event("Holiday", "2025-03-03"),
    ]

    titles = [event["title"] for event in filter_short_timed_events(events, 3)]

    assert titles == ["Workshop", "Overnight", "Holiday"]
    assert len(filter_short_timed_events(events, 0)) == 4
    assert len(filter_short_timed_events(events, -5)) == 4
    assert [event["title"] for event in filter_short_timed_events(events, 99)] == [
        "Overnight",
        "Holiday",
    ]


def test_normalize_calendar_ids():
    assert normalize_calendar_ids([" work ", "work", "", 7, "family"]) == [
        "work",
        "family",
    ]
    assert normalize_calendar_ids("work") == []
    assert normalize_calendar_ids(None) == []
