import pytest

from yeargrid.repository.event_source import EventSourceRepository
from yeargrid.service.normalize import normalize_events


def test_bare_list_of_events(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text(
        "- id: e1\n"
        "  summary: Trip\n"
        "  start: {date: '2025-03-10'}\n"
        "  end: {date: '2025-03-12'}\n"
        "- not an event\n"
    )

    calendars = EventSourceRepository(path).calendars

    assert len(calendars) == 1
    assert calendars[0]["id"] is None
    assert [item["id"] for item in calendars[0]["items"]] == ["e1"]


def test_json_items_document(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(
        '{"items": [{"id": "e1", "start": {"date": "2025-03-10"},'
        ' "end": {"date": "2025-03-11"}}]}'
    )

    calendars = EventSourceRepository(path).calendars

    assert len(calendars[0]["items"]) == 1


def test_calendars_document(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text(
        "calendars:\n"
        "  - id: family\n"
        "    name: Family\n"
        "    color: '#3B82F6'\n"
        "    items: []\n"
        "  - id: 42\n"
        "    items:\n"
        "      - {id: e1, start: {date: '2025-03-10'}, end: {date: '2025-03-11'}}\n"
    )

    repository = EventSourceRepository(path)

    assert [calendar["id"] for calendar in repository.calendars] == ["family", "42"]
    assert repository.calendars[0]["name"] == "Family"
    assert repository.get_calendar_ids() == {"family", "42"}


def test_empty_file_has_no_calendars(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text("")

    assert EventSourceRepository(path).calendars == []


@pytest.mark.parametrize(
    "content",
    ["just text\n", "calendars: nope\n", "items: nope\n", "calendars: [1, 2]\n"],
)
def test_unexpected_shapes_raise(tmp_path, content):
    path = tmp_path / "events.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        EventSourceRepository(path).calendars


def test_unquoted_dates_normalize(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text(
        "- id: a\n"
        "  summary: Conference\n"
        "  start: {date: 2025-01-30}\n"
        "  end: {date: 2025-02-03}\n"
        "- id: b\n"
        "  summary: Lunch\n"
        "  start: {dateTime: 2025-03-01T12:00:00Z}\n"
        "  end: {dateTime: 2025-03-01T13:00:00Z}\n"
        "- id: c\n"
        "  summary: Flat\n"
        "  start: 2025-03-01\n"
        "  end: 2025-03-02\n"
    )

    events = normalize_events(EventSourceRepository(path).calendars[0]["items"])

    assert [
        (event["id"], event["start_date"], event["end_date"]) for event in events
    ] == [
        ("a", "2025-01-30", "2025-02-02"),
        ("b", "2025-03-01", "2025-03-01"),
    ]
    assert events[1]["start_time"] == "12:00"
