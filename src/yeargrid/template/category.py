# SPDX-License-Identifier: MIT

from yeargrid.color import UNCATEGORIZED_COLOR
from yeargrid.model.category import CategoryRule, MatchMode

UNCATEGORIZED_ID = "uncategorized"


def get_uncategorized_template() -> CategoryRule:
    return {
        "id": UNCATEGORIZED_ID,
        "label": "Uncategorized",
        "color": UNCATEGORIZED_COLOR,
        "keywords": [],
        "match_mode": MatchMode.ANY,
        "is_default": True,
    }


def get_default_categories_template() -> list[CategoryRule]:
    """The categories that ship with yeargrid, used until the user configures their own."""
    return [
        {
            "id": "birthdays",
            "label": "Birthdays",
            "color": "#F59E0B",
            "keywords": ["birthday", "bday", "b-day"],
            "match_mode": MatchMode.ANY,
            "is_default": True,
        },
        {
            "id": "family",
            "label": "Family",
            "color": "#3B82F6",
            "keywords": [
                "family",
                "kids",
                "kid",
                "mom",
                "dad",
                "anniversary",
                "wedding",
                "reunion",
            ],
            "match_mode": MatchMode.ANY,
            "is_default": True,
        },
        {
            "id": "holidays",
            "label": "Holidays/Trips",
            "color": "#F97316",
            "keywords": [
                "flight",
                "hotel",
                "stay at",
                "vacation",
                "holiday",
                "trip",
                "travel",
                "airport",
            ],
            "match_mode": MatchMode.ANY,
            "is_default": True,
        },
        {
            "id": "races",
            "label": "Races",
            "color": "#10B981",
            "keywords": [
                "race",
                "marathon",
                "run",
                "hike",
                "summit",
                "climb",
                "trek",
                "5k",
                "10k",
            ],
            "match_mode": MatchMode.ANY,
            "is_default": True,
        },
        {
            "id": "work",
            "label": "Work",
            "color": "#8B5CF6",
            "keywords": [
                "meeting",
                "call",
                "1:1",
                "sync",
                "review",
                "standup",
                "interview",
                "retro",
            ],
            "match_mode": MatchMode.ANY,
            "is_default": True,
        },
    ]
