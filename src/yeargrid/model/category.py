# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict


class MatchMode:
    ANY = "any"
    ALL = "all"


class CategoryRule(TypedDict):
    id: str
    label: str
    color: str
    keywords: list[str]
    match_mode: str
    is_default: NotRequired[bool]


class CategoryMatch(TypedDict):
    category: str
    color: str
