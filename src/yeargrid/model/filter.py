# SPDX-License-Identifier: MIT

from typing import TypedDict


class EventFilter(TypedDict):
    id: str
    pattern: str
