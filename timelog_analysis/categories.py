"""Known event categories for day annotations."""

from __future__ import annotations

from enum import Enum


class EventCategory(str, Enum):
    """Closed set of event labels recognised in the notes column."""

    WORK_FROM_HOME = "Work_from_home"
    POST_WORK_COMMITMENT = "Post_Work_Commitment"
    PRE_WORK_COMMITMENT = "Pre_Work_Commitment"
    LECTURE_1600 = "16_00_lecture"
    LECTURE_1400 = "14_00_lecture"
    LECTURE_1100 = "11_00_lecture"
    ANNUAL_LEAVE = "Annual_leave"
    SICK_LEAVE = "Sick_leave"
    STUDY_LEAVE = "Study_leave"
    PUBLIC_HOLIDAY = "Public_Holiday"
    CONFERENCE = "Conference"
    STANDARD = "Standard"


DEFAULT_CATEGORY = EventCategory.STANDARD

# Declaration order is the column order of every indicator table.
CATEGORIES: tuple[EventCategory, ...] = tuple(EventCategory)
CATEGORY_VALUES: tuple[str, ...] = tuple(category.value for category in CATEGORIES)


def indicator_column(category: EventCategory) -> str:
    """Return the boolean column name used for ``category`` in tidy tables."""

    return f"event_{category.value}"
