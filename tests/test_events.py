import logging
from datetime import date, time

import pytest

from timelog_analysis.categories import CATEGORIES, EventCategory
from timelog_analysis.errors import JoinError
from timelog_analysis.events import collapse, expand_and_collapse, explode, long_events, rejoin
from timelog_analysis.normalizer import canonicalize_notes
from timelog_analysis.schema import DayRecord


def make_day(day_id, notes, clock_in=time(8, 0), clock_out=time(16, 30)):
    return DayRecord(
        id=day_id,
        date=date(2024, 7, day_id),
        clock_in=clock_in,
        clock_out=clock_out,
        event_tokens=canonicalize_notes(notes),
    )


def sample_days():
    return [
        make_day(1, None),
        make_day(2, "16:00 lecture, Post-Work Commitment"),
        make_day(3, "Work from home"),
        make_day(4, "Annual leave", clock_in=None, clock_out=None),
        make_day(5, "Work from home, Work from home"),
    ]


def test_collapse_keeps_one_row_per_day():
    days = sample_days()
    tidy = expand_and_collapse(days)
    assert len(tidy) == len(days)
    assert [d.id for d in tidy] == [d.id for d in days]


def test_flags_are_or_of_tokens():
    days = sample_days()
    tidy = expand_and_collapse(days)
    for day, record in zip(days, tidy):
        for category in CATEGORIES:
            assert record.events[category] is (category.value in day.event_tokens)


def test_default_category_day():
    tidy = expand_and_collapse([make_day(1, "")])
    assert tidy[0].events[EventCategory.STANDARD] is True
    assert sum(tidy[0].events.values()) == 1


def test_multi_event_day():
    tidy = expand_and_collapse([make_day(2, "16:00 lecture, Post-Work Commitment")])
    events = tidy[0].events
    assert events[EventCategory.LECTURE_1600] is True
    assert events[EventCategory.POST_WORK_COMMITMENT] is True
    assert sum(events.values()) == 2


def test_rejoin_carries_day_fields():
    days = sample_days()
    tidy = expand_and_collapse(days)
    assert tidy[3].date == date(2024, 7, 4)
    assert tidy[3].clock_in is None
    assert tidy[1].clock_out == time(16, 30)


def test_explode_emits_row_per_token():
    rows = explode([make_day(2, "16:00 lecture, Post-Work Commitment")])
    assert [r.event_token for r in rows] == ["16_00_lecture", "Post_Work_Commitment"]
    assert all(len(r.flags) == len(CATEGORIES) for r in rows)
    assert all(sum(r.flags) == 1 for r in rows)


def test_unknown_token_passes_through_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        tidy = expand_and_collapse([make_day(1, "Team offsite")])
    assert len(tidy) == 1
    assert not any(tidy[0].events.values())
    assert "Team_offsite" in caplog.text


def test_rejoin_with_unknown_id_raises():
    days = sample_days()
    collapsed = collapse(explode(days))
    collapsed[99] = collapsed[1]
    with pytest.raises(JoinError) as excinfo:
        rejoin(collapsed, days)
    assert excinfo.value.ids == (99,)


def test_rejoin_with_missing_flags_raises():
    days = sample_days()
    collapsed = collapse(explode(days))
    del collapsed[3]
    with pytest.raises(JoinError):
        rejoin(collapsed, days)


def test_long_events_one_row_per_true_flag():
    tidy = expand_and_collapse(sample_days())
    events = long_events(tidy)
    assert [(e.id, e.event_type) for e in events] == [
        (1, "Standard"),
        (2, "Post_Work_Commitment"),
        (2, "16_00_lecture"),
        (3, "Work_from_home"),
        (4, "Annual_leave"),
        (5, "Work_from_home"),
    ]
