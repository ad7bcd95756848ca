# tests/test_schedule_round_robin.py
from __future__ import annotations
from collections import Counter, defaultdict
from datetime import date, timedelta

import pytest

from clubsim.club import Club
from clubsim.errors import InvalidInput
from clubsim.schedule import Schedule

START = date(2024, 1, 6)


def _clubs(n):
    return [Club(id=i + 1, name=str(i + 1)) for i in range(n)]


@pytest.mark.parametrize("n", [2, 4, 6, 8, 20])
def test_single_round_robin_counts_and_uniqueness(n):
    schedule = Schedule.generate(_clubs(n), START, legs=1)
    assert len(schedule.items) == (n - 1) * (n // 2)

    by_date = defaultdict(list)
    for item in schedule.items:
        by_date[item.date].extend([item.home_club_id, item.guest_club_id])
    for ids in by_date.values():
        assert len(ids) == len(set(ids))

    pairs = Counter(frozenset((i.home_club_id, i.guest_club_id)) for i in schedule.items)
    assert len(pairs) == n * (n - 1) // 2
    assert all(c == 1 for c in pairs.values())


@pytest.mark.parametrize("n", [3, 5, 7])
def test_odd_club_count_gives_one_bye_per_round(n):
    schedule = Schedule.generate(_clubs(n), START, legs=1)
    rounds = schedule.dates()
    assert len(rounds) == n
    assert len(schedule.items) == n * (n // 2)
    sat_out = []
    for d in rounds:
        playing = {c for i in schedule.get_matches(d) for c in (i.home_club_id, i.guest_club_id)}
        byes = schedule.byes_on(d)
        assert len(byes) == 1
        assert byes[0] not in playing
        assert len(playing) == n - 1
        sat_out.append(byes[0])
    # everyone rests exactly once per leg
    assert sorted(sat_out) == list(range(1, n + 1))


def test_three_clubs_two_rounds_gives_two_fixtures():
    schedule = Schedule.generate(_clubs(3), START, legs=1, rounds=2)
    assert len(schedule.items) == 2
    assert [i.date for i in schedule.items] == [START, START + timedelta(days=7)]


def test_two_clubs_alternate_home_and_away():
    schedule = Schedule.generate(_clubs(2), START, legs=2)
    assert len(schedule.items) == 2
    first, second = schedule.items
    assert (first.home_club_id, first.guest_club_id) == (second.guest_club_id, second.home_club_id)
    assert second.date - first.date == timedelta(days=7)


def test_rounds_are_a_week_apart():
    schedule = Schedule.generate(_clubs(6), START)
    dates = schedule.dates()
    assert dates[0] == START
    assert all(b - a == timedelta(days=7) for a, b in zip(dates, dates[1:]))
    assert schedule.end_date == START + timedelta(days=7 * (len(dates) - 1))


def test_get_matches_is_an_exact_date_filter():
    schedule = Schedule.generate(_clubs(4), START)
    assert schedule.get_matches(START - timedelta(days=1)) == ()
    assert schedule.get_matches(START + timedelta(days=1)) == ()
    assert schedule.get_matches(schedule.end_date + timedelta(days=7)) == ()
    for d in schedule.dates():
        found = schedule.get_matches(d)
        assert found and all(i.date == d for i in found)
        assert len(found) == sum(1 for i in schedule.items if i.date == d)


def test_rest_weekday_moves_round_to_next_day():
    # START is a Saturday (weekday 5)
    schedule = Schedule.generate(_clubs(4), START, legs=1, rest_weekday=5)
    assert schedule.get_matches(START) == ()
    assert all(d.weekday() == 6 for d in schedule.dates())


def test_accepts_bare_ids():
    schedule = Schedule.generate([10, 20, 30, 40], START, legs=1)
    assert set(schedule.club_ids) == {10, 20, 30, 40}
    assert len(schedule) == 6


@pytest.mark.parametrize("clubs", [[], [Club(id=1, name="solo")]])
def test_fewer_than_two_clubs_is_invalid(clubs):
    with pytest.raises(InvalidInput):
        Schedule.generate(clubs, START)


def test_duplicate_ids_are_invalid():
    with pytest.raises(InvalidInput):
        Schedule.generate([1, 2, 2], START)


def test_schedule_is_immutable():
    schedule = Schedule.generate(_clubs(4), START)
    with pytest.raises(AttributeError):
        schedule.items = ()
    with pytest.raises(TypeError):
        schedule.byes[START] = (1,)
