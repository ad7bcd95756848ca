# tests/test_entity_ticks.py
from __future__ import annotations
from datetime import date, timedelta

from clubsim.context import SimulationContext
from clubsim.events import PlayerEventKind, StaffEventKind
from clubsim.people import PersonBehaviourState, is_birthday
from clubsim.player import PlayerCollection, TeamType
from clubsim.staff import StaffPosition


def test_birthday_fires_once_on_matching_day_only(make_staff):
    staff = make_staff(1, StaffPosition.COACH, birth_date=date(1975, 4, 9))
    start = date(2024, 1, 1)
    birthdays = []
    for offset in range(366):
        today = start + timedelta(days=offset)
        events = staff.simulate(SimulationContext(date=today))
        hits = [e for e in events if e.kind is StaffEventKind.BIRTHDAY]
        if today == date(2024, 4, 9):
            assert len(hits) == 1
            assert hits[0].staff_id == 1 and hits[0].date == today
        else:
            assert hits == []
        birthdays.extend(hits)
    assert len(birthdays) == 1


def test_leap_day_birthday_only_on_leap_days():
    born = date(2004, 2, 29)
    assert is_birthday(born, date(2024, 2, 29))
    assert not is_birthday(born, date(2023, 2, 28))
    assert not is_birthday(born, date(2023, 3, 1))


def test_birthday_can_only_improve_behaviour(make_staff):
    staff = make_staff(3, birth_date=date(1970, 6, 1))
    staff.behaviour.state = PersonBehaviourState.POOR
    for year in range(2020, 2030):
        staff.simulate(SimulationContext(date=date(year, 6, 1), seed=7))
    assert staff.behaviour.state >= PersonBehaviourState.POOR
    assert staff.behaviour.state <= PersonBehaviourState.GOOD


def test_birthday_roll_is_deterministic(make_staff):
    a = make_staff(3, birth_date=date(1970, 6, 1))
    b = make_staff(3, birth_date=date(1970, 6, 1))
    for year in range(2020, 2026):
        a.simulate(SimulationContext(date=date(year, 6, 1), seed=11))
        b.simulate(SimulationContext(date=date(year, 6, 1), seed=11))
    assert a.behaviour.state == b.behaviour.state


def test_staff_contract_expiry_clears_contract_and_emits_once(make_staff):
    staff = make_staff(5, StaffPosition.SCOUT, club_id=9, expires=date(2024, 6, 30))
    assert staff.simulate(SimulationContext(date=date(2024, 6, 29))) == []
    assert staff.contract is not None

    events = staff.simulate(SimulationContext(date=date(2024, 6, 30)))
    assert [e.kind for e in events] == [StaffEventKind.CONTRACT_EXPIRED]
    assert events[0].payload["club_id"] == 9
    assert events[0].payload["position"] is StaffPosition.SCOUT
    assert staff.contract is None
    assert staff.position is None

    assert staff.simulate(SimulationContext(date=date(2024, 7, 1))) == []


def test_overdue_contract_expires_on_first_tick(make_staff):
    staff = make_staff(5, StaffPosition.SCOUT, expires=date(2020, 1, 1))
    events = staff.simulate(SimulationContext(date=date(2024, 1, 6)))
    assert [e.kind for e in events] == [StaffEventKind.CONTRACT_EXPIRED]


def test_birthday_and_expiry_on_same_day_keep_order(make_staff):
    staff = make_staff(5, StaffPosition.COACH, birth_date=date(1980, 6, 30), expires=date(2024, 6, 30))
    events = staff.simulate(SimulationContext(date=date(2024, 6, 30)))
    assert [e.kind for e in events] == [StaffEventKind.BIRTHDAY, StaffEventKind.CONTRACT_EXPIRED]


def test_player_tick_events(make_player):
    player = make_player(8, club_id=2, team_type=TeamType.U18, birth_date=date(2006, 9, 1), expires=date(2024, 9, 1))
    events = player.simulate(SimulationContext(date=date(2024, 9, 1)))
    assert [e.kind for e in events] == [PlayerEventKind.BIRTHDAY, PlayerEventKind.CONTRACT_EXPIRED]
    assert events[0].payload["age"] == 18
    assert events[1].payload["team_type"] is TeamType.U18
    assert player.contract is None


def test_player_collection_ticks_every_player(make_player):
    today = date(2024, 5, 20)
    roster = PlayerCollection([make_player(1), make_player(2, birth_date=date(1999, 1, 1)), make_player(3)])
    events = roster.simulate(SimulationContext(date=today))
    assert sorted(e.player_id for e in events) == [1, 3]
    assert roster.get(2).id == 2 and roster.get(99) is None
    assert [p.id for p in roster.by_team_type(TeamType.MAIN)] == [1, 2, 3]


def test_tick_does_not_touch_other_entities(make_staff):
    a = make_staff(1, StaffPosition.COACH, expires=date(2024, 1, 1))
    b = make_staff(2, StaffPosition.COACH, expires=date(2024, 1, 1))
    a.simulate(SimulationContext(date=date(2024, 1, 1)))
    assert a.contract is None
    assert b.contract is not None
