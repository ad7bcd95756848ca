# clubsim/schedule.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from clubsim import config
from clubsim.errors import InvalidInput

_BYE = None


@dataclass(frozen=True)
class ScheduleItem:
    date: date
    home_club_id: int
    guest_club_id: int
    round: int = 0

    def involves(self, club_id: int) -> bool:
        return club_id in (self.home_club_id, self.guest_club_id)


def _club_id(club) -> int:
    return int(club if isinstance(club, int) else club.id)


def _circle_rounds(ids: List[Optional[int]]) -> List[List[Tuple[Optional[int], Optional[int]]]]:
    """
    One leg of the circle method over an even-length id list: m-1 rounds,
    position idx meets position m-1-idx, everything but position 0 rotates.
    """
    m = len(ids)
    arr = ids[:]
    rounds = []
    for _ in range(m - 1):
        rounds.append([(arr[idx], arr[m - 1 - idx]) for idx in range(m // 2)])
        arr = [arr[0]] + [arr[-1]] + arr[1:-1]
    return rounds


def _round_date(start_date: date, r: int, rest_weekday: Optional[int]) -> date:
    d = start_date + timedelta(days=config.DAYS_BETWEEN_ROUNDS * r)
    if rest_weekday is not None and d.weekday() == rest_weekday:
        d += timedelta(days=1)
    return d


@dataclass(frozen=True)
class Schedule:
    """
    A season's calendar. Built once by `generate`, read-only afterwards, so
    any number of threads may query it.
    """
    items: Tuple[ScheduleItem, ...]
    start_date: date
    byes: Mapping[date, Tuple[int, ...]] = field(default_factory=dict, hash=False)
    club_ids: Tuple[int, ...] = ()

    @classmethod
    def generate(
        cls,
        clubs: Sequence,
        start_date: date,
        legs: int = config.DEFAULT_LEGS,
        rounds: Optional[int] = None,
        rest_weekday: Optional[int] = config.REST_WEEKDAY,
    ) -> "Schedule":
        """
        Round robin via the circle method. `clubs` may be Club objects or bare ids.

        - legs=1 is a single round robin, legs=2 a double one; leg k>0 repeats
          leg 0 with home and guest swapped on every odd leg, so each reverse
          fixture lands in the second half of the season.
        - odd club counts get a bye slot; whoever draws it sits the round out.
        - rounds are a week apart; `rounds` caps how many are generated.
        """
        if len(clubs) < 2:
            raise InvalidInput(f"Need at least two clubs to build a schedule, got {len(clubs)}")
        if int(legs) < 1:
            raise InvalidInput(f"legs must be at least 1, got {legs}")
        ids: List[Optional[int]] = [_club_id(c) for c in clubs]
        if len(set(ids)) != len(ids):
            raise InvalidInput("Club ids in a schedule must be unique")
        if rounds is not None and int(rounds) < 0:
            raise InvalidInput(f"rounds must not be negative, got {rounds}")

        club_ids = tuple(ids)
        if len(ids) % 2 == 1:
            ids.append(_BYE)

        leg_rounds = _circle_rounds(ids)
        total_rounds = len(leg_rounds) * int(legs)
        if rounds is not None:
            total_rounds = min(total_rounds, int(rounds))

        items: List[ScheduleItem] = []
        byes: Dict[date, Tuple[int, ...]] = {}
        for r in range(total_rounds):
            leg, w = divmod(r, len(leg_rounds))
            when = _round_date(start_date, r, rest_weekday)
            sitting_out: List[int] = []
            for a, b in leg_rounds[w]:
                if a is _BYE or b is _BYE:
                    sitting_out.append(b if a is _BYE else a)
                    continue
                # alternate hosts by round parity, then swap on every odd leg
                home, guest = (a, b) if w % 2 == 0 else (b, a)
                if leg % 2 == 1:
                    home, guest = guest, home
                items.append(ScheduleItem(date=when, home_club_id=home, guest_club_id=guest, round=r))
            if sitting_out:
                byes[when] = tuple(sitting_out)

        return cls(items=tuple(items), start_date=start_date, byes=MappingProxyType(byes), club_ids=club_ids)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def get_matches(self, when: date) -> Tuple[ScheduleItem, ...]:
        return tuple(item for item in self.items if item.date == when)

    def byes_on(self, when: date) -> Tuple[int, ...]:
        return tuple(self.byes.get(when, ()))

    def dates(self) -> List[date]:
        """Distinct round dates, in order."""
        return sorted({item.date for item in self.items} | set(self.byes))

    @property
    def end_date(self) -> date:
        ds = self.dates()
        return ds[-1] if ds else self.start_date

    def for_club(self, club_id: int) -> List[ScheduleItem]:
        return [item for item in self.items if item.involves(club_id)]

    def __len__(self) -> int:
        return len(self.items)
