# clubsim/academy.py
from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from datetime import date, timedelta
from threading import Lock
from typing import List, Optional, Protocol, Tuple

from clubsim import config
from clubsim.context import SimulationContext
from clubsim.events import PlayerEvent, PlayerEventKind
from clubsim.people import FullName, PersonAttributes
from clubsim.player import Player
from clubsim.rng import youth_rng


class PlayerGenerator(Protocol):
    def generate(self, country_id: int, as_of: date) -> Player: ...


# ---------------------------------------------------------------------------
# Default youth generator
# ---------------------------------------------------------------------------

_FIRST = ["Kael", "Ryn", "Mira", "Thorn", "Lysa", "Doran", "Nyra", "Kellan", "Sera", "Jorin",
          "Talia", "Bren", "Arin", "Sel", "Vara", "Garrin", "Orin", "Kira", "Fen", "Zara"]
_LAST = ["Stone", "Vale", "Rook", "Ash", "Hollow", "Black", "Bright", "Gale", "Wolfe", "Mire",
         "Thorne", "Ridge", "Hawk", "Frost", "Dusk", "Iron", "Raven", "Drake", "Storm", "Oath"]


def _generate_name(rng: random.Random) -> FullName:
    i = rng.randrange(0, len(_FIRST))
    j = (i + rng.randrange(0, len(_LAST))) % len(_LAST)
    return FullName(_FIRST[i], _LAST[j])


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:  # 29 Feb into a common year
        return day.replace(year=day.year - years, day=28)


def _roll_birth_date(rng: random.Random, as_of: date) -> date:
    """Birth date putting the youngster at an age inside `YOUTH_AGE_RANGE` on `as_of`."""
    lo, hi = config.YOUTH_AGE_RANGE
    age = rng.randint(lo, hi)
    latest = _years_before(as_of, age)
    too_early = _years_before(as_of, age + 1)
    return latest - timedelta(days=rng.randrange((latest - too_early).days))


def _roll_attributes(rng: random.Random) -> PersonAttributes:
    return PersonAttributes(*[rng.randint(1, 20) for _ in range(8)])


class YouthPlayerGenerator:
    """
    Deterministic stand-in for the real player generator: same seed, same
    sequence of youngsters. Ids are handed out from `first_id` upwards.
    """

    def __init__(self, seed: int = config.DEFAULT_SEED, first_id: int = 1_000_000):
        self.seed = int(seed)
        self._ids = itertools.count(int(first_id))
        self._lock = Lock()

    def generate(self, country_id: int, as_of: date) -> Player:
        with self._lock:
            pid = next(self._ids)
        rng = youth_rng(self.seed, pid)
        return Player(
            id=pid,
            full_name=_generate_name(rng),
            birth_date=_roll_birth_date(rng, as_of),
            country_id=int(country_id),
            attributes=_roll_attributes(rng),
        )


YOUTH_IDS_PER_CLUB = 10_000


def youth_id_base(club_id: Optional[int]) -> int:
    """First youth player id of a club's own block, so academies never collide."""
    return 1_000_000 + int(club_id or 0) * YOUTH_IDS_PER_CLUB


# ---------------------------------------------------------------------------
# Academy pool
# ---------------------------------------------------------------------------

@dataclass
class AcademySettings:
    players_count_range: Tuple[int, int] = config.ACADEMY_PLAYERS_COUNT_RANGE
    intake_range: Tuple[int, int] = config.ACADEMY_INTAKE_RANGE


@dataclass
class AcademyPlayer:
    player: Player
    completed: bool = False

    @classmethod
    def from_player(cls, player: Player) -> "AcademyPlayer":
        return cls(player=player, completed=False)


class ClubAcademy:
    """Youth pool of a club. Tops itself up when it runs short of players."""

    def __init__(
        self,
        level: int = 1,
        settings: Optional[AcademySettings] = None,
        generator: Optional[PlayerGenerator] = None,
        country_id: int = 0,
    ):
        self.level = int(level)
        self.settings = settings or AcademySettings()
        self.generator: Optional[PlayerGenerator] = generator
        self.country_id = int(country_id)
        self.players: List[AcademyPlayer] = []

    def __len__(self) -> int:
        return len(self.players)

    def simulate(self, ctx: SimulationContext) -> List[PlayerEvent]:
        if len(self.players) >= self.settings.players_count_range[0]:
            return []
        return self._produce_youth_players(ctx)

    def _produce_youth_players(self, ctx: SimulationContext) -> List[PlayerEvent]:
        lo, hi = self.settings.intake_range
        count = ctx.rng("academy", ctx.club_id, "intake").randint(lo, hi)
        if self.generator is None:
            self.generator = YouthPlayerGenerator(seed=ctx.seed, first_id=youth_id_base(ctx.club_id))
        events: List[PlayerEvent] = []
        for _ in range(count):
            player = self.generator.generate(self.country_id, ctx.date)
            self.players.append(AcademyPlayer.from_player(player))
            events.append(PlayerEvent(
                PlayerEventKind.YOUTH_PLAYER_GENERATED, player.id, ctx.date, {"country_id": self.country_id},
            ))
        return events

    def mark_completed(self, player_id: int) -> bool:
        """Hook for the (external) evaluation step that signs off a youngster."""
        for ap in self.players:
            if ap.player.id == player_id:
                ap.completed = True
                return True
        return False

    def graduates(self) -> List[Player]:
        return [ap.player for ap in self.players if ap.completed]

    def in_development(self) -> List[Player]:
        return [ap.player for ap in self.players if not ap.completed]
