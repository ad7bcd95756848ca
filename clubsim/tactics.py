# clubsim/tactics.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from clubsim import config
from clubsim.player import Player, PlayerCollection, TeamType
from clubsim.staff import Staff


class TacticsFormation(Enum):
    F442 = "4-4-2"
    F433 = "4-3-3"
    F451 = "4-5-1"
    F352 = "3-5-2"


DEFAULT_FORMATION = TacticsFormation.F442


@dataclass
class Tactics:
    formation: TacticsFormation = DEFAULT_FORMATION
    chosen_by: Optional[int] = None   # staff id of whoever picked it (0 = stub)


@dataclass
class Squad:
    coach_id: int
    main_squad: List[Player] = field(default_factory=list)
    substitutes: List[Player] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.main_squad) + len(self.substitutes)


def select_squad(
    players: PlayerCollection,
    coach: Staff,
    starters: int = config.MATCH_STARTERS,
    substitutes: int = config.MATCH_SUBSTITUTES,
) -> Squad:
    """
    First-team players in roster order: the first `starters` start, the next
    `substitutes` sit on the bench. The coach is recorded, the stub included.
    """
    pool = players.by_team_type(TeamType.MAIN)
    return Squad(
        coach_id=coach.id,
        main_squad=pool[:starters],
        substitutes=pool[starters:starters + substitutes],
    )
