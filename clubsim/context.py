# clubsim/context.py
from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, List, Optional

from clubsim import config
from clubsim.errors import TickFailure
from clubsim.measure import MeasureSink, estimate_result
from clubsim.rng import day_rng


@dataclass
class SimulationContext:
    """
    Plain-English:
      - What every tick gets: the simulated date, the season seed and the
        measurement sink.
      - `with_club` / `with_staff` return scoped copies. The copies share the
        same `handled` and `failures` lists, so anything a handler or the tick
        guard records lands on the driver's context.
    """
    date: date
    seed: int = config.DEFAULT_SEED
    club_id: Optional[int] = None
    staff_id: Optional[int] = None
    measure: MeasureSink = estimate_result
    handled: List[Any] = field(default_factory=list)
    failures: List[TickFailure] = field(default_factory=list)

    def with_club(self, club_id: Optional[int]) -> "SimulationContext":
        return replace(self, club_id=club_id, staff_id=None)

    def with_staff(self, staff_id: Optional[int]) -> "SimulationContext":
        return replace(self, staff_id=staff_id)

    def rng(self, *labels: Any) -> random.Random:
        """Deterministic RNG for this date, separated by labels."""
        return day_rng(self.seed, self.date, *labels)
