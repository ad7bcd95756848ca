# clubsim/board.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from clubsim import config
from clubsim.context import SimulationContext
from clubsim.events import BoardEvent, BoardEventKind


@dataclass
class ClubBoard:
    """The club's board. It only meets once a month; what it decides is the handler's business."""
    club_id: Optional[int] = None
    review_day: int = config.BOARD_REVIEW_DAY
    last_review: Optional[date] = None

    def simulate(self, ctx: SimulationContext) -> List[BoardEvent]:
        today = ctx.date
        if today.day != self.review_day or self.last_review == today:
            return []
        self.last_review = today
        club_id = self.club_id if self.club_id is not None else ctx.club_id
        return [BoardEvent(BoardEventKind.MONTHLY_REVIEW, club_id, today)]
