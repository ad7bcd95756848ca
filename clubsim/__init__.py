# clubsim/__init__.py
"""Day-by-day league simulation: fixtures, clubs, staff and their ticks."""
from __future__ import annotations

from clubsim.errors import InvalidInput, TickFailure
from clubsim.schedule import Schedule, ScheduleItem
from clubsim.club import Club
from clubsim.season import SeasonDriver, DayReport

__all__ = [
    "InvalidInput",
    "TickFailure",
    "Schedule",
    "ScheduleItem",
    "Club",
    "SeasonDriver",
    "DayReport",
]
