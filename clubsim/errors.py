# clubsim/errors.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


class ClubSimError(Exception):
    """Base class for errors raised by the simulation core."""


class InvalidInput(ClubSimError, ValueError):
    """Setup input the core cannot work with (e.g. fewer than two clubs)."""


@dataclass(frozen=True)
class TickFailure:
    """
    Record of an entity tick that raised. Never propagated past the club:
    the failing entity simply produced no events that day.
    """
    label: str
    date: date
    error: BaseException
    club_id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.label} on {self.date.isoformat()}: {self.error!r}"
