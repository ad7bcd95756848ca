# clubsim/people.py
from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import Dict, Iterator, Optional, Tuple


def is_birthday(birth_date: date, today: date) -> bool:
    """Month/day match. 29 Feb birthdays only fire on leap days."""
    return birth_date.month == today.month and birth_date.day == today.day


@dataclass(frozen=True)
class FullName:
    first_name: str
    last_name: str
    middle_name: str = ""

    def __str__(self) -> str:
        if self.middle_name:
            return f"{self.first_name} {self.middle_name} {self.last_name}"
        return f"{self.first_name} {self.last_name}"


@dataclass
class PersonAttributes:
    # 1..20 personality ratings
    adaptability: int = 10
    ambition: int = 10
    controversy: int = 10
    loyalty: int = 10
    pressure: int = 10
    professionalism: int = 10
    sportsmanship: int = 10
    temperament: int = 10

    @classmethod
    def flat(cls, value: int) -> "PersonAttributes":
        return cls(*([int(value)] * 8))


class PersonBehaviourState(IntEnum):
    POOR = 0
    NORMAL = 1
    GOOD = 2


@dataclass
class PersonBehaviour:
    state: PersonBehaviourState = PersonBehaviourState.NORMAL

    def try_increase(self, rng: random.Random, chance: float) -> bool:
        """Roll once; on success move up one notch. Returns True if the state changed."""
        if self.state >= PersonBehaviourState.GOOD:
            return False
        if rng.random() >= chance:
            return False
        self.state = PersonBehaviourState(self.state + 1)
        return True


@dataclass
class Relations:
    """Ledger of how a person feels about other people, keyed by person id (-100..100)."""
    levels: Dict[int, float] = field(default_factory=dict)

    def get(self, person_id: int) -> float:
        return self.levels.get(int(person_id), 0.0)

    def update(self, person_id: int, delta: float) -> float:
        pid = int(person_id)
        level = max(-100.0, min(100.0, self.levels.get(pid, 0.0) + float(delta)))
        self.levels[pid] = level
        return level

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        return iter(sorted(self.levels.items()))

    def __len__(self) -> int:
        return len(self.levels)


def age_on(birth_date: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years
