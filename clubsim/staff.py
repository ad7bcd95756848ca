# clubsim/staff.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from typing import List, Optional

from clubsim import config
from clubsim.context import SimulationContext
from clubsim.events import StaffEvent, StaffEventKind
from clubsim.people import (
    FullName, PersonAttributes, PersonBehaviour, Relations, is_birthday,
)


class StaffPosition(Enum):
    FREE = auto()
    CHAIRMAN = auto()
    DIRECTOR = auto()
    DIRECTOR_OF_FOOTBALL = auto()
    MANAGER = auto()
    ASSISTANT_MANAGER = auto()
    COACH = auto()
    FIRST_TEAM_COACH = auto()
    GOALKEEPER_COACH = auto()
    FITNESS_COACH = auto()
    YOUTH_TEAM_COACH = auto()
    HEAD_OF_YOUTH_DEVELOPMENT = auto()
    CHIEF_SCOUT = auto()
    SCOUT = auto()
    DATA_ANALYST = auto()
    PHYSIO = auto()
    SPORTS_SCIENTIST = auto()


class StaffLicenseType(Enum):
    CONTINENTAL_PRO = auto()
    CONTINENTAL_A = auto()
    CONTINENTAL_B = auto()
    CONTINENTAL_C = auto()
    NATIONAL_A = auto()
    NATIONAL_B = auto()
    NATIONAL_C = auto()


# Role ratings, 1..20 each.

@dataclass
class StaffCoaching:
    attacking: int = 10
    defending: int = 10
    fitness: int = 10
    mental: int = 10
    tactical: int = 10
    technical: int = 10
    working_with_youngsters: int = 10


@dataclass
class StaffGoalkeeperCoaching:
    distribution: int = 10
    handling: int = 10
    shot_stopping: int = 10


@dataclass
class StaffMental:
    adaptability: int = 10
    determination: int = 10
    discipline: int = 10
    man_management: int = 10
    motivating: int = 10


@dataclass
class StaffKnowledge:
    judging_player_ability: int = 10
    judging_player_potential: int = 10
    tactical_knowledge: int = 10


@dataclass
class StaffDataAnalysis:
    judging_player_data: int = 10
    judging_team_data: int = 10
    presenting_data: int = 10


@dataclass
class StaffMedical:
    physiotherapy: int = 10
    sports_science: int = 10
    non_player_tendencies: int = 10


@dataclass
class StaffAttributes:
    coaching: StaffCoaching = field(default_factory=StaffCoaching)
    goalkeeping: StaffGoalkeeperCoaching = field(default_factory=StaffGoalkeeperCoaching)
    mental: StaffMental = field(default_factory=StaffMental)
    knowledge: StaffKnowledge = field(default_factory=StaffKnowledge)
    data_analysis: StaffDataAnalysis = field(default_factory=StaffDataAnalysis)
    medical: StaffMedical = field(default_factory=StaffMedical)

    @classmethod
    def flat(cls, value: int) -> "StaffAttributes":
        v = int(value)
        return cls(
            coaching=StaffCoaching(v, v, v, v, v, v, v),
            goalkeeping=StaffGoalkeeperCoaching(v, v, v),
            mental=StaffMental(v, v, v, v, v),
            knowledge=StaffKnowledge(v, v, v),
            data_analysis=StaffDataAnalysis(v, v, v),
            medical=StaffMedical(v, v, v),
        )


@dataclass
class StaffClubContract:
    club_id: int
    position: StaffPosition
    expired: date
    started: Optional[date] = None

    def is_expired(self, today: date) -> bool:
        return self.expired <= today


@dataclass
class Staff:
    id: int
    full_name: FullName
    birth_date: date
    country_id: int = 0
    contract: Optional[StaffClubContract] = None
    attributes: PersonAttributes = field(default_factory=PersonAttributes)
    behaviour: PersonBehaviour = field(default_factory=PersonBehaviour)
    staff_attributes: StaffAttributes = field(default_factory=StaffAttributes)
    relations: Relations = field(default_factory=Relations)
    license: StaffLicenseType = StaffLicenseType.NATIONAL_C

    # True only on the shared stub; see `sealed`
    _sealed = False

    def __setattr__(self, name: str, value) -> None:
        if self._sealed:
            raise AttributeError(f"the shared staff stub is read-only (tried to set {name!r})")
        super().__setattr__(name, value)

    def sealed(self) -> "Staff":
        """Freeze this instance in place; used for the process-wide stub."""
        object.__setattr__(self, "_sealed", True)
        return self

    @classmethod
    def stub(cls) -> "Staff":
        """Placeholder returned when nobody real can be resolved. Always id 0."""
        return cls(
            id=0,
            full_name=FullName("stub", "stub", "stub"),
            birth_date=date(2019, 1, 1),
            country_id=0,
            contract=None,
            attributes=PersonAttributes.flat(1),
            staff_attributes=StaffAttributes.flat(1),
            license=StaffLicenseType.NATIONAL_C,
        )

    @property
    def is_stub(self) -> bool:
        return self.id == 0

    @property
    def position(self) -> Optional[StaffPosition]:
        """Club-scoped position; None without a contract."""
        return self.contract.position if self.contract is not None else None

    def simulate(self, ctx: SimulationContext) -> List[StaffEvent]:
        now = ctx.date
        events: List[StaffEvent] = []

        if is_birthday(self.birth_date, now):
            self.behaviour.try_increase(ctx.rng("staff", self.id, "birthday"), config.BEHAVIOUR_IMPROVE_CHANCE)
            events.append(StaffEvent(StaffEventKind.BIRTHDAY, self.id, now))

        self._process_contract(events, now)
        return events

    def _process_contract(self, events: List[StaffEvent], now: date) -> None:
        contract = self.contract
        if contract is None or not contract.is_expired(now):
            return
        self.contract = None
        events.append(StaffEvent(
            StaffEventKind.CONTRACT_EXPIRED,
            self.id,
            now,
            {"club_id": contract.club_id, "position": contract.position, "expired": contract.expired},
        ))

    def __str__(self) -> str:
        return f"{self.full_name}, {self.birth_date.isoformat()}"


# Shared sentinel handed out by every directory; read-only, never ticked.
STAFF_STUB = Staff.stub().sealed()
