# clubsim/staff_collection.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional

from clubsim.context import SimulationContext
from clubsim.events import StaffEvent
from clubsim.player import TeamType
from clubsim.responsibility import CATEGORY_POSITIONS, ResponsibilityCategory, StaffResponsibility
from clubsim.staff import STAFF_STUB, Staff, StaffPosition
from clubsim.ticks import run_entity_tick


class ResolutionSource(Enum):
    ASSIGNED = auto()   # explicit registry entry, present in the directory
    MANAGER = auto()    # the designated head of club
    POSITION = auto()   # first contracted staff holding the implied position
    STUB = auto()       # nobody found; the shared placeholder


@dataclass(frozen=True)
class StaffResolution:
    staff: Staff
    source: ResolutionSource

    @property
    def resolved(self) -> bool:
        return self.source is not ResolutionSource.STUB


class StaffCollection:
    """
    A club's staff plus its head of club and role registry.

    Every lookup ends with somebody: an explicit assignment, then the first
    staff member (directory order) holding the category's position, then the
    shared stub (id 0). Lookups never mutate anything.
    """

    def __init__(
        self,
        staffs: Optional[Iterable[Staff]] = None,
        manager: Optional[Staff] = None,
        responsibility: Optional[StaffResponsibility] = None,
    ):
        self.staffs: List[Staff] = list(staffs or [])
        self.manager: Optional[Staff] = manager
        self.responsibility: StaffResponsibility = responsibility or StaffResponsibility()

    # -----------------------------------------------------------------------
    # Container
    # -----------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.staffs)

    def __iter__(self) -> Iterator[Staff]:
        return iter(self.staffs)

    def add(self, staff: Staff) -> None:
        if self.find_by_id(staff.id) is not None:
            raise ValueError(f"staff {staff.id} is already in this directory")
        self.staffs.append(staff)

    def remove(self, staff_id: int) -> Optional[Staff]:
        for staff in self.staffs:
            if staff.id == staff_id:
                self.staffs.remove(staff)
                return staff
        return None

    # -----------------------------------------------------------------------
    # Tick
    # -----------------------------------------------------------------------

    def simulate(self, ctx: SimulationContext) -> List[StaffEvent]:
        events: List[StaffEvent] = []
        for staff in self.members():
            staff_ctx = ctx.with_staff(staff.id)
            events.extend(run_entity_tick(
                staff_ctx,
                f"simulate staff: id: {staff.id}",
                lambda staff=staff, staff_ctx=staff_ctx: staff.simulate(staff_ctx),
            ))
        return events

    # -----------------------------------------------------------------------
    # Resolution
    # -----------------------------------------------------------------------

    def resolve(self, category: ResponsibilityCategory) -> StaffResolution:
        staff_id = self.responsibility.get(category)
        if staff_id is not None:
            assigned = self.find_by_id(staff_id)
            if assigned is not None:
                return StaffResolution(assigned, ResolutionSource.ASSIGNED)
        return self._resolve_position(CATEGORY_POSITIONS[category])

    def _resolve_position(self, position: StaffPosition) -> StaffResolution:
        found = self.find_by_position(position)
        # TODO: choose the most qualified holder instead of the first one listed
        if found:
            return StaffResolution(found[0], ResolutionSource.POSITION)
        return StaffResolution(STAFF_STUB, ResolutionSource.STUB)

    def head_of_club(self) -> Staff:
        return self.resolve_head_of_club().staff

    def resolve_head_of_club(self) -> StaffResolution:
        if self.manager is not None:
            return StaffResolution(self.manager, ResolutionSource.MANAGER)
        return self._resolve_position(StaffPosition.ASSISTANT_MANAGER)

    def training_coach(self, team_type: TeamType) -> Staff:
        if team_type is TeamType.MAIN:
            return self.resolve(ResponsibilityCategory.TRAINING_FIRST_TEAM).staff
        return self.resolve(ResponsibilityCategory.TRAINING_YOUTH_TEAM).staff

    def contract_resolver(self, team_type: TeamType) -> Staff:
        if team_type is TeamType.MAIN:
            category = ResponsibilityCategory.CONTRACTS_FIRST_TEAM
        elif team_type is TeamType.B:
            category = ResponsibilityCategory.CONTRACTS_OTHER_STAFF
        else:
            category = ResponsibilityCategory.CONTRACTS_YOUTH_TEAM
        return self.resolve(category).staff

    def scout(self) -> Staff:
        return self.resolve(ResponsibilityCategory.SCOUTING).staff

    def recruiter(self) -> Staff:
        return self.resolve(ResponsibilityCategory.RECRUITMENT).staff

    def transfers_in(self) -> Staff:
        return self.resolve(ResponsibilityCategory.INCOMING_TRANSFERS).staff

    def transfers_out(self) -> Staff:
        return self.resolve(ResponsibilityCategory.OUTGOING_TRANSFERS).staff

    def board_liaison(self) -> Staff:
        return self.resolve(ResponsibilityCategory.BOARD).staff

    # -----------------------------------------------------------------------
    # Lookups
    # -----------------------------------------------------------------------

    def members(self) -> List[Staff]:
        """Head of club first (when set and not already listed), then the staff list."""
        if self.manager is None or any(s is self.manager for s in self.staffs):
            return list(self.staffs)
        return [self.manager] + self.staffs

    def find_by_id(self, staff_id: int) -> Optional[Staff]:
        for staff in self.members():
            if staff.id == staff_id:
                return staff
        return None

    def get_by_id(self, staff_id: int) -> Staff:
        """Staff member with this id, or the stub."""
        staff = self.find_by_id(staff_id)
        return staff if staff is not None else STAFF_STUB

    def find_by_position(self, position: StaffPosition) -> List[Staff]:
        """Contracted members holding `position`, head of club included, in `members()` order."""
        return [s for s in self.members() if s.contract is not None and s.contract.position == position]

    def get_by_position(self, position: StaffPosition) -> Staff:
        return self._resolve_position(position).staff
