# clubsim/responsibility.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from threading import RLock
from typing import Dict, Optional, Tuple

from clubsim.staff import StaffPosition

# Who at the club owns which decision. Every slot holds a staff id or None
# ("unassigned"); ids are checked against the directory only when resolved.


@dataclass
class BoardResponsibility:
    handle_board_matters: Optional[int] = None


@dataclass
class RecruitmentResponsibility:
    handle_recruitment: Optional[int] = None


@dataclass
class IncomingTransfersResponsibility:
    handle_incoming_transfers: Optional[int] = None


@dataclass
class OutgoingTransfersResponsibility:
    handle_outgoing_transfers: Optional[int] = None


@dataclass
class ContractRenewalResponsibility:
    handle_first_team_contracts: Optional[int] = None
    handle_youth_team_contracts: Optional[int] = None
    handle_director_of_football_contract: Optional[int] = None
    handle_other_staff_contracts: Optional[int] = None


@dataclass
class ScoutingResponsibility:
    handle_scouting: Optional[int] = None


@dataclass
class TrainingResponsibility:
    training_first_team: Optional[int] = None
    training_youth_team: Optional[int] = None


class ResponsibilityCategory(Enum):
    """Every decision slot, as (group attribute, slot attribute)."""
    BOARD = ("board", "handle_board_matters")
    RECRUITMENT = ("recruitment", "handle_recruitment")
    INCOMING_TRANSFERS = ("incoming_transfers", "handle_incoming_transfers")
    OUTGOING_TRANSFERS = ("outgoing_transfers", "handle_outgoing_transfers")
    CONTRACTS_FIRST_TEAM = ("contract_renewal", "handle_first_team_contracts")
    CONTRACTS_YOUTH_TEAM = ("contract_renewal", "handle_youth_team_contracts")
    CONTRACTS_DIRECTOR_OF_FOOTBALL = ("contract_renewal", "handle_director_of_football_contract")
    CONTRACTS_OTHER_STAFF = ("contract_renewal", "handle_other_staff_contracts")
    SCOUTING = ("scouting", "handle_scouting")
    TRAINING_FIRST_TEAM = ("training", "training_first_team")
    TRAINING_YOUTH_TEAM = ("training", "training_youth_team")

    @property
    def path(self) -> Tuple[str, str]:
        return self.value


# Position searched when a category has no (valid) explicit assignment.
CATEGORY_POSITIONS: Dict[ResponsibilityCategory, StaffPosition] = {
    ResponsibilityCategory.BOARD: StaffPosition.CHAIRMAN,
    ResponsibilityCategory.RECRUITMENT: StaffPosition.CHIEF_SCOUT,
    ResponsibilityCategory.INCOMING_TRANSFERS: StaffPosition.DIRECTOR_OF_FOOTBALL,
    ResponsibilityCategory.OUTGOING_TRANSFERS: StaffPosition.DIRECTOR_OF_FOOTBALL,
    ResponsibilityCategory.CONTRACTS_FIRST_TEAM: StaffPosition.DIRECTOR_OF_FOOTBALL,
    ResponsibilityCategory.CONTRACTS_YOUTH_TEAM: StaffPosition.HEAD_OF_YOUTH_DEVELOPMENT,
    ResponsibilityCategory.CONTRACTS_DIRECTOR_OF_FOOTBALL: StaffPosition.CHAIRMAN,
    ResponsibilityCategory.CONTRACTS_OTHER_STAFF: StaffPosition.DIRECTOR_OF_FOOTBALL,
    ResponsibilityCategory.SCOUTING: StaffPosition.CHIEF_SCOUT,
    ResponsibilityCategory.TRAINING_FIRST_TEAM: StaffPosition.COACH,
    ResponsibilityCategory.TRAINING_YOUTH_TEAM: StaffPosition.COACH,
}


@dataclass
class StaffResponsibility:
    board: BoardResponsibility = field(default_factory=BoardResponsibility)
    recruitment: RecruitmentResponsibility = field(default_factory=RecruitmentResponsibility)
    incoming_transfers: IncomingTransfersResponsibility = field(default_factory=IncomingTransfersResponsibility)
    outgoing_transfers: OutgoingTransfersResponsibility = field(default_factory=OutgoingTransfersResponsibility)
    contract_renewal: ContractRenewalResponsibility = field(default_factory=ContractRenewalResponsibility)
    scouting: ScoutingResponsibility = field(default_factory=ScoutingResponsibility)
    training: TrainingResponsibility = field(default_factory=TrainingResponsibility)
    # one writer at a time; readers never see a half-applied assignment
    _lock: RLock = field(default_factory=RLock, init=False, repr=False, compare=False)

    def get(self, category: ResponsibilityCategory) -> Optional[int]:
        group, slot = category.path
        with self._lock:
            return getattr(getattr(self, group), slot)

    def assign(self, category: ResponsibilityCategory, staff_id: Optional[int]) -> None:
        group, slot = category.path
        with self._lock:
            setattr(getattr(self, group), slot, None if staff_id is None else int(staff_id))

    def unassign(self, category: ResponsibilityCategory) -> None:
        self.assign(category, None)

    def assignments(self) -> Dict[ResponsibilityCategory, Optional[int]]:
        with self._lock:
            return {c: getattr(getattr(self, c.path[0]), c.path[1]) for c in ResponsibilityCategory}
