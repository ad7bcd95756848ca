# clubsim/events.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Mapping, Protocol

if TYPE_CHECKING:
    from clubsim.context import SimulationContext

logger = logging.getLogger(__name__)

# Events are produced by entity ticks and handed back to the caller; entities
# never dispatch them themselves.


class PlayerEventKind(Enum):
    BIRTHDAY = auto()
    CONTRACT_EXPIRED = auto()
    YOUTH_PLAYER_GENERATED = auto()


class StaffEventKind(Enum):
    BIRTHDAY = auto()
    CONTRACT_EXPIRED = auto()


class BoardEventKind(Enum):
    MONTHLY_REVIEW = auto()


@dataclass(frozen=True)
class PlayerEvent:
    kind: PlayerEventKind
    player_id: int
    date: date
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StaffEvent:
    kind: StaffEventKind
    staff_id: int
    date: date
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BoardEvent:
    kind: BoardEventKind
    club_id: int
    date: date
    payload: Mapping[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Handler interfaces
# ---------------------------------------------------------------------------

class PlayerEventHandler(Protocol):
    def handle(self, event: PlayerEvent, context: "SimulationContext") -> None: ...


class StaffEventHandler(Protocol):
    def handle(self, event: StaffEvent, context: "SimulationContext") -> None: ...


class BoardEventHandler(Protocol):
    def handle(self, event: BoardEvent, context: "SimulationContext") -> None: ...


class PlayerEventHandlers:
    """Default player policy: note the event on the context, nothing else."""

    def handle(self, event: PlayerEvent, context: "SimulationContext") -> None:
        logger.debug("player %s: %s on %s", event.player_id, event.kind.name, event.date)
        context.handled.append(event)


class StaffEventHandlers:
    def handle(self, event: StaffEvent, context: "SimulationContext") -> None:
        if event.kind is StaffEventKind.CONTRACT_EXPIRED:
            logger.info("staff %s left club %s (contract expired %s)",
                        event.staff_id, event.payload.get("club_id"), event.date)
        else:
            logger.debug("staff %s: %s on %s", event.staff_id, event.kind.name, event.date)
        context.handled.append(event)


class BoardEventHandlers:
    def handle(self, event: BoardEvent, context: "SimulationContext") -> None:
        logger.debug("board of club %s: %s on %s", event.club_id, event.kind.name, event.date)
        context.handled.append(event)


@dataclass
class EventHandlers:
    """The set of policy owners a club dispatches its collected events to."""
    player: PlayerEventHandler = field(default_factory=PlayerEventHandlers)
    staff: StaffEventHandler = field(default_factory=StaffEventHandlers)
    board: BoardEventHandler = field(default_factory=BoardEventHandlers)
