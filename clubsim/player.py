# clubsim/player.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional

from clubsim import config
from clubsim.context import SimulationContext
from clubsim.events import PlayerEvent, PlayerEventKind
from clubsim.people import (
    FullName, PersonAttributes, PersonBehaviour, Relations, age_on, is_birthday,
)
from clubsim.ticks import run_entity_tick


class TeamType(Enum):
    MAIN = auto()
    B = auto()
    U23 = auto()
    U21 = auto()
    U19 = auto()
    U18 = auto()


@dataclass
class PlayerClubContract:
    club_id: int
    expired: date
    team_type: TeamType = TeamType.MAIN
    started: Optional[date] = None

    def is_expired(self, today: date) -> bool:
        return self.expired <= today


@dataclass
class Player:
    id: int
    full_name: FullName
    birth_date: date
    country_id: int = 0
    contract: Optional[PlayerClubContract] = None
    attributes: PersonAttributes = field(default_factory=PersonAttributes)
    behaviour: PersonBehaviour = field(default_factory=PersonBehaviour)
    relations: Relations = field(default_factory=Relations)

    def age(self, today: Optional[date] = None) -> int:
        return age_on(self.birth_date, today)

    def simulate(self, ctx: SimulationContext) -> List[PlayerEvent]:
        now = ctx.date
        events: List[PlayerEvent] = []

        if is_birthday(self.birth_date, now):
            self.behaviour.try_increase(ctx.rng("player", self.id, "birthday"), config.BEHAVIOUR_IMPROVE_CHANCE)
            events.append(PlayerEvent(PlayerEventKind.BIRTHDAY, self.id, now, {"age": self.age(now)}))

        contract = self.contract
        if contract is not None and contract.is_expired(now):
            self.contract = None
            events.append(PlayerEvent(
                PlayerEventKind.CONTRACT_EXPIRED,
                self.id,
                now,
                {"club_id": contract.club_id, "team_type": contract.team_type, "expired": contract.expired},
            ))
        return events

    def __str__(self) -> str:
        return f"{self.full_name}, {self.birth_date.isoformat()}"


class PlayerCollection:
    """A club's roster, in signing order."""

    def __init__(self, players: Optional[Iterable[Player]] = None):
        self.players: List[Player] = list(players or [])

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def add(self, player: Player) -> None:
        self.players.append(player)

    def get(self, player_id: int) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def by_team_type(self, team_type: TeamType) -> List[Player]:
        return [p for p in self.players if p.contract is not None and p.contract.team_type is team_type]

    def simulate(self, ctx: SimulationContext) -> List[PlayerEvent]:
        events: List[PlayerEvent] = []
        for player in self.players:
            events.extend(run_entity_tick(
                ctx, f"simulate player: id: {player.id}", lambda player=player: player.simulate(ctx),
            ))
        return events
