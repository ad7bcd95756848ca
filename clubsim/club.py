# clubsim/club.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from clubsim import config
from clubsim.academy import ClubAcademy
from clubsim.board import ClubBoard
from clubsim.context import SimulationContext
from clubsim.events import EventHandlers
from clubsim.player import Player, PlayerCollection, TeamType
from clubsim.rng import club_id_for
from clubsim.staff import Staff
from clubsim.staff_collection import StaffCollection
from clubsim.tactics import DEFAULT_FORMATION, Squad, Tactics, select_squad
from clubsim.ticks import dispatch_events, run_entity_tick


@dataclass
class Club:
    """
    Plain-English:
      - Owns its roster, staff directory, academy and board by value.
      - One `simulate` call is one day: collect events from every owned
        entity, hand each to the matching handler, then tick the board.
      - `id` is fixed once the club exists.
    """
    id: int
    name: str
    country_id: int = 0
    players: PlayerCollection = field(default_factory=PlayerCollection)
    staffs: StaffCollection = field(default_factory=StaffCollection)
    academy: ClubAcademy = field(default_factory=ClubAcademy)
    board: ClubBoard = field(default_factory=ClubBoard)
    tactics: Optional[Tactics] = None

    def __post_init__(self) -> None:
        if self.players is None:
            self.players = PlayerCollection()
        if self.staffs is None:
            self.staffs = StaffCollection()
        if self.board.club_id is None:
            self.board.club_id = self.id
        self.academy.country_id = self.country_id

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("club id is immutable")
        super().__setattr__(name, value)

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        name: str,
        players: Optional[Iterable[Player]] = None,
        staffs: Optional[Iterable[Staff]] = None,
        manager: Optional[Staff] = None,
        country_id: int = 0,
        seed: int = config.DEFAULT_SEED,
    ) -> "Club":
        """Club with a random id drawn from `config.CLUB_ID_RANGE` (seeded by name)."""
        return cls(
            id=club_id_for(name, seed),
            name=name,
            country_id=country_id,
            players=PlayerCollection(players),
            staffs=StaffCollection(staffs, manager=manager),
        )

    def items_count(self) -> int:
        return len(self.players)

    # -----------------------------------------------------------------------
    # Match day helpers
    # -----------------------------------------------------------------------

    def select_tactics(self) -> Tactics:
        """Head coach of the first team sets the formation; keeps an existing choice."""
        coach = self.staffs.training_coach(TeamType.MAIN)
        if self.tactics is None:
            self.tactics = Tactics(formation=DEFAULT_FORMATION, chosen_by=coach.id)
        return self.tactics

    def get_match_squad(self) -> Squad:
        return select_squad(self.players, self.staffs.training_coach(TeamType.MAIN))

    # -----------------------------------------------------------------------
    # Tick
    # -----------------------------------------------------------------------

    def simulate(self, context: SimulationContext, handlers: Optional[EventHandlers] = None) -> None:
        handlers = handlers or EventHandlers()
        ctx = context.with_club(self.id)

        dispatch_events(ctx, self.players.simulate(ctx), handlers.player.handle)

        academy_events = run_entity_tick(ctx, f"simulate academy: club: {self.id}", lambda: self.academy.simulate(ctx))
        dispatch_events(ctx, academy_events, handlers.player.handle)

        dispatch_events(ctx, self.staffs.simulate(ctx), handlers.staff.handle)

        board_events = run_entity_tick(ctx, f"simulate board: club: {self.id}", lambda: self.board.simulate(ctx))
        dispatch_events(ctx, board_events, handlers.board.handle)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
