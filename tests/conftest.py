# tests/conftest.py
# Ensure the project root (where the local `clubsim/` lives) is first on sys.path
from __future__ import annotations

import os, sys
from datetime import date

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from clubsim.people import FullName
from clubsim.player import Player, PlayerClubContract, TeamType
from clubsim.staff import Staff, StaffClubContract, StaffPosition

SEASON_START = date(2024, 1, 6)   # a Saturday
FAR_FUTURE = date(2099, 6, 30)


@pytest.fixture
def make_staff():
    def _make(staff_id, position=None, club_id=1, birth_date=date(1980, 3, 15), expires=FAR_FUTURE):
        contract = None
        if position is not None:
            contract = StaffClubContract(club_id=club_id, position=position, expired=expires)
        return Staff(
            id=staff_id,
            full_name=FullName("Staff", str(staff_id)),
            birth_date=birth_date,
            contract=contract,
        )
    return _make


@pytest.fixture
def make_player():
    def _make(player_id, club_id=1, team_type=TeamType.MAIN, birth_date=date(2000, 5, 20), expires=FAR_FUTURE,
              contracted=True):
        contract = PlayerClubContract(club_id=club_id, expired=expires, team_type=team_type) if contracted else None
        return Player(
            id=player_id,
            full_name=FullName("Player", str(player_id)),
            birth_date=birth_date,
            contract=contract,
        )
    return _make


@pytest.fixture
def season_start():
    return SEASON_START
