# clubsim/rng.py
"""
Seeded randomness for the simulation.

Every draw is keyed by the season seed plus a short label path (a date, a
club or player id, what the draw is for). The path is folded into a 64-bit
FNV-1a hash, because the built-in hash() is salted per process and a season
has to replay the same on any machine, in any thread order.
"""
from __future__ import annotations

import random
from datetime import date
from typing import Union

from clubsim import config

_OFFSET = 0xCBF29CE484222325
_PRIME = 0x100000001B3
_MASK = (1 << 64) - 1
_SEPARATOR = b"\x1f"

Label = Union[int, str, date]


def _encode(label: Label) -> bytes:
    if isinstance(label, date):
        return label.isoformat().encode("ascii")
    if isinstance(label, int):
        return (int(label) & _MASK).to_bytes(8, "little")
    return str(label).encode("utf-8")


def _fold(h: int, data: bytes) -> int:
    for byte in data:
        h = ((h ^ byte) * _PRIME) & _MASK
    return h


def derive_seed(season_seed: int, *labels: Label) -> int:
    """Positive 31-bit seed for one label path inside a season."""
    h = _fold(_OFFSET, _encode(season_seed))
    for label in labels:
        h = _fold(h, _SEPARATOR + _encode(label))
    return ((h ^ (h >> 33)) & 0x7FFFFFFF) or 1


def seeded(season_seed: int, *labels: Label) -> random.Random:
    return random.Random(derive_seed(season_seed, *labels))


def day_rng(season_seed: int, day: date, *labels: Label) -> random.Random:
    """Draws for something that happens on `day` (birthdays, academy intake)."""
    return seeded(season_seed, day, *labels)


def youth_rng(season_seed: int, player_id: int) -> random.Random:
    """Everything rolled for one generated youngster: name, birth date, ratings."""
    return seeded(season_seed, "youth", player_id)


def club_id_for(name: str, season_seed: int = config.DEFAULT_SEED) -> int:
    """Id for a new club, drawn from `config.CLUB_ID_RANGE`; same name, same id."""
    lo, hi = config.CLUB_ID_RANGE
    return seeded(season_seed, "club", name).randint(lo, hi)
