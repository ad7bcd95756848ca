# clubsim/config.py
from __future__ import annotations

# -------- League / Season --------
DEFAULT_LEGS: int = 2                 # each opponent twice (home/away)
DAYS_BETWEEN_ROUNDS: int = 7          # weekly cadence
REST_WEEKDAY: int | None = None       # 0=Monday .. 6=Sunday; rounds landing here move one day on
SKIP_BYE_CLUBS_ON_MATCHDAY: bool = True

# -------- Clubs --------
CLUB_ID_RANGE = (0, 1_000_000)

# -------- Academy --------
ACADEMY_PLAYERS_COUNT_RANGE = (30, 50)   # start of range is the top-up threshold
ACADEMY_INTAKE_RANGE = (5, 15)           # players generated per top-up
YOUTH_AGE_RANGE = (14, 16)

# -------- People --------
BEHAVIOUR_IMPROVE_CHANCE: float = 0.5    # rolled on each birthday

# -------- Match day --------
MATCH_STARTERS: int = 11
MATCH_SUBSTITUTES: int = 7

# -------- Board --------
BOARD_REVIEW_DAY: int = 1                # day of month the board meets

# -------- RNG / Seeds --------
DEFAULT_SEED: int = 1337
