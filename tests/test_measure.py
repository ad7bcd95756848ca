# tests/test_measure.py
from __future__ import annotations

import logging
from datetime import date

import pytest

from clubsim.measure import estimate_result
from clubsim.rng import club_id_for, day_rng, derive_seed, youth_rng


def test_estimate_result_passes_value_through(caplog):
    marker = object()
    with caplog.at_level(logging.DEBUG, logger="clubsim.measure"):
        assert estimate_result("simulate staff: id: 4", lambda: marker) is marker
    assert "simulate staff: id: 4" in caplog.text


def test_estimate_result_does_not_swallow_errors():
    class Boom(Exception):
        pass

    def fail():
        raise Boom("x")

    with pytest.raises(Boom):
        estimate_result("boom", fail)


def test_seeds_are_stable_and_label_sensitive():
    assert derive_seed(1337, "academy", 4) == derive_seed(1337, "academy", 4)
    assert derive_seed(1337, "academy", 4) != derive_seed(1337, "academy", 5)
    assert derive_seed(1337, "academy", 4) != derive_seed(1338, "academy", 4)
    assert 0 < derive_seed(7, date(2024, 1, 6)) < 2 ** 31


def test_day_and_youth_streams_are_separate():
    day = date(2024, 1, 6)
    assert day_rng(2, day, "a").random() == day_rng(2, day, "a").random()
    assert day_rng(2, day, "a").random() != day_rng(2, date(2024, 1, 7), "a").random()
    assert youth_rng(2, 100).random() == youth_rng(2, 100).random()
    assert youth_rng(2, 100).random() != youth_rng(2, 101).random()


def test_club_id_depends_on_name_and_seed():
    assert club_id_for("Harbor", 9) == club_id_for("Harbor", 9)
    assert 0 <= club_id_for("Harbor") <= 1_000_000
    assert club_id_for("Harbor", 9) != club_id_for("Quay", 9)
