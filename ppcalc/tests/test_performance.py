from math import isclose, isfinite, log10
import logging

from hypothesis import given
from hypothesis.strategies import integers
import pytest

from ppcalc import Accuracy, GameMode, Mod
from ppcalc.performance import (
    ar_bonus,
    base_pp,
    length_bonus,
    performance_points,
)
from ppcalc.strategies import hit_counts


def play(**kwargs):
    params = dict(
        aim_stars=2.6,
        speed_stars=2.4,
        max_combo=1000,
        n_circles=400,
        n_sliders=150,
        n_objects=552,
        base_ar=9,
        base_od=8,
    )
    params.update(kwargs)
    return performance_points(**params)


def test_hidden_double_time_reference():
    # full combo with 8 100s on an AR9 OD8 map
    pp = play(mods=Mod.hidden | Mod.double_time, n100=8)

    assert pp.computed_accuracy == Accuracy(544, 8, 0, 0)
    assert isclose(pp.aim, 74.5745, abs_tol=0.001)
    assert isclose(pp.speed, 66.5257, abs_tol=0.001)
    assert isclose(pp.accuracy, 95.1939, abs_tol=0.001)
    assert isclose(pp.total, 239.7713, abs_tol=0.01)


def test_base_pp():
    assert base_pp(0) == 1 / 100000
    assert base_pp(0.0675) == 1 / 100000
    assert isclose(base_pp(0.675), 46 ** 3 / 100000)


def test_length_bonus():
    assert length_bonus(0) == 0.95
    assert isclose(length_bonus(1000), 1.15)
    assert isclose(length_bonus(2000), 1.35)
    assert isclose(length_bonus(4000), 1.35 + log10(2) * 0.5)


def test_ar_bonus():
    assert ar_bonus(9) == 1
    assert isclose(ar_bonus(11), 1 + 0.45 * 0.67)
    assert isclose(ar_bonus(7), 1.01)
    assert isclose(ar_bonus(7, Mod.hidden), 1.02)


def test_no_objects(caplog):
    with caplog.at_level(logging.WARNING):
        pp = performance_points(
            aim_stars=0,
            speed_stars=0,
            max_combo=0,
            n_circles=0,
            n_sliders=0,
            n_objects=0,
        )

    assert len(caplog.records) == 1
    for value in pp.aim, pp.speed, pp.accuracy, pp.total:
        assert isfinite(value)
        assert value >= 0


def test_unsupported_mode():
    with pytest.raises(ValueError):
        play(mode=GameMode.taiko)


@pytest.mark.parametrize('score_version', [0, 3])
def test_unsupported_score_version(score_version):
    with pytest.raises(ValueError):
        play(score_version=score_version)


def test_combo_is_clamped():
    assert play(combo=5000) == play()
    assert play(combo=-1) == play(combo=0)
    assert play(combo=500).total < play().total


def test_misses():
    full_combo = play()
    missed = play(nmiss=3)
    assert missed.computed_accuracy == Accuracy(549, 0, 0, 3)
    assert missed.total < full_combo.total

    # more misses than combo does not fail
    assert play(nmiss=552).total >= 0


def test_final_multiplier():
    nomod = play()
    no_fail = play(mods=Mod.no_fail)
    spun_out = play(mods=Mod.spun_out)

    assert no_fail.aim == nomod.aim
    assert isclose(no_fail.total, nomod.total * 0.9)
    assert isclose(spun_out.total, nomod.total * 0.95)


def test_flashlight():
    nomod = play()
    flashlight = play(mods=Mod.flashlight)

    assert isclose(flashlight.aim, nomod.aim * 1.45 * length_bonus(552))
    assert flashlight.speed == nomod.speed
    assert isclose(flashlight.accuracy, nomod.accuracy * 1.02)


@given(integers(0, 552).flatmap(hit_counts))
def test_score_v2_accuracy_at_least_v1(counts):
    n300, n100, n50, nmiss = counts
    v1 = play(n300=n300, n100=n100, n50=n50, nmiss=nmiss)
    v2 = play(
        n300=n300,
        n100=n100,
        n50=n50,
        nmiss=nmiss,
        score_version=2,
    )
    assert v2.accuracy >= v1.accuracy
    assert v2.aim == v1.aim
    assert v2.speed == v1.speed
