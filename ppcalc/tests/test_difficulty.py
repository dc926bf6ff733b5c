from datetime import timedelta
from math import isclose

from hypothesis import given, settings
import pytest

import ppcalc.example_data.beatmaps
from ppcalc import Beatmap, Circle, GameMode, Mod, Position, Spinner
from ppcalc.difficulty import (
    calculate_difficulty,
    difficulty_hit_objects,
    scaling_factor,
)
from ppcalc.mod import circle_radius
from ppcalc.position import playfield_center
from ppcalc.strategies import beatmaps, mods


def make_beatmap(hit_objects, circle_size=4):
    return Beatmap(
        format_version=14,
        mode=GameMode.standard,
        title='',
        title_unicode='',
        artist='',
        artist_unicode='',
        creator='',
        version='',
        hp_drain_rate=5,
        circle_size=circle_size,
        overall_difficulty=5,
        approach_rate=5,
        slider_multiplier=1.4,
        slider_tick_rate=1,
        timing_points=[],
        hit_objects=hit_objects,
    )


def circle(x, y, ms):
    return Circle(Position(x, y), timedelta(milliseconds=ms))


@pytest.fixture
def three_circles():
    return make_beatmap([
        circle(0, 0, 0),
        circle(100, 0, 300),
        circle(100, 100, 900),
    ])


def test_three_circles(three_circles):
    difficulty = calculate_difficulty(three_circles)

    assert isclose(difficulty.aim, 0.3071461051010384, rel_tol=1e-9)
    assert isclose(difficulty.speed, 0.30914434238415867, rel_tol=1e-9)
    assert isclose(difficulty.total, 0.6172895661267572, rel_tol=1e-9)

    # both jumps are 142.5 normalized pixels
    assert difficulty.singles == 2
    assert difficulty.singles_threshold == 2


def test_strains(three_circles):
    objects = difficulty_hit_objects(three_circles.hit_objects(), cs=4)

    assert objects[0].strains == (0, 0)
    assert objects[0].delta_time == 0
    assert not objects[0].is_single

    speed, aim = objects[1].strains
    assert isclose(speed, 2.5 * 1400 / 300)
    assert isclose(aim, 142.54385964912282 ** 0.99 * 26.25 / 300)
    assert objects[1].delta_time == 300


def test_singletap_threshold(three_circles):
    difficulty = calculate_difficulty(three_circles, singletap_threshold=400)
    assert difficulty.singles_threshold == 1

    # double time makes the intervals 200ms and 400ms
    difficulty = calculate_difficulty(
        three_circles,
        Mod.double_time,
        singletap_threshold=400,
    )
    assert difficulty.singles_threshold == 1

    difficulty = calculate_difficulty(
        three_circles,
        Mod.double_time,
        singletap_threshold=401,
    )
    assert difficulty.singles_threshold == 0


def test_empty():
    difficulty = calculate_difficulty(make_beatmap([]))
    assert difficulty.aim == 0
    assert difficulty.speed == 0
    assert difficulty.total == 0
    assert difficulty.singles == 0
    assert difficulty.singles_threshold == 0


def test_single_object():
    difficulty = calculate_difficulty(make_beatmap([circle(0, 0, 5000)]))
    assert difficulty.total == 0


def test_scaling_factor():
    assert scaling_factor(52) == 1
    # small circles get a buff of up to 10%
    assert isclose(scaling_factor(28), 52 / 28 * 1.04)
    assert isclose(scaling_factor(20), 52 / 20 * 1.1)
    assert isclose(scaling_factor(10), 52 / 10 * 1.1)


def test_spinner_is_centered():
    spinner = Spinner(Position(0, 0), timedelta(), timedelta(seconds=1))
    objects = difficulty_hit_objects([spinner], cs=5)
    factor = scaling_factor(circle_radius(5))
    assert objects[0].normalized_position == playfield_center * factor

    # spinners do not add strain
    objects = difficulty_hit_objects(
        [circle(0, 0, 0), Spinner(Position(0, 0), timedelta(seconds=1))],
        cs=5,
    )
    assert objects[1].strains == (0, 0)
    assert not objects[1].is_single


def test_touch_device(three_circles):
    nomod = calculate_difficulty(three_circles)
    touch_device = calculate_difficulty(three_circles, Mod.touch_device)

    assert isclose(touch_device.aim, nomod.aim ** 0.8)
    assert touch_device.speed == nomod.speed


def test_mods_do_not_change_hit_objects(three_circles):
    before = [(ob.position, ob.time) for ob in three_circles.hit_objects()]
    calculate_difficulty(three_circles, Mod.hard_rock | Mod.double_time)
    after = [(ob.position, ob.time) for ob in three_circles.hit_objects()]
    assert before == after


def test_example_map():
    beatmap = ppcalc.example_data.beatmaps.example_map()

    nomod = calculate_difficulty(beatmap)
    hard_rock = calculate_difficulty(beatmap, Mod.hard_rock)
    easy = calculate_difficulty(beatmap, Mod.easy)

    assert nomod.total > 0
    # bigger circles mean less spacing after normalization
    assert easy.aim < nomod.aim < hard_rock.aim


@given(beatmaps(), mods())
@settings(deadline=None)
def test_total_is_at_least_each_skill(beatmap, mods):
    difficulty = calculate_difficulty(beatmap, mods)
    assert difficulty.aim >= 0
    assert difficulty.speed >= 0
    assert difficulty.total >= max(difficulty.aim, difficulty.speed)


@given(beatmaps(min_objects=2), mods(), mods())
@settings(deadline=None)
def test_independent_of_order(beatmap, first, second):
    expected_first = calculate_difficulty(beatmap, first)
    expected_second = calculate_difficulty(beatmap, second)

    assert calculate_difficulty(beatmap, second) == expected_second
    assert calculate_difficulty(beatmap, first) == expected_first
