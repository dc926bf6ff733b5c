from math import isclose

import pytest

from ppcalc.mod import (
    MapStats,
    Mod,
    Stat,
    ar_to_ms,
    circle_radius,
    map_changing,
    mods_apply,
    ms_300_to_od,
    ms_to_ar,
    od_to_ms_300,
    speed_multiplier,
)


@pytest.fixture
def stats():
    return MapStats(ar=9, od=8, cs=4, hp=6)


def test_parse():
    assert Mod.parse('HDDT') == Mod.hidden | Mod.double_time
    assert Mod.parse('+hdhr') == Mod.hidden | Mod.hard_rock
    assert Mod.parse('nfezsofl') == (
        Mod.no_fail | Mod.easy | Mod.spun_out | Mod.flashlight
    )
    assert Mod.parse('') == 0
    assert Mod.parse('+') == 0


@pytest.mark.parametrize('cs', ['HDX', 'XY', 'HDXY', 'H'])
def test_parse_invalid(cs):
    with pytest.raises(ValueError):
        Mod.parse(cs)


def test_serialize():
    assert Mod.serialize(0) == ''
    assert Mod.serialize(Mod.double_time | Mod.hidden) == 'HDDT'
    assert Mod.serialize(
        Mod.nightcore | Mod.double_time | Mod.hidden,
    ) == 'HDNC'
    assert Mod.serialize(
        Mod.spun_out | Mod.flashlight | Mod.half_time | Mod.touch_device |
        Mod.easy | Mod.no_fail,
    ) == 'NFEZTDHTFLSO'


def test_parse_serialize_canonical():
    assert Mod.serialize(Mod.parse('dthd')) == 'HDDT'
    assert Mod.serialize(Mod.parse('+SOHRNF')) == 'NFHRSO'


def test_pack_unpack():
    packed = Mod.pack(hidden=True, double_time=True, easy=False)
    assert packed == Mod.hidden | Mod.double_time
    assert Mod.pack() == 0

    unpacked = Mod.unpack(packed)
    assert unpacked['hidden']
    assert unpacked['double_time']
    assert not unpacked['easy']
    assert len(unpacked) == len(Mod)

    with pytest.raises(TypeError):
        Mod.pack(not_a_mod=True)


def test_groupings():
    assert not map_changing & Mod.hidden
    assert map_changing & Mod.nightcore
    assert Stat.all() == 15


def test_speed_multiplier():
    assert speed_multiplier(0) == 1.0
    assert speed_multiplier(Mod.double_time) == 1.5
    assert speed_multiplier(Mod.nightcore | Mod.double_time) == 1.5
    assert speed_multiplier(Mod.half_time) == 0.75
    # the bits are read independently
    assert speed_multiplier(Mod.double_time | Mod.half_time) == 1.125


def test_nomod_is_identity(stats):
    assert mods_apply(0, stats) == stats
    assert mods_apply(0, stats).speed == 1.0

    # hidden does not change the map stats
    assert mods_apply(Mod.hidden | Mod.flashlight, stats) == stats


def test_double_time(stats):
    applied = mods_apply(Mod.double_time, stats)
    assert applied.speed == 1.5
    assert round(applied.ar, 2) == 10.33
    assert applied.od == 9.75
    assert applied.cs == 4
    assert applied.hp == 6


def test_half_time(stats):
    applied = mods_apply(Mod.half_time, stats)
    assert applied.speed == 0.75
    # 600ms / 0.75 = 800ms
    assert isclose(applied.ar, 7 + 2 / 3)
    assert applied.cs == 4


def test_hard_rock(stats):
    applied = mods_apply(Mod.hard_rock, stats)
    assert applied.speed == 1.0
    # AR and OD are capped at 10 before any speed change
    assert applied.ar == 10
    assert applied.od == 10
    assert isclose(applied.cs, 5.2)
    assert isclose(applied.hp, 8.4)

    capped = mods_apply(Mod.hard_rock, MapStats(cs=9, hp=9), Stat.cs | Stat.hp)
    assert capped.cs == 10
    assert capped.hp == 10


def test_easy(stats):
    applied = mods_apply(Mod.easy, stats)
    assert applied.ar == 4.5
    assert applied.cs == 2
    assert applied.hp == 3


def test_hard_rock_double_time(stats):
    applied = mods_apply(Mod.hard_rock | Mod.double_time, stats)
    assert applied.speed == 1.5
    assert isclose(applied.ar, 11)
    assert isclose(applied.od, 66.5 / 6)


def test_only_selected_fields(stats):
    applied = mods_apply(Mod.hard_rock, stats, Stat.ar)
    assert applied.ar == 10
    assert applied.od == stats.od
    assert applied.cs == stats.cs
    assert applied.hp == stats.hp

    applied = mods_apply(Mod.double_time, MapStats(cs=4), Stat.cs)
    assert applied.ar is None
    assert applied.od is None
    assert applied.speed == 1.5


def test_ar_ms():
    assert ar_to_ms(0) == 1800
    assert ar_to_ms(5) == 1200
    assert ar_to_ms(10) == 450
    assert ms_to_ar(1800) == 0
    assert ms_to_ar(1200) == 5
    assert ms_to_ar(450) == 10
    assert ms_to_ar(300) == 11
    for ar in (1, 3.5, 7, 9.3):
        assert isclose(ms_to_ar(ar_to_ms(ar)), ar)


def test_od_ms():
    assert od_to_ms_300(0) == 79.5
    assert od_to_ms_300(10) == 19.5
    # the window is rounded to whole milliseconds
    assert od_to_ms_300(8.1) == 79.5 - 49
    assert ms_300_to_od(19.5) == 10


def test_circle_radius():
    assert circle_radius(5) == 32
    assert isclose(circle_radius(4), 36.48)
