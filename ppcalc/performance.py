from collections import namedtuple
import logging

import numpy as np

from .accuracy import Accuracy
from .game_mode import GameMode
from .mod import MapStats, Mod, Stat, mods_apply
from .utils import clamp


class PerformanceResult(namedtuple('PerformanceResult',
                                   'aim speed accuracy total'
                                   ' computed_accuracy')):
    """The performance points awarded for a play.

    Parameters
    ----------
    aim : float
        The aim portion of the pp.
    speed : float
        The speed portion of the pp.
    accuracy : float
        The accuracy portion of the pp.
    total : float
        The pp as seen in osu!.
    computed_accuracy : Accuracy
        The hit counts the pp was computed with.
    """
    def __str__(self):
        return (
            f'{self.total:.2f}pp ({self.aim:.2f} aim, {self.speed:.2f} speed,'
            f' {self.accuracy:.2f} acc)'
        )


def base_pp(stars):
    """The pp of a single skill before any of the bonuses are applied.

    Parameters
    ----------
    stars : float
        The stars for the skill.

    Returns
    -------
    pp : float
        The base pp.
    """
    return (5 * max(1.0, stars / 0.0675) - 4) ** 3 / 100000


def length_bonus(n_objects):
    """The bonus awarded for longer maps.

    Parameters
    ----------
    n_objects : int
        The number of hit objects in the map.

    Returns
    -------
    bonus : float
        The multiplier for the aim and speed pp.
    """
    objects_over_2k = n_objects / 2000
    bonus = 0.95 + 0.4 * min(1.0, objects_over_2k)
    if n_objects > 2000:
        bonus += np.log10(objects_over_2k) * 0.5
    return float(bonus)


def ar_bonus(ar, mods=0):
    """The bonus awarded for very high or low approach rates.

    Parameters
    ----------
    ar : float
        The effective approach rate.
    mods : int, optional
        The mod mask.

    Returns
    -------
    bonus : float
        The multiplier for the aim pp.
    """
    bonus = 1.0
    if ar > 10.33:
        bonus += 0.45 * (ar - 10.33)
    elif ar < 8.0:
        low_ar_bonus = 0.01 * (8.0 - ar)
        if mods & Mod.hidden:
            low_ar_bonus *= 2.0
        bonus += low_ar_bonus
    return bonus


def performance_points(*,
                       aim_stars,
                       speed_stars,
                       max_combo,
                       n_circles,
                       n_sliders,
                       n_objects,
                       base_ar=5.0,
                       base_od=5.0,
                       mode=GameMode.standard,
                       mods=0,
                       combo=None,
                       n300=None,
                       n100=0,
                       n50=0,
                       nmiss=0,
                       score_version=1):
    """Compute the performance points for a play.

    Parameters
    ----------
    aim_stars : float
        The aim stars of the beatmap with the mods applied.
    speed_stars : float
        The speed stars of the beatmap with the mods applied.
    max_combo : int
        The max combo of the beatmap.
    n_circles : int
        The number of circles in the beatmap.
    n_sliders : int
        The number of sliders in the beatmap.
    n_objects : int
        The total number of hit objects in the beatmap.
    base_ar : float, optional
        The approach rate without mods.
    base_od : float, optional
        The overall difficulty without mods.
    mode : GameMode, optional
        The game mode of the beatmap.
    mods : int, optional
        The mod mask.
    combo : int, optional
        The combo achieved. Defaults to ``max_combo - nmiss``.
    n300 : int, optional
        The number of 300s. Defaults to the objects which were not otherwise
        counted.
    n100 : int, optional
        The number of 100s.
    n50 : int, optional
        The number of 50s.
    nmiss : int, optional
        The number of misses.
    score_version : {1, 2}, optional
        The scoring system the play was made with.

    Returns
    -------
    pp : PerformanceResult
        The pp for the play.

    Raises
    ------
    ValueError
        Raised when the game mode or score version is not supported.
    """
    if mode != GameMode.standard:
        raise ValueError(f'unsupported game mode: {GameMode(mode).name}')

    if score_version not in (1, 2):
        raise ValueError(f'unsupported score version: {score_version!r}')

    if max_combo <= 0:
        logging.warning(f'max combo is {max_combo}, using 1')
        max_combo = 1

    if combo is None:
        combo = max_combo - nmiss
    combo = clamp(combo, 0, max_combo)

    if n300 is None:
        n300 = n_objects - n100 - n50 - nmiss

    computed_accuracy = Accuracy(n300, n100, n50, nmiss)
    accuracy = computed_accuracy.value()

    if score_version == 1:
        # sliders and spinners are free 300s in score v1
        n_spinners = n_objects - n_sliders - n_circles
        real_accuracy = Accuracy(
            max(n300 - n_sliders - n_spinners, 0),
            n100,
            n50,
            nmiss,
        ).value()
    else:
        real_accuracy = accuracy
        n_circles = n_objects

    length = length_bonus(n_objects)
    miss_penalty = 0.97 ** nmiss
    combo_break = (combo / max_combo) ** 0.8

    stats = mods_apply(
        mods,
        MapStats(ar=base_ar, od=base_od),
        Stat.ar | Stat.od,
    )
    ar = stats.ar
    od = stats.od

    accuracy_bonus = 0.5 + accuracy / 2
    od_bonus = 0.98 + od ** 2 / 2500

    aim = (
        base_pp(aim_stars) *
        length *
        miss_penalty *
        combo_break *
        ar_bonus(ar, mods)
    )
    if mods & Mod.hidden:
        aim *= 1.02 + (11 - ar) / 50
    if mods & Mod.flashlight:
        aim *= 1.45 * length
    aim *= accuracy_bonus * od_bonus

    speed = (
        base_pp(speed_stars) *
        length *
        miss_penalty *
        combo_break *
        accuracy_bonus *
        od_bonus
    )
    if mods & Mod.hidden:
        speed *= 1.18

    accuracy_pp = (
        1.52163 ** od *
        real_accuracy ** 24 *
        2.83 *
        min(1.15, (n_circles / 1000) ** 0.3)
    )
    if mods & Mod.hidden:
        accuracy_pp *= 1.02
    if mods & Mod.flashlight:
        accuracy_pp *= 1.02

    final_multiplier = 1.12
    if mods & Mod.no_fail:
        final_multiplier *= 0.90
    if mods & Mod.spun_out:
        final_multiplier *= 0.95

    total = float(
        np.power(
            np.power([aim, speed, accuracy_pp], 1.1).sum(),
            1 / 1.1,
        ) * final_multiplier,
    )

    return PerformanceResult(
        aim=float(aim),
        speed=float(speed),
        accuracy=float(accuracy_pp),
        total=total,
        computed_accuracy=computed_accuracy,
    )
