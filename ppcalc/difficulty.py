from collections import namedtuple
from datetime import timedelta
from enum import IntEnum, unique

import numpy as np

from .beatmap import Circle, Slider
from .mod import MapStats, Mod, Stat, circle_radius, mods_apply
from .position import distance, playfield_center

#: The slowest interval, in milliseconds, which still counts as a singletap.
#: 125ms is 240 bpm 1/2 ((60000 / 240) / 2).
DEFAULT_SINGLETAP_THRESHOLD = 125.0


@unique
class Strain(IntEnum):
    """Indices for the strain specific values.
    """
    speed = 0
    aim = 1


class DifficultyHitObject:
    """The strain information computed for a single hit object.

    Parameters
    ----------
    hit_object : HitObject
        The hit object to wrap. This is never modified.
    normalized_position : Position
        The position of the object scaled to a common circle size.
    speed_multiplier : float
        The playback rate of the song.
    previous : DifficultyHitObject, optional
        The previous difficulty hit object.

    Attributes
    ----------
    delta_time : float
        The milliseconds since the previous object, at the playback rate.
    strains : tuple[float, float]
        The speed and aim strains at this object, indexed by
        :class:`~ppcalc.difficulty.Strain`.
    is_single : bool
        Is this object spaced far enough from the previous one that it must
        be singletapped?
    """
    decay_base = 0.3, 0.15

    almost_diameter = 90

    stream_spacing = 110
    single_spacing = 125

    weight_scaling = 1400, 26.25

    def __init__(self,
                 hit_object,
                 normalized_position,
                 speed_multiplier,
                 previous=None):
        self.hit_object = hit_object
        self.normalized_position = normalized_position
        self.is_single = False

        if previous is None:
            self.delta_time = 0.0
            self.strains = 0, 0
            return

        self.delta_time = (
            hit_object.time -
            previous.hit_object.time
        ).total_seconds() * 1000 / speed_multiplier

        if isinstance(hit_object, (Circle, Slider)):
            # this currently ignores slider length
            spacing = distance(
                normalized_position,
                previous.normalized_position,
            )
            self.is_single = spacing > self.single_spacing
        else:
            spacing = None

        self.strains = (
            self._calculate_strain(previous, spacing, Strain.speed),
            self._calculate_strain(previous, spacing, Strain.aim),
        )

    def _calculate_strain(self, previous, spacing, strain):
        result = 0
        if spacing is not None:
            result = (
                self._spacing_weight(spacing, strain) *
                self.weight_scaling[strain]
            )

        time_elapsed = self.delta_time
        result /= max(time_elapsed, 50)
        decay = self.decay_base[strain] ** (time_elapsed / 1000)
        return previous.strains[strain] * decay + result

    def _spacing_weight(self, distance, strain):
        if strain == Strain.speed:
            if distance > self.single_spacing:
                return 2.5
            elif distance > self.stream_spacing:
                return (
                    1.6 +
                    0.9 *
                    (distance - self.stream_spacing) /
                    (self.single_spacing - self.stream_spacing)
                )
            elif distance > self.almost_diameter:
                return (
                    1.2 +
                    0.4 *
                    (distance - self.almost_diameter) /
                    (self.stream_spacing - self.almost_diameter)
                )
            elif distance > self.almost_diameter / 2:
                return (
                    0.95 +
                    0.25 *
                    (distance - self.almost_diameter / 2) /
                    (self.almost_diameter / 2.0)
                )
            return 0.95

        return distance ** 0.99


class DifficultyResult(namedtuple('DifficultyResult',
                                  'aim speed total singles'
                                  ' singles_threshold')):
    """The star rating of a beatmap.

    Parameters
    ----------
    aim : float
        The aim component of the stars.
    speed : float
        The speed component of the stars.
    total : float
        The stars as seen in osu!.
    singles : int
        The number of objects spaced far enough apart that they are
        considered singletaps.
    singles_threshold : int
        The number of taps at or slower than the singletap threshold.
    """
    def __str__(self):
        return (
            f'{self.total:.2f} stars ({self.aim:.2f} aim,'
            f' {self.speed:.2f} speed)'
        )


_circle_size_buff_threshold = 30
_strain_step = timedelta(milliseconds=400)
_decay_weight = 0.9
_star_scaling_factor = 0.0675
_extreme_scaling_factor = 0.5


def scaling_factor(radius):
    """The factor which normalizes positions to a common circle size.

    Parameters
    ----------
    radius : float
        The circle radius in osu! pixels.

    Returns
    -------
    scaling_factor : float
        The factor to multiply positions by.
    """
    factor = 52 / radius
    if radius < _circle_size_buff_threshold:
        # small circles are harder than their spacing alone suggests
        factor *= 1 + min(_circle_size_buff_threshold - radius, 5) / 50
    return factor


def difficulty_hit_objects(hit_objects, cs, speed_multiplier=1.0):
    """Compute the strain information for each hit object.

    Parameters
    ----------
    hit_objects : iterable[HitObject]
        The hit objects in the order they appear.
    cs : float
        The circle size, with mods already applied.
    speed_multiplier : float, optional
        The playback rate of the song.

    Returns
    -------
    difficulty_hit_objects : list[DifficultyHitObject]
        One entry per hit object, in the same order.
    """
    factor = scaling_factor(circle_radius(cs))
    normalized_center = playfield_center * factor

    out = []
    append = out.append

    previous = None
    for hit_object in hit_objects:
        if isinstance(hit_object, (Circle, Slider)):
            normalized_position = hit_object.position * factor
        else:
            normalized_position = normalized_center

        previous = DifficultyHitObject(
            hit_object,
            normalized_position,
            speed_multiplier,
            previous,
        )
        append(previous)

    return out


def _calculate_difficulty(strain, difficulty_hit_objects, speed_multiplier):
    highest_strains = []
    append_highest_strain = highest_strains.append

    strain_step = _strain_step * speed_multiplier
    interval_end = strain_step
    max_strain = 0

    previous = None
    for difficulty_hit_object in difficulty_hit_objects:
        while difficulty_hit_object.hit_object.time > interval_end:
            append_highest_strain(max_strain)

            if previous is None:
                max_strain = 0
            else:
                decay = (
                    DifficultyHitObject.decay_base[strain] ** (
                        interval_end -
                        previous.hit_object.time
                    ).total_seconds()
                )
                max_strain = previous.strains[strain] * decay

            interval_end += strain_step

        max_strain = max(max_strain, difficulty_hit_object.strains[strain])
        previous = difficulty_hit_object

    # weigh the top strains sorted from highest to lowest
    peaks = np.sort(np.array(highest_strains, dtype=np.float64))[::-1]
    weights = _decay_weight ** np.arange(len(peaks))
    return float(np.dot(peaks, weights))


def calculate_difficulty(beatmap,
                         mods=0,
                         *,
                         singletap_threshold=DEFAULT_SINGLETAP_THRESHOLD):
    """Compute the stars and star components for a beatmap.

    Parameters
    ----------
    beatmap : Beatmap
        The beatmap to rate.
    mods : int, optional
        The mod mask.
    singletap_threshold : float, optional
        The slowest interval in milliseconds, at the playback rate, which is
        counted in ``singles_threshold``.

    Returns
    -------
    difficulty : DifficultyResult
        The computed stars.

    Notes
    -----
    The beatmap and its hit objects are not modified, all of the intermediate
    state belongs to this call.
    """
    stats = mods_apply(mods, MapStats(cs=beatmap.circle_size), Stat.cs)
    speed_multiplier = stats.speed

    objects = difficulty_hit_objects(
        beatmap.hit_objects(),
        stats.cs,
        speed_multiplier,
    )

    speed = _calculate_difficulty(Strain.speed, objects, speed_multiplier)
    aim = _calculate_difficulty(Strain.aim, objects, speed_multiplier)

    speed = float(np.sqrt(speed) * _star_scaling_factor)
    aim = float(np.sqrt(aim) * _star_scaling_factor)
    if mods & Mod.touch_device:
        aim **= 0.8

    total = aim + speed + abs(speed - aim) * _extreme_scaling_factor

    singles = sum(ob.is_single for ob in objects)
    singles_threshold = sum(
        1 for ob in objects[1:]
        if isinstance(ob.hit_object, (Circle, Slider)) and
        ob.delta_time >= singletap_threshold
    )

    return DifficultyResult(
        aim=aim,
        speed=speed,
        total=total,
        singles=singles,
        singles_threshold=singles_threshold,
    )
