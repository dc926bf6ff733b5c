from collections import namedtuple
import math

from .bit_enum import BitEnum
from .utils import clamp


class Mod(BitEnum):
    """The mods in osu! which affect difficulty or performance points.
    """
    no_fail = 1
    easy = 1 << 1
    touch_device = 1 << 2
    hidden = 1 << 3
    hard_rock = 1 << 4
    double_time = 1 << 6
    half_time = 1 << 8
    nightcore = 1 << 9  # always used with double_time
    flashlight = 1 << 10
    spun_out = 1 << 12

    @classmethod
    def parse(cls, cs):
        """Parse a mod mask out of a list of shortened mod names.

        Parameters
        ----------
        cs : str
            The mod string, for example ``'HDDT'`` or ``'+hdhr'``.

        Returns
        -------
        mod_mask : int
            The mod mask.

        Raises
        ------
        ValueError
            Raised when ``cs`` contains an unknown or partial mod name.
        """
        cs = cs.strip().lower()
        if cs.startswith('+'):
            cs = cs[1:]

        if len(cs) % 2 != 0:
            raise ValueError(f'malformed mods: {cs!r}')

        mod = 0
        for n in range(0, len(cs), 2):
            try:
                mod |= _short_names[cs[n:n + 2]]
            except KeyError:
                raise ValueError(f'unknown mod: {cs[n:n + 2]!r}')

        return mod

    @classmethod
    def serialize(cls, mod_mask):
        """Serialize a mod mask into the shortened mod names.

        Parameters
        ----------
        mod_mask : int
            The mod mask.

        Returns
        -------
        cs : str
            The mod string, for example ``'HDDT'``. Nightcore implies double
            time so only ``'NC'`` is written when both are set.
        """
        names = []
        for name, mod in _short_names.items():
            if not mod_mask & mod:
                continue
            if mod == cls.double_time and mod_mask & cls.nightcore:
                continue
            names.append(name.upper())

        return ''.join(names)


# ordered the way osu! displays mods
_short_names = {
    'nf': Mod.no_fail,
    'ez': Mod.easy,
    'td': Mod.touch_device,
    'hd': Mod.hidden,
    'hr': Mod.hard_rock,
    'nc': Mod.nightcore,
    'dt': Mod.double_time,
    'ht': Mod.half_time,
    'fl': Mod.flashlight,
    'so': Mod.spun_out,
}

#: The mods which change the playback rate of the song.
speed_changing = Mod.double_time | Mod.half_time | Mod.nightcore

#: The mods which change the beatmap's difficulty attributes.
map_changing = Mod.hard_rock | Mod.easy | speed_changing


class Stat(BitEnum):
    """Selects which difficulty attributes :func:`mods_apply` should modify.
    """
    ar = 1
    od = 1 << 1
    cs = 1 << 2
    hp = 1 << 3

    @classmethod
    def all(cls):
        return cls.ar | cls.od | cls.cs | cls.hp


class MapStats(namedtuple('MapStats', 'ar od cs hp speed')):
    """Difficulty attributes of a beatmap, optionally with mods applied.

    Parameters
    ----------
    ar : float or None
        The approach rate.
    od : float or None
        The overall difficulty.
    cs : float or None
        The circle size.
    hp : float or None
        The health drain rate.
    speed : float
        The playback rate multiplier of the song.

    Notes
    -----
    Only the attributes that will be passed through :func:`mods_apply` need to
    be set, the others may be left as ``None``.
    """
    def __new__(cls, ar=None, od=None, cs=None, hp=None, speed=1.0):
        return super().__new__(cls, ar, od, cs, hp, speed)


# millisecond windows at the anchor values of AR and OD
AR0_MS = 1800.0
AR5_MS = 1200.0
AR10_MS = 450.0
AR_MS_STEP1 = (AR0_MS - AR5_MS) / 5.0
AR_MS_STEP2 = (AR5_MS - AR10_MS) / 5.0

OD0_MS = 79.5
OD10_MS = 19.5
OD_MS_STEP = (OD0_MS - OD10_MS) / 10.0


def ar_to_ms(ar):
    """Convert an approach rate value to milliseconds of time that an element
    appears on the screen before being hit.

    Parameters
    ----------
    ar : float
        The approach rate.

    Returns
    -------
    milliseconds : float
        The number of milliseconds that an element appears on the screen before
        being hit at the given approach rate.

    See Also
    --------
    :func:`ppcalc.mod.ms_to_ar`
    """
    # NOTE: The formula for ar_to_ms is different for ar >= 5 and ar < 5
    # see: https://osu.ppy.sh/wiki/Song_Setup#Approach_Rate
    if ar < 5:
        return AR0_MS - AR_MS_STEP1 * ar
    return AR5_MS - AR_MS_STEP2 * (ar - 5)


def ms_to_ar(ms):
    """Convert milliseconds to hit an element into an approach rate value.

    Parameters
    ----------
    ms : float
        The number of milliseconds that an element appears on the screen before
        being hit.

    Returns
    -------
    ar : float
        The approach rate value that produces the given millisecond value.

    See Also
    --------
    :func:`ppcalc.mod.ar_to_ms`
    """
    if ms > AR5_MS:
        return (AR0_MS - ms) / AR_MS_STEP1
    return 5 + (AR5_MS - ms) / AR_MS_STEP2


def od_to_ms_300(od):
    """Convert an overall difficulty value into milliseconds to hit an object
    at maximum accuracy.

    Parameters
    ----------
    od : float
        The overall difficulty.

    Returns
    -------
    ms : float
        The number of milliseconds to hit an object at maximum accuracy.

    Notes
    -----
    osu! rounds the window to whole milliseconds so the step is rounded up
    before being taken off of the OD 0 window.

    See Also
    --------
    :func:`ppcalc.mod.ms_300_to_od`
    """
    return OD0_MS - math.ceil(OD_MS_STEP * od)


def ms_300_to_od(ms):
    """Convert the milliseconds to score a 300 into an OD value.

    Parameters
    ----------
    ms : float
        The length of the 300 window in milliseconds.

    Returns
    -------
    od : float
        The OD value that produces a 300 window of length ``ms``.

    See Also
    --------
    :func:`ppcalc.mod.od_to_ms_300`
    """
    return (OD0_MS - ms) / OD_MS_STEP


def circle_radius(cs):
    """Compute the ``CS`` attribute into a circle radius in osu! pixels.

    Parameters
    ----------
    cs : float
        The circle size.

    Returns
    -------
    radius : float
        The radius in osu! pixels.
    """
    return (512 / 16) * (1 - 0.7 * (cs - 5) / 5)


def speed_multiplier(mods):
    """The playback rate of the song with the given mods.

    Parameters
    ----------
    mods : int
        The mod mask.

    Returns
    -------
    speed : float
        The rate multiplier.
    """
    speed = 1.0
    if Mod.any_set(mods, Mod.double_time, Mod.nightcore):
        speed = 1.5

    # half time is checked on its own; conflicting masks compound
    if mods & Mod.half_time:
        speed *= 0.75

    return speed


def mods_apply(mods, stats, fields=None):
    """Apply mods to the difficulty attributes of a beatmap.

    Parameters
    ----------
    mods : int
        The mod mask.
    stats : MapStats
        The base attributes of the beatmap. Only the attributes selected by
        ``fields`` need to be set.
    fields : int, optional
        A :class:`~ppcalc.mod.Stat` mask selecting which attributes should be
        modified. Defaults to all of them.

    Returns
    -------
    stats : MapStats
        The effective attributes along with the speed multiplier.

    Notes
    -----
    ``double_time`` and ``half_time`` do not change the AR or OD shown in
    game; however, because the map is sped up or slowed down, the effective
    windows are changed.

    Examples
    --------
    >>> stats = mods_apply(Mod.double_time, MapStats(ar=9), Stat.ar)
    >>> round(stats.ar, 2), stats.speed
    (10.33, 1.5)
    """
    if fields is None:
        fields = Stat.all()

    if not mods & map_changing:
        return stats._replace(speed=1.0)

    speed = speed_multiplier(mods)

    od_ar_hp_multiplier = 1.0
    if mods & Mod.hard_rock:
        od_ar_hp_multiplier = 1.4
    if mods & Mod.easy:
        od_ar_hp_multiplier *= 0.5

    ar, od, cs, hp = stats.ar, stats.od, stats.cs, stats.hp

    if fields & Stat.ar:
        # the window is capped to the 0-10 range before the speed change
        # which can take the effective value to -5 through 11
        ms = clamp(ar_to_ms(ar * od_ar_hp_multiplier), AR10_MS, AR0_MS)
        ar = ms_to_ar(ms / speed)

    if fields & Stat.od:
        ms = clamp(od_to_ms_300(od * od_ar_hp_multiplier), OD10_MS, OD0_MS)
        od = ms_300_to_od(ms / speed)

    if fields & Stat.cs:
        if mods & Mod.hard_rock:
            cs *= 1.3
        if mods & Mod.easy:
            cs *= 0.5
        cs = min(cs, 10.0)

    if fields & Stat.hp:
        hp = min(hp * od_ar_hp_multiplier, 10.0)

    return MapStats(ar=ar, od=od, cs=cs, hp=hp, speed=speed)
