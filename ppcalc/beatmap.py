from datetime import timedelta
import logging
import math
import re

from .game_mode import GameMode
from .mod import MapStats, Mod, Stat, map_changing, mods_apply
from .position import Position
from .utils import lazyval, no_default


def _get(cs, ix, default=no_default):
    try:
        return cs[ix]
    except IndexError:
        if default is no_default:
            raise
        return default


def _parse_float(cs):
    value = float(cs)
    if not math.isfinite(value):
        raise ValueError(f'{cs!r} is not a finite number')
    return value


def _parse_time(cs):
    try:
        return timedelta(milliseconds=_parse_float(cs))
    except OverflowError:
        raise ValueError(f'{cs!r} is out of range')


class TimingPoint:
    """A timing point assigns properties to an offset into a beatmap.

    Parameters
    ----------
    offset : timedelta
        When this ``TimingPoint`` takes effect.
    ms_per_beat : float
        The milliseconds per beat, this is another representation of BPM.
    uninherited : bool, optional
        Does this timing point define its own tempo? An inherited timing point
        differs from a normal timing point in that the ``ms_per_beat`` value is
        negative, and defines a slider velocity multiplier relative to the
        parent timing point.
    parent : TimingPoint or None, optional
        The last uninherited timing point before an inherited timing point.
        This is ``None`` for uninherited timing points and for inherited
        timing points which appear before any uninherited one.
    """
    def __init__(self, offset, ms_per_beat, uninherited=True, parent=None):
        self.offset = offset
        self.ms_per_beat = ms_per_beat
        self.uninherited = uninherited
        self.parent = parent

    @lazyval
    def slider_velocity_multiplier(self):
        """The multiplier this timing point applies to the base slider
        velocity.
        """
        if not self.uninherited and self.ms_per_beat < 0:
            return -100.0 / self.ms_per_beat
        return 1.0

    def __repr__(self):
        if self.uninherited:
            inherited = ''
        else:
            inherited = 'inherited '
        return (
            f'<{type(self).__qualname__}:'
            f' {inherited}{self.offset.total_seconds() * 1000:g}ms>'
        )

    @classmethod
    def parse(cls, data, parent):
        """Parse a TimingPoint object from a line in a ``.osu`` file.

        Parameters
        ----------
        data : str
            The line to parse.
        parent : TimingPoint or None
            The last uninherited timing point.

        Returns
        -------
        timing_point : TimingPoint
            The parsed timing point.

        Raises
        ------
        ValueError
            Raised when ``data`` does not describe a ``TimingPoint`` object.
        """
        try:
            offset, ms_per_beat, *rest = data.split(',')
        except ValueError:
            raise ValueError(
                f'failed to parse {cls.__qualname__} from {data!r}',
            )

        if len(rest) > 6:
            logging.warning(f'timing point with trailing values: {data!r}')

        try:
            offset = _parse_time(offset)
        except ValueError:
            raise ValueError(f'offset should be a float, got {offset!r}')

        try:
            ms_per_beat = _parse_float(ms_per_beat)
        except ValueError:
            raise ValueError(
                f'ms_per_beat should be a float, got {ms_per_beat!r}',
            )

        uninherited = _get(rest, 4, '1')
        try:
            uninherited = bool(int(uninherited))
        except ValueError:
            raise ValueError(
                f'uninherited should be a bool, got {uninherited!r}',
            )

        return cls(
            offset=offset,
            ms_per_beat=ms_per_beat,
            uninherited=uninherited,
            parent=None if uninherited else parent,
        )


class HitObject:
    """An abstract hit element for osu! standard.

    Parameters
    ----------
    position : Position
        Where this element appears on the screen.
    time : timedelta
        When this element appears in the map.
    """
    type_code = 0

    def __init__(self, position, time):
        self.position = position
        self.time = time

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.position},'
            f' {self.time.total_seconds() * 1000:g}ms>'
        )

    @classmethod
    def parse(cls, data):
        """Parse a HitObject object from a line in a ``.osu`` file.

        Parameters
        ----------
        data : str
            The line to parse.

        Returns
        -------
        hit_objects : HitObject
            The parsed hit object. This will be the concrete subclass given
            the type.

        Raises
        ------
        ValueError
            Raised when ``data`` does not describe a ``HitObject`` object.
        """
        try:
            x, y, time, type_, hitsound, *rest = data.split(',')
        except ValueError:
            raise ValueError(f'not enough elements in line, got {data!r}')

        if len(rest) > 6:
            logging.warning(f'hit object with trailing values: {data!r}')

        try:
            x = _parse_float(x)
        except ValueError:
            raise ValueError(f'x should be a number, got {x!r}')

        try:
            y = _parse_float(y)
        except ValueError:
            raise ValueError(f'y should be a number, got {y!r}')

        try:
            time = _parse_time(time)
        except ValueError:
            raise ValueError(f'time should be a number, got {time!r}')

        try:
            type_ = int(type_)
        except ValueError:
            raise ValueError(f'type should be an int, got {type_!r}')

        if type_ & Circle.type_code:
            parse = Circle._parse
        elif type_ & Slider.type_code:
            parse = Slider._parse
        elif type_ & Spinner.type_code:
            parse = Spinner._parse
        else:
            raise ValueError(f'unknown type code {type_!r}')

        return parse(Position(x, y), time, rest)


class Circle(HitObject):
    """A circle hit element.

    Parameters
    ----------
    position : Position
        Where this circle appears on the screen.
    time : timedelta
        When this circle appears in the map.
    """
    type_code = 1

    @classmethod
    def _parse(cls, position, time, rest):
        return cls(position, time)


class Spinner(HitObject):
    """A spinner hit element

    Parameters
    ----------
    position : Position
        Where this spinner appears on the screen. This is ignored by the
        difficulty calculation which always places spinners in the center of
        the playfield.
    time : timedelta
        When this spinner appears in the map.
    end_time : timedelta, optional
        When this spinner ends in the map.
    """
    type_code = 8

    def __init__(self, position, time, end_time=None):
        super().__init__(position, time)
        self.end_time = time if end_time is None else end_time

    @classmethod
    def _parse(cls, position, time, rest):
        try:
            end_time, *rest = rest
        except ValueError:
            raise ValueError('missing end_time')

        try:
            end_time = _parse_time(end_time)
        except ValueError:
            raise ValueError(f'end_time should be a number, got {end_time!r}')

        return cls(position, time, end_time)


class Slider(HitObject):
    """A slider hit element.

    Parameters
    ----------
    position : Position
        Where this slider appears on the screen.
    time : datetime.timedelta
        When this slider appears in the map.
    repeat : int, optional
        The number of times the slider is traversed.
    length : float, optional
        The length of one traversal of this slider in osu! pixels.

    Notes
    -----
    The curve of the slider is not kept; only the head position takes part in
    the difficulty calculation.
    """
    type_code = 2

    def __init__(self, position, time, repeat=1, length=0.0):
        super().__init__(position, time)
        self.repeat = repeat
        self.length = length

    @classmethod
    def _parse(cls, position, time, rest):
        try:
            _, repeat, length, *rest = rest
        except ValueError:
            raise ValueError('missing required slider attributes')

        try:
            repeat = int(repeat)
        except ValueError:
            raise ValueError(f'repeat should be an int, got {repeat!r}')

        if repeat < 1:
            raise ValueError(f'repeat should be at least 1, got {repeat}')

        try:
            length = _parse_float(length)
        except ValueError:
            raise ValueError(f'length should be a float, got {length!r}')

        return cls(position, time, repeat, length)

    def ticks(self, px_per_beat, tick_rate):
        """The number of combo increments this slider awards.

        Parameters
        ----------
        px_per_beat : float
            The slider velocity where this slider appears, in osu! pixels per
            beat.
        tick_rate : float
            The number of ticks per beat.

        Returns
        -------
        ticks : int
            The combo awarded for the head, the ticks, the repeats and the
            tail of this slider.
        """
        repeat = self.repeat
        num_beats = self.length * repeat / px_per_beat

        ticks = math.ceil((num_beats - 0.1) / repeat * tick_rate)
        # ticks on every pass plus one for the head and each pass' end
        ticks = (ticks - 1) * repeat + repeat + 1
        return max(0, ticks)


def _get_as_str(groups, section, field, default=no_default):
    """Lookup a field from a given section.

    Parameters
    ----------
    groups : dict[str, dict[str, str]]
        The grouped osu! file.
    section : str
        The section to read from.
    field : str
        The field to read.
    default : int, optional
        A value to return if ``field`` is not in ``groups[section]``.

    Returns
    -------
    cs : str
        ``groups[section][field]`` or default if ``field` is not in
         ``groups[section]``.
    """
    try:
        mapping = groups[section]
    except KeyError:
        if default is no_default:
            raise ValueError(f'missing section {section!r}')
        return default

    try:
        return mapping[field]
    except KeyError:
        if default is no_default:
            raise ValueError(f'missing field {field!r} in section {section!r}')
        return default


def _get_as_int(groups, section, field, default=no_default):
    v = _get_as_str(groups, section, field, default)

    if v is default:
        return v

    try:
        return int(v)
    except ValueError:
        raise ValueError(
            f'field {field!r} in section {section!r} should be an int,'
            f' got {v!r}',
        )


def _get_as_float(groups, section, field, default=no_default):
    v = _get_as_str(groups, section, field, default)

    if v is default:
        return v

    try:
        return _parse_float(v)
    except ValueError:
        raise ValueError(
            f'field {field!r} in section {section!r} should be a float,'
            f' got {v!r}',
        )


class Beatmap:
    """A beatmap for osu! standard.

    Parameters
    ----------
    format_version : int
        The version of the beatmap file.
    mode : GameMode
        The game mode.
    title : str
        The title of the song limited to ascii characters.
    title_unicode : str
        The title of the song with unicode support.
    artist : str
        The name of the song artist limited to ascii characters.
    artist_unicode : str
        The name of the song artist with unicode support.
    creator : str
        The username of the mapper.
    version : str
        The name of the beatmap's difficulty.
    hp_drain_rate : float
        The ``HP`` attribute of the beatmap.
    circle_size, : float
        The ``CS`` attribute of the beatmap.
    overall_difficulty : float
        The ``OD`` attribute of the beatmap.
    approach_rate : float
        The ``AR`` attribute of the beatmap.
    slider_multiplier : float
        The multiplier for slider velocity.
    slider_tick_rate : float
        How often slider ticks appear.
    timing_points : list[TimingPoint]
        The timing points the the map, ordered by offset.
    hit_objects : list[HitObject]
        The hit objects in the map, ordered by time.

    Notes
    -----
    Beatmaps are never modified by the difficulty or performance points
    calculations, the same object may be scored with any number of mod
    combinations.
    """
    _version_regex = re.compile(r'^osu file format v(\d+)$')

    def __init__(self,
                 *,
                 format_version,
                 mode,
                 title,
                 title_unicode,
                 artist,
                 artist_unicode,
                 creator,
                 version,
                 hp_drain_rate,
                 circle_size,
                 overall_difficulty,
                 approach_rate,
                 slider_multiplier,
                 slider_tick_rate,
                 timing_points,
                 hit_objects):
        self.format_version = format_version
        self.mode = mode
        self.title = title
        self.title_unicode = title_unicode
        self.artist = artist
        self.artist_unicode = artist_unicode
        self.creator = creator
        self.version = version
        self.hp_drain_rate = hp_drain_rate
        self.circle_size = circle_size
        self.overall_difficulty = overall_difficulty
        self.approach_rate = approach_rate
        self.slider_multiplier = slider_multiplier
        self.slider_tick_rate = slider_tick_rate
        self.timing_points = timing_points
        self._hit_objects = hit_objects

        # cache the difficulty with different mod combinations
        self._difficulty_cache = {}

    @property
    def display_name(self):
        """The name of the map as it appears in game.
        """
        return f'{self.artist} - {self.title} [{self.version}]'

    @property
    def stats(self):
        """The base difficulty attributes of this beatmap.
        """
        return MapStats(
            ar=self.approach_rate,
            od=self.overall_difficulty,
            cs=self.circle_size,
            hp=self.hp_drain_rate,
        )

    def hp(self, mods=0):
        """Compute the Health Drain (HP) value for different mods.

        Parameters
        ----------
        mods : int, optional
            The mod mask.

        Returns
        -------
        hp : float
            The HP value.
        """
        return mods_apply(mods, self.stats, Stat.hp).hp

    def cs(self, mods=0):
        """Compute the Circle Size (CS) value for different mods.

        Parameters
        ----------
        mods : int, optional
            The mod mask.

        Returns
        -------
        cs : float
            The CS value.
        """
        return mods_apply(mods, self.stats, Stat.cs).cs

    def od(self, mods=0):
        """Compute the effective Overall Difficulty (OD) value for different
        mods.

        Parameters
        ----------
        mods : int, optional
            The mod mask.

        Returns
        -------
        od : float
            The OD value.
        """
        return mods_apply(mods, self.stats, Stat.od).od

    def ar(self, mods=0):
        """Compute the effective Approach Rate (AR) value for different mods.

        Parameters
        ----------
        mods : int, optional
            The mod mask.

        Returns
        -------
        ar : float
            The effective AR value.
        """
        return mods_apply(mods, self.stats, Stat.ar).ar

    def hit_objects(self, *, circles=True, sliders=True, spinners=True):
        """Retrieve hit_objects.

        Parameters
        ----------
        circles : bool, optional
            If circles should be included.
        sliders : bool, optional
            If sliders should be included.
        spinners : bool, optional
            If spinners should be included.

        Returns
        -------
        hit_objects : tuple[HitObject]
            The objects in the order they appear in the map.
        """
        keep_classes = []
        if spinners:
            keep_classes.append(Spinner)
        if circles:
            keep_classes.append(Circle)
        if sliders:
            keep_classes.append(Slider)

        return tuple(ob for ob in self._hit_objects if
                     isinstance(ob, tuple(keep_classes)))

    @lazyval
    def circles(self):
        """Just the circles in the beatmap.
        """
        return self.hit_objects(sliders=False, spinners=False)

    @lazyval
    def sliders(self):
        """Just the sliders in the beatmap.
        """
        return self.hit_objects(circles=False, spinners=False)

    @lazyval
    def spinners(self):
        """Just the spinners in the beatmap.
        """
        return self.hit_objects(circles=False, sliders=False)

    @lazyval
    def max_combo(self):
        """The highest combo that can be achieved on this beatmap.
        """
        max_combo = 0

        base_px_per_beat = self.slider_multiplier * 100.0
        if not base_px_per_beat > 0:
            logging.warning(
                f'slider multiplier is {self.slider_multiplier}, counting'
                f' sliders without ticks',
            )

        timing_points = self.timing_points
        # walk the timing points forward alongside the objects instead of
        # searching for every slider
        tp_index = -1
        next_offset = None
        sv_multiplier = 1.0

        for hit_object in self._hit_objects:
            if not isinstance(hit_object, Slider):
                max_combo += 1
                continue

            while (tp_index + 1 < len(timing_points) and
                   (next_offset is None or hit_object.time >= next_offset)):
                tp_index += 1
                timing_point = timing_points[tp_index]
                sv_multiplier = timing_point.slider_velocity_multiplier
                if tp_index + 1 < len(timing_points):
                    next_offset = timing_points[tp_index + 1].offset
                else:
                    next_offset = None

            if not base_px_per_beat > 0:
                # the head and the end of each pass
                max_combo += hit_object.repeat + 1
                continue

            px_per_beat = base_px_per_beat
            if self.format_version >= 8:
                px_per_beat *= sv_multiplier

            max_combo += hit_object.ticks(px_per_beat, self.slider_tick_rate)

        return max_combo

    def difficulty(self, mods=0, *, singletap_threshold=None):
        """Compute the star rating of this beatmap.

        Parameters
        ----------
        mods : int, optional
            The mod mask.
        singletap_threshold : float, optional
            The slowest interval in milliseconds which is counted as a
            singletap, see :func:`ppcalc.difficulty.calculate_difficulty`.

        Returns
        -------
        difficulty : DifficultyResult
            The aim, speed and total stars along with the singletap counts.
        """
        from .difficulty import (
            DEFAULT_SINGLETAP_THRESHOLD,
            calculate_difficulty,
        )

        if singletap_threshold is None:
            singletap_threshold = DEFAULT_SINGLETAP_THRESHOLD

        # only these mods change the star rating
        key = mods & (map_changing | Mod.touch_device), singletap_threshold
        try:
            return self._difficulty_cache[key]
        except KeyError:
            pass

        self._difficulty_cache[key] = result = calculate_difficulty(
            self,
            key[0],
            singletap_threshold=singletap_threshold,
        )
        return result

    def stars(self, mods=0):
        """The stars as seen in osu!.

        Parameters
        ----------
        mods : int, optional
            The mod mask.

        Returns
        -------
        stars : float
            The total stars for the map.
        """
        return self.difficulty(mods).total

    def performance_points(self,
                           *,
                           mods=0,
                           combo=None,
                           accuracy=None,
                           count_300=None,
                           count_100=None,
                           count_50=None,
                           count_miss=0,
                           score_version=1,
                           aim_stars=None,
                           speed_stars=None):
        """Compute the performance points for the given map.

        Parameters
        ----------
        mods : int, optional
            The mod mask.
        combo : int, optional
            The combo achieved on the map. Defaults to max combo minus the
            misses.
        accuracy : float, optional
            The accuracy achieved in the range [0, 1]. If not provided
            and none of ``count_300``, ``count_100``, or ``count_50``
            provided then the this defaults to 100%
        count_300 : int, optional
            The number of 300s hit. Defaults to the objects which were not
            otherwise counted.
        count_100 : int, optional
            The number of 100s hit.
        count_50 : int, optional
            The number of 50s hit.
        count_miss : int, optional
            The number of misses.
        score_version : {1, 2}, optional
            The scoring system the play was made with.
        aim_stars : float, optional
            The aim stars to use instead of calculating them.
        speed_stars : float, optional
            The speed stars to use instead of calculating them.

        Returns
        -------
        pp : PerformanceResult
            The performance points awarded for the specified play.

        Raises
        ------
        ValueError
            Raised when both an accuracy and hit counts are passed, or when
            the beatmap is not an osu! standard beatmap.
        """
        from .accuracy import Accuracy
        from .performance import performance_points

        count_objects = len(self._hit_objects)

        if accuracy is not None:
            if (count_300 is not None or
                    count_100 is not None or
                    count_50 is not None):
                raise ValueError('cannot pass accuracy and hit counts')
            # compute the closest hit counts for the accuracy
            rounded = Accuracy.from_percent(
                accuracy * 100,
                count_objects,
                count_miss,
            )
            count_300 = rounded.n300
            count_100 = rounded.n100
            count_50 = rounded.n50
            count_miss = rounded.nmiss

        if aim_stars is None or speed_stars is None:
            difficulty = self.difficulty(mods)
            if aim_stars is None:
                aim_stars = difficulty.aim
            if speed_stars is None:
                speed_stars = difficulty.speed

        return performance_points(
            aim_stars=aim_stars,
            speed_stars=speed_stars,
            max_combo=self.max_combo,
            n_circles=len(self.circles),
            n_sliders=len(self.sliders),
            n_objects=count_objects,
            base_ar=self.approach_rate,
            base_od=self.overall_difficulty,
            mode=self.mode,
            mods=mods,
            combo=combo,
            n300=count_300,
            n100=count_100 or 0,
            n50=count_50 or 0,
            nmiss=count_miss,
            score_version=score_version,
        )

    def __repr__(self):
        return f'<{type(self).__qualname__}: {self.display_name}>'

    @classmethod
    def from_path(cls, path):
        """Read in a ``Beatmap`` object from a file on disk.

        Parameters
        ----------
        path : str or pathlib.Path
            The path to the file to read from.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        ValueError
            Raised when the file cannot be parsed as a ``.osu`` file.
        """
        with open(path, encoding='utf-8-sig') as file:
            return cls.from_file(file)

    @classmethod
    def from_file(cls, file):
        """Read in a ``Beatmap`` object from an open file object.

        Parameters
        ----------
        file : file-like
            The file object to read from.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        ValueError
            Raised when the file cannot be parsed as a ``.osu`` file.
        """
        return cls.parse(file.read())

    _mapping_groups = frozenset({
        'General',
        'Metadata',
        'Difficulty',
    })

    @classmethod
    def _find_groups(cls, lines):
        """Split the input data into the named groups.

        Parameters
        ----------
        lines : iterator[str]
            The raw lines from the file.

        Returns
        -------
        groups : dict[str, list[str] or dict[str, str]]
            The lines in the section. If the section is a mapping section
            the the value will be a dict from key to value.
        """
        groups = {}

        current_group = None
        group_buffer = []

        def commit_group():
            nonlocal group_buffer

            if current_group is None:
                # we are not building a group, just return
                return

            if current_group in cls._mapping_groups:
                # build a dict from the ``Key: Value`` line format.
                mapping = {}
                for line in group_buffer:
                    key, sep, value = line.partition(':')
                    if not sep:
                        logging.warning(
                            f'skipping malformed line in [{current_group}]:'
                            f' {line!r}',
                        )
                        continue
                    mapping[key.strip()] = value.strip()
                group_buffer = mapping

            groups[current_group] = group_buffer
            group_buffer = []

        for line in lines:
            # some (presumably manually edited) beatmaps have whitespace at the
            # beginning or end of lines
            line = line.strip()
            if not line or line.startswith('//'):
                # filter out empty lines and comments
                continue

            if line[0] == '[' and line[-1] == ']':
                commit_group()
                current_group = line[1:-1]
            else:
                group_buffer.append(line)

        # commit the final group
        commit_group()
        return groups

    @staticmethod
    def _parse_lines(parse, lines, kind):
        """Parse each line of a list section, skipping malformed lines.

        Parameters
        ----------
        parse : callable[str, any]
            The function to parse a single line.
        lines : list[str]
            The lines of the section.
        kind : str
            The name of the elements for warning messages.

        Returns
        -------
        parsed : list[any]
            The successfully parsed elements.
        """
        out = []
        for line in lines:
            try:
                out.append(parse(line))
            except ValueError as e:
                logging.warning(f'skipping malformed {kind} {line!r}: {e}')
        return out

    @classmethod
    def parse(cls, data):
        """Parse a ``Beatmap`` from text in the ``.osu`` format.

        Parameters
        ----------
        data : str
            The data to parse.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        ValueError
            Raised when the data cannot be parsed in the ``.osu`` format.

        Notes
        -----
        Malformed timing points and hit objects are logged and skipped.
        """
        data = data.lstrip()
        lines = iter(data.splitlines())
        line = next(lines, '').strip()
        match = cls._version_regex.match(line)
        if match is None:
            raise ValueError(f'missing osu file format specifier in: {line!r}')

        format_version = int(match.group(1))
        groups = cls._find_groups(lines)

        # an inherited timing point before the first uninherited one has no
        # parent
        parent = None

        def parse_timing_point(line):
            nonlocal parent

            timing_point = TimingPoint.parse(line, parent)
            if timing_point.uninherited:
                # we have a new parent node, pass that along to the new
                # timing points
                parent = timing_point
            return timing_point

        timing_points = cls._parse_lines(
            parse_timing_point,
            groups.get('TimingPoints', []),
            'timing point',
        )
        hit_objects = cls._parse_lines(
            HitObject.parse,
            groups.get('HitObjects', []),
            'hit object',
        )

        title = _get_as_str(groups, 'Metadata', 'Title', '')
        artist = _get_as_str(groups, 'Metadata', 'Artist', '')
        od = _get_as_float(groups, 'Difficulty', 'OverallDifficulty', 5.0)

        return cls(
            format_version=format_version,
            mode=GameMode(_get_as_int(groups, 'General', 'Mode', 0)),
            title=title,
            title_unicode=_get_as_str(
                groups,
                'Metadata',
                'TitleUnicode',
                title,
            ),
            artist=artist,
            artist_unicode=_get_as_str(
                groups,
                'Metadata',
                'ArtistUnicode',
                artist,
            ),
            creator=_get_as_str(groups, 'Metadata', 'Creator', ''),
            version=_get_as_str(groups, 'Metadata', 'Version', ''),
            hp_drain_rate=_get_as_float(
                groups,
                'Difficulty',
                'HPDrainRate',
                5.0,
            ),
            circle_size=_get_as_float(groups, 'Difficulty', 'CircleSize', 5.0),
            overall_difficulty=od,
            approach_rate=_get_as_float(
                groups,
                'Difficulty',
                'ApproachRate',
                # old maps didn't have an AR so the OD is used as a default
                default=od,
            ),
            slider_multiplier=_get_as_float(
                groups,
                'Difficulty',
                'SliderMultiplier',
                default=1.4,  # taken from wiki
            ),
            slider_tick_rate=_get_as_float(
                groups,
                'Difficulty',
                'SliderTickRate',
                default=1.0,  # taken from wiki
            ),
            timing_points=timing_points,
            hit_objects=hit_objects,
        )
