from datetime import timedelta

from hypothesis.strategies import (
    characters,
    composite,
    floats as _floats,
    integers,
    lists,
    one_of,
    sampled_from,
    text,
)

from ppcalc import (
    Beatmap,
    Circle,
    GameMode,
    Mod,
    Position,
    Slider,
    Spinner,
    TimingPoint,
)


def floats(*args, **kwargs):
    # I don't really want to deal with these edge cases right now.
    return _floats(*args, allow_nan=False, allow_infinity=False, **kwargs)


def times(max_ms=600000):
    return integers(0, max_ms).map(lambda ms: timedelta(milliseconds=ms))


@composite
def positions(draw):
    return Position(
        x=draw(integers(0, 512)),
        y=draw(integers(0, 384)),
    )


@composite
def circles(draw):
    return Circle(
        position=draw(positions()),
        time=draw(times()),
    )


@composite
def spinners(draw):
    time = draw(times())
    return Spinner(
        position=draw(positions()),
        time=time,
        end_time=time + timedelta(milliseconds=draw(integers(0, 5000))),
    )


@composite
def sliders(draw):
    return Slider(
        position=draw(positions()),
        time=draw(times()),
        repeat=draw(integers(1, 5)),
        length=draw(floats(1, 500)),
    )


def hit_objects():
    return one_of(circles(), sliders(), spinners())


@composite
def timing_points(draw):
    return [
        TimingPoint(
            offset=timedelta(),
            ms_per_beat=draw(floats(200, 1000)),
        ),
    ]


@composite
def mods(draw):
    """A mod mask built from any of the mods.
    """
    mask = 0
    for mod in draw(lists(sampled_from(list(Mod)), unique=True)):
        mask |= mod
    return mask


@composite
def beatmaps(draw, *, min_objects=0, max_objects=50):
    hit_objs = draw(lists(
        hit_objects(),
        min_size=min_objects,
        max_size=max_objects,
    ))
    hit_objs = sorted(hit_objs, key=lambda hitobj: hitobj.time)
    return Beatmap(
        format_version=draw(integers(3, 14)),
        mode=GameMode.standard,
        title=draw(text(characters(codec='ascii'))),
        title_unicode=draw(text()),
        artist=draw(text(characters(codec='ascii'))),
        artist_unicode=draw(text()),
        creator=draw(text()),
        version=draw(text()),
        hp_drain_rate=draw(floats(0, 10)),
        circle_size=draw(floats(0, 10)),
        overall_difficulty=draw(floats(0, 10)),
        approach_rate=draw(floats(0, 10)),
        slider_multiplier=draw(floats(0.4, 3.6)),
        slider_tick_rate=draw(sampled_from([0.5, 1.0, 2.0, 3.0, 4.0])),
        timing_points=draw(timing_points()),
        hit_objects=hit_objs,
    )


@composite
def hit_counts(draw, n_objects):
    """Split ``n_objects`` into 300s, 100s, 50s and misses.
    """
    n100 = draw(integers(0, n_objects))
    n50 = draw(integers(0, n_objects - n100))
    nmiss = draw(integers(0, n_objects - n100 - n50))
    return n_objects - n100 - n50 - nmiss, n100, n50, nmiss
