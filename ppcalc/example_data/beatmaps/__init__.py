from importlib.resources import as_file, files

from ppcalc import Beatmap


def example_beatmap(name):
    """Load one of the example beatmaps.

    Parameters
    ----------
    name : str
        The name of the example file to open.

    Returns
    -------
    beatmap : Beatmap
        The parsed beatmap object.
    """
    with as_file(files(__name__) / name) as path:
        return Beatmap.from_path(path)


_example_map_versions = frozenset({
    'Normal',
})


def example_map(version='Normal'):
    """Load a version of the example map.

    Parameters
    ----------
    version : str
        The version to load.

    Returns
    -------
    example_map : Beatmap
        The beatmap object.
    """
    if version not in _example_map_versions:
        raise ValueError(
            f'unknown version {version}, options: {set(_example_map_versions)}'
        )

    return example_beatmap(f'ppcalc - Example Map (tester) [{version}].osu')
