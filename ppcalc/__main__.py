import logging

import click

from . import Beatmap
from .cli import MODS, format_mods
from .difficulty import DEFAULT_SINGLETAP_THRESHOLD


@click.group()
@click.option(
    '--verbose/--quiet',
    help='Log the warnings raised while reading the beatmap?',
    default=True,
)
def main(verbose):
    """Compute the stars and pp of osu! standard beatmaps.
    """
    logging.basicConfig(
        format='%(levelname)s: %(message)s',
        level=logging.WARNING if verbose else logging.ERROR,
    )


def _read_beatmap(path):
    try:
        return Beatmap.from_path(path)
    except ValueError as e:
        raise click.ClickException(f'failed to read {path}: {e}')


@main.command()
@click.argument(
    'path',
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    '--mods',
    type=MODS,
    help='The mods to apply, for example HDDT.',
    default='',
)
@click.option(
    '--singletap-threshold',
    type=float,
    help='The slowest interval in milliseconds which counts as a singletap.',
    default=DEFAULT_SINGLETAP_THRESHOLD,
    show_default=True,
)
def difficulty(path, mods, singletap_threshold):
    """Print the star rating of a beatmap.
    """
    beatmap = _read_beatmap(path)
    result = beatmap.difficulty(mods, singletap_threshold=singletap_threshold)

    click.echo(f'{beatmap.display_name} {format_mods(mods)}')
    click.echo(f'{result.total:.2f} stars')
    click.echo(f'{result.aim:.2f} aim stars')
    click.echo(f'{result.speed:.2f} speed stars')
    click.echo(f'{result.singles} spacing singletaps')
    click.echo(
        f'{result.singles_threshold} notes within the singletap threshold'
        f' ({singletap_threshold:g}ms)',
    )


@main.command()
@click.argument(
    'path',
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    '--mods',
    type=MODS,
    help='The mods to apply, for example HDDT.',
    default='',
)
@click.option(
    '--accuracy',
    type=float,
    help='The accuracy percentage, cannot be used with --n100 or --n50.',
)
@click.option('--n100', type=int, help='The number of 100s.')
@click.option('--n50', type=int, help='The number of 50s.')
@click.option(
    '--misses',
    type=int,
    help='The number of misses.',
    default=0,
    show_default=True,
)
@click.option(
    '--combo',
    type=int,
    help='The combo achieved. Defaults to max combo minus the misses.',
)
@click.option(
    '--score-version',
    type=click.Choice(['1', '2']),
    help='The scoring system the play was made with.',
    default='1',
    show_default=True,
)
def pp(path, mods, accuracy, n100, n50, misses, combo, score_version):
    """Print the performance points for a play on a beatmap.
    """
    if accuracy is not None and (n100 is not None or n50 is not None):
        raise click.UsageError(
            '--accuracy cannot be combined with --n100 or --n50',
        )

    beatmap = _read_beatmap(path)
    try:
        result = beatmap.performance_points(
            mods=mods,
            combo=combo,
            accuracy=None if accuracy is None else accuracy / 100,
            count_100=n100,
            count_50=n50,
            count_miss=misses,
            score_version=int(score_version),
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f'{beatmap.display_name} {format_mods(mods)}')
    click.echo(f'{result.computed_accuracy.value() * 100:.2f}%')
    click.echo(f'{result.aim:.2f} aim pp')
    click.echo(f'{result.speed:.2f} speed pp')
    click.echo(f'{result.accuracy:.2f} acc pp')
    click.echo(f'{result.total:.2f}pp')


if __name__ == '__main__':
    main()
