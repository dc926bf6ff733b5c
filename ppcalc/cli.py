import click

from .mod import Mod


class ModsParamType(click.ParamType):
    """A click parameter for mod strings like ``HDDT``.

    The value is converted to the mod mask.
    """
    name = 'mods'

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value

        try:
            return Mod.parse(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


MODS = ModsParamType()


def format_mods(mods):
    """Format a mod mask for display.

    Parameters
    ----------
    mods : int
        The mod mask.

    Returns
    -------
    cs : str
        ``'+HDDT'`` style mods, or ``'nomod'``.
    """
    cs = Mod.serialize(mods)
    if not cs:
        return 'nomod'
    return f'+{cs}'
