from enum import IntEnum, unique


@unique
class GameMode(IntEnum):
    """The game modes a beatmap may be written for.

    Only :data:`GameMode.standard` can be scored; the other values exist so
    that beatmaps for other modes can still be parsed and rejected explicitly.
    """
    standard = 0
    taiko = 1
    catch = 2
    mania = 3
