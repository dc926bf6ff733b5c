from collections import namedtuple
import numpy as np


class Position(namedtuple('Position', 'x y')):
    """A position on the osu! screen.

    Parameters
    ----------
    x : int or float
        The x coordinate in the range.
    y : int or float
        The y coordinate in the range.

    Notes
    -----
    The visible region of the osu! standard playfield is [0, 512] by [0, 384].
    Positions are also used as plain 2d vectors once they have been scaled
    for difficulty calculation, in which case they may fall anywhere.
    """
    x_max = 512
    y_max = 384

    def __eq__(self, other):
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__

    def __sub__(self, other):
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return type(self)(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    @property
    def length(self):
        """The euclidean length of this position treated as a vector.
        """
        return np.sqrt(self.x ** 2 + self.y ** 2)


#: The center of the osu! standard playfield.
playfield_center = Position(Position.x_max / 2, Position.y_max / 2)


def distance(start, end):
    return (start - end).length
