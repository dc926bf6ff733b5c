import logging

from .utils import clamp


def accuracy(count_300, count_100, count_50, count_miss):
    """Calculate osu! standard accuracy from discrete hit counts.

    Parameters
    ----------
    count_300 : int
        The number of 300's hit.
    count_100 : int
        The number of 100's hit.
    count_50 : int
        The number of 50's hit.
    count_miss : int
        The number of misses

    Returns
    -------
    accuracy : float
        The accuracy in the range [0, 1]
    """
    total_hits = count_300 + count_100 + count_50 + count_miss
    if total_hits <= 0:
        return 0.0

    points_of_hits = count_300 * 300 + count_100 * 100 + count_50 * 50
    return clamp(points_of_hits / (total_hits * 300), 0.0, 1.0)


class Accuracy:
    """The hit counts of a play.

    Parameters
    ----------
    n300 : int, optional
        The number of 300s. If not given it is derived from the object count
        passed to :meth:`value`.
    n100 : int, optional
        The number of 100s.
    n50 : int, optional
        The number of 50s.
    nmiss : int, optional
        The number of misses.
    """
    def __init__(self, n300=None, n100=0, n50=0, nmiss=0):
        self.n300 = n300
        self.n100 = n100
        self.n50 = n50
        self.nmiss = nmiss

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.n300}x300 {self.n100}x100'
            f' {self.n50}x50 {self.nmiss}xmiss>'
        )

    def __eq__(self, other):
        if not isinstance(other, Accuracy):
            return NotImplemented
        return (
            (self.n300, self.n100, self.n50, self.nmiss) ==
            (other.n300, other.n100, other.n50, other.nmiss)
        )

    @classmethod
    def from_percent(cls, percent, nobjects, nmiss=0):
        """Round an accuracy percentage to the closest hit counts.

        Parameters
        ----------
        percent : float
            The accuracy in the range [0, 100]. Values which cannot be
            reached with the given number of misses are clamped.
        nobjects : int
            The total number of hits (n300 + n100 + n50 + nmiss).
        nmiss : int, optional
            The number of misses.

        Returns
        -------
        accuracy : Accuracy
            The hit counts with all fields set.
        """
        nmiss = min(nobjects, nmiss)
        max_300 = nobjects - nmiss

        max_percent = accuracy(max_300, 0, 0, nmiss) * 100.0
        clamped = clamp(percent, 0.0, max_percent)
        if clamped != percent:
            logging.warning(
                f'accuracy {percent}% is not reachable with {nmiss} misses,'
                f' using {clamped}%',
            )
        # the hit counts needed to lose this many points of accuracy;
        # each 100 costs 200 points and each 50 costs 250
        lost = (clamped * 0.01 - 1.0) * nobjects + nmiss

        n50 = 0
        n100 = round(-3.0 * lost * 0.5)
        if n100 > max_300:
            # accuracy is lower than all 100s, use 50s
            n100 = 0
            n50 = min(max_300, round(-6.0 * lost * 0.2))

        n300 = nobjects - n100 - n50 - nmiss
        return cls(n300, n100, n50, nmiss)

    def value(self, nobjects=None):
        """The accuracy of these hit counts.

        Parameters
        ----------
        nobjects : int, optional
            The total number of hits (n300 + n100 + n50 + nmiss). Required
            if ``n300`` was not given, otherwise it is deduced from the
            counts.

        Returns
        -------
        accuracy : float
            The accuracy in the range [0, 1].

        Raises
        ------
        ValueError
            Raised when neither ``n300`` nor ``nobjects`` are known.
        """
        n300 = self.n300
        if n300 is None:
            if nobjects is None:
                raise ValueError('either nobjects or n300 must be specified')
            n300 = nobjects - self.n100 - self.n50 - self.nmiss

        if nobjects is None:
            nobjects = n300 + self.n100 + self.n50 + self.nmiss

        if nobjects <= 0:
            return 0.0

        points_of_hits = n300 * 300 + self.n100 * 100 + self.n50 * 50
        return clamp(points_of_hits / (nobjects * 300), 0.0, 1.0)
