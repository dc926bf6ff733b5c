class lazyval:
    """Decorator to lazily compute and cache a value.
    """
    def __init__(self, fget):
        self._fget = fget
        self._name = None

    def __set_name__(self, owner, name):
        self._name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self

        # this is a data descriptor so the instance dict is not checked first
        try:
            return vars(instance)[self._name]
        except KeyError:
            pass

        value = self._fget(instance)
        vars(instance)[self._name] = value
        return value

    def __set__(self, instance, value):
        vars(instance)[self._name] = value


class no_default:
    """Sentinel type; this should not be instantiated.

    This type is used so functions can tell the difference between no argument
    passed and an explicit value passed even if ``None`` is a valid value.
    """
    def __new__(cls):
        raise TypeError('cannot create instances of sentinel type')


def clamp(value, lower, upper):
    """Clamp ``value`` into the closed range ``[lower, upper]``.

    Parameters
    ----------
    value : float
        The value to clamp.
    lower : float
        The smallest value to return.
    upper : float
        The largest value to return.

    Returns
    -------
    clamped : float
        ``value`` moved to the nearest bound if it was outside of the range.
    """
    return max(lower, min(upper, value))
