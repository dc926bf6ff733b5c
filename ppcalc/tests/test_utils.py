import pytest

from ppcalc.utils import clamp, lazyval, no_default


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_lazyval():
    calls = []

    class C:
        @lazyval
        def value(self):
            calls.append(None)
            return 1

    ob = C()
    assert ob.value == 1
    assert ob.value == 1
    assert len(calls) == 1

    ob.value = 2
    assert ob.value == 2
    assert len(calls) == 1


def test_no_default():
    with pytest.raises(TypeError):
        no_default()
