import pytest

from extbasics.meta import (
    are_same,
    if_all,
    if_any,
    if_constant,
    is_any,
    tuple_for_each,
)


def test_if_all():
    assert if_all(True, True) is True
    assert if_all(True, True, False) is False
    assert if_all() is True


def test_if_any():
    assert if_any(True, True) is True
    assert if_any(False, False) is False
    assert if_any(True, False, True) is True
    assert if_any() is False


def test_is_one_of():
    assert is_any(int, float, float, int)
    assert is_any(int, float, int, float)
    assert not is_any(int, float, float)
    assert not is_any(int)


def test_is_any_none_type():
    assert is_any(type(None), int, type(None))


def test_are_same():
    assert are_same(int, int, int)
    assert not are_same(int, int, float)
    assert are_same(int)


def test_if_constant():
    assert if_constant(True, "first", "second") == "first"
    assert if_constant(False, "first", "second") == "second"


def test_tuple_for_each():
    result = []
    tuple_for_each((1, 2, 3), result.append)
    assert result == [1, 2, 3]


def test_tuple_for_each_returns_functor_state():
    class Summer:
        def __init__(self):
            self.total = 0

        def __call__(self, x):
            self.total += x

    returned = tuple_for_each((1, 2, 3), Summer())
    assert returned.total == 6


def test_tuple_for_each_requires_tuple():
    with pytest.raises(TypeError):
        tuple_for_each([1, 2, 3], print)