import pytest

from codedrills.intset import IntSet


def make(*values):
    s = IntSet()
    for v in values:
        s.add(v)
    return s


def test_string_form_is_sorted():
    x = make(1, 144, 9)
    assert str(x) == "{1 9 144}"
    y = make(9, 42)
    assert str(y) == "{9 42}"


def test_union_with():
    x = make(1, 144, 9)
    y = make(9, 42)
    x.union_with(y)
    assert str(x) == "{1 9 42 144}"
    assert str(y) == "{9 42}"


def test_has():
    x = make(1, 144, 9, 42)
    assert x.has(9) is True
    assert x.has(123) is False


def test_empty_set():
    s = IntSet()
    assert str(s) == "{}"
    assert len(s) == 0
    assert not s.has(0)


def test_negative_is_never_a_member():
    s = make(0, 1, 63)
    assert s.has(-1) is False
    assert -1 not in s


def test_add_negative_raises():
    s = IntSet()
    with pytest.raises(ValueError):
        s.add(-5)


def test_iteration_and_length_match_added_values():
    values = [300, 0, 64, 63, 5, 65, 1000]
    s = IntSet(values)
    assert list(s) == sorted(values)
    assert len(s) == len(values)
    assert all(v in s for v in values)


def test_adding_twice_keeps_one_member():
    s = make(7, 7, 7)
    assert list(s) == [7]


def test_union_contains_both_operands():
    a = IntSet([1, 2, 200])
    b = IntSet([2, 3, 64])
    a.union_with(b)
    assert set(a) == {1, 2, 200} | {2, 3, 64}


def test_equality():
    assert IntSet([3, 1]) == make(1, 3)
    assert not (IntSet([3]) == IntSet([4]))