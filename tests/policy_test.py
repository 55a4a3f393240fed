import pytest

from dynarray import compute_growth, should_shrink, compute_shrink
from dynarray import _policy


def test_growth_not_needed():
    assert compute_growth(10, 10) == 10
    assert compute_growth(10, 1) == 10


def test_growth_doubles():
    assert compute_growth(10, 11) == 20
    assert compute_growth(1, 2) == 2


def test_growth_to_required_minimum():
    assert compute_growth(4, 100) == 100


def test_growth_from_zero_capacity():
    assert compute_growth(0, 1) == 10
    assert compute_growth(0, 10) == 10
    assert compute_growth(0, 25) == 25


def test_shrink_threshold_is_strict():
    assert should_shrink(4, 20)
    assert not should_shrink(5, 20)
    assert should_shrink(1, 8)
    assert not should_shrink(2, 8)


def test_no_shrink_when_empty():
    assert not should_shrink(0, 100)


def test_no_shrink_for_small_capacities():
    assert not should_shrink(1, 3)
    assert not should_shrink(1, 0)


def test_shrink_halves():
    assert compute_shrink(20) == 10
    assert compute_shrink(7) == 3


def test_default_capacity_from_environment(monkeypatch):
    monkeypatch.setenv('DYNARRAY_DEFAULT_CAPACITY', '16')
    assert _policy._capacity_from_env('DYNARRAY_DEFAULT_CAPACITY', 10) == 16


def test_default_capacity_without_environment(monkeypatch):
    monkeypatch.delenv('DYNARRAY_DEFAULT_CAPACITY', raising=False)
    assert _policy._capacity_from_env('DYNARRAY_DEFAULT_CAPACITY', 10) == 10


@pytest.mark.parametrize('value', ['-1', 'ten', '1.5'])
def test_invalid_default_capacity_from_environment(monkeypatch, value):
    monkeypatch.setenv('DYNARRAY_DEFAULT_CAPACITY', value)
    with pytest.raises(ValueError):
        _policy._capacity_from_env('DYNARRAY_DEFAULT_CAPACITY', 10)


def test_changed_default_capacity_is_used_when_growing_from_zero(monkeypatch):
    monkeypatch.setattr(_policy, 'DEFAULT_CAPACITY', 4)
    assert compute_growth(0, 1) == 4


def test_no_growth_from_zero_when_nothing_required():
    assert compute_growth(0, 0) == 0
