"""Tests for the sorted sample list."""

import numpy as np
import pytest
from approx1d import SampleList


def test_construction_sorts():
    """Check samples are sorted by abscissa, with values carried along."""
    sl = SampleList([3.0, 1.0, 2.0], [30.0, 10.0, 20.0])
    assert sl.t.tolist() == [1.0, 2.0, 3.0]
    assert sl.x.tolist() == [10.0, 20.0, 30.0]
    assert sl.count == 3
    assert len(sl) == 3


def test_construction_from_mapping():
    """Check a mapping of abscissae to values is converted and sorted."""
    sl = SampleList({2.0: 4.0, 0.0: 0.0, 1.0: 1.0})
    assert sl.t.tolist() == [0.0, 1.0, 2.0]
    assert sl.x.tolist() == [0.0, 1.0, 4.0]


def test_construction_stable():
    """Check samples with equal abscissae keep the order they were given in."""
    sl = SampleList([1.0, 0.0, 1.0], [5.0, 0.0, 7.0])
    assert sl.t.tolist() == [0.0, 1.0, 1.0]
    assert sl.x.tolist() == [0.0, 5.0, 7.0]


def test_construction_mismatched():
    """Check different lengths of abscissae and values are rejected."""
    with pytest.raises(ValueError):
        SampleList([0.0, 1.0, 2.0], [0.0, 1.0])
    with pytest.raises(ValueError):
        SampleList([0.0, 1.0])


def test_views_read_only():
    """Check the arrays returned can not be used to break the ordering."""
    sl = SampleList([0.0, 1.0], [0.0, 1.0])
    with pytest.raises(ValueError):
        sl.t[0] = 5.0


@pytest.mark.parametrize(
    "t,expected", ((2.0, 1), (3.0, 1), (0.0, 0), (-1.0, 0), (4.0, 2), (5.0, 2))
)
def test_locate(t: float, expected: int):
    """Check the largest abscissa not greater than the position is found."""
    sl = SampleList([0.0, 2.0, 4.0], [1.0, 2.0, 3.0])
    assert sl.locate(t) == expected


@pytest.mark.parametrize("n", (1, 2, 7, 50))
def test_locate_near(n: int):
    """Check hunting from any hint gives the same result as bisection."""
    np.random.seed(1512)
    sl = SampleList(np.sort(np.random.random_sample(n)), np.zeros(n))
    for t in np.linspace(-0.2, 1.2, 37):
        expected = sl.locate(t)
        for hint in range(-1, n + 1):
            assert sl.locate_near(t, hint) == expected


def test_accessors_out_of_range():
    """Check index accessors reject invalid indices."""
    sl = SampleList([0.0, 1.0], [2.0, 3.0])
    assert sl.get_t(1) == 1.0
    assert sl.get_x(0) == 2.0
    with pytest.raises(IndexError):
        sl.get_t(2)
    with pytest.raises(IndexError):
        sl.get_x(-1)
    with pytest.raises(IndexError):
        sl.remove_at(2)


def test_empty():
    """Check queries which need samples fail on an empty list."""
    sl = SampleList()
    assert len(sl) == 0
    assert 0.0 not in sl
    with pytest.raises(RuntimeError):
        _ = sl.min_t
    with pytest.raises(RuntimeError):
        _ = sl.max_t
    with pytest.raises(RuntimeError):
        sl.locate(0.0)


def test_mapping_interface():
    """Check the list behaves like a mapping of abscissae to values."""
    sl = SampleList([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    assert sl[1.0] == 1.0
    assert 1.0 + 4e-16 in sl
    assert 1.5 not in sl
    assert "text" not in sl
    assert list(sl) == [0.0, 1.0, 2.0]
    assert dict(sl) == {0.0: 0.0, 1.0: 1.0, 2.0: 4.0}
    with pytest.raises(KeyError):
        _ = sl[1.5]
    with pytest.raises(KeyError):
        del sl[1.5]

    del sl[1.0]
    assert list(sl) == [0.0, 2.0]
    assert sl.contains_x(4.0)
    assert not sl.contains_x(1.0)


def test_add_averages():
    """Check adding at an existing abscissa averages all values added there."""
    sl = SampleList([0.0, 1.0], [0.0, 1.0])
    sl.add(1.0, 3.0)
    assert sl[1.0] == pytest.approx(2.0)
    sl.add(1.0, 5.0)
    assert sl[1.0] == pytest.approx(3.0)
    assert len(sl) == 2

    sl.add(0.5, 7.0)
    assert sl.t.tolist() == [0.0, 0.5, 1.0]
    assert sl.x.tolist() == pytest.approx([0.0, 7.0, 3.0])


def test_set_overwrites():
    """Check setting a value replaces the average and inserts if needed."""
    sl = SampleList([0.0, 1.0], [0.0, 1.0])
    sl.add(1.0, 3.0)
    sl[1.0] = 10.0
    assert sl[1.0] == 10.0
    sl.add(1.0, 20.0)
    assert sl[1.0] == pytest.approx(15.0)

    sl[-1.0] = 8.0
    assert sl.t.tolist() == [-1.0, 0.0, 1.0]
    assert sl.get_x(0) == 8.0


@pytest.mark.parametrize("n", (10, 100))
def test_sorted_after_mutations(n: int):
    """Check the samples stay sorted and within bounds after random mutations."""
    np.random.seed(912)
    sl = SampleList()
    for _ in range(n):
        op = np.random.randint(3)
        t = float(np.random.randint(20)) / 4
        if op == 0:
            sl.add(t, np.random.random_sample())
        elif op == 1:
            sl[t] = np.random.random_sample()
        else:
            sl.remove(t)

        if len(sl):
            assert np.all(np.diff(sl.t) >= 0)
            assert np.all(sl.min_t <= sl.t)
            assert np.all(sl.t <= sl.max_t)


def test_notifications():
    """Check every change is reported synchronously to subscribers."""
    sl = SampleList([0.0, 1.0], [0.0, 1.0])
    events: list[float] = []

    def callback(samples: SampleList, t: float) -> None:
        assert samples is sl
        events.append(t)

    sl.subscribe(callback)
    sl.add(2.0, 4.0)
    assert events == [2.0]
    sl.add(2.0, 6.0)
    sl[0.0] = 1.0
    sl.remove(1.0)
    sl.remove(1.0)  # Not there anymore, so nothing changes
    assert events == [2.0, 2.0, 0.0, 1.0]
    assert sl.version == 4

    sl.clear()
    assert len(events) == 5
    assert np.isnan(events[-1])
    assert len(sl) == 0

    sl.unsubscribe(callback)
    sl.add(1.0, 1.0)
    assert len(events) == 5
    assert sl.version == 6


def test_copy_independent():
    """Check a copy does not share samples or subscribers."""
    sl = SampleList([0.0, 1.0], [0.0, 1.0])
    events: list[float] = []
    sl.subscribe(lambda s, t: events.append(t))
    other = sl.copy()
    other.add(0.5, 2.0)
    assert len(sl) == 2
    assert len(other) == 3
    assert events == []
