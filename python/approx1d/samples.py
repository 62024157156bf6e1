"""Sorted container of samples of a one dimensional function."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Self

import numpy as np
import numpy.typing as npt

from approx1d._common import almost_equal, locate, sort_samples

SampleAlteredCallback = Callable[["SampleList", float], None]
"""Callback invoked with the sample list and the abscissa which was altered."""


class SampleList(MutableMapping[float, float]):
    """Samples :math:`(t, x(t))` kept sorted by their abscissa.

    The list can be used as a mapping from ``t`` to ``x``, where keys are
    compared up to the default relative accuracy. Indices used by
    :meth:`get_t`, :meth:`get_x` and :meth:`locate` always refer to the
    samples sorted by ascending ``t``.

    Every change to the samples is reported synchronously to all callbacks
    registered with :meth:`subscribe`, before the mutating call returns.

    Parameters
    ----------
    t : array_like or Mapping of float to float, optional
        Abscissae of the samples, or a mapping of abscissae to values. If not
        given, the list starts empty.
    x : array_like, optional
        Values of the samples. Must be given if and only if ``t`` is an array,
        and must have the same length.
    """

    _t: npt.NDArray[np.float64]
    _x: npt.NDArray[np.float64]
    _counts: npt.NDArray[np.uint64]
    _observers: list[SampleAlteredCallback]
    _version: int

    def __init__(
        self,
        t: npt.ArrayLike | Mapping[float, float] | None = None,
        x: npt.ArrayLike | None = None,
    ) -> None:
        if isinstance(t, Mapping):
            if x is not None:
                raise ValueError("Values can not be given when samples are a mapping.")
            keys = np.fromiter(t.keys(), np.float64, len(t))
            values = np.fromiter(t.values(), np.float64, len(t))
            self._t, self._x = sort_samples(keys, values)
        elif t is None:
            if x is not None:
                raise ValueError("Values were given without abscissae.")
            self._t = np.empty(0, np.float64)
            self._x = np.empty(0, np.float64)
        else:
            if x is None:
                raise ValueError("Abscissae were given without values.")
            self._t, self._x = sort_samples(t, x)

        self._counts = np.ones(self._t.shape[0], np.uint64)
        self._observers = []
        self._version = 0

    def __repr__(self) -> str:
        """Return the representation of the samples."""
        return f"SampleList({self._t.tolist()!r}, {self._x.tolist()!r})"

    # Change notification

    def subscribe(self, callback: SampleAlteredCallback) -> None:
        """Register a callback to be called whenever the samples change."""
        self._observers.append(callback)

    def unsubscribe(self, callback: SampleAlteredCallback) -> None:
        """Remove a previously registered callback."""
        self._observers.remove(callback)

    @property
    def version(self) -> int:
        """Number of changes made to the samples since creation."""
        return self._version

    def _altered(self, t: float) -> None:
        self._version += 1
        for callback in tuple(self._observers):
            callback(self, t)

    # Queries

    def __len__(self) -> int:
        """Return the number of samples."""
        return int(self._t.shape[0])

    @property
    def count(self) -> int:
        """Number of samples."""
        return int(self._t.shape[0])

    @property
    def t(self) -> npt.NDArray[np.float64]:
        """Read-only view of the sorted abscissae."""
        v = self._t.view()
        v.flags.writeable = False
        return v

    @property
    def x(self) -> npt.NDArray[np.float64]:
        """Read-only view of the values, ordered the same as :attr:`t`."""
        v = self._x.view()
        v.flags.writeable = False
        return v

    @property
    def min_t(self) -> float:
        """Smallest abscissa."""
        if self.count == 0:
            raise RuntimeError("The sample list is empty.")
        return float(self._t[0])

    @property
    def max_t(self) -> float:
        """Largest abscissa."""
        if self.count == 0:
            raise RuntimeError("The sample list is empty.")
        return float(self._t[-1])

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.count:
            raise IndexError(
                f"Sample index {index} is out of range for {self.count} samples."
            )

    def get_t(self, index: int) -> float:
        """Return abscissa of the sample with the given index."""
        self._check_index(index)
        return float(self._t[index])

    def get_x(self, index: int) -> float:
        """Return value of the sample with the given index."""
        self._check_index(index)
        return float(self._x[index])

    def locate(self, t: float) -> int:
        """Find the sample with the largest abscissa not greater than ``t``.

        Parameters
        ----------
        t : float
            Position to search for.

        Returns
        -------
        int
            Index of the sample. If ``t`` is before all samples, this is 0, if it is
            after all of them, it is the index of the last sample.
        """
        return locate(self._t, t)

    def locate_near(self, t: float, near_index: int) -> int:
        """Find the same index as :meth:`locate`, starting the search at a hint.

        The search first hunts away from ``near_index`` with doubling steps until
        ``t`` is bracketed, then bisects the bracket. This is faster than
        :meth:`locate` when consecutive queries are close together.

        Parameters
        ----------
        t : float
            Position to search for.
        near_index : int
            Index of a sample expected to be close to ``t``. If it is not a valid
            index, the search is the same as :meth:`locate`.

        Returns
        -------
        int
            Index of the sample with the largest abscissa not greater than ``t``.
        """
        n = self.count
        if near_index < 0 or near_index >= n:
            return self.locate(t)

        lower = near_index
        upper: int
        step = 1
        if t >= self._t[lower]:
            # Hunt up
            if lower == n - 1:
                return lower
            upper = lower + 1
            while t >= self._t[upper]:
                lower = upper
                step <<= 1
                upper = lower + step
                if upper > n - 1:
                    upper = n
                    break
        else:
            # Hunt down
            if lower == 0:
                return 0
            upper = lower
            lower -= 1
            while t < self._t[lower]:
                upper = lower
                step <<= 1
                if step > upper:
                    lower = -1
                    break
                lower = upper - step

        while upper - lower > 1:
            mid = (upper + lower) >> 1
            if t >= self._t[mid]:
                lower = mid
            else:
                upper = mid

        return max(lower, 0)

    def index_of_t(self, t: float) -> int:
        """Return index of the sample at ``t``, or -1 if there is none."""
        if self.count == 0:
            return -1
        index = self.locate(t)
        if almost_equal(float(self._t[index]), t):
            return index
        if index + 1 < self.count and almost_equal(float(self._t[index + 1]), t):
            return index + 1
        return -1

    def contains_t(self, t: float) -> bool:
        """Check if there is a sample at ``t``."""
        return self.index_of_t(t) != -1

    def contains_x(self, x: float) -> bool:
        """Check if any of the samples has exactly the value ``x``."""
        return bool(np.any(self._x == x))

    def __contains__(self, t: object) -> bool:
        """Check if there is a sample at ``t``."""
        if not isinstance(t, (int, float, np.floating, np.integer)):
            return False
        return self.contains_t(float(t))

    def __getitem__(self, t: float) -> float:
        """Return value of the sample at ``t``."""
        index = self.index_of_t(float(t))
        if index < 0:
            raise KeyError(t)
        return float(self._x[index])

    def __iter__(self) -> Iterator[float]:
        """Iterate over abscissae in ascending order."""
        return iter(self._t.tolist())

    # Mutation

    def _insert(self, index: int, t: float, x: float) -> None:
        self._t = np.insert(self._t, index, t)
        self._x = np.insert(self._x, index, x)
        self._counts = np.insert(self._counts, index, np.uint64(1))
        self._altered(t)

    def _insertion_index(self, t: float) -> int:
        return int(np.searchsorted(self._t, t, side="right"))

    def add(self, t: float, x: float) -> None:
        """Add a sample, averaging it with any existing sample at the same ``t``.

        If a sample already exists at ``t``, its value becomes the mean of all the
        values which were added at that position. Otherwise, a new sample is
        inserted so that the samples remain sorted.

        Parameters
        ----------
        t : float
            Abscissa of the sample.
        x : float
            Value of the sample.
        """
        t = float(t)
        x = float(x)
        index = self.index_of_t(t)
        if index < 0:
            self._insert(self._insertion_index(t), t, x)
            return

        cnt_before = float(self._counts[index])
        self._counts[index] += np.uint64(1)
        self._x[index] = (self._x[index] * cnt_before + x) / (cnt_before + 1)
        self._altered(float(self._t[index]))

    def __setitem__(self, t: float, x: float) -> None:
        """Set the value of the sample at ``t``, inserting it if needed."""
        t = float(t)
        x = float(x)
        index = self.index_of_t(t)
        if index < 0:
            self._insert(self._insertion_index(t), t, x)
            return

        self._x[index] = x
        self._counts[index] = 1
        self._altered(float(self._t[index]))

    def remove_at(self, index: int) -> None:
        """Remove the sample with the given index."""
        self._check_index(index)
        t = float(self._t[index])
        self._t = np.delete(self._t, index)
        self._x = np.delete(self._x, index)
        self._counts = np.delete(self._counts, index)
        self._altered(t)

    def remove(self, t: float) -> None:
        """Remove the sample at ``t`` if there is one."""
        index = self.index_of_t(float(t))
        if index >= 0:
            self.remove_at(index)

    def __delitem__(self, t: float) -> None:
        """Remove the sample at ``t``."""
        index = self.index_of_t(float(t))
        if index < 0:
            raise KeyError(t)
        self.remove_at(index)

    def clear(self) -> None:
        """Remove all samples."""
        self._t = np.empty(0, np.float64)
        self._x = np.empty(0, np.float64)
        self._counts = np.empty(0, np.uint64)
        self._altered(np.nan)

    def copy(self) -> Self:
        """Return an independent copy of the samples without any subscribers."""
        other = type(self)()
        other._t = np.array(self._t)
        other._x = np.array(self._x)
        other._counts = np.array(self._counts)
        return other
