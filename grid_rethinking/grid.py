#!/usr/bin/env python3
# =============================================================================
#     File: grid.py
#  Created: 2026-10-19 10:11
#   Author: Bernie Roesler
#
"""
  Description: Discretization of a parameter space into a grid of points.
"""
# =============================================================================

import itertools
import numbers
import warnings

import numpy as np
import pandas as pd

from . import config
from .exceptions import InvalidGridSpec


def _readonly(a):
    a = np.array(a, dtype=float)
    a.flags.writeable = False
    return a


class GridAxis:
    """The ordered coordinates of a single parameter.

    Parameters
    ----------
    values : (N,) array_like
        Strictly increasing, finite coordinates with N >= 2.
    name : str, optional
        The name of the parameter.

    Raises
    ------
    InvalidGridSpec
        If the values are not a strictly increasing 1-D sequence of at least
        2 finite numbers.
    """

    def __init__(self, values, name=None):
        try:
            values = np.asarray(values, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidGridSpec(f"axis '{name}' is not numeric: {e}")
        if values.ndim != 1:
            raise InvalidGridSpec(
                f"axis '{name}' must be 1-D, got shape {values.shape}"
            )
        if values.size < 2:
            raise InvalidGridSpec(
                f"axis '{name}' needs at least 2 points, got {values.size}"
            )
        if not np.all(np.isfinite(values)):
            raise InvalidGridSpec(f"axis '{name}' has non-finite values")
        if np.any(np.diff(values) <= 0):
            raise InvalidGridSpec(f"axis '{name}' is not strictly increasing")
        self.values = _readonly(values)
        self.name = name

    @classmethod
    def linspace(cls, start, stop, num, name=None):
        """Return `num` evenly spaced points over ``[start, stop]``.

        Both endpoints are included, so the spacing is
        ``(stop - start) / (num - 1)``.
        """
        if (isinstance(num, bool)
                or not isinstance(num, numbers.Integral)
                or num < 2):
            raise InvalidGridSpec(
                f"axis '{name}' count must be an integer >= 2, got {num!r}"
            )
        try:
            finite = np.isfinite(start) and np.isfinite(stop)
        except TypeError:
            finite = False
        if not finite:
            raise InvalidGridSpec(f"axis '{name}' bounds must be finite reals")
        if not start < stop:
            raise InvalidGridSpec(
                f"axis '{name}' requires min < max, got ({start}, {stop})"
            )
        return cls(np.linspace(start, stop, num), name=name)

    @property
    def spacing(self):
        """The distance between consecutive coordinates."""
        return np.diff(self.values)

    def __len__(self):
        return self.values.size

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, i):
        return self.values[i]

    def __eq__(self, other):
        if not isinstance(other, GridAxis):
            return NotImplemented
        return (self.name == other.name
                and np.array_equal(self.values, other.values))

    def __hash__(self):
        return hash((self.name, self.values.tobytes()))

    def __repr__(self):
        return (f"<GridAxis '{self.name}': {len(self)} points"
                f" in [{self.values[0]:g}, {self.values[-1]:g}]>")


def _make_axis(spec, name):
    """Build a `GridAxis` from an axis, a (min, max, count) tuple, or a list
    of explicit breakpoints."""
    if isinstance(spec, GridAxis):
        return GridAxis(spec.values, name=name)
    if isinstance(spec, tuple):
        if len(spec) != 3:
            raise InvalidGridSpec(
                f"axis '{name}' range must be (min, max, count), got {spec!r}"
            )
        return GridAxis.linspace(*spec, name=name)
    return GridAxis(spec, name=name)


class GridSpace:
    """The Cartesian product of one or more `GridAxis`.

    Points are ordered row-major, *i.e.* the last axis varies fastest, which
    matches both `itertools.product` and ``np.meshgrid(..., indexing='ij')``.
    Points are never stored as a dense N-D structure; the `i`-th point is
    computed from its flat index.

    Parameters
    ----------
    *axes : GridAxis, tuple, or array_like
        Unnamed axis specifications. A tuple is read as ``(min, max, count)``,
        any other sequence as explicit breakpoints.
    max_size : int, optional
        Maximum number of grid points. Defaults to `config.MAX_GRID_SIZE`.
    **named_axes : GridAxis, tuple, or array_like
        Named axis specifications, appended after the unnamed ones.

    Examples
    --------
    >>> space = GridSpace(mu=(140, 160, 200), sigma=(4, 9, 200))
    >>> space.shape
    === (200, 200)
    >>> space[1]
    === array([140.        ,   4.02512563])
    """

    def __init__(self, *axes, max_size=None, **named_axes):
        specs = [(getattr(a, 'name', None) or f"x{i}", a)
                 for i, a in enumerate(axes)]
        specs += list(named_axes.items())
        if not specs:
            raise InvalidGridSpec('at least one axis is required')

        self.axes = tuple(_make_axis(spec, name) for name, spec in specs)

        names = self.names
        if len(set(names)) != len(names):
            raise InvalidGridSpec(f"duplicate axis names in {names}")

        if max_size is None:
            max_size = config.MAX_GRID_SIZE

        size = int(np.prod([len(a) for a in self.axes], dtype=object))
        if size > max_size:
            raise InvalidGridSpec(
                f"grid of shape {self.shape} has {size} points,"
                f" more than the maximum of {max_size}"
            )
        if size > config.WARN_GRID_SIZE:
            warnings.warn(
                f"grid of shape {self.shape} has {size} points;"
                " evaluating the posterior may be slow.",
                RuntimeWarning,
            )

    @property
    def names(self):
        return tuple(a.name for a in self.axes)

    @property
    def shape(self):
        return tuple(len(a) for a in self.axes)

    @property
    def ndim(self):
        return len(self.axes)

    @property
    def size(self):
        return int(np.prod(self.shape))

    def __len__(self):
        return self.size

    def __getitem__(self, i):
        """Return the grid point at flat index `i` as a (D,) array."""
        if not isinstance(i, numbers.Integral):
            raise TypeError(f"grid index must be an integer, got {i!r}")
        if i < 0:
            i += self.size
        if not 0 <= i < self.size:
            raise IndexError(f"index {i} out of range for grid of {self.size}")
        idx = np.unravel_index(i, self.shape)
        return np.array([a.values[j] for a, j in zip(self.axes, idx)])

    def __iter__(self):
        for pt in itertools.product(*(a.values for a in self.axes)):
            yield np.array(pt)

    def __eq__(self, other):
        if not isinstance(other, GridSpace):
            return NotImplemented
        return self.axes == other.axes

    def __hash__(self):
        return hash(self.axes)

    def __repr__(self):
        axes = ', '.join(f"{a.name}={len(a)}" for a in self.axes)
        return f"<GridSpace ({axes}): {self.size} points>"

    def axis(self, key):
        """Return an axis by name or position."""
        if isinstance(key, numbers.Integral):
            return self.axes[key]
        try:
            return self.axes[self.names.index(key)]
        except ValueError:
            raise KeyError(f"no axis named '{key}' in {self.names}")

    def take(self, indices):
        """Return the points at the given flat indices as an (M, D) array."""
        indices = np.asarray(indices, dtype=np.intp)
        idx = np.unravel_index(indices, self.shape)
        cols = [a.values[j] for a, j in zip(self.axes, idx)]
        return np.stack(cols, axis=-1)

    @property
    def points(self):
        """The (M, D) array of every grid point, in flat index order."""
        mesh = np.meshgrid(*(a.values for a in self.axes), indexing='ij')
        return _readonly(np.stack([m.ravel() for m in mesh], axis=-1))

    def index_of(self, point):
        """Return the flat index of a point lying exactly on the grid."""
        point = np.asarray(point, dtype=float)
        if point.shape != (self.ndim,):
            raise ValueError(
                f"point must have shape ({self.ndim},), got {point.shape}"
            )
        idx = []
        for a, x in zip(self.axes, point):
            j = np.searchsorted(a.values, x)
            if j == len(a) or a.values[j] != x:
                raise KeyError(f"{x} is not a coordinate of axis '{a.name}'")
            idx.append(j)
        return int(np.ravel_multi_index(idx, self.shape))

    def to_frame(self):
        """Return a DataFrame of the grid points, one column per axis."""
        return pd.DataFrame(self.points, columns=list(self.names))


def expand_grid(**kwargs):
    """Return a DataFrame of points, where the columns are kwargs.

    Notes
    -----
    Compare to `numpy.meshgrid`:
        xx, yy = np.meshgrid(mu_list, sigma_list)  # == (..., indexing='xy')
    `expand_grid` returns the *transpose* of meshgrid's default xy orientation.
    `expand_grid` matches:
        xx, yy = np.meshgrid(mu_list, sigma_list, indexing='ij')
    and has the same row order as `GridSpace` on the same axes.

    See Also
    --------
    numpy.meshgrid, GridSpace.to_frame
    """
    return pd.DataFrame(itertools.product(*kwargs.values()),
                        columns=list(kwargs.keys()))

# =============================================================================
# =============================================================================
