#!/usr/bin/env python3
# =============================================================================
#     File: sampling.py
#  Created: 2026-10-19 11:36
#   Author: Bernie Roesler
#
"""
  Description: Draw samples from a posterior distribution on a grid.
"""
# =============================================================================

import numbers

import numpy as np
import pandas as pd

from . import config
from .exceptions import (
    DimensionMismatch,
    EmptyPMF,
    InvalidPMF,
    InvalidSampleCount,
)
from .grid import _readonly


class SampleSet:
    """A fixed-size collection of grid points drawn with replacement.

    Duplicate points are expected: they encode posterior mass.

    Attributes
    ----------
    indices : (N,) ndarray of int
        Flat grid index of each draw.
    values : (N, D) ndarray
        The drawn grid points, read-only.
    names : tuple of str
        The parameter name of each column of `values`.
    """

    def __init__(self, values, names, indices=None):
        values = np.asarray(values, dtype=float)
        if values.ndim == 1:
            values = values[:, np.newaxis]
        names = tuple(names)
        if values.ndim != 2 or values.shape[1] != len(names):
            raise DimensionMismatch(
                f"values of shape {values.shape} do not match names {names}"
            )
        self.values = _readonly(values)
        self.names = names
        if indices is not None:
            indices = np.array(indices, dtype=np.intp)
            indices.flags.writeable = False
        self.indices = indices

    def __len__(self):
        return self.values.shape[0]

    def __getitem__(self, key):
        """Return the (N,) draws of one parameter, by name or position."""
        if isinstance(key, numbers.Integral):
            return self.values[:, key]
        try:
            return self.values[:, self.names.index(key)]
        except ValueError:
            raise KeyError(f"no parameter named '{key}' in {self.names}")

    def __eq__(self, other):
        if not isinstance(other, SampleSet):
            return NotImplemented
        return (self.names == other.names
                and np.array_equal(self.values, other.values))

    __hash__ = None

    def __repr__(self):
        return f"<SampleSet: {len(self)} draws of {self.names}>"

    def to_frame(self):
        """Return the draws as a DataFrame, one column per parameter."""
        df = pd.DataFrame(self.values, columns=list(self.names))
        df.index.name = 'draw'
        return df


def _check_pmf(pmf, size, rtol=None):
    """Validate a PMF for sampling."""
    if rtol is None:
        rtol = config.PMF_RTOL
    pmf = np.asarray(pmf, dtype=float).reshape(-1)
    if pmf.size == 0:
        raise EmptyPMF('cannot sample from an empty PMF')
    if pmf.size != size:
        raise DimensionMismatch(
            f"PMF has {pmf.size} entries for a grid of {size} points"
        )
    if not np.all(np.isfinite(pmf)) or np.any(pmf < 0):
        raise InvalidPMF('PMF entries must be finite and non-negative')
    total = pmf.sum()
    if abs(total - 1) > rtol:
        raise InvalidPMF(f"PMF sums to {total:.12g}, not 1")
    return pmf


def sample_posterior(space, pmf, N=None, seed=None, rtol=None):
    """Draw `N` grid points with replacement, weighted by `pmf`.

    Uses inverse-transform sampling on the cumulative distribution, so the
    frequency of each index converges to its probability, and points with
    zero probability are never drawn.

    Parameters
    ----------
    space : GridSpace
        The parameter grid.
    pmf : (M,) array_like
        Probability of each grid point, in flat index order.
    N : int, optional
        Number of samples to draw. Defaults to `config.DEFAULT_NS`.
    seed : None, int, SeedSequence, or Generator, optional
        Seed for `numpy.random.default_rng`. Identical seeds give identical
        samples.
    rtol : float, optional
        Tolerance on ``sum(pmf) == 1``. Defaults to `config.PMF_RTOL`.

    Returns
    -------
    samples : SampleSet
        The N drawn points.

    Raises
    ------
    EmptyPMF
        If `pmf` is empty.
    InvalidSampleCount
        If `N` is not an integer >= 1.
    """
    if N is None:
        N = config.DEFAULT_NS
    if isinstance(N, bool) or not isinstance(N, numbers.Integral) or N < 1:
        raise InvalidSampleCount(f"N must be an integer >= 1, got {N!r}")

    pmf = _check_pmf(pmf, space.size, rtol=rtol)

    cdf = np.cumsum(pmf)
    cdf /= cdf[-1]

    rng = np.random.default_rng(seed)
    u = rng.random(N)  # [0, 1)
    idx = np.searchsorted(cdf, u, side='right')

    return SampleSet(space.take(idx), space.names, indices=idx)

# =============================================================================
# =============================================================================
