#!/usr/bin/env python3
# =============================================================================
#     File: intervals.py
#  Created: 2026-10-19 13:20
#   Author: Bernie Roesler
#
"""
  Description: Credible intervals of posterior samples.

  Two flavours of "interval of defined mass":

  * the percentile (equal-tailed) interval, which excludes the same
    probability mass from each tail, and
  * the highest posterior density interval (HPDI), the narrowest interval
    containing the requested mass.

  Both take any collection of scalar draws, whether from a grid posterior or
  from an external sampler.
"""
# =============================================================================

import warnings

import numpy as np
import pandas as pd

from dataclasses import dataclass

from . import config
from .exceptions import EmptyDrawSet, InvalidMassLevel
from .sampling import SampleSet

# Slack when converting a mass level into a count of draws, so that e.g.
# 0.57 * 100 == 56.99999999999999 still counts as 57 draws.
_COUNT_EPS = 1e-9


@dataclass(frozen=True)
class Interval:
    """A credible interval.

    Attributes
    ----------
    lower, upper : float
        The interval bounds, ``lower <= upper``.
    q : float
        The requested probability mass.
    coverage : float
        The fraction of draws that actually fall in ``[lower, upper]``, which
        can differ from `q` because the draws are discrete.
    kind : str
        'equal-tailed' or 'hdi'.
    """
    lower: float
    upper: float
    q: float
    coverage: float
    kind: str = 'equal-tailed'

    def __iter__(self):
        return iter((self.lower, self.upper))

    @property
    def width(self):
        return self.upper - self.lower

    def __str__(self):
        return (f"{100*self.q:g}% {self.kind}: [{self.lower:.4f},"
                f" {self.upper:.4f}] (coverage {100*self.coverage:.2f}%)")


def _check_draws(draws):
    """Return the draws as a flat float array."""
    x = np.asarray(draws, dtype=float).reshape(-1)
    if x.size == 0:
        raise EmptyDrawSet('cannot compute an interval of zero draws')
    if not np.all(np.isfinite(x)):
        raise ValueError('draws must be finite')
    return x


def _check_mass(q):
    try:
        q = float(q)
    except (TypeError, ValueError):
        raise InvalidMassLevel(f"mass level must be a real number, got {q!r}")
    if not 0 < q <= 1:  # also catches NaN
        raise InvalidMassLevel(f"mass level must be in (0, 1], got {q}")
    return q


def interval_mass(draws, lower, upper):
    """Return the fraction of draws in the closed interval [lower, upper]."""
    x = _check_draws(draws)
    return float(np.mean((x >= lower) & (x <= upper)))


def equal_tailed(draws, q=None):
    """Compute the equal-tailed (percentile) interval of the draws.

    Parameters
    ----------
    draws : array_like
        Scalar draws. Multi-dimensional input is unraveled.
    q : float in (0, 1], optional
        Probability mass of the interval. Defaults to `config.DEFAULT_Q`.

    Returns
    -------
    result : Interval
        Bounds at the ``(1 - q)/2`` and ``1 - (1 - q)/2`` quantiles, with
        linear interpolation between order statistics.

    Examples
    --------
    >>> equal_tailed(np.arange(1, 101), q=0.5)
    === Interval(lower=25.75, upper=75.25, q=0.5, coverage=0.5, ...)
    """
    if q is None:
        q = config.DEFAULT_Q
    q = _check_mass(q)
    x = _check_draws(draws)
    a = (1 - q) / 2
    lo, hi = np.quantile(x, (a, 1 - a))
    return Interval(float(lo), float(hi), q, interval_mass(x, lo, hi),
                    kind='equal-tailed')


def hdi(draws, q=None):
    """Compute the highest density interval of the draws.

    Every window of `k` consecutive sorted draws is a candidate, where `k` is
    the number of draws the interval must contain. The narrowest window wins,
    and ties go to the window with the lowest starting index.

    Parameters
    ----------
    draws : array_like
        Scalar draws. Multi-dimensional input is unraveled.
    q : float in (0, 1], optional
        Probability mass of the interval. Defaults to `config.DEFAULT_Q`.

    Returns
    -------
    result : Interval
        The narrowest interval containing `k` of the draws.

    Notes
    -----
    The interval is always contiguous. For a multimodal distribution it may
    span the gap between modes, or capture only one mode, rather than
    returning a union of disjoint intervals.
    """
    if q is None:
        q = config.DEFAULT_Q
    q = _check_mass(q)
    x = np.sort(_check_draws(draws))
    n = x.size

    k = int(np.floor(q * n + _COUNT_EPS))
    k = min(max(k, 1), n)

    widths = x[k-1:] - x[:n-k+1]
    i = int(np.argmin(widths))  # first minimum
    lo, hi = x[i], x[i+k-1]
    return Interval(float(lo), float(hi), q, interval_mass(x, lo, hi),
                    kind='hdi')


# -----------------------------------------------------------------------------
#         Printing wrappers
# -----------------------------------------------------------------------------
def quantile(data, qs=0.89, width=6, precision=4,
             q_func=np.quantile, verbose=False, **kwargs):
    """Pretty-print the desired quantile values from the data.

    Parameters
    ----------
    data : (M, N) array_like
        Matrix of M vectors in N dimensions.
    qs : array_like of float
        Quantile or sequence of quantiles to compute, which must be between
        0 and 1 inclusive.
    width : int, optional, default=6
        Width of printing field.
    precision : int, optional, default=4
        Number of decimal places to print.
    q_func : callable, optional, default=numpy.quantile
        Function to compute the quantile outputs from the data.
    verbose : bool, optional, default=False
        Print the output quantile percentages names and values.
    **kwargs
        Additional arguments to `q_func`.

    Returns
    -------
    quantile : scalar or ndarray
        The requested quantiles. See documentation for `numpy.quantile`.

    Examples
    --------
    >>> quantile(samples, 0.8, verbose=True)
       80%
    0.7608
    """
    if np.size(data) == 0:
        raise EmptyDrawSet('cannot compute quantiles of zero draws')
    qs = np.asarray(qs)
    quantiles = q_func(data, qs, **kwargs)
    if verbose:
        fstr = f"{width}.{precision}f"
        name_str = ' '.join([f"{100*p:{width-1}g}%" for p in np.atleast_1d(qs)])
        value_str = ' '.join([f"{q:{fstr}}" for q in np.atleast_1d(quantiles)])
        print(f"{name_str}\n{value_str}")
    return quantiles


def _intervals(func, data, q, verbose, width, precision):
    """Return a (2,) or (2, Q) array of intervals from `func`."""
    if q is None:
        q = config.DEFAULT_Q
    qs = np.asarray(q)

    if verbose and qs.size > 1:
        verbose = False
        warnings.warn("verbose flag only valid for singleton q.")

    Q = np.array([tuple(func(data, p)) for p in np.atleast_1d(qs)]).T
    if qs.ndim == 0:
        Q = Q[:, 0]

    if verbose:
        fstr = f"{width}.{precision}f"
        p = float(qs)
        if func is hdi:
            names = [f"|{100*p:{width-2}g}", f"{100*p:{width-2}g}|"]
        else:
            a = (1 - p) / 2
            names = [f"{100*p:{width-1}g}%" for p in (a, 1 - a)]
        value_str = ' '.join([f"{x:{fstr}}" for x in Q])
        print(f"{' '.join(names)}\n{value_str}")

    return Q


def percentiles(data, q=None, verbose=False, width=6, precision=4):
    r"""Compute the equal-tailed interval(s) of the data.

    .. note:: The bounds are the quantiles
    .. math:: a = \frac{1 - q}{2}
        and :math:`1 - a`.

    Parameters
    ----------
    data : array_like
        Scalar draws. Multi-dimensional input is unraveled.
    q : float or array_like of float
        Interval probability mass(es), each in (0, 1].
    verbose : bool, optional
        Print the bounds. Only valid for a single `q`.

    Returns
    -------
    percentiles : ndarray
        The low and high bounds, shape (2,) for a scalar `q`, otherwise
        (2, Q). The low boundary is index 0, and the high boundary is index 1.

    See Also
    --------
    equal_tailed
    """
    return _intervals(equal_tailed, data, q, verbose, width, precision)


def hpdi(data, q=None, verbose=False, width=6, precision=4):
    """Compute highest probability density interval(s) of the data.

    Parameters
    ----------
    data : array_like
        Scalar draws. Multi-dimensional input is unraveled.
    q : float or array_like of float
        Interval probability mass(es), each in (0, 1].
    verbose : bool, optional
        Print the bounds. Only valid for a single `q`.

    Returns
    -------
    result : ndarray
        The low and high bounds, shape (2,) for a scalar `q`, otherwise
        (2, Q).

    See Also
    --------
    hdi
    """
    return _intervals(hdi, data, q, verbose, width, precision)


def precis(obj, q=None, kind='pi', digits=4, verbose=False):
    """Return a `DataFrame` of the mean, standard deviation, and interval of
    each parameter.

    Parameters
    ----------
    obj : SampleSet, DataFrame, or array_like
        Posterior draws. Columns of a DataFrame or (N, D) array are separate
        parameters.
    q : float in (0, 1]
        The probability mass of the interval.
    kind : str in {'pi', 'hpdi'}
        Percentile (equal-tailed) or highest density interval.
    digits : int
        Number of digits in the printed output if `verbose=True`.
    verbose : bool
        If True, print the output.

    Returns
    -------
    result : DataFrame
        A DataFrame with a row for each variable, and columns for mean,
        standard deviation, and low/high bounds of the interval.
    """
    if kind not in ('pi', 'hpdi'):
        raise ValueError(f"kind must be 'pi' or 'hpdi', got '{kind}'")
    if q is None:
        q = config.DEFAULT_Q
    q = _check_mass(q)

    if isinstance(obj, SampleSet):
        df = obj.to_frame()
    elif isinstance(obj, pd.DataFrame):
        df = obj
    elif isinstance(obj, pd.Series):
        df = obj.to_frame(name=obj.name or 'x')
    else:
        arr = np.asarray(obj, dtype=float)
        if arr.ndim == 1:
            arr = arr[:, np.newaxis]
        df = pd.DataFrame(arr).add_prefix('x')

    if df.empty:
        raise EmptyDrawSet('cannot summarize zero draws')

    func = equal_tailed if kind == 'pi' else hdi
    ivals = [func(df[c].to_numpy(), q) for c in df.columns]

    if kind == 'pi':
        a = (1 - q) / 2
        pp = 100*np.array([a, 1-a])
        lo_name, hi_name = f"{pp[0]:g}%", f"{pp[1]:g}%"
    else:
        lo_name, hi_name = f"|{100*q:g}", f"{100*q:g}|"

    result = pd.DataFrame(
        {
            'mean': df.mean().to_numpy(),
            'std': df.std().to_numpy(),
            lo_name: [iv.lower for iv in ivals],
            hi_name: [iv.upper for iv in ivals],
        },
        index=df.columns,
    )

    if verbose:
        with pd.option_context('display.float_format',
                               f"{{:.{digits}f}}".format):
            print(result)

    return result

# =============================================================================
# =============================================================================
