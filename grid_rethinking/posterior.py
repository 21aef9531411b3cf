#!/usr/bin/env python3
# =============================================================================
#     File: posterior.py
#  Created: 2026-10-19 10:48
#   Author: Bernie Roesler
#
r"""
  Description: Evaluate and normalize a posterior distribution on a grid.

  Bayes' rule numerator on the log scale:

    ..math::
        \log P(x | data) = \log P(data | x) + \sum_d \log P(x_d) + C,

  where :math:`x = (x_1, \dots, x_D)` is a grid point and the priors are
  independent across parameters.
"""
# =============================================================================

import warnings

import numpy as np
import pandas as pd
import xarray as xr

from collections.abc import Mapping
from scipy import stats
from scipy.special import logsumexp as _logsumexp
from tqdm import tqdm
from tqdm.contrib.concurrent import thread_map

from . import config
from .exceptions import DegenerateLikelihood, DimensionMismatch
from .grid import GridSpace, _readonly
from .sampling import sample_posterior


def logsumexp(a, dim=None, **kwargs):
    """Compute the log of the sum of the exponentials of input elements.

    Parameters
    ----------
    a : array_like
        Input array.
    dim : str, Iterable of Hashable, "..." or None, optional
        Name of dimension[s] along which to apply ``logsumexp``. For, *e.g.*,
        ``dim="x"`` or ``dim=["x", "y"]``. If "..." or None, will reduce over
        all dimensions.

        Only one of ``dim`` or ``axis`` may be given. If ``dim`` is given,
        ``axis`` will be ignored.
    **kwargs : Any
        Additional keyword arguments passed on to ``scipy.special.logsumexp``.

    Returns
    -------
    res : ndarray
        The result, ``np.log(np.sum(np.exp(a)))`` calculated in a numerically
        more stable way.

    See Also
    --------
    scipy.special.logsumexp
    """
    axis = kwargs.pop('axis', None)

    if dim is not None:
        if axis is not None:
            warnings.warn('Both `dim` and `axis` given, ignoring `axis`.')
        # Test if a is an xr.DataArray
        try:
            axis = a.get_axis_num(dim)
        except AttributeError:
            pass

    return _logsumexp(np.asarray(a), axis=axis, **kwargs)


def normalize(log_post):
    """Convert an unnormalized log-posterior table into a PMF.

    The maximum value is subtracted before exponentiating, so the result does
    not under- or overflow, and adding any constant to every entry of
    `log_post` leaves the PMF unchanged.

    Parameters
    ----------
    log_post : array_like
        Unnormalized log-posterior values, one per grid point. May be any
        shape; the normalization is over all entries.

    Returns
    -------
    pmf : ndarray
        Non-negative values of the same shape as `log_post`, summing to 1.

    Raises
    ------
    DegenerateLikelihood
        If the table is empty, every entry is ``-inf``, or any entry is NaN or
        ``+inf``.
    """
    T = np.asarray(log_post, dtype=float)
    if T.size == 0:
        raise DegenerateLikelihood('cannot normalize an empty table')
    if np.any(np.isnan(T)):
        raise DegenerateLikelihood(
            f"log-posterior has {np.isnan(T).sum()} NaN entries"
        )
    m = T.max()
    if m == -np.inf:
        raise DegenerateLikelihood(
            'log-posterior is -inf everywhere; posterior mass is zero'
        )
    if m == np.inf:
        raise DegenerateLikelihood('log-posterior has +inf entries')
    w = np.exp(T - m)  # max(w) == 1, so sum(w) >= 1
    return w / w.sum()


def _match_priors(space, log_priors):
    """Return a list of one prior (or None) per axis of `space`."""
    if log_priors is None:
        return [None] * space.ndim

    if isinstance(log_priors, Mapping):
        extra = set(log_priors) - set(space.names)
        missing = set(space.names) - set(log_priors)
        if extra or missing:
            raise DimensionMismatch(
                f"prior names {sorted(log_priors, key=str)} do not match"
                f" grid axes {list(space.names)}"
            )
        return [log_priors[name] for name in space.names]

    if callable(log_priors):
        log_priors = [log_priors]

    log_priors = list(log_priors)
    if len(log_priors) != space.ndim:
        raise DimensionMismatch(
            f"got {len(log_priors)} prior functions for a grid with"
            f" {space.ndim} dimensions"
        )
    return log_priors


class PosteriorEvaluator:
    """Evaluate the unnormalized log-posterior at every point of a grid.

    Parameters
    ----------
    space : GridSpace
        The parameter grid.
    loglik : callable
        Log-likelihood of the data given a single grid point,
        ``loglik(point) -> float``, where `point` is a (D,) array ordered like
        `space.axes`. Any aggregation over the observed data is done inside
        this function.
    log_priors : sequence or mapping of callable, optional
        One log-prior density per axis, ``log_prior(coordinate) -> float``,
        given in axis order or keyed by axis name. A ``None`` entry, or
        ``log_priors=None``, is a flat prior.
    vectorized : bool, optional
        If True, `loglik` is called once with the (M, D) array of all points
        and must return M values.
    parallel : bool, optional
        If True, evaluate `loglik` point-by-point across worker threads.
        The result is identical to the serial evaluation.
    max_workers : int, optional
        Number of threads if `parallel` is True.
    chunksize : int, optional
        Number of points handed to a thread at a time.
    progressbar : bool, optional
        If True, show a progress bar over the grid points.

    Raises
    ------
    DimensionMismatch
        If the priors do not match the dimensions of `space`.

    Examples
    --------
    >>> space = GridSpace(mu=(140, 160, 200), sigma=(4, 9, 200))
    >>> loglik = lambda x: stats.norm(x[0], x[1]).logpdf(heights).sum()
    >>> priors = dict(mu=stats.norm(178, 20).logpdf,
    ...               sigma=stats.uniform(0, 50).logpdf)
    >>> post = PosteriorEvaluator(space, loglik, priors).evaluate()
    """

    def __init__(self, space, loglik, log_priors=None, vectorized=False,
                 parallel=False, max_workers=None, chunksize=1000,
                 progressbar=False):
        if not isinstance(space, GridSpace):
            raise TypeError(f"`space` must be a GridSpace, got {type(space)}")
        self.space = space
        self.loglik = loglik
        self.log_priors = _match_priors(space, log_priors)
        self.vectorized = vectorized
        self.parallel = parallel
        self.max_workers = max_workers
        self.chunksize = chunksize
        self.progressbar = progressbar

    def log_prior(self):
        """Return the (M,) table of the summed log-priors.

        Each prior is evaluated once per coordinate of its own axis, then
        broadcast over the other axes.
        """
        total = np.zeros(self.space.shape)
        for d, (axis, f) in enumerate(zip(self.space.axes, self.log_priors)):
            if f is None:
                continue
            lp = np.array([float(f(x)) for x in axis.values])
            shape = [1] * self.space.ndim
            shape[d] = -1
            total = total + lp.reshape(shape)
        return total.ravel()

    def log_likelihood(self):
        """Return the (M,) table of log-likelihood values."""
        points = self.space.points
        M = self.space.size

        if self.vectorized:
            ll = np.asarray(self.loglik(points), dtype=float).reshape(-1)
            if ll.size != M:
                raise DimensionMismatch(
                    f"vectorized log-likelihood returned {ll.size} values"
                    f" for {M} grid points"
                )
            return ll

        if self.parallel:
            ll = thread_map(
                self.loglik,
                points,
                max_workers=self.max_workers,
                chunksize=self.chunksize,
                desc='log-likelihood',
                leave=False,
                disable=not self.progressbar,
            )
        else:
            iters = points
            if self.progressbar:
                iters = tqdm(points, desc='log-likelihood', leave=False)
            ll = [self.loglik(pt) for pt in iters]

        return np.asarray(ll, dtype=float).reshape(M)

    def log_posterior(self):
        """Return the read-only (M,) unnormalized log-posterior table."""
        return _readonly(self.log_likelihood() + self.log_prior())

    def evaluate(self):
        """Compute the log-posterior table and its PMF.

        Returns
        -------
        result : GridPosterior
            The grid, log-posterior, and normalized posterior.

        Raises
        ------
        DegenerateLikelihood
            If the log-posterior cannot be normalized.
        """
        return GridPosterior(self.space, self.log_posterior())


class GridPosterior:
    """A posterior distribution approximated on a grid.

    Attributes
    ----------
    space : GridSpace
        The parameter grid.
    log_post : (M,) ndarray
        The unnormalized log-posterior, read-only.
    pmf : (M,) ndarray
        The normalized posterior probability of each grid point, read-only.
    """

    def __init__(self, space, log_post):
        log_post = np.asarray(log_post, dtype=float)
        if log_post.shape != (space.size,):
            raise DimensionMismatch(
                f"log-posterior has shape {log_post.shape}, expected"
                f" ({space.size},)"
            )
        self.space = space
        self.log_post = _readonly(log_post)
        self.pmf = _readonly(normalize(log_post))

    @property
    def log_evidence(self):
        """The log of the normalizing constant of `log_post`."""
        return float(logsumexp(self.log_post))

    def sample(self, N=None, seed=None):
        """Draw `N` points from the posterior. See `sample_posterior`."""
        if N is None:
            N = config.DEFAULT_NS
        return sample_posterior(self.space, self.pmf, N, seed=seed)

    def map_point(self):
        """Return the maximum *a posteriori* grid point as a dict.

        Ties go to the first point in grid order.
        """
        pt = self.space[int(np.argmax(self.log_post))]
        return dict(zip(self.space.names, pt.tolist()))

    def mean(self):
        """Return the posterior mean of each parameter."""
        return pd.Series(self.pmf @ self.space.points,
                         index=list(self.space.names))

    def marginal(self, name):
        """Return the marginal posterior PMF of a single parameter.

        Parameters
        ----------
        name : str or int
            The axis name or position.

        Returns
        -------
        result : pd.Series
            Marginal probabilities indexed by the axis coordinates.
        """
        axis = self.space.axis(name)
        d = self.space.names.index(axis.name)
        others = tuple(i for i in range(self.space.ndim) if i != d)
        p = self.pmf.reshape(self.space.shape).sum(axis=others)
        return pd.Series(p, index=pd.Index(axis.values, name=axis.name),
                         name='posterior')

    def to_frame(self):
        """Return a DataFrame with one row per grid point.

        Columns are the parameter values, 'log_posterior', and 'posterior'.
        """
        df = self.space.to_frame()
        df['log_posterior'] = self.log_post
        df['posterior'] = self.pmf
        return df

    def to_dataarray(self):
        """Return the PMF as a DataArray with one dimension per axis."""
        return xr.DataArray(
            self.pmf.reshape(self.space.shape),
            dims=self.space.names,
            coords={a.name: a.values for a in self.space.axes},
            name='posterior',
        )

    def __repr__(self):
        return f"<GridPosterior on {self.space!r}>"


def grid_posterior(space, loglik, log_priors=None, **kwargs):
    """Evaluate and normalize the posterior on `space`.

    Shorthand for ``PosteriorEvaluator(space, loglik, log_priors,
    **kwargs).evaluate()``.
    """
    return PosteriorEvaluator(space, loglik, log_priors, **kwargs).evaluate()


def grid_binom_posterior(Np, k, n, log_prior=None):
    """Posterior probability assuming a binomial distribution likelihood and
    arbitrary prior.

    Parameters
    ----------
    Np : int
        Number of parameter values to use.
    k : int
        Number of event occurrences observed.
    n : int
        Number of trials performed.
    log_prior : callable, optional, default U(0, 1)
        Log-density of the prior on `p`. If None, the prior is uniform.

    Returns
    -------
    result : GridPosterior
        The posterior on the grid ``p = np.linspace(0, 1, Np)``.
    """
    space = GridSpace(p=(0, 1, Np))
    return grid_posterior(
        space,
        lambda x: stats.binom.logpmf(k=k, n=n, p=x[:, 0]),
        [log_prior],
        vectorized=True,
    )

# =============================================================================
# =============================================================================
