#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2026-10-19 09:51
#   Author: Bernie Roesler
#
"""
  Description: Grid approximation of posterior distributions.

  Typical usage::

    import grid_rethinking as grt

    post = grt.grid_binom_posterior(1000, k=6, n=9)
    samples = post.sample(10_000, seed=56)
    grt.hpdi(samples['p'], q=0.89, verbose=True)
"""
# =============================================================================

from .exceptions import (
    GridApproxError,
    InvalidGridSpec,
    DimensionMismatch,
    DegenerateLikelihood,
    EmptyPMF,
    InvalidPMF,
    InvalidSampleCount,
    EmptyDrawSet,
    InvalidMassLevel,
)
from .grid import GridAxis, GridSpace, expand_grid
from .sampling import SampleSet, sample_posterior
from .posterior import (
    GridPosterior,
    PosteriorEvaluator,
    grid_binom_posterior,
    grid_posterior,
    logsumexp,
    normalize,
)
from .intervals import (
    Interval,
    equal_tailed,
    hdi,
    hpdi,
    interval_mass,
    percentiles,
    precis,
    quantile,
)

__all__ = [
    'GridApproxError',
    'InvalidGridSpec',
    'DimensionMismatch',
    'DegenerateLikelihood',
    'EmptyPMF',
    'InvalidPMF',
    'InvalidSampleCount',
    'EmptyDrawSet',
    'InvalidMassLevel',
    'GridAxis',
    'GridSpace',
    'expand_grid',
    'SampleSet',
    'sample_posterior',
    'GridPosterior',
    'PosteriorEvaluator',
    'grid_binom_posterior',
    'grid_posterior',
    'logsumexp',
    'normalize',
    'Interval',
    'equal_tailed',
    'hdi',
    'hpdi',
    'interval_mass',
    'percentiles',
    'precis',
    'quantile',
]

# =============================================================================
# =============================================================================
