#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2026-10-19 15:02
#   Author: Bernie Roesler
#
"""
Description: Shared fixtures for the grid approximation tests.
"""
# =============================================================================

import numpy as np
import pytest

from scipy import stats

import grid_rethinking as grt


@pytest.fixture
def rng():
    return np.random.default_rng(56)


@pytest.fixture
def globe_post():
    """Binomial posterior of 6 "water" in 9 tosses (R code 2.3)."""
    return grt.grid_binom_posterior(1000, k=6, n=9)


@pytest.fixture
def heights():
    """Simulated adult heights [cm], roughly like the Howell1 adults."""
    return stats.norm(154.6, 7.7).rvs(352, random_state=56)


@pytest.fixture
def height_space():
    return grt.GridSpace(mu=(150, 160, 80), sigma=(6, 10, 60))


@pytest.fixture
def height_priors():
    return dict(mu=stats.norm(178, 20).logpdf,
                sigma=stats.uniform(0, 50).logpdf)

# =============================================================================
# =============================================================================
