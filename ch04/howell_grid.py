#!/usr/bin/env python3
# =============================================================================
#     File: howell_grid.py
#  Created: 2019-07-16 21:56
#   Author: Bernie Roesler
#
r"""
Description: Section 4.3.3, grid approximation of a Gaussian model of heights.

    ..math::
        h_i \sim \mathcal{N}(\mu, \sigma)  \text{likelihood}
        \mu \sim \mathcal{N}(178, 20)      \text{mean prior}
        \sigma \sim \mathcal{U}(0, 50)     \text{std prior}

Heights are in [cm]. The data are simulated to resemble the adults in the
Howell1 dataset.
"""
# =============================================================================

import numpy as np

from scipy import stats

import grid_rethinking as grt

SEED = 56  # initialize random number generator

# Set to True for "Overthinking" (R code 4.23 - 4.25)
SAMPLE_SIZE_FLAG = False  # if True, take only 20 data points

N_data = 20 if SAMPLE_SIZE_FLAG else 352
heights = stats.norm(154.6, 7.7).rvs(N_data, random_state=SEED)

# -----------------------------------------------------------------------------
#        Priors (R code 4.12, 4.13)
# -----------------------------------------------------------------------------
mu_c = 178  # [cm] mean for the height-mean prior
mus_c = 20  # [cm] std  for the height-mean prior
sig_c = 50  # [cm] maximum value for height-stdev prior
mu = stats.norm(mu_c, mus_c)
sigma = stats.uniform(0, sig_c)  # sigma must be positive!

# -----------------------------------------------------------------------------
#         Grid approximation of the posterior distribution (R code 4.16)
# -----------------------------------------------------------------------------
# P(h | data) ∝ P(data | h) * P(h)
#             = P(data | h) * P(h | mu, sigma) * P(mu) * P(sigma)
Np = 200  # number of parameters values to test

if SAMPLE_SIZE_FLAG:
    mu_lims = (140, 170)
    sigma_lims = (4, 20)
else:
    mu_lims = (150, 160)
    sigma_lims = (4, 9)

space = grt.GridSpace(mu=(*mu_lims, Np), sigma=(*sigma_lims, Np))


def log_likelihood(x):
    r"""Compute the joint (log) probability of the data given each set of
    parameters:

    ..math::
        f(x) = \log(P(data | x)),

    where :math:`x = (\mu, \sigma)`, for example.
    """
    return stats.norm(x[0], x[1]).logpdf(heights).sum()


post = grt.grid_posterior(
    space,
    log_likelihood,
    dict(mu=mu.logpdf, sigma=sigma.logpdf),
    parallel=True,
    progressbar=True,
)

print(f"MAP: {post.map_point()}")
print(f"log P(data) = {post.log_evidence:.4f} (up to a constant)")

# -----------------------------------------------------------------------------
#         Sample from the posterior (R code 4.19 - 22)
# -----------------------------------------------------------------------------
Ns = 10_000
samples = post.sample(Ns, seed=SEED)

print('---------- HPDI of Posterior Samples ----------')
grt.hpdi(samples['mu'], verbose=True)
grt.hpdi(samples['sigma'], verbose=True)

print('---------- Posterior Summary ----------')
grt.precis(samples, verbose=True)

# Marginal posterior of sigma is skewed for small samples (R code 4.24)
sigma_marg = post.marginal('sigma')
print(f"sigma mode: {sigma_marg.idxmax():.4f}")

# =============================================================================
# =============================================================================
