#!/usr/bin/env python3
# =============================================================================
#     File: posterior_samples.py
#  Created: 2019-06-23 23:16
#   Author: Bernie Roesler
#
"""
  Description: Example sampling from a posterior distribution
"""
# =============================================================================

import numpy as np

from scipy import stats

import grid_rethinking as grt

SEED = 56  # initialize random number generator

k = 6       # successes
n = 9       # trials
Np = 1000   # size of parameter grid

# prior: P(p) ~ U(0, 1)
post = grt.grid_binom_posterior(Np, k, n)
p_grid = post.space.axis('p').values

# Sample the posterior distribution (R code 3.3)
Ns = 10_000
samples = post.sample(Ns, seed=SEED)['p']

# Exact analytical posterior for comparison
Beta = stats.beta(k+1, n-k+1)  # Beta(\alpha = 1, \beta = 1) == U(0, 1)

# Intervals of defined boundaries
fstr = '10.8f'

print(f"----------Beta({k+1}, {n-k+1}) sample----------")
value = np.sum(post.pmf[p_grid < 0.5])
print(f"P(p < 0.5) = {value:{fstr}}  # Sum the grid search posterior")

value = grt.interval_mass(samples, 0, 0.5)
print(f"P(p < 0.5) = {value:{fstr}}  # Sum the posterior samples")

value = np.sum((samples > 0.5) & (samples < 0.75)) / Ns
print(f"P(0.5 < p < 0.75) = {value:{fstr}}")

value = Beta.cdf(0.5)
print(f"P(p < 0.5) = {value:{fstr}}  # Analytical")

# Intervals of defined probability mass (R code 3.9 and 3.10)
grt.quantile(samples, 0.8, verbose=True)
grt.quantile(samples, (0.1, 0.9), verbose=True)

# -----------------------------------------------------------------------------
#        A highly skewed distribution
# -----------------------------------------------------------------------------
# R code 3.11
n = k = 3  # all wins!
skewed_post = grt.grid_binom_posterior(Np, k=k, n=n)
skewed_samples = skewed_post.sample(Ns, seed=SEED)['p']

print('----------Beta(4, 1) sample----------')
# R code 3.12 and 3.13
q = 0.5  # interval probability mass
print('Middle 50% PI:')
perc_50 = grt.percentiles(skewed_samples, q=q, verbose=True)
print('HPDI 50%:')
hpdi_50 = grt.hpdi(skewed_samples, q=q, verbose=True)

# Point estimates (R code 3.14 - 3.16)
print(f"MAP    = {skewed_post.map_point()['p']:.4f}")
print(f"mean   = {np.mean(skewed_samples):.4f}")
print(f"median = {np.median(skewed_samples):.4f}")

# =============================================================================
# =============================================================================
