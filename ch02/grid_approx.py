#!/usr/bin/env python3
#==============================================================================
#     File: grid_approx.py
#  Created: 2019-06-17 11:17
#   Author: Bernie Roesler
#
"""
  Description: Grid approximation example (R code 2.3 - 2.5).
"""
#==============================================================================

import numpy as np
import pandas as pd

from scipy import stats

import grid_rethinking as grt

# Possible prior distributions (log densities)
PRIOR_D = dict({'uniform': {'log_prior': None,
                            'title': 'U(0, 1)'},
                'step': {'log_prior': lambda p: 0.0 if p >= 0.5 else -np.inf,
                         'title': '0 where p < 0.5, 1 otherwise'},
                'exp': {'log_prior': lambda p: -5 * np.abs(p - 0.5),
                        'title': 'exp(-5 |p - 0.5|)'}
                })

#------------------------------------------------------------------------------
#        Define Parameters
#------------------------------------------------------------------------------
# Data
k = 6  # number of event occurrences, i.e. "heads"
n = 9  # number of trials, i.e. "tosses"

Nps = [5, 20, 100, 1000]  # range of grid sizes to try

## Analytical Posterior (uniform prior only)
beta = stats.beta(k+1, n-k+1)

#------------------------------------------------------------------------------
#        Compare grid sizes and priors
#------------------------------------------------------------------------------
for prior_key, d in PRIOR_D.items():
    rows = []
    for Np in Nps:
        post = grt.grid_binom_posterior(Np, k, n, log_prior=d['log_prior'])
        rows.append(dict(Np=Np,
                         p_max=post.map_point()['p'],
                         mean=post.mean()['p']))

    print(f"---------- P ~ {d['title']} | trials: {n}, events: {k} ----------")
    print(pd.DataFrame(rows).set_index('Np'))

print(f"True Posterior: Beta({k+1}, {n-k+1})")
print(f"    mode = {k/n:.4f}, mean = {beta.mean():.4f}")

#==============================================================================
#==============================================================================
