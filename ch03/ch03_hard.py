#!/usr/bin/env python3
#==============================================================================
#     File: ch03_hard.py
#  Created: 2019-07-01 22:32
#   Author: Bernie Roesler
#
"""
  Description: Solutions to Hard Exercises in Chapter 3.
"""
#==============================================================================

import numpy as np

from scipy import stats

import grid_rethinking as grt

SEED = 56  # initialize random number generator

# Load the given data: 1 == 'boy', 0 == 'girl'
#   birth1[i]: first  child for family i
#   birth2[i]: second child for family i
birth1 = np.array([1,0,0,0,1,1,0,1,0,1,0,0,1,1,0,1,1,0,0,0,1,0,0,0,1,0,
0,0,0,1,1,1,0,1,0,1,1,1,0,1,0,1,1,0,1,0,0,1,1,0,1,0,0,0,0,0,0,0,
1,1,0,1,0,0,1,0,0,0,1,0,0,1,1,1,1,0,1,0,1,1,1,1,1,0,0,1,0,1,1,0,
1,0,1,1,1,0,1,1,1,1])

birth2 = np.array([0,1,0,1,0,1,1,1,0,0,1,1,1,1,1,0,0,1,1,1,0,0,1,1,1,0,
1,1,1,0,1,1,1,0,1,0,0,1,1,1,1,0,0,1,0,1,1,1,1,1,1,1,1,1,1,1,1,1,
1,1,1,0,1,1,0,1,1,0,1,1,1,0,0,0,0,0,0,1,0,0,0,1,1,0,0,1,0,0,1,1,
0,0,0,1,1,1,0,0,0,0])

# Compute the posterior distribution for:
#   P(boy | data) ∝ P(data | boy) * P(boy)
#
Np = 1000                        # [-] size of parameter grid
n = birth1.size + birth2.size    # trials
k = birth1.sum() + birth2.sum()  # total boys

# prior: P(p) ~ U(0, 1); P(data | p) = B(n, p)
post = grt.grid_binom_posterior(Np, k, n)

# 3H1: MAP estimation
p_max = post.map_point()['p']
print(f"P(boy | data) = {p_max:10.8f}")

# 3H2: sample from the posterior
Ns = 10_000
samples = post.sample(Ns, seed=SEED)['p']

hpdi_qs = [0.50, 0.89, 0.97]
for q in hpdi_qs:
    grt.hpdi(samples, q, width=6, precision=4, verbose=True)


# 3H3
def model_compare(n=0, k=0, p=0.5, title=None):
    """Compare simulated binomial counts to the observed count."""
    binom = stats.binom(n=n, p=p).rvs(Ns, random_state=SEED)
    mode = np.bincount(binom).argmax()
    lo, hi = grt.equal_tailed(binom, q=0.89)
    print(f"---------- {title} ----------")
    print(f"B({n}, {p:.2f}) | Theory: k = {mode}, 89% PI = [{lo:g}, {hi:g}]")
    print(f"Data: k = {k}")


# Simulate 10,000 replicas of 200 births
p = p_max  # use MAP estimate from the data
model_compare(n=n, k=k, p=p, title='All 200 births')

# 3H4: simulate 10,000 replicas of 100 births (birth1)
model_compare(n=birth1.size, k=np.sum(birth1), p=p, title='First birth only')

# 3H5: Check assumption that birth1 and birth2 are independent
girl_first = birth2[birth1 == 0]
model_compare(n=girl_first.size, k=girl_first.sum(), p=p,
              title='Second Births after Girls')

# Model far underpredicts boys following girls!

#==============================================================================
#==============================================================================
