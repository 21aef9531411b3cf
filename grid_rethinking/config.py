#!/usr/bin/env python3
# =============================================================================
#     File: config.py
#  Created: 2026-10-19 10:05
#   Author: Bernie Roesler
#
"""
  Description: Package-wide default values.

  Each of these may be overridden by keyword at the call site.
"""
# =============================================================================

MAX_GRID_SIZE = 10_000_000   # [points] refuse to build larger grids
WARN_GRID_SIZE = 1_000_000   # [points] warn above this size

PMF_RTOL = 1e-9  # tolerance on sum(pmf) == 1

DEFAULT_Q = 0.89      # interval probability mass
DEFAULT_NS = 10_000   # number of posterior samples

# =============================================================================
# =============================================================================
