#!/usr/bin/env python3
# =============================================================================
#     File: exceptions.py
#  Created: 2026-10-19 10:02
#   Author: Bernie Roesler
#
"""
  Description: Errors raised by the grid approximation routines.
"""
# =============================================================================


class GridApproxError(ValueError):
    """Base class for all grid approximation errors."""


class InvalidGridSpec(GridApproxError):
    """A grid axis definition is malformed, or the grid is too large."""


class DimensionMismatch(GridApproxError):
    """The number of priors (or values) does not match the grid."""


class DegenerateLikelihood(GridApproxError):
    """The log-posterior table cannot be normalized."""


class EmptyPMF(GridApproxError):
    """Cannot sample from an empty probability mass function."""


class InvalidPMF(GridApproxError):
    """The PMF has negative entries or does not sum to 1."""


class InvalidSampleCount(GridApproxError):
    """The number of requested samples is not a positive integer."""


class EmptyDrawSet(GridApproxError):
    """Cannot summarize an empty collection of draws."""


class InvalidMassLevel(GridApproxError):
    """The interval probability mass is not in (0, 1]."""

# =============================================================================
# =============================================================================
