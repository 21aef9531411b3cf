#!/usr/bin/env python3
# =============================================================================
#     File: test_sampling.py
#  Created: 2026-10-19 16:25
#   Author: Bernie Roesler
#
"""
Description: Tests for weighted resampling of a grid posterior.
"""
# =============================================================================

import numpy as np
import pytest

from numpy.testing import assert_allclose, assert_array_equal

import grid_rethinking as grt
from grid_rethinking import config


@pytest.fixture
def space3():
    return grt.GridSpace(x=[0.0, 1.0, 2.0])


@pytest.fixture
def pmf3():
    return np.array([0.1, 0.7, 0.2])


def test_convergence(space3, pmf3):
    N = 200_000
    samples = grt.sample_posterior(space3, pmf3, N, seed=56)
    assert len(samples) == N
    freqs = np.bincount(samples.indices, minlength=3) / N
    assert_allclose(freqs, pmf3, atol=0.01)


def test_reproducible(space3, pmf3):
    a = grt.sample_posterior(space3, pmf3, 1000, seed=56)
    b = grt.sample_posterior(space3, pmf3, 1000, seed=56)
    assert a == b
    assert_array_equal(a.indices, b.indices)


def test_different_seeds(space3, pmf3):
    a = grt.sample_posterior(space3, pmf3, 1000, seed=1)
    b = grt.sample_posterior(space3, pmf3, 1000, seed=2)
    assert a != b


def test_generator_seed(space3, pmf3):
    a = grt.sample_posterior(space3, pmf3, 100,
                             seed=np.random.default_rng(7))
    b = grt.sample_posterior(space3, pmf3, 100, seed=7)
    assert a == b


def test_calls_are_independent(space3, pmf3):
    rng = np.random.default_rng(7)
    a = grt.sample_posterior(space3, pmf3, 100, seed=rng)
    b = grt.sample_posterior(space3, pmf3, 100, seed=rng)
    assert a != b


def test_zero_mass_never_drawn():
    space = grt.GridSpace(x=(0, 4, 5))
    pmf = [0.0, 0.5, 0.0, 0.5, 0.0]
    samples = grt.sample_posterior(space, pmf, 10_000, seed=56)
    assert set(np.unique(samples.indices)) == {1, 3}


def test_point_mass():
    space = grt.GridSpace(x=(0, 4, 5))
    samples = grt.sample_posterior(space, [0, 0, 1, 0, 0], 50, seed=56)
    assert_array_equal(samples['x'], np.full(50, 2.0))


def test_values_are_grid_points():
    space = grt.GridSpace(a=[0, 1], b=[10, 20, 30])
    pmf = np.full(6, 1/6)
    samples = grt.sample_posterior(space, pmf, 500, seed=56)
    assert samples.values.shape == (500, 2)
    assert samples.names == ('a', 'b')
    assert_array_equal(samples.values, space.take(samples.indices))
    assert_array_equal(samples['a'], samples[0])
    assert_array_equal(samples['b'], samples[1])
    assert set(samples['b']) <= {10, 20, 30}
    with pytest.raises(KeyError):
        samples['c']


def test_to_frame():
    space = grt.GridSpace(a=[0, 1], b=[10, 20, 30])
    samples = grt.sample_posterior(space, np.full(6, 1/6), 20, seed=56)
    df = samples.to_frame()
    assert list(df.columns) == ['a', 'b']
    assert len(df) == 20
    assert_array_equal(df.values, samples.values)


def test_read_only(space3, pmf3):
    samples = grt.sample_posterior(space3, pmf3, 10, seed=56)
    with pytest.raises(ValueError):
        samples.values[0, 0] = 99
    with pytest.raises(ValueError):
        samples.indices[0] = 2


def test_default_sample_count(space3, pmf3):
    assert len(grt.sample_posterior(space3, pmf3)) == config.DEFAULT_NS


def test_empty_pmf(space3):
    with pytest.raises(grt.EmptyPMF):
        grt.sample_posterior(space3, [], 10)


@pytest.mark.parametrize('N', [0, -1, 2.5, True, '10'])
def test_invalid_sample_count(space3, pmf3, N):
    with pytest.raises(grt.InvalidSampleCount):
        grt.sample_posterior(space3, pmf3, N)


def test_wrong_pmf_length(space3):
    with pytest.raises(grt.DimensionMismatch):
        grt.sample_posterior(space3, [0.5, 0.5], 10)


@pytest.mark.parametrize('pmf', [
    [0.5, 0.6, -0.1],
    [0.2, 0.2, 0.2],
    [0.5, 0.5, np.nan],
])
def test_invalid_pmf(space3, pmf):
    with pytest.raises(grt.InvalidPMF):
        grt.sample_posterior(space3, pmf, 10)


def test_pmf_tolerance(space3):
    pmf = np.array([0.1, 0.7, 0.2 + 1e-6])
    with pytest.raises(grt.InvalidPMF):
        grt.sample_posterior(space3, pmf, 10)
    samples = grt.sample_posterior(space3, pmf, 10, seed=56, rtol=1e-5)
    assert len(samples) == 10


def test_grid_posterior_sample(globe_post):
    a = globe_post.sample(1000, seed=56)
    b = grt.sample_posterior(globe_post.space, globe_post.pmf, 1000, seed=56)
    assert a == b
    assert len(globe_post.sample()) == config.DEFAULT_NS


def test_sample_set_from_values():
    samples = grt.SampleSet(np.arange(5.0), names=['x'])
    assert samples.values.shape == (5, 1)
    assert samples.indices is None
    with pytest.raises(grt.DimensionMismatch):
        grt.SampleSet(np.zeros((5, 2)), names=['x'])

# =============================================================================
# =============================================================================
