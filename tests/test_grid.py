#!/usr/bin/env python3
# =============================================================================
#     File: test_grid.py
#  Created: 2026-10-19 15:10
#   Author: Bernie Roesler
#
"""
Description: Tests for grid axes and grid spaces.
"""
# =============================================================================

import numpy as np
import pytest

from numpy.testing import assert_allclose, assert_array_equal

import grid_rethinking as grt
from grid_rethinking import config


class TestGridAxis:
    def test_linspace(self):
        axis = grt.GridAxis.linspace(0, 1, 1000)
        assert len(axis) == 1000
        assert axis[0] == 0
        assert axis[-1] == 1
        assert np.all(np.diff(axis.values) > 0)
        assert_allclose(axis.spacing, 1/999, rtol=1e-9)

    def test_explicit_breakpoints(self):
        axis = grt.GridAxis([0.1, 0.5, 2.0], name='b')
        assert axis.name == 'b'
        assert_array_equal(axis.values, [0.1, 0.5, 2.0])

    @pytest.mark.parametrize('values', [
        [1.0],
        [],
        [0.0, 0.0, 1.0],
        [2.0, 1.0],
        [0.0, np.nan],
        [0.0, np.inf],
        [[0.0, 1.0], [2.0, 3.0]],
        ['a', 'b'],
    ])
    def test_invalid_breakpoints(self, values):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridAxis(values)

    @pytest.mark.parametrize('spec', [
        (0, 1, 1),
        (0, 1, 0),
        (0, 1, 2.5),
        (0, 1, True),
        (1, 1, 10),
        (1, 0, 10),
        (0, np.inf, 10),
        (0, 'x', 10),
    ])
    def test_invalid_range(self, spec):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridAxis.linspace(*spec)

    def test_values_read_only(self):
        axis = grt.GridAxis.linspace(0, 1, 5)
        with pytest.raises(ValueError):
            axis.values[0] = 10

    def test_input_not_aliased(self):
        x = np.array([0.0, 1.0, 2.0])
        axis = grt.GridAxis(x)
        x[0] = -5
        assert axis[0] == 0

    def test_equality(self):
        assert grt.GridAxis([0, 1], name='a') == grt.GridAxis([0, 1], name='a')
        assert grt.GridAxis([0, 1], name='a') != grt.GridAxis([0, 2], name='a')
        assert grt.GridAxis([0, 1], name='a') != grt.GridAxis([0, 1], name='b')


class TestGridSpace:
    @pytest.fixture
    def space(self):
        return grt.GridSpace(a=[0, 1], b=[10, 20, 30])

    def test_shape(self, space):
        assert space.names == ('a', 'b')
        assert space.shape == (2, 3)
        assert space.ndim == 2
        assert space.size == len(space) == 6

    def test_row_major_order(self, space):
        expected = [[0, 10], [0, 20], [0, 30],
                    [1, 10], [1, 20], [1, 30]]
        assert_array_equal(space.points, expected)
        assert_array_equal(np.array(list(space)), expected)

    def test_matches_expand_grid(self, space):
        df = grt.expand_grid(a=[0, 1], b=[10, 20, 30])
        assert list(df.columns) == ['a', 'b']
        assert_array_equal(df.values, space.points)
        assert_array_equal(space.to_frame().values, space.points)

    def test_getitem(self, space):
        assert_array_equal(space[0], [0, 10])
        assert_array_equal(space[4], [1, 20])
        assert_array_equal(space[-1], [1, 30])
        with pytest.raises(IndexError):
            space[6]
        with pytest.raises(IndexError):
            space[-7]
        with pytest.raises(TypeError):
            space[1.0]

    def test_take(self, space):
        assert_array_equal(space.take([5, 0, 4]),
                           [[1, 30], [0, 10], [1, 20]])

    def test_index_of(self, space):
        for i, pt in enumerate(space.points):
            assert space.index_of(pt) == i
        with pytest.raises(KeyError):
            space.index_of([0.5, 10])
        with pytest.raises(ValueError):
            space.index_of([0])

    def test_axis_lookup(self, space):
        assert space.axis('b') is space.axes[1]
        assert space.axis(0) is space.axes[0]
        with pytest.raises(KeyError):
            space.axis('c')

    def test_mixed_specs(self):
        space = grt.GridSpace(
            grt.GridAxis([1, 2, 4], name='k'),
            p=(0, 1, 11),
        )
        assert space.names == ('k', 'p')
        assert space.shape == (3, 11)
        assert_allclose(space.axis('p').values, np.linspace(0, 1, 11))

    def test_default_names(self):
        space = grt.GridSpace((0, 1, 3), [5, 6])
        assert space.names == ('x0', 'x1')

    def test_single_axis(self):
        space = grt.GridSpace(p=(0, 1, 1000))
        assert space.shape == (1000,)
        assert_allclose(space.points[:, 0], np.linspace(0, 1, 1000))

    def test_no_axes(self):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridSpace()

    def test_bad_tuple(self):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridSpace(p=(0, 1))

    def test_duplicate_names(self):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridSpace(grt.GridAxis([0, 1], name='a'), a=[0, 1])

    def test_max_size(self):
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridSpace(a=(0, 1, 100), b=(0, 1, 100), max_size=1000)

    def test_default_max_size(self):
        # 10**8 points, refused before anything is allocated
        with pytest.raises(grt.InvalidGridSpec):
            grt.GridSpace(a=(0, 1, 10_000), b=(0, 1, 10_000))

    def test_large_grid_warns(self, monkeypatch):
        monkeypatch.setattr(config, 'WARN_GRID_SIZE', 10)
        with pytest.warns(RuntimeWarning):
            grt.GridSpace(a=(0, 1, 5), b=(0, 1, 5))

    def test_points_read_only(self, space):
        with pytest.raises(ValueError):
            space.points[0, 0] = 99

    def test_equality(self, space):
        assert space == grt.GridSpace(a=[0, 1], b=[10, 20, 30])
        assert space != grt.GridSpace(b=[10, 20, 30], a=[0, 1])

# =============================================================================
# =============================================================================
