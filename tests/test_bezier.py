"""Test module for BezierCurve in polycurve.bezier

The tests are run using pytest.
These tests ensure that the general de Casteljau evaluator, the closed-form
quadratic and cubic evaluators and the samplers stay consistent with each other.
"""

import numpy as np
import pytest

from polycurve.bezier import BezierCurve

QUAD_P0 = np.array([0.0, 0.0, 0.0])
QUAD_C = np.array([10.0, 20.0, 5.0])
QUAD_P1 = np.array([20.0, 0.0, 0.0])

CUBIC_P0 = np.array([0.0, 0.0, 0.0])
CUBIC_C0 = np.array([5.0, 20.0, -3.0])
CUBIC_C1 = np.array([15.0, 20.0, 7.0])
CUBIC_P1 = np.array([20.0, 0.0, 1.0])

###############################################################################
# General Evaluator Tests
###############################################################################


class TestBezierEvaluate:
    """Test the general de Casteljau evaluator."""

    def test_single_control_point(self):
        """A single control point is returned unchanged for any t."""
        for t in (0.0, 0.3, 1.0):
            result = BezierCurve.evaluate(t, [(1.0, 2.0, 3.0)])
            assert np.array_equal(result, [1.0, 2.0, 3.0])

    def test_linear_interpolation(self):
        """Two control points give a straight line."""
        result = BezierCurve.evaluate(0.25, [(0.0, 0.0, 0.0), (8.0, 4.0, 0.0)])
        assert np.allclose(result, [2.0, 1.0, 0.0])

    def test_end_points(self):
        """t=0 and t=1 hit the first and last control point."""
        points = [(0.0, 0.0, 0.0), (3.0, 9.0, 1.0), (7.0, -2.0, 2.0), (9.0, 4.0, 0.0), (12.0, 0.0, 5.0)]
        assert np.allclose(BezierCurve.evaluate(0.0, points), points[0])
        assert np.allclose(BezierCurve.evaluate(1.0, points), points[-1])

    def test_high_degree_symmetric_curve(self):
        """A symmetric control polygon evaluates to its axis of symmetry at t=0.5."""
        points = [(float(i), float(min(i, 10 - i)), 0.0) for i in range(11)]
        result = BezierCurve.evaluate(0.5, points)
        assert result[0] == pytest.approx(5.0)

    def test_many_control_points(self):
        """Large control lists do not hit a recursion limit."""
        points = np.column_stack([np.arange(2000.0), np.zeros(2000), np.zeros(2000)])
        result = BezierCurve.evaluate(0.5, points)
        assert result[0] == pytest.approx(999.5)

    def test_2d_input_is_lifted(self):
        """2D control points are evaluated with z=0."""
        result = BezierCurve.evaluate(0.5, [(0.0, 0.0), (2.0, 2.0)])
        assert result.shape == (3,)
        assert np.allclose(result, [1.0, 1.0, 0.0])

    def test_input_not_modified(self):
        """The control points are treated as read-only."""
        points = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [2.0, 0.0, 0.0]])
        original = points.copy()
        BezierCurve.evaluate(0.7, points)
        assert np.array_equal(points, original)

    def test_empty_control_points(self):
        """Evaluating without control points raises ValueError."""
        with pytest.raises(ValueError):
            BezierCurve.evaluate(0.5, [])

    def test_parameter_out_of_range(self):
        """t outside [0, 1] raises ValueError."""
        with pytest.raises(ValueError):
            BezierCurve.evaluate(1.5, [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)])
        with pytest.raises(ValueError):
            BezierCurve.evaluate(-0.1, [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)])


###############################################################################
# Closed Form Tests
###############################################################################


class TestBezierClosedForms:
    """Test that the closed forms match the general evaluator."""

    @pytest.mark.parametrize("s", np.linspace(0.0, 1.0, 17))
    def test_quadratic_matches_general(self, s):
        """Quadratic closed form agrees with de Casteljau on [p0, c, p1]."""
        closed = BezierCurve.evaluate_quadratic(s, QUAD_P0, QUAD_P1, QUAD_C)
        general = BezierCurve.evaluate(s, [QUAD_P0, QUAD_C, QUAD_P1])
        assert np.allclose(closed, general, rtol=0.0, atol=1e-9)

    @pytest.mark.parametrize("s", np.linspace(0.0, 1.0, 17))
    def test_cubic_matches_general(self, s):
        """Cubic closed form agrees with de Casteljau on [p0, c0, c1, p1]."""
        closed = BezierCurve.evaluate_cubic(s, CUBIC_P0, CUBIC_P1, CUBIC_C0, CUBIC_C1)
        general = BezierCurve.evaluate(s, [CUBIC_P0, CUBIC_C0, CUBIC_C1, CUBIC_P1])
        assert np.allclose(closed, general, rtol=0.0, atol=1e-9)

    def test_quadratic_midpoint(self):
        """Quadratic midpoint is (p0 + 2c + p1) / 4."""
        result = BezierCurve.evaluate_quadratic(0.5, QUAD_P0, QUAD_P1, QUAD_C)
        assert np.allclose(result, (QUAD_P0 + 2 * QUAD_C + QUAD_P1) / 4)

    def test_cubic_midpoint(self):
        """Cubic midpoint is (p0 + 3c0 + 3c1 + p1) / 8."""
        result = BezierCurve.evaluate_cubic(0.5, CUBIC_P0, CUBIC_P1, CUBIC_C0, CUBIC_C1)
        assert np.allclose(result, (CUBIC_P0 + 3 * CUBIC_C0 + 3 * CUBIC_C1 + CUBIC_P1) / 8)


###############################################################################
# Sampler Tests
###############################################################################


class TestBezierSamplers:
    """Test the in-place segment samplers."""

    def test_quadratic_sampler(self):
        """Quadratic sampler writes t = i/steps for i < steps."""
        steps = 16
        output_buffer = np.full((steps + 2, 3), np.nan)

        count = BezierCurve.sample_quadratic_segment_inplace(QUAD_P0, QUAD_P1, QUAD_C, steps, output_buffer, 1)

        assert count == steps
        assert np.all(np.isnan(output_buffer[0]))
        assert np.all(np.isnan(output_buffer[-1]))
        for i in range(steps):
            expected = BezierCurve.evaluate_quadratic(i / steps, QUAD_P0, QUAD_P1, QUAD_C)
            assert np.allclose(output_buffer[1 + i], expected, rtol=0.0, atol=1e-9)

    def test_cubic_sampler(self):
        """Cubic sampler writes t = i/steps for i < steps."""
        steps = 8
        output_buffer = np.empty((steps, 3))

        count = BezierCurve.sample_cubic_segment_inplace(CUBIC_P0, CUBIC_P1, CUBIC_C0, CUBIC_C1, steps, output_buffer)

        assert count == steps
        assert np.allclose(output_buffer[0], CUBIC_P0)
        for i in range(steps):
            expected = BezierCurve.evaluate(i / steps, [CUBIC_P0, CUBIC_C0, CUBIC_C1, CUBIC_P1])
            assert np.allclose(output_buffer[i], expected, rtol=0.0, atol=1e-9)


###############################################################################
# Polygonize Tests
###############################################################################


class TestBezierPolygonize:
    """Test polygonization of a whole control list."""

    def test_shape_and_end_points(self):
        """steps samples plus the exact last control point."""
        points = [(0.0, 0.0, 0.0), (1.0, 3.0, 0.0), (4.0, 3.0, 1.0), (5.0, 0.0, 0.0)]
        result = BezierCurve.polygonize(points, 32)

        assert result.shape == (33, 3)
        assert result.dtype == np.float64
        assert np.array_equal(result[0], points[0])
        assert np.array_equal(result[-1], points[-1])

    def test_samples_follow_evaluator(self):
        """Every sample is the curve at i/steps."""
        points = [(0.0, 0.0, 0.0), (2.0, 6.0, 0.0), (6.0, 0.0, 0.0)]
        result = BezierCurve.polygonize(points, 10)
        for i in range(10):
            assert np.allclose(result[i], BezierCurve.evaluate(i / 10, points))

    def test_single_point(self):
        """A single control point repeats steps + 1 times."""
        result = BezierCurve.polygonize([(1.0, 2.0, 3.0)], 4)
        assert result.shape == (5, 3)
        assert np.all(result == [1.0, 2.0, 3.0])

    def test_invalid_steps(self):
        """steps smaller than 1 raises ValueError."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)], 0)

    def test_empty_points(self):
        """No control points raises ValueError."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize([], 8)
