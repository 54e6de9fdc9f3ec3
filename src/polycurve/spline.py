"""Spline fitting through the control points of a polyline."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from polycurve.bezier import BezierCurve
from polycurve.geom import GeomMath, PointsLike

logger = logging.getLogger(__name__)


class SplineFitter:
    """Fits a smooth curve through every point of a polyline.

    The fit is loosely based on the finite difference tangents of a cubic Hermite
    spline, with these differences:
    - all segments are solved in Bezier form,
    - the first and last segments are quadratic, so the tangents at both ends
      of the curve are left unconstrained,
    - the interior control points are scaled by the segment length, which keeps
      short segments free of kinks and self intersections.
    """

    @staticmethod
    def compute_tangents(points: PointsLike) -> NDArray[np.float64]:
        """Finite difference tangents for the interior points.

        For interior point i the tangent is (p[i+1] - p[i-1]) / (l0 + l1) where l0
        and l1 are the lengths of the two adjacent segments. The tangent is not
        normalized. Two coinciding neighbours give a zero tangent.

        Args:
            points: Ordered points, shape (n, 3)

        Returns:
            NDArray[np.float64] of shape (max(n-2, 0), 3); row j belongs to point j+1
        """
        pts = GeomMath.as_points(points)
        if pts.shape[0] < 3:
            return np.empty((0, 3), dtype=np.float64)

        lengths = GeomMath.segment_lengths(pts)
        spans = lengths[:-1] + lengths[1:]
        chords = pts[2:] - pts[:-2]

        tangents = np.zeros_like(chords)
        nonzero = spans > 0.0
        tangents[nonzero] = chords[nonzero] / spans[nonzero][:, np.newaxis]
        return tangents

    @classmethod
    def fit(cls, points: PointsLike, steps: int = 16) -> NDArray[np.float64]:
        """Sample the spline through the given points.

        Every segment between two consecutive points contributes `steps` samples;
        the last input point is appended once at the end, giving
        2*steps + steps*(n-3) + 1 points for n >= 3 input points.
        With two or fewer points there is nothing to fit and the points are
        returned unchanged.

        Args:
            points: Ordered points to pass through
            steps: Number of samples per segment

        Returns:
            NDArray[np.float64] of shape (m, 3)

        Raises:
            ValueError: If steps is smaller than 1
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        pts = GeomMath.as_points(points)
        num_points = pts.shape[0]
        if num_points <= 2:
            return pts

        tangents = cls.compute_tangents(pts)
        result = np.empty((steps * (num_points - 1) + 1, 3), dtype=np.float64)
        out_idx = 0

        # Start with a quadratic segment
        p0, p1 = pts[0], pts[1]
        seg_length = GeomMath.distance(p0, p1)
        ctrl = p1 - tangents[0] * (seg_length / 2.0)
        out_idx += BezierCurve.sample_quadratic_segment_inplace(p0, p1, ctrl, steps, result, out_idx)

        # Interior segments are cubic
        for i in range(2, num_points - 1):
            p0, p1 = pts[i - 1], pts[i]
            seg_length = GeomMath.distance(p0, p1)
            ctrl0 = p0 + tangents[i - 2] * (seg_length / 3.0)
            ctrl1 = p1 - tangents[i - 1] * (seg_length / 3.0)
            out_idx += BezierCurve.sample_cubic_segment_inplace(p0, p1, ctrl0, ctrl1, steps, result, out_idx)

        # End with another quadratic segment
        p0, p1 = pts[-2], pts[-1]
        seg_length = GeomMath.distance(p0, p1)
        ctrl = p0 + tangents[-1] * (seg_length / 2.0)
        out_idx += BezierCurve.sample_quadratic_segment_inplace(p0, p1, ctrl, steps, result, out_idx)

        result[out_idx] = pts[-1]
        logger.debug("Fitted spline through %d points into %d curve points", num_points, result.shape[0])
        return result
