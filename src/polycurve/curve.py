"""Building the sampled curve points of a polyline from its control points."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from polycurve.bezier import BezierCurve
from polycurve.common import DEFAULT_CURVE_SETTINGS, CurveSettings, CurveType
from polycurve.geom import GeomMath, PointsLike
from polycurve.spline import SplineFitter

logger = logging.getLogger(__name__)


###############################################################################
# CurveBuilder
###############################################################################
class CurveBuilder:
    """Dispatches on the curve type to produce the points used for rendering."""

    @staticmethod
    def build(
        points: PointsLike,
        curve_type: CurveType,
        settings: CurveSettings = DEFAULT_CURVE_SETTINGS,
    ) -> NDArray[np.float64]:
        """Return the sampled curve points for the given control points.

        - LINEAR: the control points themselves, without copying or resampling.
        - BEZIER: one Bezier curve over all control points, sampled with
          settings.bezier_steps parametric steps plus the exact last point.
        - SPLINE: the spline fitted through the control points with
          settings.spline_steps samples per segment.

        Args:
            points: Ordered control points
            curve_type: How the control points are connected
            settings: Sampling densities

        Returns:
            NDArray[np.float64] of shape (m, 3)

        Raises:
            ValueError: If curve_type is not a CurveType member
        """
        pts = GeomMath.as_points(points)

        if curve_type is CurveType.LINEAR:
            curve_points = pts
        elif curve_type is CurveType.BEZIER:
            curve_points = BezierCurve.polygonize(pts, settings.bezier_steps)
        elif curve_type is CurveType.SPLINE:
            curve_points = SplineFitter.fit(pts, settings.spline_steps)
        else:
            raise ValueError(f"Unsupported curve type: {curve_type!r}")

        logger.debug(
            "Built %s curve: %d control points -> %d curve points",
            curve_type.name,
            pts.shape[0],
            curve_points.shape[0],
        )
        return curve_points
