"""Arc length parameterization of point sequences.

Positions along a polyline are addressed by a fraction of its total length.
The cumulative length table of the points is searched with a binary search and
the position is interpolated linearly inside the segment containing it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from polycurve.common import ArcLengthSearchError
from polycurve.geom import GeomMath, PointsLike

logger = logging.getLogger(__name__)


###############################################################################
# ArcLengthIndex
###############################################################################
class ArcLengthIndex:
    """Collection of static arc length queries over point sequences."""

    @staticmethod
    def cumulative_lengths(points: PointsLike) -> NDArray[np.float64]:
        """Return the cumulative lengths of the nodes along the polyline.

        Entry 0 is 0.0 and entry i is entry i-1 plus the distance between point i-1
        and point i, so the last entry is the total length.

        Args:
            points: Ordered points, shape (n, 3)

        Returns:
            NDArray[np.float64] of shape (n,), non-decreasing
        """
        pts = GeomMath.as_points(points)
        lengths = np.zeros(pts.shape[0], dtype=np.float64)
        if pts.shape[0] > 1:
            lengths[1:] = np.cumsum(GeomMath.segment_lengths(pts))
        return lengths

    @classmethod
    def total_length(cls, points: PointsLike) -> float:
        """Return the total length of the polyline."""
        lengths = cls.cumulative_lengths(points)
        return float(lengths[-1]) if lengths.shape[0] > 0 else 0.0

    @classmethod
    def position_at_fraction(
        cls,
        points: PointsLike,
        frac: float,
        cumulative_lengths: Optional[NDArray[np.float64]] = None,
    ) -> NDArray[np.float64]:
        """Return the position at a fractional distance along the polyline.

        A single point, or several coinciding points, resolve to the first point.
        An empty sequence has no position at all; for it the origin (0, 0, 0) is
        returned and a warning is logged.

        Args:
            points: Ordered points of the polyline
            frac: Fraction of the total length, within [0, 1]
            cumulative_lengths: Precomputed result of cumulative_lengths(points)

        Returns:
            NDArray[np.float64]: New point of shape (3,)

        Raises:
            ValueError: If frac is outside [0, 1]
            ArcLengthSearchError: If the given cumulative lengths do not fit the points
        """
        cls._check_fraction(frac, "frac")
        pts = GeomMath.as_points(points)
        lengths = cls._resolve_lengths(pts, cumulative_lengths)
        if pts.shape[0] == 0:
            logger.warning("Position requested on an empty polyline, returning the origin")
            return np.zeros(3, dtype=np.float64)

        dist = frac * lengths[-1]
        index, exact = cls._locate(lengths, dist)

        # Exact match
        if exact:
            return pts[index].copy()

        # No insertion point before the first node
        if index == 0:
            logger.warning("Distance %s lies before the start of the polyline, returning the origin", dist)
            return np.zeros(3, dtype=np.float64)

        if index == pts.shape[0]:
            return pts[-1].copy()
        return cls._interpolate(pts, lengths, index, dist)

    @classmethod
    def sub_polyline(
        cls,
        points: PointsLike,
        frac0: float,
        frac1: float,
        cumulative_lengths: Optional[NDArray[np.float64]] = None,
    ) -> NDArray[np.float64]:
        """Return the section of the polyline between two fractional distances.

        The result starts with the (interpolated) position at frac0, continues with
        all original points lying strictly before the distance for frac1 and ends
        with the (interpolated) position at frac1. Start and end points that fall
        exactly on a node are taken over unchanged, so sub_polyline(points, 0, 1)
        reproduces the points.

        Args:
            points: Ordered points of the polyline
            frac0: Fractional distance of the start, within [0, 1]
            frac1: Fractional distance of the end, within [0, 1] and above frac0
            cumulative_lengths: Precomputed result of cumulative_lengths(points)

        Returns:
            NDArray[np.float64] of shape (m, 3)

        Raises:
            ValueError: If the fractions are outside [0, 1] or frac0 >= frac1
            ArcLengthSearchError: If the start position cannot be located
        """
        cls._check_fraction(frac0, "frac0")
        cls._check_fraction(frac1, "frac1")
        if frac0 >= frac1:
            raise ValueError(f"frac0 must be smaller than frac1, got frac0={frac0}, frac1={frac1}")

        pts = GeomMath.as_points(points)
        lengths = cls._resolve_lengths(pts, cumulative_lengths)
        num_points = pts.shape[0]
        if num_points == 0:
            raise ArcLengthSearchError("Unable to find position in an empty polyline.")

        # Position of the first node
        dist0 = frac0 * lengths[-1]
        index, exact = cls._locate(lengths, dist0)
        if not exact and index == 0:
            raise ArcLengthSearchError(f"Unable to find position {dist0} in polyline using binary search.")

        result: List[NDArray[np.float64]] = []
        if exact:
            result.append(pts[index])
            index += 1
            if index == num_points:
                return np.vstack(result)
        elif index == num_points:
            result.append(pts[-1])
        else:
            result.append(cls._interpolate(pts, lengths, index, dist0))

        # Nodes following the insertion point
        dist1 = frac1 * lengths[-1]
        while index < num_points and lengths[index] < dist1:
            result.append(pts[index])
            index += 1
        if index == num_points:
            return np.vstack(result)

        # Position of the last node
        if lengths[index] == dist1:
            result.append(pts[index])
        else:
            result.append(cls._interpolate(pts, lengths, index, dist1))
        return np.vstack(result)

    @staticmethod
    def _check_fraction(value: float, label: str) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{label} must be within [0, 1], got {value}")

    @classmethod
    def _resolve_lengths(
        cls, pts: NDArray[np.float64], cumulative_lengths: Optional[NDArray[np.float64]]
    ) -> NDArray[np.float64]:
        """Compute the cumulative lengths, or check the precomputed ones."""
        if cumulative_lengths is None:
            return cls.cumulative_lengths(pts)

        lengths = np.asarray(cumulative_lengths, dtype=np.float64)
        if lengths.ndim != 1 or lengths.shape[0] != pts.shape[0]:
            raise ArcLengthSearchError(
                f"Cumulative lengths of shape {lengths.shape} do not match {pts.shape[0]} points"
            )
        if lengths.shape[0] > 0:
            if not np.all(np.isfinite(lengths)):
                raise ArcLengthSearchError("Cumulative lengths contain NaN or infinity")
            if lengths[0] != 0.0 or np.any(np.diff(lengths) < 0.0):
                raise ArcLengthSearchError("Cumulative lengths must start at 0.0 and be non-decreasing")
        return lengths

    @staticmethod
    def _locate(lengths: NDArray[np.float64], dist: float) -> Tuple[int, bool]:
        """Binary search of dist in the cumulative lengths.

        Returns:
            (index, True) for an exact match at index, otherwise (insertion index, False)
            where the insertion index is the first entry greater than dist.
        """
        index = int(np.searchsorted(lengths, dist, side="left"))
        exact = index < lengths.shape[0] and lengths[index] == dist
        return index, bool(exact)

    @staticmethod
    def _interpolate(
        pts: NDArray[np.float64], lengths: NDArray[np.float64], index: int, dist: float
    ) -> NDArray[np.float64]:
        """Interpolate between node index-1 and node index at the given distance."""
        frac_in_segment = (dist - lengths[index - 1]) / (lengths[index] - lengths[index - 1])
        return GeomMath.interpolate(pts[index - 1], pts[index], frac_in_segment)
