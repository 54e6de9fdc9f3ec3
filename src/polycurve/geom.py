"""Vector helpers for 3D points stored as numpy arrays"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

# Input accepted wherever a sequence of points is expected
PointsLike = Union[
    Sequence[Sequence[float]],
    NDArray[np.float64],
]


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to 3D point handling."""

    @staticmethod
    def as_point(value: Union[Sequence[float], NDArray[np.float64]]) -> NDArray[np.float64]:
        """
        Convert the given coordinates into a 3D point.

        A 2D coordinate (x, y) is lifted to (x, y, 0.0).

        Args:
            value (Sequence[float]): Coordinates (x, y) or (x, y, z)

        Returns:
            NDArray[np.float64]: New array of shape (3,)

        Raises:
            ValueError: If the value has the wrong size or is not finite
        """
        arr = np.array(value, dtype=np.float64).reshape(-1)
        if arr.shape[0] == 2:
            arr = np.append(arr, 0.0)
        if arr.shape[0] != 3:
            raise ValueError(f"point must have 2 or 3 coordinates, got {arr.shape[0]}")
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"point must be finite, got {arr.tolist()}")
        return arr

    @staticmethod
    def as_points(points: PointsLike) -> NDArray[np.float64]:
        """
        Convert the given sequence of coordinates into an array of 3D points.

        A float64 array of shape (n, 3) is returned as is, without copying.
        Points given as (x, y) are lifted to (x, y, 0.0).

        Args:
            points (PointsLike): Sequence of (x, y) or (x, y, z) coordinates

        Returns:
            NDArray[np.float64]: Array of shape (n, 3)

        Raises:
            ValueError: If the points are not two-dimensional with 2 or 3 columns,
                or contain NaN or infinity
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.size == 0:
            return np.empty((0, 3), dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"points must have 2 dimensions, got {arr.ndim}")
        if arr.shape[1] == 2:
            arr = np.column_stack([arr, np.zeros(arr.shape[0], dtype=np.float64)])
        elif arr.shape[1] != 3:
            raise ValueError(f"points must have shape (n, 2) or (n, 3), got {arr.shape}")
        if not np.all(np.isfinite(arr)):
            invalid = np.where(~np.all(np.isfinite(arr), axis=1))[0].tolist()
            raise ValueError(f"points contain invalid coordinates (NaN or infinity) at indices: {invalid}")
        return arr

    @staticmethod
    def distance(point_a: NDArray[np.float64], point_b: NDArray[np.float64]) -> float:
        """Euclidean distance between two points."""
        return float(np.linalg.norm(point_b - point_a))

    @staticmethod
    def segment_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Lengths of the n-1 straight segments of a point sequence."""
        if points.shape[0] < 2:
            return np.empty(0, dtype=np.float64)
        return np.linalg.norm(np.diff(points, axis=0), axis=1)

    @staticmethod
    def interpolate(
        point_a: NDArray[np.float64], point_b: NDArray[np.float64], fraction: float
    ) -> NDArray[np.float64]:
        """
        Linear interpolation between two points.

        Args:
            point_a (NDArray[np.float64]): Point returned for fraction 0.0
            point_b (NDArray[np.float64]): Point returned for fraction 1.0
            fraction (float): Position between the two points

        Returns:
            NDArray[np.float64]: New point a + (b - a) * fraction
        """
        return point_a + (point_b - point_a) * fraction
