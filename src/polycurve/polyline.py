"""Polyline value with its control points and the derived curve points for rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

import numpy as np
from numpy.typing import NDArray

from polycurve.arc_length import ArcLengthIndex
from polycurve.common import CurveType
from polycurve.curve import CurveBuilder
from polycurve.geom import GeomMath, PointsLike

###############################################################################
# Polyline
###############################################################################


@dataclass(frozen=True, eq=False)
class Polyline:
    """Immutable polyline defined by control points and a curve type.

    The curve points are computed once at construction from the control points and
    the curve type and never change afterwards. Two polylines are equal if their
    control points, curve type, color and width are equal.

    Attributes:
        points: Read-only array of control points (shape: n_points, 3), n_points >= 1
        curve_type: How the control points are turned into curve points
        color: Rendering color, carried but not interpreted
        width: Line width in pixels, carried but not interpreted
        curve_points: Read-only array of sampled curve points (shape: n_curve_points, 3)
    """

    points: NDArray[np.float64]
    curve_type: CurveType = CurveType.LINEAR
    color: Any = None
    width: int = 1
    curve_points: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.curve_type, CurveType):
            raise ValueError(f"Invalid curve type: {self.curve_type!r}")

        points = np.array(GeomMath.as_points(self.points), dtype=np.float64)
        if points.shape[0] == 0:
            raise ValueError("Polyline requires at least one point.")
        points.flags.writeable = False

        curve_points = CurveBuilder.build(points, self.curve_type)
        if curve_points is not points:
            curve_points.flags.writeable = False

        if isinstance(self.color, (list, np.ndarray)):
            object.__setattr__(self, "color", tuple(np.asarray(self.color).tolist()))
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "curve_points", curve_points)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Polyline):
            return NotImplemented
        return (
            np.array_equal(self.points, other.points)
            and self.curve_type is other.curve_type
            and self.color == other.color
            and self.width == other.width
        )

    def __str__(self) -> str:
        return str(self.points.tolist())

    def approx_equal(self, other: Polyline, rtol: float = 1e-9, atol: float = 1e-9) -> bool:
        """Check if two polylines are equal within floating point tolerances.

        Control points are compared with np.allclose, all other attributes exactly.

        Args:
            other: Polyline to compare with
            rtol: Relative tolerance for coordinates
            atol: Absolute tolerance for coordinates

        Returns:
            bool: True if the polylines are approximately equal
        """
        if not isinstance(other, Polyline):
            return False
        if self.points.shape != other.points.shape:
            return False
        return (
            np.allclose(self.points, other.points, rtol=rtol, atol=atol)
            and self.curve_type is other.curve_type
            and self.color == other.color
            and self.width == other.width
        )

    @classmethod
    def from_points(
        cls,
        points: PointsLike,
        curve_type: CurveType = CurveType.LINEAR,
        color: Any = None,
        width: int = 1,
    ) -> Polyline:
        """Create a polyline from any sequence of (x, y) or (x, y, z) coordinates."""
        return cls(GeomMath.as_points(points), curve_type, color, width)

    @cached_property
    def cumulative_lengths(self) -> NDArray[np.float64]:
        """Read-only cumulative lengths of the curve points."""
        lengths = ArcLengthIndex.cumulative_lengths(self.curve_points)
        lengths.flags.writeable = False
        return lengths

    @property
    def length(self) -> float:
        """Total length of the curve."""
        return float(self.cumulative_lengths[-1])

    def position_at(self, frac: float) -> NDArray[np.float64]:
        """Return the position on the curve at a fraction of its total length."""
        return ArcLengthIndex.position_at_fraction(self.curve_points, frac, self.cumulative_lengths)

    def sub_polyline(self, frac0: float, frac1: float) -> NDArray[np.float64]:
        """Return the curve points between two fractions of the total length."""
        return ArcLengthIndex.sub_polyline(self.curve_points, frac0, frac1, self.cumulative_lengths)


###############################################################################
# Main
###############################################################################


def main():
    """Main"""
    control_points = [(0.0, 0.0, 0.0), (10.0, 10.0, 0.0), (20.0, 0.0, 0.0), (30.0, 10.0, 0.0)]
    for curve_type in CurveType:
        polyline = Polyline.from_points(control_points, curve_type)
        print(
            f"{curve_type.name:7s} curve points: {polyline.curve_points.shape[0]:3d}  "
            f"length: {polyline.length:8.4f}  "
            f"middle: {polyline.position_at(0.5).tolist()}"
        )


if __name__ == "__main__":
    main()
