"""Central module containing curve types, settings and exceptions for polyline curves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

###############################################################################
# Enums
###############################################################################


class CurveType(Enum):
    """Enum to define how the control points of a polyline are turned into a curve."""

    # Straight segments between the control points, no resampling
    LINEAR = auto()
    # One Bezier curve of degree n-1 over all n control points
    BEZIER = auto()
    # Piecewise quadratic/cubic Bezier segments passing through every control point
    SPLINE = auto()


###############################################################################
# Exceptions
###############################################################################


class PolylineError(Exception):
    """Base exception for polyline curve errors."""


class ArcLengthSearchError(PolylineError):
    """Raised when a distance cannot be located in a cumulative length table."""


###############################################################################
# CurveSettings
###############################################################################


@dataclass(frozen=True)
class CurveSettings:
    """Sampling densities used when building curve points.

    Attributes:
        bezier_steps: Number of parametric steps over the whole Bezier curve.
        spline_steps: Number of samples per spline segment.
    """

    bezier_steps: int = 32
    spline_steps: int = 16

    def __post_init__(self) -> None:
        for name in ("bezier_steps", "spline_steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

    def to_dict(self) -> dict:
        """Convert settings to a dictionary."""
        return {
            "bezier_steps": self.bezier_steps,
            "spline_steps": self.spline_steps,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CurveSettings":
        """Create CurveSettings from a dictionary."""
        return cls(
            bezier_steps=data.get("bezier_steps", 32),
            spline_steps=data.get("spline_steps", 16),
        )


DEFAULT_CURVE_SETTINGS = CurveSettings()


###############################################################################
# Functions
###############################################################################


def main() -> None:
    """Display the curve types and the default sampling settings."""
    for curve_type in CurveType:
        print(curve_type, curve_type.value)

    print()
    print("default settings:", DEFAULT_CURVE_SETTINGS.to_dict())


if __name__ == "__main__":
    main()
