"""Bezier curve evaluation and sampling for polyline curve building."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from polycurve.geom import GeomMath, PointsLike

PointLike = Union[Sequence[float], NDArray[np.float64]]


class BezierCurve:
    """Class to handle Bezier curve evaluation of arbitrary degree.

    Provides a general de Casteljau evaluator, closed-form quadratic and cubic
    evaluators and samplers writing into pre-allocated buffers.
    """

    @staticmethod
    def evaluate(t: float, control_points: PointsLike) -> NDArray[np.float64]:
        """
        Evaluate a Bezier curve of degree len(control_points) - 1 at parameter t.

        Uses the de Casteljau construction: the working array of points is collapsed
        by one level per pass, each new point being (1 - t) * left + t * right,
        until a single point remains.

        Args:
            t: Curve parameter in [0, 1]
            control_points: Ordered control points, at least one

        Returns:
            NDArray[np.float64]: New point of shape (3,)

        Raises:
            ValueError: If there are no control points or t is outside [0, 1]
        """
        if not 0.0 <= t <= 1.0:
            raise ValueError(f"Curve parameter must be within [0, 1], got {t}")
        work = np.array(GeomMath.as_points(control_points), dtype=np.float64)
        if work.shape[0] == 0:
            raise ValueError("At least one control point is required to evaluate a Bezier curve.")

        omt = 1.0 - t
        for level in range(work.shape[0] - 1, 0, -1):
            work[:level] = work[:level] * omt + work[1 : level + 1] * t
        return work[0].copy()

    @staticmethod
    def evaluate_quadratic(
        s: float, p0: NDArray[np.float64], p1: NDArray[np.float64], c: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """
        Evaluate a quadratic Bezier curve with end points p0, p1 and control point c.

        B(s) = (1-s)^2*P0 + 2*s*(1-s)*C + s^2*P1

        Gives the same result as evaluate(s, [p0, c, p1]).
        """
        omt = 1.0 - s
        return omt * omt * p0 + 2.0 * s * omt * c + s * s * p1

    @staticmethod
    def evaluate_cubic(
        s: float,
        p0: NDArray[np.float64],
        p1: NDArray[np.float64],
        c0: NDArray[np.float64],
        c1: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve with end points p0, p1 and control points c0, c1.

        B(s) = (1-s)^3*P0 + 3*s*(1-s)^2*C0 + 3*s^2*(1-s)*C1 + s^3*P1

        Gives the same result as evaluate(s, [p0, c0, c1, p1]).
        """
        omt = 1.0 - s
        return omt * omt * omt * p0 + 3.0 * s * omt * omt * c0 + 3.0 * s * s * omt * c1 + s * s * s * p1

    @staticmethod
    def sample_quadratic_segment_inplace(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        p0: NDArray[np.float64],
        p1: NDArray[np.float64],
        c: NDArray[np.float64],
        steps: int,
        output_buffer: NDArray[np.float64],
        start_index: int = 0,
    ) -> int:
        """
        Sample a quadratic Bezier segment directly into a pre-allocated buffer.

        Writes the points for t = 0, 1/steps, ..., (steps-1)/steps. The end point p1
        is not written, it is the start of the following segment.

        Args:
            p0: Start point of the segment
            p1: End point of the segment
            c: Control point
            steps: Number of samples to write
            output_buffer: Pre-allocated buffer of shape (N, 3)
            start_index: Starting index in output_buffer

        Returns:
            Number of points written to buffer
        """
        t = (np.arange(steps, dtype=np.float64) / steps)[:, np.newaxis]
        omt = 1.0 - t

        output_buffer[start_index : start_index + steps] = omt * omt * p0 + 2.0 * t * omt * c + t * t * p1
        return steps

    @staticmethod
    def sample_cubic_segment_inplace(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        p0: NDArray[np.float64],
        p1: NDArray[np.float64],
        c0: NDArray[np.float64],
        c1: NDArray[np.float64],
        steps: int,
        output_buffer: NDArray[np.float64],
        start_index: int = 0,
    ) -> int:
        """
        Sample a cubic Bezier segment directly into a pre-allocated buffer.

        Writes the points for t = 0, 1/steps, ..., (steps-1)/steps, the end point p1
        is left to the following segment.

        Returns:
            Number of points written to buffer
        """
        t = (np.arange(steps, dtype=np.float64) / steps)[:, np.newaxis]
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t

        output_buffer[start_index : start_index + steps] = (
            omt2 * omt * p0 + 3.0 * t * omt2 * c0 + 3.0 * t2 * omt * c1 + t2 * t * p1
        )
        return steps

    @classmethod
    def polygonize(cls, control_points: PointsLike, steps: int = 32) -> NDArray[np.float64]:
        """
        Polygonize a Bezier curve of arbitrary degree into line segments.

        The curve is evaluated at t = i/steps for i in 0..steps-1, then the last
        control point is appended exactly.

        Args:
            control_points: Ordered control points, at least one
            steps: Number of parametric steps

        Returns:
            NDArray[np.float64] of shape (steps+1, 3)

        Raises:
            ValueError: If there are no control points or steps is smaller than 1
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        points = GeomMath.as_points(control_points)
        if points.shape[0] == 0:
            raise ValueError("At least one control point is required to polygonize a Bezier curve.")

        result = np.empty((steps + 1, 3), dtype=np.float64)
        inv_steps = 1.0 / steps
        for i in range(steps):
            result[i] = cls.evaluate(i * inv_steps, points)
        result[steps] = points[-1]
        return result
