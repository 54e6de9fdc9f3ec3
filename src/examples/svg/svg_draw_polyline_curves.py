"""Creates a SVG file showing one control polygon drawn as
LINEAR, BEZIER and SPLINE curve, each next to the other.
The middle half of the spline is highlighted as sub-polyline
and the midpoint of each curve is marked with a dot.
"""

import os

import svgwrite

from polycurve.common import CurveType
from polycurve.polyline import Polyline

OUTPUT_FILE = "data/output/example/svg/polyline_curves.svg"

CANVAS_WIDTH = 210  # DIN A4 page width in mm
CANVAS_HEIGHT = 297  # DIN A4 page height in mm

CONTROL_POINTS = [(0, 0), (20, 40), (45, 10), (60, 45), (80, 5)]
CURVE_OFFSET_Y = 80  # vertical distance between the curves in mm
MARGIN = 20  # left and top margin in mm

CURVE_COLORS = {
    CurveType.LINEAR: "black",
    CurveType.BEZIER: "blue",
    CurveType.SPLINE: "green",
}


def points_to_svg(points, offset_y: float):
    """Convert 3D points into SVG (x, y) tuples, z is dropped."""
    return [(MARGIN + float(x), MARGIN + offset_y + float(y)) for x, y, _ in points]


def main(output_file: str = OUTPUT_FILE):
    """Draws the control polygon of each curve type in light gray,
    the curve points on top of it and the highlighted sub-polyline.
    Finally, it saves the drawing to a SVG file.
    """
    directory = os.path.dirname(output_file)
    if directory:
        os.makedirs(directory, exist_ok=True)

    dwg = svgwrite.Drawing(
        output_file,
        size=(f"{CANVAS_WIDTH}mm", f"{CANVAS_HEIGHT}mm"),
        viewBox=f"0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}",
    )

    for row, curve_type in enumerate(CurveType):
        offset_y = row * CURVE_OFFSET_Y
        polyline = Polyline.from_points(CONTROL_POINTS, curve_type, color=CURVE_COLORS[curve_type], width=1)

        # Control polygon
        dwg.add(
            dwg.polyline(
                points_to_svg(polyline.points, offset_y),
                stroke="lightgray",
                stroke_width=0.3,
                fill="none",
            )
        )

        # Curve
        dwg.add(
            dwg.polyline(
                points_to_svg(polyline.curve_points, offset_y),
                stroke=polyline.color,
                stroke_width=0.5 * polyline.width,
                fill="none",
            )
        )

        # Middle half of the curve
        dwg.add(
            dwg.polyline(
                points_to_svg(polyline.sub_polyline(0.25, 0.75), offset_y),
                stroke="red",
                stroke_width=1.0,
                stroke_opacity=0.5,
                fill="none",
            )
        )

        # Midpoint
        (center,) = points_to_svg([polyline.position_at(0.5)], offset_y)
        dwg.add(dwg.circle(center=center, r=1.2, fill="red"))

    dwg.saveas(output_file, pretty=True, indent=2)


if __name__ == "__main__":
    main()
