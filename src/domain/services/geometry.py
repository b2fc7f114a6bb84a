"""Polar projection and arc paths for ring and donut charts."""

import math

from src.domain.constants import (
    LARGE_ARC_THRESHOLD_DEGREES,
    MIN_LABEL_ANGLE_DEGREES,
    RING_GAP_DEGREES,
)
from src.domain.models.charts import ArcPath, ArcTo, ChartSector, MoveTo, Point


def polar_to_cartesian(
    center_x: float,
    center_y: float,
    radius: float,
    angle_degrees: float,
) -> Point:
    """Project a polar coordinate onto the chart plane.

    The angle is rotated by -90 degrees first, so angle 0 points up.

    Args:
        center_x: X coordinate of the circle center.
        center_y: Y coordinate of the circle center.
        radius: Distance from the center.
        angle_degrees: Angle in degrees.

    Returns:
        Point: Projected coordinates.
    """
    angle_radians = math.radians(angle_degrees - 90)
    return Point(
        x=center_x + radius * math.cos(angle_radians),
        y=center_y + radius * math.sin(angle_radians),
    )


def describe_arc(
    x: float,
    y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    gap: float = 0.0,
) -> ArcPath:
    """Describe a circular arc between two angles.

    The path moves to the point at ``end_angle`` and arcs back to the point
    at ``start_angle`` with sweep flag 0. Renderers rely on that order for
    the sweep direction.

    Args:
        x: X coordinate of the circle center.
        y: Y coordinate of the circle center.
        radius: Arc radius.
        start_angle: Start angle in degrees.
        end_angle: End angle in degrees.
        gap: Degrees trimmed from the arc, half on each side.

    Returns:
        ArcPath: Move-to command followed by a single arc command.
    """
    adjusted_start = start_angle + gap / 2
    adjusted_end = end_angle - gap / 2
    end_point = polar_to_cartesian(x, y, radius, adjusted_end)
    start_point = polar_to_cartesian(x, y, radius, adjusted_start)
    large_arc_flag = (
        1 if adjusted_end - adjusted_start > LARGE_ARC_THRESHOLD_DEGREES else 0
    )
    return ArcPath(
        commands=(
            MoveTo(point=end_point),
            ArcTo(
                radius_x=radius,
                radius_y=radius,
                rotation=0,
                large_arc=large_arc_flag,
                sweep=0,
                point=start_point,
            ),
        )
    )


def sector_label_position(
    sector: ChartSector,
    center_x: float,
    center_y: float,
    radius: float,
    gap: float = RING_GAP_DEGREES,
    min_angle: float = MIN_LABEL_ANGLE_DEGREES,
) -> Point | None:
    """Return where to place a sector label, or None if it is too thin."""
    if sector.angle < min_angle:
        return None
    adjusted_start = sector.start_angle + gap / 2
    adjusted_end = sector.end_angle - gap / 2
    mid_angle = adjusted_start + (adjusted_end - adjusted_start) / 2
    return polar_to_cartesian(center_x, center_y, radius, mid_angle)


__all__ = ["polar_to_cartesian", "describe_arc", "sector_label_position"]
