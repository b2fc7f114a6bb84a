"""Ring chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a ``ChartData``
produced by ``GetSubscriptionChartUseCase`` to a ring model, SVG markup and
a Plotly figure.

The UI is responsible for:
    - loading the ``ChartData`` (no IO here),
    - choosing between the SVG ring and the interactive Plotly figure.

Each subscription becomes one stroked arc. Arcs are separated by a small
angular gap and labelled at their midpoint when they are wide enough.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from html import escape
from typing import TYPE_CHECKING

from src.domain.constants import RING_GAP_DEGREES
from src.domain.models.charts import ChartData, ChartSector, Point
from src.domain.services.geometry import (
    describe_arc,
    polar_to_cartesian,
    sector_label_position,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


CHART_SIZE = 400
RING_RADIUS = 160
STROKE_WIDTH = 50
TRACK_COLOR = "#e5e7eb"
ARC_SAMPLE_STEP_DEGREES = 2.0
FULL_RING_DEGREES = 359.999
# Chart sectors start at -90 and polar_to_cartesian rotates by another -90,
# so drawing angles are shifted back by 90 to start at 12 o'clock.
SCREEN_ANGLE_OFFSET = 90.0


@dataclass(frozen=True)
class RingSegment:
    """Drawable arc for one chart sector.

    Attributes:
        sector: Source chart sector.
        path: SVG path ``d`` attribute of the arc.
        color: Stroke color taken from the subscription.
        label: Short text shown on hover or next to the arc.
        label_position: Where to place the label, None when too thin.
    """

    sector: ChartSector
    path: str
    color: str
    label: str
    label_position: Point | None


@dataclass(frozen=True)
class RingModel:
    """Ring segments plus the canvas geometry they were computed for."""

    segments: list[RingSegment]
    total_for_period: Decimal
    size: int
    radius: float
    stroke_width: float
    gap: float


def format_amount(value: Decimal, currency_code: str = "USD") -> str:
    """Format amounts for labels."""
    symbol = "$" if currency_code == "USD" else f"{currency_code} "
    return f"{symbol}{value:,.2f}"


def build_ring_model(
    chart: ChartData,
    *,
    size: int = CHART_SIZE,
    radius: float = RING_RADIUS,
    stroke_width: float = STROKE_WIDTH,
    gap: float = RING_GAP_DEGREES,
    currency_code: str = "USD",
) -> RingModel:
    """Build ring segments from chart sectors.

    A single sector covering the whole circle is drawn without a gap so the
    ring stays closed.

    Args:
        chart: Chart sectors and total.
        size: Width and height of the square canvas.
        radius: Ring radius measured to the middle of the stroke.
        stroke_width: Ring thickness.
        gap: Angular gap between segments, in degrees.
        currency_code: Currency used in labels.

    Returns:
        RingModel: Drawable segments in sector order.
    """
    center = size / 2
    segment_gap = gap if len(chart.sectors) > 1 else 0.0
    segments = []
    for sector in chart.sectors:
        screen = screen_sector(sector)
        arc = describe_arc(
            center,
            center,
            radius,
            screen.start_angle,
            screen.end_angle,
            gap=segment_gap,
        )
        segments.append(
            RingSegment(
                sector=sector,
                path=arc.to_svg_path(),
                color=sector.subscription.color,
                label=(
                    f"{sector.subscription.name}: "
                    f"{format_amount(sector.period_amount, currency_code)} "
                    f"({sector.percentage:.1f}%)"
                ),
                label_position=sector_label_position(
                    screen,
                    center,
                    center,
                    radius,
                    gap=segment_gap,
                ),
            )
        )
    return RingModel(
        segments=segments,
        total_for_period=chart.total_for_period,
        size=size,
        radius=radius,
        stroke_width=stroke_width,
        gap=segment_gap,
    )


def screen_sector(sector: ChartSector) -> ChartSector:
    """Return a copy of ``sector`` with angles shifted for drawing."""
    return replace(
        sector,
        start_angle=sector.start_angle + SCREEN_ANGLE_OFFSET,
        end_angle=sector.end_angle + SCREEN_ANGLE_OFFSET,
    )


def render_ring_svg(model: RingModel) -> str:
    """Render the ring model as standalone SVG markup.

    Segment paths are already in screen angles, so the SVG is not rotated.
    """
    center = model.size / 2
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{model.size}" '
        f'height="{model.size}" viewBox="0 0 {model.size} {model.size}">',
        f'<circle cx="{center:g}" cy="{center:g}" r="{model.radius:g}" '
        f'fill="none" stroke="{TRACK_COLOR}" '
        f'stroke-width="{model.stroke_width:g}" opacity="0.1"/>',
    ]
    for segment in model.segments:
        if segment.sector.angle >= FULL_RING_DEGREES:
            # An arc whose endpoints coincide renders nothing.
            parts.append(
                f'<circle cx="{center:g}" cy="{center:g}" '
                f'r="{model.radius:g}" fill="none" '
                f'stroke="{escape(segment.color)}" '
                f'stroke-width="{model.stroke_width:g}">'
                f"<title>{escape(segment.label)}</title></circle>"
            )
            continue
        parts.append(
            f'<path d="{segment.path}" fill="none" '
            f'stroke="{escape(segment.color)}" '
            f'stroke-width="{model.stroke_width:g}" stroke-linecap="round">'
            f"<title>{escape(segment.label)}</title></path>"
        )
    parts.append("</svg>")
    return "".join(parts)


def arc_points(
    sector: ChartSector,
    center: float,
    radius: float,
    gap: float = 0.0,
    step: float = ARC_SAMPLE_STEP_DEGREES,
) -> list[Point]:
    """Sample points along a sector arc from start to end angle.

    Plotly shapes cannot draw SVG arc commands, so the interactive figure
    draws each arc as a polyline through these points. Takes chart angles
    and shifts them to screen angles like the SVG paths.
    """
    screen = screen_sector(sector)
    start = screen.start_angle + gap / 2
    end = screen.end_angle - gap / 2
    if end <= start:
        return []
    count = max(int((end - start) / step), 1)
    return [
        polar_to_cartesian(
            center,
            center,
            radius,
            start + (end - start) * index / count,
        )
        for index in range(count + 1)
    ]


def build_plotly_figure(model: RingModel) -> "go.Figure":
    """Build an interactive Plotly ring from a ring model.

    Args:
        model: Precomputed ring model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    center = model.size / 2
    fig = go.Figure()
    for segment in model.segments:
        points = arc_points(
            segment.sector,
            center,
            model.radius,
            gap=model.gap,
        )
        fig.add_trace(
            go.Scatter(
                x=[point.x for point in points],
                y=[point.y for point in points],
                mode="lines",
                line=dict(color=segment.color, width=model.stroke_width / 2),
                name=segment.sector.subscription.name,
                hoverinfo="text",
                text=[segment.label] * len(points),
            )
        )
    fig.update_xaxes(visible=False, range=[0, model.size])
    # Chart coordinates grow downwards like SVG.
    fig.update_yaxes(
        visible=False,
        range=[model.size, 0],
        scaleanchor="x",
        scaleratio=1,
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=model.size,
        showlegend=True,
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


__all__ = [
    "RingSegment",
    "RingModel",
    "format_amount",
    "screen_sector",
    "build_ring_model",
    "render_ring_svg",
    "arc_points",
    "build_plotly_figure",
]
