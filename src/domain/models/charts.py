"""Domain models for proportional chart geometry."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.subscriptions import Subscription


@dataclass(frozen=True)
class ChartSector:
    """One wedge of the spend chart.

    Attributes:
        subscription: Source subscription, passed through unchanged.
        period_amount: Subscription amount in the reporting period.
        percentage: Share of the period total, 0-100.
        start_angle: Start of the wedge in degrees (-90 is 12 o'clock).
        end_angle: End of the wedge in degrees.
        angle: Angular size of the wedge.
    """

    subscription: Subscription
    period_amount: Decimal
    percentage: float
    start_angle: float
    end_angle: float
    angle: float


@dataclass(frozen=True)
class ChartData:
    """Ordered sectors plus the unfiltered period total."""

    sectors: list[ChartSector]
    total_for_period: Decimal


@dataclass(frozen=True)
class Point:
    """Cartesian point in chart coordinates (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class MoveTo:
    """Move the pen without drawing."""

    point: Point

    def tokens(self) -> list:
        return ["M", self.point.x, self.point.y]


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc from the current pen position to ``point``."""

    radius_x: float
    radius_y: float
    rotation: float
    large_arc: int
    sweep: int
    point: Point

    def tokens(self) -> list:
        return [
            "A",
            self.radius_x,
            self.radius_y,
            self.rotation,
            self.large_arc,
            self.sweep,
            self.point.x,
            self.point.y,
        ]


@dataclass(frozen=True)
class ArcPath:
    """Ordered drawing commands describing one arc."""

    commands: tuple[MoveTo | ArcTo, ...]

    def to_svg_path(self) -> str:
        """Render the commands as an SVG ``d`` attribute."""
        return " ".join(
            _format_token(token)
            for command in self.commands
            for token in command.tokens()
        )


def _format_token(token) -> str:
    if isinstance(token, str):
        return token
    value = float(token)
    if value.is_integer():
        return str(int(value))
    return repr(value)


__all__ = [
    "ChartSector",
    "ChartData",
    "Point",
    "MoveTo",
    "ArcTo",
    "ArcPath",
]
