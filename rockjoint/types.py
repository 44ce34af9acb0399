from __future__ import annotations

from dataclasses import dataclass, field
from math import atan2, degrees, hypot
from typing import List, Optional

from .config import PALETTE


@dataclass(frozen=True)
class Point:
    """A 2-D coordinate in image pixel space."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class LineSegment:
    """A single line segment defined by two endpoints start -> end.

    Angle is returned as an orientation in degrees within [0, 180), since a
    trace and its reverse are the same geometric object.
    """

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "LineSegment":
        return cls(Point(x1, y1), Point(x2, y2))

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def angle_deg(self) -> float:
        """Return orientation angle in degrees folded to [0, 180).

        Uses arctan2(dy, dx) in degrees within (-180, 180], then folds.
        """
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        # Second fold: a tiny negative angle wraps to 360.0, not 180.0
        a180 = (degrees(atan2(dy, dx)) % 360.0) % 180.0
        # Normalize -0.0 to 0.0
        return 0.0 if abs(a180) < 1e-12 else a180

    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2.0, (self.start.y + self.end.y) / 2.0)


@dataclass(frozen=True)
class ScaleData:
    """Pixel-to-metre conversion plus the calibration that produced it."""

    pixels_per_meter: float
    point1: Optional[Point] = None
    point2: Optional[Point] = None
    real_world_distance: Optional[float] = None

    def to_meters(self, length_px: float) -> float:
        """Pixel length in metres; 0 when the scale is not positive."""
        if not self.pixels_per_meter > 0:
            return 0.0
        return length_px / self.pixels_per_meter

    @classmethod
    def from_calibration(cls, point1: Point, point2: Point, real_world_distance: float) -> "ScaleData":
        """Derive the scale from two picked points and the distance between them (metres)."""
        # NaN fails the comparison too
        if real_world_distance is None or not real_world_distance > 0:
            raise ValueError(f"real-world distance must be positive, got {real_world_distance!r}")
        pixel_distance = point1.distance_to(point2)
        return cls(
            pixels_per_meter=pixel_distance / real_world_distance,
            point1=point1,
            point2=point2,
            real_world_distance=real_world_distance,
        )


def full_circle_orientation(start: Point, end: Point) -> float:
    """Direction of start -> end in degrees, within [0, 360)."""
    a = degrees(atan2(end.y - start.y, end.x - start.x))
    return (a + 360.0) % 360.0


@dataclass
class Joint:
    """A measured discontinuity trace.

    ``orientation`` is the full-circle direction in [0, 360), or None when it
    has not been computed (e.g. imported without angles).
    """

    id: str
    start: Point
    end: Point
    length_pixels: float
    length_meters: float
    orientation: Optional[float] = None
    kind: str = "detected"
    confidence: Optional[float] = None

    def to_segment(self) -> LineSegment:
        return LineSegment(self.start, self.end)

    def move_endpoint(self, which: str, point: Point, scale: ScaleData) -> None:
        """Move the ``"start"`` or ``"end"`` point and recompute derived values."""
        if which == "start":
            self.start = point
        elif which == "end":
            self.end = point
        else:
            raise ValueError(f"endpoint must be 'start' or 'end', got {which!r}")
        self.length_pixels = self.start.distance_to(self.end)
        self.length_meters = scale.to_meters(self.length_pixels)
        self.orientation = full_circle_orientation(self.start, self.end)


@dataclass
class JointSet:
    """Joints sharing one orientation bin. Membership only; joints are shared."""

    id: int
    mean_orientation: float
    count: int
    joints: List[Joint] = field(default_factory=list)
    total_length: float = 0.0
    mean_length: float = 0.0
    color_index: int = 0
    bin_start: float = 0.0

    @property
    def color(self) -> str:
        return PALETTE[self.color_index % len(PALETTE)]


@dataclass(frozen=True)
class FractureStats:
    """Summary statistics in metric base units (m, m^2, m/m^2, 1/m)."""

    joint_count: int = 0
    total_length: float = 0.0
    mean_length: float = 0.0
    median_length: float = 0.0
    min_length: float = 0.0
    max_length: float = 0.0
    area_analyzed: float = 0.0
    p21: float = 0.0
    frequency: float = 0.0
