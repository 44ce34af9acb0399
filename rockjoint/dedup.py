"""Collapse near-duplicate line detections into one segment per trace.

A probabilistic Hough transform typically reports the same crack several
times: nearly identical copies, and shorter fragments lying along a longer
detection. ``remove_duplicate_segments`` keeps the longest evidence for each
trace and drops the rest. No segment is synthesized or merged; the output is
a subset of the input.
"""

from __future__ import annotations

import logging
from math import hypot
from typing import Iterable, List

from .config import COLLINEAR_ANGLE_DEG, DEFAULT_MATCH_THRESHOLD, MIDPOINT_GATE_RATIO
from .types import LineSegment, Point

logger = logging.getLogger(__name__)


def point_to_line_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Perpendicular distance from ``point`` to the infinite line through the two points.

    A zero-length line degrades to the distance to ``line_start``.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length = hypot(dx, dy)
    if length == 0:
        return point.distance_to(line_start)
    cross = dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x
    return abs(cross) / length


def point_to_segment_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from ``point`` to the nearest point on the segment (projection clamped to [0, 1])."""
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    det = dx * dx + dy * dy
    if det == 0:
        return point.distance_to(seg_start)
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / det
    t = max(0.0, min(1.0, t))
    return point.distance_to(Point(seg_start.x + t * dx, seg_start.y + t * dy))


def endpoints_match(candidate: LineSegment, existing: LineSegment, threshold: float) -> bool:
    """True if both endpoints coincide within ``threshold``, in either pairing."""
    direct = (
        candidate.start.distance_to(existing.start) < threshold
        and candidate.end.distance_to(existing.end) < threshold
    )
    if direct:
        return True
    return (
        candidate.start.distance_to(existing.end) < threshold
        and candidate.end.distance_to(existing.start) < threshold
    )


def folded_angle_difference(a_deg: float, b_deg: float) -> float:
    """Difference between two [0, 180) orientations, folded into [0, 90]."""
    diff = abs(a_deg - b_deg)
    return 180.0 - diff if diff > 90.0 else diff


def is_collinear_fragment(
    candidate: LineSegment,
    existing: LineSegment,
    threshold: float,
    angle_tolerance: float = COLLINEAR_ANGLE_DEG,
) -> bool:
    """True if ``candidate`` lies along ``existing`` near enough to be the same trace."""
    if folded_angle_difference(candidate.angle_deg(), existing.angle_deg()) >= angle_tolerance:
        return False
    gate = max(candidate.length(), existing.length()) * MIDPOINT_GATE_RATIO
    if candidate.midpoint().distance_to(existing.midpoint()) >= gate:
        return False
    return (
        point_to_line_distance(candidate.start, existing.start, existing.end) < threshold
        and point_to_line_distance(candidate.end, existing.start, existing.end) < threshold
    )


def is_duplicate(candidate: LineSegment, existing: LineSegment, threshold: float) -> bool:
    return endpoints_match(candidate, existing, threshold) or is_collinear_fragment(
        candidate, existing, threshold
    )


def remove_duplicate_segments(
    segments: Iterable[LineSegment],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> List[LineSegment]:
    """Return one segment per distinct trace, longest first.

    Candidates are visited longest first and only compared against segments
    already accepted, so whenever two segments are duplicates the longer one
    survives. Equal lengths keep their input order.
    """
    ordered = sorted(segments, key=lambda s: s.length(), reverse=True)
    result: List[LineSegment] = []
    for segment in ordered:
        if any(is_duplicate(segment, existing, threshold) for existing in result):
            continue
        result.append(segment)
    logger.debug("Deduplicated %d raw segments to %d (threshold=%.1f px)", len(ordered), len(result), threshold)
    return result
