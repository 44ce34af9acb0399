"""Build and look up joints.

Joints come from two places: segments returned by the line detector (after
deduplication) and traces drawn by hand. Both end up as the same ``Joint``
record with pixel and metric lengths and a full-circle orientation.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, List, Optional, Tuple

from .config import DETECTION_MATCH_THRESHOLD, MIN_JOINT_LENGTH_M
from .dedup import point_to_segment_distance, remove_duplicate_segments
from .types import Joint, LineSegment, Point, ScaleData, full_circle_orientation

logger = logging.getLogger(__name__)


def calculate_distance(p1: Point, p2: Point) -> float:
    return p1.distance_to(p2)


def calculate_orientation(p1: Point, p2: Point) -> float:
    """Direction p1 -> p2 in degrees within [0, 360)."""
    return full_circle_orientation(p1, p2)


def joint_from_points(
    start: Point,
    end: Point,
    scale: ScaleData,
    joint_id: Optional[str] = None,
    kind: str = "manual",
) -> Joint:
    length_px = calculate_distance(start, end)
    return Joint(
        id=joint_id if joint_id is not None else f"joint_{uuid.uuid4().hex}",
        start=start,
        end=end,
        length_pixels=length_px,
        length_meters=scale.to_meters(length_px),
        orientation=calculate_orientation(start, end),
        kind=kind,
    )


def joints_from_segments(
    segments: Iterable[LineSegment],
    scale: ScaleData,
    min_length_m: float = MIN_JOINT_LENGTH_M,
) -> List[Joint]:
    """Convert segments to detected joints, drop short ones, sort longest first.

    Ids are ``joint_<i>`` where ``i`` is the segment's position in the input.
    """
    joints = [
        joint_from_points(s.start, s.end, scale, joint_id=f"joint_{i}", kind="detected")
        for i, s in enumerate(segments)
    ]
    kept = [j for j in joints if j.length_meters >= min_length_m]
    if len(kept) < len(joints):
        logger.debug("Dropped %d joints shorter than %.3f m", len(joints) - len(kept), min_length_m)
    kept.sort(key=lambda j: j.length_meters, reverse=True)
    return kept


def detect_joints(
    raw_segments: Iterable[LineSegment],
    scale: ScaleData,
    threshold: float = DETECTION_MATCH_THRESHOLD,
    min_length_m: float = MIN_JOINT_LENGTH_M,
) -> List[Joint]:
    """Turn raw line-detector output into a clean list of joints."""
    segments = remove_duplicate_segments(raw_segments, threshold=threshold)
    joints = joints_from_segments(segments, scale, min_length_m=min_length_m)
    logger.info("Detected %d joints from %d unique segments", len(joints), len(segments))
    return joints


def remove_joint(joints: Iterable[Joint], joint_id: str) -> List[Joint]:
    return [j for j in joints if j.id != joint_id]


def find_joint_at_point(joints: Iterable[Joint], point: Point, threshold: float = 10.0) -> Optional[Joint]:
    """First joint whose trace passes within ``threshold`` pixels of ``point``."""
    for joint in joints:
        if point_to_segment_distance(point, joint.start, joint.end) < threshold:
            return joint
    return None


def find_endpoint_at_point(
    joints: Iterable[Joint], point: Point, threshold: float = 15.0
) -> Optional[Tuple[Joint, str]]:
    """First (joint, "start" | "end") whose endpoint lies within ``threshold`` of ``point``."""
    for joint in joints:
        if calculate_distance(point, joint.start) < threshold:
            return joint, "start"
        if calculate_distance(point, joint.end) < threshold:
            return joint, "end"
    return None
