"""RockJoint: rock-joint trace statistics from photographs.

This package turns raw line-detector output into a clean set of joints,
groups them into orientation sets (15° bins) and computes fracture
statistics (trace lengths, P21 intensity, linear frequency), plus plots
(trace map, rose diagram), a CLI and a small viewer.

Modules are intentionally small and focused to make extension easy.
"""

from .types import FractureStats, Joint, JointSet, LineSegment, Point, ScaleData
from .dedup import remove_duplicate_segments
from .joints import detect_joints, joint_from_points, joints_from_segments
from .stats import cluster_joint_sets, fracture_stats, normalize_orientation

__all__ = [
    "Point",
    "LineSegment",
    "ScaleData",
    "Joint",
    "JointSet",
    "FractureStats",
    "remove_duplicate_segments",
    "joint_from_points",
    "joints_from_segments",
    "detect_joints",
    "normalize_orientation",
    "cluster_joint_sets",
    "fracture_stats",
]
