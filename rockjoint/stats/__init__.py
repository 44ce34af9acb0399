from .orientation import bin_joints, cluster_joint_sets, normalize_orientation, orientations_deg
from .lengths import lengths
from .fracture import analyzed_area, fracture_stats

__all__ = [
    "normalize_orientation",
    "orientations_deg",
    "bin_joints",
    "cluster_joint_sets",
    "lengths",
    "analyzed_area",
    "fracture_stats",
]
