from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..config import BIN_WIDTH_DEG, MAX_JOINT_SETS, PALETTE
from ..types import Joint, JointSet

logger = logging.getLogger(__name__)

# Shared key so joints with NaN orientation land in one bin
_NAN_BIN = math.nan


def normalize_orientation(angle: Optional[float]) -> float:
    """Fold an orientation in degrees to the bidirectional range [0, 180).

    ``None`` stands for a joint whose orientation was never computed and is
    read as 0. This biases the first bin for such joints.
    """
    if angle is None:
        angle = 0.0
    # Python's modulo is non-negative for a positive divisor; a tiny negative
    # angle rounds up to 360.0, which the second fold maps back to 0.
    a = angle % 360.0
    return a % 180.0


def orientations_deg(joints: Iterable[Joint]) -> np.ndarray:
    """Return joint orientations (degrees) folded to [0, 180)."""
    return np.array([normalize_orientation(j.orientation) for j in joints], dtype=float)


def _bin_key(angle: float, bin_width: float) -> float:
    if math.isnan(angle):
        return _NAN_BIN
    return math.floor(angle / bin_width) * bin_width


def _round_half_up(value: float) -> float:
    return float(np.floor(value + 0.5))


def bin_joints(joints: Iterable[Joint], bin_width: float = BIN_WIDTH_DEG) -> List[JointSet]:
    """Group joints into fixed-width orientation bins.

    Returns every non-empty bin, ordered by member count (descending) then
    bin start. Ids and colours follow that rank. Bin edges are fixed, so a
    set whose mean sits on a boundary can be split across two bins.
    """
    members: Dict[float, List[Joint]] = {}
    angles: Dict[float, List[float]] = {}
    missing = 0
    for joint in joints:
        if joint.orientation is None:
            missing += 1
        a = normalize_orientation(joint.orientation)
        key = _bin_key(a, bin_width)
        members.setdefault(key, []).append(joint)
        angles.setdefault(key, []).append(a)
    if missing:
        logger.debug("%d joints without orientation binned as 0 deg", missing)

    # NaN bin last among equal counts
    keys = sorted(members, key=lambda k: (math.isnan(k), k))
    keys.sort(key=lambda k: len(members[k]), reverse=True)

    sets: List[JointSet] = []
    for rank, key in enumerate(keys, start=1):
        group = members[key]
        lengths = np.array([j.length_meters for j in group], dtype=float)
        total = float(lengths.sum())
        sets.append(
            JointSet(
                id=rank,
                mean_orientation=_round_half_up(float(np.mean(angles[key]))),
                count=len(group),
                joints=group,
                total_length=total,
                mean_length=total / len(group),
                color_index=(rank - 1) % len(PALETTE),
                bin_start=key,
            )
        )
    return sets


def cluster_joint_sets(
    joints: Iterable[Joint],
    max_sets: int = MAX_JOINT_SETS,
    bin_width: float = BIN_WIDTH_DEG,
) -> List[JointSet]:
    """Cluster joints into at most ``max_sets`` joint sets by apparent orientation.

    This is a fixed-bin histogram, not a statistical clustering: orientations
    are folded to [0, 180), binned by ``floor(a / bin_width) * bin_width``,
    and the most populated bins are kept.
    """
    sets = bin_joints(joints, bin_width=bin_width)
    if len(sets) > max_sets:
        logger.debug("Keeping %d of %d joint sets", max_sets, len(sets))
    return sets[:max_sets]
