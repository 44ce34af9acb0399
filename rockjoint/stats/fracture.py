from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from ..types import FractureStats, Joint, ScaleData
from .lengths import lengths

logger = logging.getLogger(__name__)


def analyzed_area(scale: ScaleData, photo_width_px: float, photo_height_px: float) -> float:
    """Real-world area (m^2) of the photographed rectangle.

    Assumes the photo plane is parallel to the face; no perspective
    correction. An uncalibrated scale (pixels_per_meter <= 0) gives 0.
    """
    ppm = scale.pixels_per_meter
    if ppm <= 0:
        return 0.0
    return (photo_width_px / ppm) * (photo_height_px / ppm)


def fracture_stats(
    joints: Iterable[Joint],
    scale: ScaleData,
    photo_width_px: float,
    photo_height_px: float,
) -> FractureStats:
    """Summarise trace lengths, P21 intensity and linear frequency.

    - median_length is the upper median: sorted lengths at index n // 2.
    - p21 is total trace length per analysed area (m/m^2).
    - frequency is joints per metre using sqrt(area) as the scan-line
      length. There is no real scan line in a photograph, so this is an
      approximation of a 1-D frequency.

    Empty input gives an all-zero record (area included) and zero area
    gives zero p21/frequency rather than errors. NaN lengths propagate into
    the aggregates.
    """
    lens = lengths(joints)
    n = int(lens.size)
    if n == 0:
        logger.debug("No joints; returning zero statistics")
        return FractureStats()

    area = analyzed_area(scale, photo_width_px, photo_height_px)
    ordered = np.sort(lens)
    total = float(ordered.sum())
    p21 = total / area if area > 0 else 0.0
    frequency = n / math.sqrt(area) if area > 0 else 0.0

    return FractureStats(
        joint_count=n,
        total_length=total,
        mean_length=total / n,
        median_length=float(ordered[n // 2]),
        min_length=float(ordered.min()),
        max_length=float(ordered.max()),
        area_analyzed=area,
        p21=p21,
        frequency=frequency,
    )
