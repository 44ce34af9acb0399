from __future__ import annotations

from typing import Iterable

import numpy as np

from ..types import Joint


def lengths(joints: Iterable[Joint]) -> np.ndarray:
    """Return joint trace lengths (metres) as a NumPy array."""
    return np.array([j.length_meters for j in joints], dtype=float)
