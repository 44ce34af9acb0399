from __future__ import annotations

from typing import Iterable, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..config import BIN_WIDTH_DEG
from ..types import JointSet


def plot_rose(
    joint_sets: Iterable[JointSet],
    bin_width: float = BIN_WIDTH_DEG,
    ax: Optional[plt.Axes] = None,
    edgecolor: str = "white",
    alpha: float = 0.9,
) -> plt.Axes:
    """Plot a bidirectional rose diagram, one coloured petal pair per joint set.

    Each set is drawn at its bin centre and mirrored by 180 degrees; the
    radius is the member count.
    """
    if ax is None:
        fig, ax = plt.subplots(subplot_kw={"projection": "polar"}, figsize=(6, 6))
    width = np.deg2rad(bin_width)
    for js in joint_sets:
        center = js.bin_start + bin_width / 2.0
        theta = np.deg2rad([center, center + 180.0])
        ax.bar(theta, [js.count, js.count], width=width, bottom=0.0, align="center",
               facecolor=js.color, edgecolor=edgecolor, alpha=alpha, label=f"Set {js.id} ({js.mean_orientation:.0f}°)")
    ax.set_theta_zero_location("E")  # 0° to the right
    ax.set_theta_direction(-1)        # clockwise, image y axis points down
    ax.set_title("Rose Diagram")
    return ax
