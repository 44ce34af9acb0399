from __future__ import annotations

from typing import Dict, Iterable, Optional

import matplotlib.pyplot as plt

from ..types import Joint, JointSet


def plot_tracemap(
    joints: Iterable[Joint],
    joint_sets: Optional[Iterable[JointSet]] = None,
    ax: Optional[plt.Axes] = None,
    color: str = "k",
    linewidth: float = 1.5,
    equal_aspect: bool = True,
    show_nodes: bool = False,
    node_color: str = "k",
    node_size: float = 5.0,
) -> plt.Axes:
    """Plot joints in image pixel coordinates.

    Joints belonging to one of ``joint_sets`` take that set's colour; others
    use ``color``.
    """
    joints = list(joints)
    colors: Dict[str, str] = {}
    for js in joint_sets or []:
        for j in js.joints:
            colors[j.id] = js.color
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    for j in joints:
        ax.plot([j.start.x, j.end.x], [j.start.y, j.end.y], color=colors.get(j.id, color), lw=linewidth)
    if show_nodes:
        xs = []
        ys = []
        for j in joints:
            xs.extend([j.start.x, j.end.x])
            ys.extend([j.start.y, j.end.y])
        ax.scatter(xs, ys, s=node_size, c=node_color, marker='o', alpha=0.7, linewidths=0)
    if equal_aspect:
        ax.set_aspect("equal", adjustable="box")
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_xlabel("X pixels")
    ax.set_ylabel("Y pixels")
    ax.set_title("Trace Map")
    return ax
