from __future__ import annotations

from rockjoint.plots import plot_rose, plot_tracemap
from rockjoint.stats import cluster_joint_sets


def test_plot_rose_draws_mirrored_petals(make_joint):
    joints = [make_joint(orientation=o) for o in (5.0, 7.0, 95.0)]
    sets = cluster_joint_sets(joints)
    ax = plot_rose(sets)
    assert ax.name == "polar"
    assert len(ax.patches) == 2 * len(sets)
    assert ax.get_title() == "Rose Diagram"


def test_plot_tracemap_colours_by_set(make_joint):
    joints = [make_joint(orientation=o) for o in (5.0, 7.0, 95.0)]
    sets = cluster_joint_sets(joints)
    ax = plot_tracemap(joints, sets)
    assert len(ax.lines) == 3
    assert ax.lines[0].get_color() == sets[0].color
    assert ax.lines[2].get_color() == sets[1].color
    assert ax.yaxis_inverted()


def test_plot_tracemap_without_sets(make_joint):
    ax = plot_tracemap([make_joint()], color="r", show_nodes=True)
    assert ax.lines[0].get_color() == "r"
    assert len(ax.collections) == 1
