from __future__ import annotations

import math

import pytest

from rockjoint.config import PALETTE
from rockjoint.stats import bin_joints, cluster_joint_sets, normalize_orientation, orientations_deg


@pytest.mark.parametrize("angle", [-725.5, -270.0, -180.0, -90.0, -12.25, 0.0, 45.3, 90.0, 179.9, 180.0, 270.0, 359.5, 720.25])
def test_normalize_orientation_identities(angle):
    a = normalize_orientation(angle)
    assert 0.0 <= a < 180.0
    assert normalize_orientation(angle + 180.0) == pytest.approx(a, abs=1e-9)
    assert normalize_orientation(angle - 360.0) == pytest.approx(a, abs=1e-9)


@pytest.mark.parametrize(
    "angle,expected",
    [(0.0, 0.0), (180.0, 0.0), (190.0, 10.0), (-10.0, 170.0), (359.0, 179.0), (540.0, 0.0), (-1e-20, 0.0)],
)
def test_normalize_orientation_values(angle, expected):
    assert normalize_orientation(angle) == pytest.approx(expected)


def test_missing_orientation_reads_as_zero():
    assert normalize_orientation(None) == 0.0


def test_nan_orientation_does_not_raise():
    assert math.isnan(normalize_orientation(math.nan))


def test_orientations_deg(make_joint):
    joints = [make_joint(orientation=o) for o in (10.0, 200.0, None)]
    assert orientations_deg(joints).tolist() == pytest.approx([10.0, 20.0, 0.0])


def test_two_joint_sets(make_joint):
    joints = [
        make_joint(1.0, 2.0),
        make_joint(2.0, 8.0),
        make_joint(3.0, 93.0),
        make_joint(4.0, 97.0),
    ]
    sets = cluster_joint_sets(joints, max_sets=12)

    assert len(sets) == 2
    first, second = sets
    assert (first.id, first.bin_start, first.mean_orientation, first.count) == (1, 0.0, 5.0, 2)
    assert (second.id, second.bin_start, second.mean_orientation, second.count) == (2, 90.0, 95.0, 2)
    assert first.total_length == pytest.approx(3.0)
    assert first.mean_length == pytest.approx(1.5)
    assert second.total_length == pytest.approx(7.0)
    assert second.mean_length == pytest.approx(3.5)
    assert first.color == PALETTE[0]
    assert second.color == PALETTE[1]


def test_reversed_traces_share_a_set(make_joint):
    joints = [make_joint(orientation=o) for o in (182.0, 8.0, 273.0, 97.0)]
    sets = cluster_joint_sets(joints)
    assert [(s.bin_start, s.count) for s in sets] == [(0.0, 2), (90.0, 2)]


def test_sets_ranked_by_count(make_joint):
    joints = [make_joint(orientation=o) for o in (50.0, 120.0, 121.0, 125.0, 52.0, 170.0)]
    sets = cluster_joint_sets(joints)
    assert [s.bin_start for s in sets] == [120.0, 45.0, 165.0]
    assert [s.count for s in sets] == [3, 2, 1]
    assert [s.id for s in sets] == [1, 2, 3]


def test_members_are_shared_references(make_joint):
    joints = [make_joint(orientation=30.0), make_joint(orientation=31.0)]
    (js,) = cluster_joint_sets(joints)
    assert js.joints[0] is joints[0]
    assert js.joints[1] is joints[1]


def test_mean_orientation_rounds_half_up(make_joint):
    (js,) = cluster_joint_sets([make_joint(orientation=2.0), make_joint(orientation=3.0)])
    assert js.mean_orientation == 3.0


def test_missing_orientation_lands_in_first_bin(make_joint):
    joints = [make_joint(orientation=None), make_joint(orientation=100.0)]
    sets = cluster_joint_sets(joints)
    zero = next(s for s in sets if s.bin_start == 0.0)
    assert zero.joints == [joints[0]]
    assert zero.mean_orientation == 0.0


def test_boundary_splits_a_set(make_joint):
    joints = [make_joint(orientation=14.0), make_joint(orientation=16.0)]
    sets = cluster_joint_sets(joints)
    assert sorted(s.bin_start for s in sets) == [0.0, 15.0]


def test_truncation_and_palette_cycling(make_joint):
    # 12 bins; bin k holds k + 1 joints
    joints = [
        make_joint(orientation=k * 15.0 + 1.0)
        for k in range(12)
        for _ in range(k + 1)
    ]
    all_sets = bin_joints(joints)
    assert len(all_sets) == 12
    assert [s.count for s in all_sets] == list(range(12, 0, -1))
    assert [s.color_index for s in all_sets] == [i % len(PALETTE) for i in range(12)]

    top = cluster_joint_sets(joints, max_sets=3)
    assert [s.count for s in top] == [12, 11, 10]
    assert [s.bin_start for s in top] == [165.0, 150.0, 135.0]


def test_coverage_before_truncation(make_joint):
    orientations = [0.0, 14.9, 15.0, 44.0, 90.0, 179.99, 181.0, 359.0, -5.0, None, 77.7, 300.0]
    joints = [make_joint(orientation=o) for o in orientations]
    sets = bin_joints(joints)
    ids = [j.id for s in sets for j in s.joints]
    assert sorted(ids) == sorted(j.id for j in joints)
    assert sum(s.count for s in sets) == len(joints)


def test_empty_input():
    assert cluster_joint_sets([]) == []
    assert bin_joints([]) == []


def test_nan_orientation_does_not_crash_clustering(make_joint):
    joints = [make_joint(orientation=math.nan), make_joint(orientation=math.nan), make_joint(orientation=10.0)]
    sets = cluster_joint_sets(joints)
    assert sum(s.count for s in sets) == 3
    nan_set = next(s for s in sets if math.isnan(s.bin_start))
    assert nan_set.count == 2
    assert math.isnan(nan_set.mean_orientation)
