from __future__ import annotations

import math
from dataclasses import astuple

import pytest

from rockjoint.stats import analyzed_area, fracture_stats, lengths
from rockjoint.types import FractureStats, ScaleData


def test_two_joint_scenario(make_joint):
    joints = [make_joint(3.0), make_joint(5.0)]
    stats = fracture_stats(joints, ScaleData(pixels_per_meter=100.0), 1000, 800)

    assert stats.joint_count == 2
    assert stats.area_analyzed == pytest.approx(80.0)
    assert stats.total_length == pytest.approx(8.0)
    assert stats.mean_length == pytest.approx(4.0)
    assert stats.median_length == pytest.approx(5.0)
    assert stats.min_length == pytest.approx(3.0)
    assert stats.max_length == pytest.approx(5.0)
    assert stats.p21 == pytest.approx(0.1)
    assert stats.frequency == pytest.approx(2 / math.sqrt(80), rel=1e-9)
    assert stats.frequency == pytest.approx(0.2236, abs=1e-4)


def test_empty_joint_list_gives_zeros():
    stats = fracture_stats([], ScaleData(pixels_per_meter=100.0), 1000, 800)
    assert stats == FractureStats()
    assert stats.joint_count == 0
    assert all(v == 0 for v in astuple(stats))
    assert not any(math.isnan(v) for v in astuple(stats))


@pytest.mark.parametrize(
    "values,median",
    [
        ([2.0], 2.0),
        ([3.0, 1.0, 2.0], 2.0),
        ([4.0, 1.0, 3.0, 2.0], 3.0),
        ([1.0, 1.0, 9.0, 9.0], 9.0),
    ],
)
def test_median_is_upper_median(make_joint, values, median):
    joints = [make_joint(v) for v in values]
    stats = fracture_stats(joints, ScaleData(pixels_per_meter=10.0), 100, 100)
    assert stats.median_length == pytest.approx(median)


def test_min_max_ignore_input_order(make_joint):
    joints = [make_joint(v) for v in (2.5, 0.4, 7.25, 1.0)]
    stats = fracture_stats(joints, ScaleData(pixels_per_meter=50.0), 500, 500)
    assert stats.min_length == pytest.approx(0.4)
    assert stats.max_length == pytest.approx(7.25)
    assert stats.area_analyzed == pytest.approx(100.0)
    assert stats.p21 == pytest.approx(11.15 / 100.0)
    assert stats.frequency == pytest.approx(4 / 10.0)


def test_uncalibrated_scale_gives_zero_area(make_joint):
    joints = [make_joint(1.0)]
    stats = fracture_stats(joints, ScaleData(pixels_per_meter=0.0), 1000, 800)
    assert stats.area_analyzed == 0.0
    assert stats.p21 == 0.0
    assert stats.frequency == 0.0
    assert stats.total_length == pytest.approx(1.0)


def test_zero_sized_photo(make_joint):
    stats = fracture_stats([make_joint(2.0)], ScaleData(pixels_per_meter=100.0), 0, 800)
    assert stats.area_analyzed == 0.0
    assert stats.p21 == 0.0
    assert stats.frequency == 0.0


def test_nan_length_propagates(make_joint):
    joints = [make_joint(1.0), make_joint(math.nan)]
    stats = fracture_stats(joints, ScaleData(pixels_per_meter=100.0), 1000, 1000)
    assert stats.joint_count == 2
    assert math.isnan(stats.total_length)
    assert math.isnan(stats.mean_length)
    assert math.isnan(stats.p21)


def test_analyzed_area():
    assert analyzed_area(ScaleData(pixels_per_meter=200.0), 4000, 3000) == pytest.approx(300.0)
    assert analyzed_area(ScaleData(pixels_per_meter=-1.0), 4000, 3000) == 0.0


def test_lengths(make_joint):
    assert lengths([make_joint(1.5), make_joint(2.0)]).tolist() == [1.5, 2.0]
    assert lengths([]).size == 0
