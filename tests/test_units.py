from __future__ import annotations

import pytest

from rockjoint.units import (
    convert_area,
    convert_density,
    convert_frequency,
    convert_length,
    unit_labels,
)


def test_metric_is_identity():
    assert convert_length(2.5) == 2.5
    assert convert_area(80.0) == 80.0
    assert convert_density(0.1) == 0.1
    assert convert_frequency(0.2236) == 0.2236


def test_imperial_conversions():
    assert convert_length(1.0, imperial=True) == pytest.approx(3.28084)
    assert convert_area(1.0, imperial=True) == pytest.approx(10.7639)
    # 1 m/m^2 == 0.3048 ft/ft^2
    assert convert_density(1.0, imperial=True) == pytest.approx(0.3048, rel=1e-4)
    assert convert_frequency(1.0, imperial=True) == pytest.approx(0.3048, rel=1e-4)


def test_unit_labels():
    assert unit_labels()["length"] == "m"
    assert unit_labels(imperial=True)["density"] == "ft/ft²"
