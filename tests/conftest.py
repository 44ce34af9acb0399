from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from rockjoint.types import Joint, Point


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def make_joint():
    """Factory for joints with a given metric length and orientation."""
    counter = {"n": 0}

    def _make(length_m: float = 1.0, orientation=0.0, joint_id=None) -> Joint:
        counter["n"] += 1
        return Joint(
            id=joint_id or f"j{counter['n']}",
            start=Point(0.0, 0.0),
            end=Point(length_m * 100.0, 0.0),
            length_pixels=length_m * 100.0,
            length_meters=length_m,
            orientation=orientation,
        )

    return _make
