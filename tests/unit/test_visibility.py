from __future__ import annotations

import math

from pose_compare.types import Landmark
from pose_compare.visibility import anchor_visible, is_visible, visible_indices


def test_threshold_is_inclusive() -> None:
    assert is_visible(Landmark(0.1, 0.2, visibility=0.5), 0.5)
    assert not is_visible(Landmark(0.1, 0.2, visibility=0.49), 0.5)


def test_missing_visibility_counts_as_fully_visible() -> None:
    assert is_visible(Landmark(0.1, 0.2), 1.0)


def test_non_finite_coordinates_are_never_visible() -> None:
    assert not is_visible(Landmark(math.nan, 0.2, visibility=1.0), 0.0)
    assert not is_visible(Landmark(0.1, math.inf, visibility=1.0), 0.0)


def test_visible_indices_preserve_order() -> None:
    pose = [
        Landmark(0.0, 0.0, visibility=0.9),
        Landmark(0.0, 0.0, visibility=0.1),
        Landmark(0.0, 0.0),
    ]

    assert visible_indices(pose, 0.5) == (0, 2)
    assert visible_indices([], 0.5) == ()


def test_anchor_visibility_is_strict_and_bounds_checked() -> None:
    pose = [Landmark(0.0, 0.0, visibility=0.3), Landmark(0.0, 0.0, visibility=0.31)]

    assert not anchor_visible(pose, 0, 0.3)
    assert anchor_visible(pose, 1, 0.3)
    assert not anchor_visible(pose, 5, 0.3)
