"""Pruebas de los extractores de rasgos de distancia y de ángulo."""

from __future__ import annotations

import math

import pytest

from pose_compare.constants import JOINT_INDEX_MAP, LANDMARK_COUNT, PoseLandmark
from pose_compare.metrics import (
    DistanceFeatures,
    compute_angle_features,
    compute_distance_features,
    normalize_pose,
)
from pose_compare.metrics.distances import common_visible_indices
from pose_compare.types import Landmark, NormalizedPose

ELBOW_TRIPLE = (PoseLandmark.LEFT_SHOULDER, PoseLandmark.LEFT_ELBOW, PoseLandmark.LEFT_WRIST)


def _elbow_pose(wrist_angle_deg: float) -> NormalizedPose:
    """Pose con solo el codo izquierdo visible y la muñeca a ``wrist_angle_deg`` del hombro."""

    landmarks = [Landmark(0.0, 0.0, visibility=0.0) for _ in range(LANDMARK_COUNT)]
    theta = math.radians(wrist_angle_deg)
    landmarks[PoseLandmark.LEFT_SHOULDER] = Landmark(1.0, 0.0, visibility=1.0)
    landmarks[PoseLandmark.LEFT_ELBOW] = Landmark(0.0, 0.0, visibility=1.0)
    landmarks[PoseLandmark.LEFT_WRIST] = Landmark(math.cos(theta), math.sin(theta), visibility=1.0)
    return NormalizedPose(
        landmarks=tuple(landmarks),
        origin=Landmark(0.0, 0.0),
        scale=1.0,
        visible_indices=tuple(int(idx) for idx in ELBOW_TRIPLE),
    )


def test_identical_poses_have_zero_distances(standing_pose) -> None:
    normalized = normalize_pose(standing_pose)

    features = compute_distance_features(normalized, normalized)

    assert features.valid_count == LANDMARK_COUNT
    assert features.mean == pytest.approx(0.0)
    assert all(d == 0.0 for d in features.distances)


def test_distances_use_only_points_visible_in_both(standing_pose, with_point) -> None:
    reference = normalize_pose(with_point(standing_pose, PoseLandmark.NOSE, visibility=0.1))
    live = normalize_pose(with_point(standing_pose, PoseLandmark.LEFT_KNEE, visibility=0.1))

    features = compute_distance_features(reference, live)

    assert PoseLandmark.NOSE not in features.common_indices
    assert PoseLandmark.LEFT_KNEE not in features.common_indices
    assert features.valid_count == LANDMARK_COUNT - 2
    assert features.common_indices == common_visible_indices(reference, live)


def test_distances_include_depth(standing_pose, with_point) -> None:
    reference = normalize_pose(standing_pose)
    live = normalize_pose(with_point(standing_pose, PoseLandmark.RIGHT_WRIST, z=0.03))

    features = compute_distance_features(reference, live)

    # Escala de torso 0.3: 0.03 de profundidad equivale a 0.1 normalizado.
    by_index = dict(zip(features.common_indices, features.distances))
    assert by_index[PoseLandmark.RIGHT_WRIST] == pytest.approx(0.1)
    assert by_index[PoseLandmark.LEFT_WRIST] == 0.0


def test_empty_distance_features_signal_nothing_to_compare() -> None:
    features = DistanceFeatures(distances=(), common_indices=())

    assert features.valid_count == 0
    assert math.isnan(features.mean)
    assert features.mean_for([PoseLandmark.NOSE]) is None


def test_mean_for_restricts_to_requested_indices() -> None:
    features = DistanceFeatures(distances=(0.1, 0.3, 0.5), common_indices=(11, 13, 15))

    assert features.mean_for([13, 15, 99]) == pytest.approx(0.4)
    assert features.mean_for([0, 1]) is None


def test_identical_poses_have_zero_angle_differences(standing_pose) -> None:
    normalized = normalize_pose(standing_pose)

    features = compute_angle_features(normalized, normalized)

    assert features.joints == tuple(JOINT_INDEX_MAP)
    assert features.valid_count == 6
    assert features.mean == pytest.approx(0.0)


def test_angle_difference_is_normalised_by_180() -> None:
    features = compute_angle_features(_elbow_pose(30.0), _elbow_pose(90.0))

    assert features.joints == ("left_elbow",)
    assert features.as_dict()["left_elbow"] == pytest.approx(60.0 / 180.0)


def test_angle_difference_folds_to_short_arc() -> None:
    features = compute_angle_features(_elbow_pose(10.0), _elbow_pose(170.0))

    # |10 - 170| = 160 se pliega a 20 grados.
    assert features.differences == pytest.approx((20.0 / 180.0,))


def test_angle_triple_needs_every_vertex_visible(standing_pose, with_point) -> None:
    reference = normalize_pose(standing_pose)
    live = normalize_pose(with_point(standing_pose, PoseLandmark.RIGHT_ANKLE, visibility=0.0))

    features = compute_angle_features(reference, live)

    assert "right_knee" not in features.joints
    assert features.valid_count == 5


def test_no_comparable_triples_gives_empty_features() -> None:
    reference = _elbow_pose(30.0)
    hidden = NormalizedPose(
        landmarks=reference.landmarks,
        origin=reference.origin,
        scale=reference.scale,
        visible_indices=(),
    )

    features = compute_angle_features(reference, hidden)

    assert features.valid_count == 0
    assert features.joints == ()
    assert math.isnan(features.mean)
