"""API pública para calcular rasgos derivados de las poses."""

from .angles import AngleFeatures, compute_angle_features
from .distances import DistanceFeatures, common_visible_indices, compute_distance_features
from .normalization import (
    ORIGIN_STRATEGIES,
    SCALE_STRATEGIES,
    compute_origin,
    compute_scale,
    normalize_by_limbs,
    normalize_pose,
)

__all__ = [
    "AngleFeatures",
    "compute_angle_features",
    "DistanceFeatures",
    "common_visible_indices",
    "compute_distance_features",
    "ORIGIN_STRATEGIES",
    "SCALE_STRATEGIES",
    "compute_origin",
    "compute_scale",
    "normalize_by_limbs",
    "normalize_pose",
]
