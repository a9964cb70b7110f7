"""Exportaciones principales del motor de comparación de poses."""

from .comparator import compare, evaluate
from .config import ComparisonConfig, from_mapping, from_yaml, load_default
from .constants import JOINT_INDEX_MAP, LANDMARK_COUNT, LIMB_SEGMENTS, REGION_LANDMARKS, PoseLandmark
from .errors import (
    InvalidConfigError,
    InvalidPoseError,
    NoCommonLandmarksError,
    NoVisibleLandmarksError,
    PoseComparisonError,
)
from .extraction import LandmarkProviderBase, extract_landmarks_from_result, landmarks_from_proto
from .geometry import angle_at
from .metrics import normalize_pose
from .regions import detect_regions
from .types import BodyRegion, ComparisonResult, ComparisonStatus, Landmark, NormalizedPose, Pose
from .visibility import visible_indices

__all__ = [
    "compare",
    "evaluate",
    "angle_at",
    "ComparisonConfig",
    "load_default",
    "from_mapping",
    "from_yaml",
    "Landmark",
    "Pose",
    "NormalizedPose",
    "ComparisonResult",
    "ComparisonStatus",
    "BodyRegion",
    "PoseLandmark",
    "LANDMARK_COUNT",
    "JOINT_INDEX_MAP",
    "LIMB_SEGMENTS",
    "REGION_LANDMARKS",
    "normalize_pose",
    "detect_regions",
    "visible_indices",
    "landmarks_from_proto",
    "extract_landmarks_from_result",
    "LandmarkProviderBase",
    "PoseComparisonError",
    "InvalidPoseError",
    "InvalidConfigError",
    "NoVisibleLandmarksError",
    "NoCommonLandmarksError",
]
