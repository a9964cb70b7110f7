"""Reexportaciones para ``from pose_compare import config``."""

from __future__ import annotations

from .models import DEFAULT_CONFIG, ComparisonConfig
from .settings import (
    DEFAULT_ANGLE_ONLY,
    DEFAULT_ANGLE_WEIGHT,
    DEFAULT_DISTANCE_THRESHOLD,
    DEFAULT_PER_LIMB_NORMALIZATION,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_USE_ANGLES,
    DEFAULT_VISIBILITY_THRESHOLD,
)
from .utils import from_mapping, from_yaml, load_default

__all__ = [
    # Models
    "ComparisonConfig",
    "DEFAULT_CONFIG",

    # Utilities
    "load_default",
    "from_mapping",
    "from_yaml",

    # Defaults
    "DEFAULT_VISIBILITY_THRESHOLD",
    "DEFAULT_SIMILARITY_THRESHOLD",
    "DEFAULT_DISTANCE_THRESHOLD",
    "DEFAULT_USE_ANGLES",
    "DEFAULT_ANGLE_WEIGHT",
    "DEFAULT_ANGLE_ONLY",
    "DEFAULT_PER_LIMB_NORMALIZATION",
]
