"""Normalización de poses: elimina traslación, escala y opcionalmente proporciones.

El origen y la escala se eligen recorriendo listas ordenadas de estrategias
candidatas. Cada estrategia es una función pura que devuelve ``None`` cuando sus
puntos de anclaje no son fiables; se usa la primera que devuelve un valor.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..config.models import DEFAULT_CONFIG, ComparisonConfig
from ..constants import (
    ANCHOR_MIN_VISIBILITY,
    HIP_CENTER,
    LIMB_SEGMENTS,
    MIN_SEGMENT_LENGTH,
    NOSE,
    SHOULDER_CENTER,
)
from ..errors import NoVisibleLandmarksError
from ..geometry import centroid, distance, max_pairwise_distance, midpoint
from ..types import Landmark, NormalizedPose
from ..visibility import anchor_visible, visible_indices

logger = logging.getLogger(__name__)

OriginStrategy = Callable[[Sequence[Landmark], Tuple[int, ...]], Optional[Landmark]]
ScaleStrategy = Callable[[Sequence[Landmark], Tuple[int, ...]], Optional[float]]


def _pair_is_anchor(landmarks: Sequence[Landmark], pair: Tuple[int, int]) -> bool:
    return all(anchor_visible(landmarks, idx, ANCHOR_MIN_VISIBILITY) for idx in pair)


def _pair_midpoint(landmarks: Sequence[Landmark], pair: Tuple[int, int]) -> Optional[Landmark]:
    if not _pair_is_anchor(landmarks, pair):
        return None
    left, right = pair
    return midpoint(landmarks[left], landmarks[right])


# --- Estrategias de origen -----------------------------------------------------

def origin_from_hips(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[Landmark]:
    return _pair_midpoint(landmarks, HIP_CENTER)


def origin_from_shoulders(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[Landmark]:
    return _pair_midpoint(landmarks, SHOULDER_CENTER)


def origin_from_nose(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[Landmark]:
    if not anchor_visible(landmarks, NOSE, ANCHOR_MIN_VISIBILITY):
        return None
    nose = landmarks[NOSE]
    return Landmark(x=nose.x, y=nose.y, z=nose.z)


def origin_from_visible_centroid(
    landmarks: Sequence[Landmark], visible: Tuple[int, ...]
) -> Optional[Landmark]:
    if not visible:
        return None
    return centroid([landmarks[idx] for idx in visible])


ORIGIN_STRATEGIES: Tuple[Tuple[str, OriginStrategy], ...] = (
    ("hip_center", origin_from_hips),
    ("shoulder_center", origin_from_shoulders),
    ("nose", origin_from_nose),
    ("visible_centroid", origin_from_visible_centroid),
)


# --- Estrategias de escala -----------------------------------------------------

def scale_from_torso(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[float]:
    shoulder_center = _pair_midpoint(landmarks, SHOULDER_CENTER)
    hip_center = _pair_midpoint(landmarks, HIP_CENTER)
    if shoulder_center is None or hip_center is None:
        return None
    return distance(shoulder_center, hip_center)


def scale_from_shoulder_width(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[float]:
    if not _pair_is_anchor(landmarks, SHOULDER_CENTER):
        return None
    left, right = SHOULDER_CENTER
    return distance(landmarks[left], landmarks[right])


def scale_from_visible_extent(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Optional[float]:
    if not visible:
        return None
    return max_pairwise_distance([landmarks[idx] for idx in visible])


SCALE_STRATEGIES: Tuple[Tuple[str, ScaleStrategy], ...] = (
    ("torso_length", scale_from_torso),
    ("shoulder_width", scale_from_shoulder_width),
    ("visible_extent", scale_from_visible_extent),
)


def _first_candidate(strategies, landmarks, visible):
    for name, strategy in strategies:
        value = strategy(landmarks, visible)
        if value is not None:
            return name, value
    return None, None


def compute_origin(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> Landmark:
    """Origen anatómico según :data:`ORIGIN_STRATEGIES`."""

    name, origin = _first_candidate(ORIGIN_STRATEGIES, landmarks, visible)
    if origin is None:
        raise NoVisibleLandmarksError("No anchor available to compute the pose origin")
    logger.debug("Pose origin from %s: (%.4f, %.4f)", name, origin.x, origin.y)
    return origin


def compute_scale(landmarks: Sequence[Landmark], visible: Tuple[int, ...]) -> float:
    """Longitud de referencia según :data:`SCALE_STRATEGIES`, con suelo ``MIN_SEGMENT_LENGTH``."""

    name, scale = _first_candidate(SCALE_STRATEGIES, landmarks, visible)
    if scale is None:
        raise NoVisibleLandmarksError("No anchor available to compute the pose scale")
    logger.debug("Pose scale from %s: %.4f", name, scale)
    return max(float(scale), MIN_SEGMENT_LENGTH)


# --- Normalización por extremidad ----------------------------------------------

def limb_lengths(landmarks: Sequence[Landmark]) -> Dict[int, float]:
    """Longitud de cada segmento indexada por su punto inicial.

    Si un punto inicia varios segmentos prevalece el último de ``LIMB_SEGMENTS``.
    """

    lengths: Dict[int, float] = {}
    for start, end in LIMB_SEGMENTS.values():
        if max(start, end) >= len(landmarks):
            continue
        length = distance(landmarks[start], landmarks[end])
        if math.isfinite(length):
            lengths[start] = max(length, MIN_SEGMENT_LENGTH)
    return lengths


def _scaled(lm: Landmark, factor: float) -> Landmark:
    return Landmark(
        x=lm.x / factor,
        y=lm.y / factor,
        z=None if lm.z is None else lm.z / factor,
        visibility=lm.visibility,
    )


def normalize_by_limbs(landmarks: Sequence[Landmark]) -> List[Landmark]:
    """Divide cada punto por la longitud del segmento que inicia; el resto queda intacto."""

    lengths = limb_lengths(landmarks)
    return [_scaled(lm, lengths.get(idx, 1.0)) for idx, lm in enumerate(landmarks)]


def normalize_pose(
    landmarks: Sequence[Landmark], config: ComparisonConfig = DEFAULT_CONFIG
) -> NormalizedPose:
    """Traslada y escala ``landmarks`` para hacerlos comparables entre capturas.

    Lanza :class:`NoVisibleLandmarksError` si ningún punto supera el filtro de
    visibilidad; es la única ruta que no se degrada de forma gradual.
    """

    visible = visible_indices(landmarks, config.visibility_threshold)
    if not visible:
        raise NoVisibleLandmarksError("No visible landmarks to normalize")

    working: Sequence[Landmark] = landmarks
    if config.per_limb_normalization:
        working = normalize_by_limbs(landmarks)

    origin = compute_origin(working, visible)
    scale = compute_scale(working, visible)

    normalized = tuple(
        Landmark(
            x=(lm.x - origin.x) / scale,
            y=(lm.y - origin.y) / scale,
            z=None if lm.z is None else lm.z / scale,
            visibility=lm.visibility,
        )
        for lm in working
    )
    return NormalizedPose(landmarks=normalized, origin=origin, scale=scale, visible_indices=visible)


__all__ = [
    "ORIGIN_STRATEGIES",
    "SCALE_STRATEGIES",
    "compute_origin",
    "compute_scale",
    "limb_lengths",
    "normalize_by_limbs",
    "normalize_pose",
]
