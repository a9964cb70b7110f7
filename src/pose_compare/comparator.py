"""Comparador de poses: punto de entrada que combina los rasgos en una similitud.

El comparador es una función pura y sin estado. Solo los errores de
precondición (poses vacías o mal formadas, configuración inválida) salen de
:func:`compare`; cualquier otro fallo del dominio se convierte en un resultado
degenerado de similitud cero con un :class:`ComparisonStatus` que explica la causa.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence, Tuple, Union

from .config.models import DEFAULT_CONFIG, ComparisonConfig
from .config.utils import from_mapping
from .errors import (
    InvalidPoseError,
    NoCommonLandmarksError,
    NoVisibleLandmarksError,
)
from .metrics.angles import compute_angle_features
from .metrics.distances import compute_distance_features
from .metrics.normalization import normalize_pose
from .regions import region_distances, shared_regions
from .types import ComparisonResult, ComparisonStatus, Landmark, coerce_landmark

logger = logging.getLogger(__name__)

ConfigLike = Union[ComparisonConfig, Mapping, None]


def _coerce_pose(landmarks: Sequence[Any], label: str) -> Tuple[Landmark, ...]:
    if landmarks is None or len(landmarks) == 0:
        raise InvalidPoseError(f"{label} pose cannot be empty")
    try:
        return tuple(coerce_landmark(lm) for lm in landmarks)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise InvalidPoseError(f"{label} pose holds a malformed landmark: {exc}") from exc


def _resolve_config(config: ConfigLike) -> ComparisonConfig:
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, ComparisonConfig):
        return config
    return from_mapping(config)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _compare_angles_only(
    reference: Sequence[Landmark], live: Sequence[Landmark], config: ComparisonConfig
) -> ComparisonResult:
    ref_pose = normalize_pose(reference, config)
    live_pose = normalize_pose(live, config)

    angles = compute_angle_features(ref_pose, live_pose)
    if angles.valid_count == 0:
        raise NoCommonLandmarksError("No joint angle is visible in both poses")

    mean_diff = angles.mean
    similarity = _clamp_unit(1.0 - mean_diff)
    return ComparisonResult(
        is_matching=similarity >= config.similarity_threshold,
        similarity=similarity,
        landmarks_compared=angles.valid_count,
        valid_landmarks=angles.valid_count,
        mean_distance=mean_diff,
        compared_regions=shared_regions(ref_pose, live_pose),
    )


def _compare_positions(
    reference: Sequence[Landmark], live: Sequence[Landmark], config: ComparisonConfig
) -> ComparisonResult:
    ref_pose = normalize_pose(reference, config)
    live_pose = normalize_pose(live, config)

    features = compute_distance_features(ref_pose, live_pose)
    if features.valid_count == 0:
        raise NoCommonLandmarksError("No landmark is visible in both poses")

    mean_distance = features.mean
    similarity = max(0.0, 1.0 - mean_distance)

    if config.use_angles:
        angles = compute_angle_features(ref_pose, live_pose)
        if angles.valid_count > 0:
            angle_similarity = 1.0 - angles.mean
            similarity = similarity * (1.0 - config.angle_weight) + angle_similarity * config.angle_weight

    similarity = _clamp_unit(similarity)
    regions = shared_regions(ref_pose, live_pose)
    return ComparisonResult(
        is_matching=similarity >= config.similarity_threshold,
        similarity=similarity,
        landmarks_compared=len(ref_pose.visible_indices),
        valid_landmarks=features.valid_count,
        mean_distance=mean_distance,
        compared_regions=regions,
        region_distances=region_distances(regions, features),
    )


def evaluate(
    reference: Sequence[Landmark], live: Sequence[Landmark], config: ComparisonConfig = DEFAULT_CONFIG
) -> ComparisonResult:
    """Compara poses ya validadas propagando los fallos del dominio.

    Lanza :class:`NoVisibleLandmarksError` o :class:`NoCommonLandmarksError`
    cuando no hay nada que comparar.
    """

    if config.angle_only:
        return _compare_angles_only(reference, live, config)
    return _compare_positions(reference, live, config)


def compare(
    reference: Sequence[Any], live: Sequence[Any], config: ConfigLike = None
) -> ComparisonResult:
    """Compara la pose ``live`` con la pose ``reference`` y devuelve su similitud.

    Args:
        reference: Landmarks de la pose objetivo (``Landmark``, diccionarios u
            objetos con atributos ``x``/``y``/``z``/``visibility``).
        live: Landmarks capturados en vivo, en el mismo orden de 33 puntos.
        config: ``ComparisonConfig``, ``Mapping`` de opciones o ``None`` para los
            valores por defecto.

    Returns:
        ``ComparisonResult`` con la similitud en ``[0, 1]``. Si alguna pose no
        tiene puntos visibles o no comparten rasgos, el resultado es degenerado
        (similitud 0) y ``status`` indica el motivo.

    Raises:
        InvalidPoseError: si alguna pose está vacía o contiene landmarks mal formados.
        InvalidConfigError: si ``config`` trae valores fuera de rango.
    """

    resolved = _resolve_config(config)
    ref_landmarks = _coerce_pose(reference, "Reference")
    live_landmarks = _coerce_pose(live, "Live")

    try:
        return evaluate(ref_landmarks, live_landmarks, resolved)
    except NoVisibleLandmarksError as exc:
        logger.debug("Degenerate comparison: %s", exc)
        return ComparisonResult.degenerate(ComparisonStatus.NO_VISIBLE_LANDMARKS)
    except NoCommonLandmarksError as exc:
        logger.debug("Degenerate comparison: %s", exc)
        return ComparisonResult.degenerate(ComparisonStatus.NO_COMMON_FEATURES)


__all__ = ["compare", "evaluate"]
