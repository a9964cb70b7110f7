"""Rasgos de distancia entre puntos correspondientes de dos poses normalizadas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from ..geometry import landmarks_to_xyz
from ..types import NormalizedPose


@dataclass(frozen=True)
class DistanceFeatures:
    """Distancias por punto común y los índices que las originan, en el mismo orden."""

    distances: Tuple[float, ...]
    common_indices: Tuple[int, ...]

    @property
    def valid_count(self) -> int:
        return len(self.common_indices)

    @property
    def mean(self) -> float:
        return float(np.mean(self.distances)) if self.distances else float("nan")

    def mean_for(self, indices: Iterable[int]) -> float | None:
        """Media de las distancias restringida a ``indices``; ``None`` si no hay ninguno común."""

        wanted = set(indices)
        selected = [d for idx, d in zip(self.common_indices, self.distances) if idx in wanted]
        if not selected:
            return None
        return float(np.mean(selected))


def common_visible_indices(reference: NormalizedPose, live: NormalizedPose) -> Tuple[int, ...]:
    """Índices fiables en ambas poses, en el orden de la referencia."""

    live_visible = set(live.visible_indices)
    return tuple(idx for idx in reference.visible_indices if idx in live_visible)


def compute_distance_features(reference: NormalizedPose, live: NormalizedPose) -> DistanceFeatures:
    """Distancia euclídea (3D si hay profundidad) entre cada punto común de ambas poses.

    Cero puntos comunes es una salida válida que señala que no se puede comparar.
    """

    common = common_visible_indices(reference, live)
    if not common:
        return DistanceFeatures(distances=(), common_indices=())

    ref_xyz = landmarks_to_xyz([reference.landmarks[idx] for idx in common])
    live_xyz = landmarks_to_xyz([live.landmarks[idx] for idx in common])
    distances = np.linalg.norm(ref_xyz - live_xyz, axis=1)
    return DistanceFeatures(distances=tuple(float(d) for d in distances), common_indices=common)


__all__ = ["DistanceFeatures", "common_visible_indices", "compute_distance_features"]
