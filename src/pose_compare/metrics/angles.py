"""Rasgos de ángulos articulares entre dos poses normalizadas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from ..constants import JOINT_INDEX_MAP
from ..geometry import angle_abc_deg, landmarks_to_xy
from ..types import NormalizedPose


@dataclass(frozen=True)
class AngleFeatures:
    """Diferencias angulares normalizadas a ``[0, 1]`` por articulación comparable."""

    differences: Tuple[float, ...]
    joints: Tuple[str, ...]

    @property
    def valid_count(self) -> int:
        return len(self.differences)

    @property
    def mean(self) -> float:
        return float(np.mean(self.differences)) if self.differences else float("nan")

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.joints, self.differences))


def _triple_visible(pose: NormalizedPose, indices: Tuple[int, int, int]) -> bool:
    return all(pose.is_visible(idx) for idx in indices)


def _joint_angles(pose: NormalizedPose, triples: list[Tuple[int, int, int]]) -> np.ndarray:
    a = landmarks_to_xy([pose.landmarks[i] for i, _, _ in triples])
    b = landmarks_to_xy([pose.landmarks[j] for _, j, _ in triples])
    c = landmarks_to_xy([pose.landmarks[k] for _, _, k in triples])
    return angle_abc_deg(a[:, 0], a[:, 1], b[:, 0], b[:, 1], c[:, 0], c[:, 1])


def compute_angle_features(reference: NormalizedPose, live: NormalizedPose) -> AngleFeatures:
    """Compara los ángulos de ``JOINT_INDEX_MAP`` visibles en ambas poses.

    La diferencia absoluta se pliega al arco corto (``min(d, 180 - d)``) y se
    divide entre 180.
    """

    names = [
        name
        for name, indices in JOINT_INDEX_MAP.items()
        if _triple_visible(reference, indices) and _triple_visible(live, indices)
    ]
    if not names:
        return AngleFeatures(differences=(), joints=())

    triples = [JOINT_INDEX_MAP[name] for name in names]
    diff = np.abs(_joint_angles(reference, triples) - _joint_angles(live, triples))
    folded = np.minimum(diff, 180.0 - diff) / 180.0
    return AngleFeatures(differences=tuple(float(v) for v in folded), joints=tuple(names))


__all__ = ["AngleFeatures", "compute_angle_features"]
