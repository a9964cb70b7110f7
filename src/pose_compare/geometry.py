"""Utilidades geométricas compartidas entre los módulos de comparación de poses."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .types import Landmark


def distance(a: Landmark, b: Landmark) -> float:
    """Distancia euclídea entre dos landmarks; la profundidad ausente cuenta como 0."""

    dz = (a.z if a.has_depth else 0.0) - (b.z if b.has_depth else 0.0)
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + dz * dz)


def midpoint(a: Landmark, b: Landmark) -> Landmark:
    """Punto medio de ``a`` y ``b``; solo conserva profundidad si ambos la tienen."""

    z = (a.z + b.z) / 2.0 if a.has_depth and b.has_depth else None
    return Landmark(x=(a.x + b.x) / 2.0, y=(a.y + b.y) / 2.0, z=z)


def centroid(landmarks: Sequence[Landmark]) -> Landmark:
    """Media aritmética de las coordenadas planas de ``landmarks``."""

    xy = landmarks_to_xy(landmarks)
    cx, cy = xy.mean(axis=0)
    return Landmark(x=float(cx), y=float(cy))


def landmarks_to_xy(landmarks: Sequence[Landmark]) -> np.ndarray:
    """Devuelve un array ``(N, 2)`` con las coordenadas planas."""

    arr = np.empty((len(landmarks), 2), dtype=float)
    for idx, lm in enumerate(landmarks):
        arr[idx, 0] = lm.x
        arr[idx, 1] = lm.y
    return arr


def landmarks_to_xyz(landmarks: Sequence[Landmark]) -> np.ndarray:
    """Devuelve un array ``(N, 3)``; la profundidad ausente se rellena con 0."""

    arr = np.zeros((len(landmarks), 3), dtype=float)
    for idx, lm in enumerate(landmarks):
        arr[idx, 0] = lm.x
        arr[idx, 1] = lm.y
        if lm.z is not None:
            arr[idx, 2] = lm.z
    return arr


def max_pairwise_distance(landmarks: Sequence[Landmark]) -> float:
    """Mayor distancia entre cualquier par de ``landmarks`` (0 si hay menos de dos)."""

    if len(landmarks) < 2:
        return 0.0
    xyz = landmarks_to_xyz(landmarks)
    diffs = xyz[:, None, :] - xyz[None, :, :]
    return float(np.sqrt((diffs**2).sum(axis=-1)).max())


def angle_at(a: Landmark, b: Landmark, c: Landmark) -> float:
    """Calcula en grados el ángulo ABC con vértice en ``b``.

    Solo usa coordenadas planas. Devuelve un valor en ``[0, 180]`` y exactamente
    0 cuando alguno de los vectores desde ``b`` tiene longitud nula.
    """

    v1 = (a.x - b.x, a.y - b.y)
    v2 = (c.x - b.x, c.y - b.y)
    mag1, mag2 = math.hypot(*v1), math.hypot(*v2)
    if mag1 == 0 or mag2 == 0:
        return 0.0
    cosine = (v1[0] * v2[0] + v1[1] * v2[1]) / (mag1 * mag2)
    cosine = max(min(cosine, 1.0), -1.0)
    return math.degrees(math.acos(cosine))


def angle_abc_deg(
    ax: np.ndarray,
    ay: np.ndarray,
    bx: np.ndarray,
    by: np.ndarray,
    cx: np.ndarray,
    cy: np.ndarray,
) -> np.ndarray:
    """Calcula en vector el ángulo ABC en grados para cada fila de datos.

    Las filas con un vector de longitud nula producen 0 grados, igual que
    :func:`angle_at`.
    """

    v1x, v1y = ax - bx, ay - by
    v2x, v2y = cx - bx, cy - by
    dot = v1x * v2x + v1y * v2y
    denom = np.hypot(v1x, v1y) * np.hypot(v2x, v2y)
    safe_denom = np.where(denom > 0, denom, 1.0)
    cos = np.where(denom > 0, dot / safe_denom, 1.0)
    cos = np.clip(cos, -1.0, 1.0)
    return np.degrees(np.arccos(cos))


__all__ = [
    "angle_abc_deg",
    "angle_at",
    "centroid",
    "distance",
    "landmarks_to_xy",
    "landmarks_to_xyz",
    "max_pairwise_distance",
    "midpoint",
]
