# tests/conftest.py
"""Utilidades de configuración comunes para la batería de pruebas."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import pytest

# Repo root = parent de 'tests'
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Asegura que los paquetes en src/ son importables sin instalación previa
src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)

from pose_compare.constants import LANDMARK_COUNT, PoseLandmark  # noqa: E402
from pose_compare.types import Landmark  # noqa: E402

# Pose de pie con brazos caídos en coordenadas normalizadas de imagen.
_STANDING_POINTS: Dict[PoseLandmark, Tuple[float, float]] = {
    PoseLandmark.NOSE: (0.50, 0.10),
    PoseLandmark.LEFT_SHOULDER: (0.40, 0.30),
    PoseLandmark.RIGHT_SHOULDER: (0.60, 0.30),
    PoseLandmark.LEFT_ELBOW: (0.35, 0.45),
    PoseLandmark.RIGHT_ELBOW: (0.65, 0.45),
    PoseLandmark.LEFT_WRIST: (0.33, 0.60),
    PoseLandmark.RIGHT_WRIST: (0.67, 0.60),
    PoseLandmark.LEFT_HIP: (0.43, 0.60),
    PoseLandmark.RIGHT_HIP: (0.57, 0.60),
    PoseLandmark.LEFT_KNEE: (0.43, 0.78),
    PoseLandmark.RIGHT_KNEE: (0.57, 0.78),
    PoseLandmark.LEFT_ANKLE: (0.43, 0.95),
    PoseLandmark.RIGHT_ANKLE: (0.57, 0.95),
}

# Pose literal del escenario A: todo en (0.5, 0.5) salvo hombros y caderas.
_SCENARIO_A_POINTS: Dict[PoseLandmark, Tuple[float, float]] = {
    PoseLandmark.LEFT_SHOULDER: (0.4, 0.3),
    PoseLandmark.RIGHT_SHOULDER: (0.6, 0.3),
    PoseLandmark.LEFT_HIP: (0.4, 0.6),
    PoseLandmark.RIGHT_HIP: (0.6, 0.6),
}


def _build_pose(points: Dict[PoseLandmark, Tuple[float, float]]) -> List[Landmark]:
    pose = [Landmark(x=0.5, y=0.5, visibility=1.0) for _ in range(LANDMARK_COUNT)]
    for index, (x, y) in points.items():
        pose[index] = Landmark(x=x, y=y, visibility=1.0)
    return pose


@pytest.fixture
def standing_pose() -> List[Landmark]:
    """Pose completa de 33 puntos, todos visibles."""

    return _build_pose(_STANDING_POINTS)


@pytest.fixture
def scenario_a_pose() -> List[Landmark]:
    return _build_pose(_SCENARIO_A_POINTS)


@pytest.fixture
def with_point() -> Callable[..., List[Landmark]]:
    """Devuelve una copia de ``pose`` con el punto ``index`` sustituido."""

    def _with_point(pose, index, *, x=None, y=None, z=None, visibility=None):
        updated = list(pose)
        current = updated[index]
        updated[index] = Landmark(
            x=current.x if x is None else x,
            y=current.y if y is None else y,
            z=current.z if z is None else z,
            visibility=current.visibility if visibility is None else visibility,
        )
        return updated

    return _with_point


@pytest.fixture
def transform_pose() -> Callable[..., List[Landmark]]:
    """Aplica ``p' = p * factor + (dx, dy)`` a todos los puntos de ``pose``."""

    def _transform(pose, *, dx=0.0, dy=0.0, factor=1.0):
        return [
            Landmark(
                x=lm.x * factor + dx,
                y=lm.y * factor + dy,
                z=None if lm.z is None else lm.z * factor,
                visibility=lm.visibility,
            )
            for lm in pose
        ]

    return _transform
