"""Constantes compartidas de *landmarks* empleadas por la comparación de poses."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

from .types import BodyRegion

LANDMARK_COUNT: int = 33


class PoseLandmark(IntEnum):
    """Índices de landmarks en el orden del modelo BlazePose de MediaPipe."""

    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


# Atajos de índice que replican el orden de landmarks de Mediapipe.
NOSE = int(PoseLandmark.NOSE)
LEFT_SHOULDER = int(PoseLandmark.LEFT_SHOULDER)
RIGHT_SHOULDER = int(PoseLandmark.RIGHT_SHOULDER)
LEFT_ELBOW = int(PoseLandmark.LEFT_ELBOW)
RIGHT_ELBOW = int(PoseLandmark.RIGHT_ELBOW)
LEFT_WRIST = int(PoseLandmark.LEFT_WRIST)
RIGHT_WRIST = int(PoseLandmark.RIGHT_WRIST)
LEFT_HIP = int(PoseLandmark.LEFT_HIP)
RIGHT_HIP = int(PoseLandmark.RIGHT_HIP)
LEFT_KNEE = int(PoseLandmark.LEFT_KNEE)
RIGHT_KNEE = int(PoseLandmark.RIGHT_KNEE)
LEFT_ANKLE = int(PoseLandmark.LEFT_ANKLE)
RIGHT_ANKLE = int(PoseLandmark.RIGHT_ANKLE)

HIP_CENTER = (LEFT_HIP, RIGHT_HIP)
SHOULDER_CENTER = (LEFT_SHOULDER, RIGHT_SHOULDER)

# Visibilidad mínima (estricta) para aceptar un punto como ancla de origen o escala.
# Es más permisiva que el umbral general para encontrar un ancla estable.
ANCHOR_MIN_VISIBILITY = 0.3

# Suelo para longitudes de escala y de segmento; evita divisiones degeneradas.
MIN_SEGMENT_LENGTH = 0.01

# Segmentos corporales (inicio, fin) usados por la normalización por extremidad.
# El orden importa: si un punto inicia varios segmentos prevalece el último.
LIMB_SEGMENTS: Dict[str, Tuple[int, int]] = {
    "left_upper_arm": (LEFT_SHOULDER, LEFT_ELBOW),
    "left_forearm": (LEFT_ELBOW, LEFT_WRIST),
    "right_upper_arm": (RIGHT_SHOULDER, RIGHT_ELBOW),
    "right_forearm": (RIGHT_ELBOW, RIGHT_WRIST),
    "left_thigh": (LEFT_HIP, LEFT_KNEE),
    "left_calf": (LEFT_KNEE, LEFT_ANKLE),
    "right_thigh": (RIGHT_HIP, RIGHT_KNEE),
    "right_calf": (RIGHT_KNEE, RIGHT_ANKLE),
    "left_torso": (LEFT_SHOULDER, LEFT_HIP),
    "right_torso": (RIGHT_SHOULDER, RIGHT_HIP),
}

JOINT_INDEX_MAP: Dict[str, Tuple[int, int, int]] = {
    "left_elbow": (LEFT_SHOULDER, LEFT_ELBOW, LEFT_WRIST),
    "right_elbow": (RIGHT_SHOULDER, RIGHT_ELBOW, RIGHT_WRIST),
    "left_knee": (LEFT_HIP, LEFT_KNEE, LEFT_ANKLE),
    "right_knee": (RIGHT_HIP, RIGHT_KNEE, RIGHT_ANKLE),
    "left_hip": (LEFT_SHOULDER, LEFT_HIP, LEFT_KNEE),
    "right_hip": (RIGHT_SHOULDER, RIGHT_HIP, RIGHT_KNEE),
}

# Landmarks que alimentan el desglose de distancias por región.
REGION_LANDMARKS: Dict[BodyRegion, Tuple[int, ...]] = {
    BodyRegion.UPPER: (LEFT_SHOULDER, RIGHT_SHOULDER, LEFT_ELBOW, RIGHT_ELBOW),
    BodyRegion.LOWER: (LEFT_HIP, RIGHT_HIP, LEFT_KNEE, RIGHT_KNEE, LEFT_ANKLE, RIGHT_ANKLE),
    BodyRegion.LEFT_ARM: (LEFT_SHOULDER, LEFT_ELBOW, LEFT_WRIST),
    BodyRegion.RIGHT_ARM: (RIGHT_SHOULDER, RIGHT_ELBOW, RIGHT_WRIST),
}

__all__ = [
    "LANDMARK_COUNT",
    "PoseLandmark",
    "ANCHOR_MIN_VISIBILITY",
    "MIN_SEGMENT_LENGTH",
    "LIMB_SEGMENTS",
    "JOINT_INDEX_MAP",
    "REGION_LANDMARKS",
    "HIP_CENTER",
    "SHOULDER_CENTER",
    "NOSE",
    "LEFT_HIP",
    "RIGHT_HIP",
    "LEFT_SHOULDER",
    "RIGHT_SHOULDER",
]
