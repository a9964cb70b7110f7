"""Tipos ligeros que describen landmarks, poses normalizadas y resultados de comparación."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

from .errors import InvalidPoseError
from .utils.json_safety import json_safe


class BodyRegion(str, Enum):
    """Regiones corporales gruesas usadas para informar qué se comparó."""

    UPPER = "upper"
    LOWER = "lower"
    LEFT_ARM = "left_arm"
    RIGHT_ARM = "right_arm"


class ComparisonStatus(str, Enum):
    """Desenlace de una comparación.

    ``SUCCESS`` indica que hubo rasgos comparables; los otros dos casos producen
    el resultado degenerado de similitud cero y permiten distinguir "no se vio
    nada útil" de "la pose se vio pero no coincide".
    """

    SUCCESS = "success"
    NO_VISIBLE_LANDMARKS = "no_visible_landmarks"
    NO_COMMON_FEATURES = "no_common_features"


_LANDMARK_KEYS = ("x", "y", "z", "visibility")


@dataclass(frozen=True)
class Landmark(Mapping):
    """Landmark con coordenadas planas, profundidad y visibilidad opcionales.

    Se comporta como un ``Mapping`` de solo lectura para que el resto del código
    pueda tratarlo igual que los diccionarios que emite la capa de detección.
    """

    x: float
    y: float
    z: Optional[float] = None
    visibility: Optional[float] = None

    def __post_init__(self) -> None:
        try:
            x = float(self.x)
            y = float(self.y)
            z = None if self.z is None else float(self.z)
            visibility = None if self.visibility is None else float(self.visibility)
        except (TypeError, ValueError) as exc:
            raise InvalidPoseError(f"Malformed landmark {self.x!r}, {self.y!r}: {exc}") from exc
        # Una profundidad no finita equivale a no tener profundidad.
        if z is not None and not math.isfinite(z):
            z = None
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)
        object.__setattr__(self, "visibility", visibility)

    def __getitem__(self, key: str) -> Optional[float]:  # type: ignore[override]
        if key in _LANDMARK_KEYS:
            return getattr(self, key)
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        yield from _LANDMARK_KEYS

    def __len__(self) -> int:  # type: ignore[override]
        return len(_LANDMARK_KEYS)

    @property
    def effective_visibility(self) -> float:
        """Visibilidad a usar en filtros: la ausencia equivale a 1.0."""

        return 1.0 if self.visibility is None else float(self.visibility)

    @property
    def has_depth(self) -> bool:
        return self.z is not None

    @property
    def is_finite(self) -> bool:
        """``True`` si las coordenadas planas son números finitos."""

        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_dict(self) -> Dict[str, float]:
        """Exporta el landmark omitiendo los campos opcionales ausentes."""

        data = {"x": float(self.x), "y": float(self.y)}
        if self.z is not None:
            data["z"] = float(self.z)
        if self.visibility is not None:
            data["visibility"] = float(self.visibility)
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Landmark":
        """Crea un ``Landmark`` desde cualquier ``Mapping`` con claves ``x`` e ``y``."""

        return cls(x=data["x"], y=data["y"], z=data.get("z"), visibility=data.get("visibility"))

    @classmethod
    def from_object(cls, obj: object) -> "Landmark":
        """Crea un ``Landmark`` leyendo atributos (p. ej. landmarks protobuf de MediaPipe)."""

        return cls(
            x=getattr(obj, "x"),
            y=getattr(obj, "y"),
            z=getattr(obj, "z", None),
            visibility=getattr(obj, "visibility", None),
        )


def coerce_landmark(value: object) -> Landmark:
    """Normaliza ``value`` (``Landmark``, ``Mapping`` u objeto con atributos) a ``Landmark``."""

    if isinstance(value, Landmark):
        return value
    if isinstance(value, Mapping):
        return Landmark.from_mapping(value)
    return Landmark.from_object(value)


Pose = Sequence[Landmark]


@dataclass(frozen=True)
class NormalizedPose:
    """Pose trasladada al origen anatómico y escalada por la longitud de referencia."""

    landmarks: Tuple[Landmark, ...]
    origin: Landmark
    scale: float
    visible_indices: Tuple[int, ...]

    def is_visible(self, index: int) -> bool:
        return index in self.visible_indices


@dataclass(frozen=True)
class ComparisonResult:
    """Resultado de comparar una pose de referencia con una pose en vivo."""

    is_matching: bool
    similarity: float
    landmarks_compared: int
    valid_landmarks: int
    mean_distance: float
    compared_regions: Tuple[BodyRegion, ...] = ()
    region_distances: Optional[Dict[BodyRegion, float]] = None
    status: ComparisonStatus = ComparisonStatus.SUCCESS

    @classmethod
    def degenerate(cls, status: ComparisonStatus) -> "ComparisonResult":
        """Resultado de similitud cero usado cuando no hay nada comparable."""

        return cls(
            is_matching=False,
            similarity=0.0,
            landmarks_compared=0,
            valid_landmarks=0,
            mean_distance=1.0,
            compared_regions=(),
            region_distances=None,
            status=status,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Representación serializable en JSON del resultado."""

        payload: Dict[str, Any] = {
            "is_matching": self.is_matching,
            "similarity": self.similarity,
            "landmarks_compared": self.landmarks_compared,
            "valid_landmarks": self.valid_landmarks,
            "mean_distance": self.mean_distance,
            "compared_regions": list(self.compared_regions),
            "status": self.status,
        }
        if self.region_distances is not None:
            payload["region_distances"] = dict(self.region_distances)
        return json_safe(payload)


__all__ = [
    "BodyRegion",
    "ComparisonResult",
    "ComparisonStatus",
    "Landmark",
    "NormalizedPose",
    "Pose",
    "coerce_landmark",
]
