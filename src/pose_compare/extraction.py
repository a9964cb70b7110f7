"""Adaptadores que convierten resultados de detección en poses del comparador.

El comparador no sabe de dónde salen los landmarks: estos adaptadores traducen
los resultados de MediaPipe (API *Tasks* y API *Solutions* heredada) o los
``dict`` que envía un cliente web al formato :class:`Landmark`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence

from .types import Landmark

_SCREEN_KEYS = ("pose_landmarks", "landmarks")
_WORLD_KEYS = ("pose_world_landmarks", "world_landmarks", "worldLandmarks")


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def landmarks_from_proto(landmarks: Iterable[object]) -> List[Landmark]:
    """Convierte landmarks de MediaPipe (u objetos/``dict`` equivalentes) en :class:`Landmark`.

    Las coordenadas planas ausentes se rellenan con 0; profundidad y visibilidad
    ausentes se conservan como ``None``.
    """

    converted: List[Landmark] = []
    for lm in landmarks:
        x = _field(lm, "x")
        y = _field(lm, "y")
        converted.append(
            Landmark(
                x=0.0 if x is None else float(x),
                y=0.0 if y is None else float(y),
                z=_optional_float(_field(lm, "z")),
                visibility=_optional_float(_field(lm, "visibility")),
            )
        )
    return converted


def _unwrap(container: Any) -> Sequence[Any]:
    # ``NormalizedLandmarkList`` de la API heredada expone los puntos en ``.landmark``.
    inner = _field(container, "landmark")
    return inner if inner is not None else container


def _select_pose(poses: Any, pose_index: int) -> Optional[Sequence[Any]]:
    if not poses:
        return None
    if _field(poses, "landmark") is not None:
        # La API heredada solo detecta una persona.
        return _unwrap(poses) if pose_index == 0 else None
    if _field(poses[0], "x") is not None:
        # Lista plana de landmarks: una sola persona.
        return poses if pose_index == 0 else None
    if pose_index >= len(poses):
        return None
    return _unwrap(poses[pose_index])


def extract_landmarks_from_result(result: Any, pose_index: int = 0) -> List[Landmark]:
    """Extrae la pose ``pose_index`` de un resultado de detección.

    Prefiere las coordenadas normalizadas de imagen y recurre a las coordenadas
    de mundo cuando no existen. Devuelve una lista vacía si no se detectó pose.
    """

    if result is None:
        return []
    for keys in (_SCREEN_KEYS, _WORLD_KEYS):
        for key in keys:
            selected = _select_pose(_field(result, key), pose_index)
            if selected:
                return landmarks_from_proto(selected)
    return []


class LandmarkProviderBase(ABC):
    """Contrato mínimo de un proveedor de poses inyectado por quien lo posee.

    El ciclo de vida del modelo de detección pertenece a la instancia, no a un
    estado global del módulo.
    """

    @abstractmethod
    def detect(self, image: Any) -> List[Landmark]:
        """Devuelve los landmarks de la persona principal de ``image`` (vacío si no hay)."""

    def close(self) -> None:
        """Libera recursos asociados al proveedor (sobrescribible)."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["LandmarkProviderBase", "extract_landmarks_from_result", "landmarks_from_proto"]
