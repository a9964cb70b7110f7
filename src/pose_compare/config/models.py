"""Modelo ``dataclass`` inmutable que describe la configuración de la comparación."""
from __future__ import annotations

import dataclasses
import hashlib
import json
from dataclasses import dataclass, fields
from typing import Any, Dict

from ..errors import InvalidConfigError
from .settings import (
    DEFAULT_ANGLE_ONLY,
    DEFAULT_ANGLE_WEIGHT,
    DEFAULT_DISTANCE_THRESHOLD,
    DEFAULT_PER_LIMB_NORMALIZATION,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_USE_ANGLES,
    DEFAULT_VISIBILITY_THRESHOLD,
)

_UNIT_INTERVAL_FIELDS = (
    "visibility_threshold",
    "similarity_threshold",
    "distance_threshold",
    "angle_weight",
)

_BOOLEAN_FIELDS = ("use_angles", "per_limb_normalization", "angle_only")


@dataclass(frozen=True)
class ComparisonConfig:
    """Parámetros de una comparación de poses.

    ``distance_threshold`` no interviene en ninguna puntuación: solo
    ``similarity_threshold`` decide el veredicto de coincidencia.
    """
    visibility_threshold: float = DEFAULT_VISIBILITY_THRESHOLD
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD
    use_angles: bool = DEFAULT_USE_ANGLES
    angle_weight: float = DEFAULT_ANGLE_WEIGHT
    per_limb_normalization: bool = DEFAULT_PER_LIMB_NORMALIZATION
    angle_only: bool = DEFAULT_ANGLE_ONLY

    def __post_init__(self) -> None:
        for name in _UNIT_INTERVAL_FIELDS:
            raw = getattr(self, name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise InvalidConfigError(f"{name} must be a number, got {raw!r}") from exc
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(f"{name} must be within [0, 1], got {value!r}")
            object.__setattr__(self, name, value)
        # Sin conversión implícita: ``"false"`` llegado de JSON no debe activar nada.
        for name in _BOOLEAN_FIELDS:
            raw = getattr(self, name)
            if not isinstance(raw, bool):
                raise InvalidConfigError(f"{name} must be a boolean, got {raw!r}")

    def replace(self, **changes: Any) -> "ComparisonConfig":
        """Devuelve una copia con los campos indicados sustituidos."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Entrega la configuración como diccionario de Python."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def fingerprint(self) -> str:
        """Calcula un hash SHA1 de todos los parámetros de la comparación."""
        encoded = json.dumps(self.to_dict(), sort_keys=True).encode("utf-8")
        return hashlib.sha1(encoded).hexdigest()


DEFAULT_CONFIG = ComparisonConfig()
