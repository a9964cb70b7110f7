"""Utilidades para cargar configuraciones por defecto, desde diccionarios o desde YAML.

Las claves se aceptan tanto en ``snake_case`` como en el ``camelCase`` que usan
los clientes web (``visibilityThreshold``); las claves desconocidas se ignoran."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..errors import InvalidConfigError
from .models import ComparisonConfig

logger = logging.getLogger(__name__)

_CAMEL_CASE_ALIASES = {
    "visibilityThreshold": "visibility_threshold",
    "similarityThreshold": "similarity_threshold",
    "distanceThreshold": "distance_threshold",
    "useAngles": "use_angles",
    "angleWeight": "angle_weight",
    "perLimbNormalization": "per_limb_normalization",
    "angleOnly": "angle_only",
}

_KNOWN_FIELDS = frozenset(_CAMEL_CASE_ALIASES.values())


def load_default() -> ComparisonConfig:
    """Obtener la configuración por defecto."""
    return ComparisonConfig()


def from_mapping(data: Mapping[str, Any]) -> ComparisonConfig:
    """Mezclar ``data`` sobre los valores por defecto y construir la configuración."""
    updates: dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_CASE_ALIASES.get(key, key)
        if name not in _KNOWN_FIELDS:
            logger.debug("Ignoring unknown comparison option %r", key)
            continue
        updates[name] = value
    return load_default().replace(**updates)


def from_yaml(path: str | Path) -> ComparisonConfig:
    """Cargar una configuración desde un YAML y mezclarla con los valores base."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise InvalidConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return from_mapping(data)
