"""Filtro de visibilidad: decide qué landmarks son fiables para la comparación."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import Landmark


def is_visible(landmark: Landmark, threshold: float) -> bool:
    """``True`` si el landmark tiene coordenadas finitas y visibilidad ``>= threshold``."""

    return landmark.is_finite and landmark.effective_visibility >= threshold


def visible_indices(landmarks: Sequence[Landmark], threshold: float) -> Tuple[int, ...]:
    """Índices de los landmarks que superan el umbral de visibilidad.

    La visibilidad ausente cuenta como 1.0. Un resultado vacío es válido y los
    consumidores lo tratan como señal de fallo, no como excepción.
    """

    return tuple(idx for idx, lm in enumerate(landmarks) if is_visible(lm, threshold))


def anchor_visible(landmarks: Sequence[Landmark], index: int, min_visibility: float) -> bool:
    """Comprueba si ``index`` existe y puede servir como ancla (visibilidad estricta)."""

    if index >= len(landmarks):
        return False
    lm = landmarks[index]
    return lm.is_finite and lm.effective_visibility > min_visibility


__all__ = ["anchor_visible", "is_visible", "visible_indices"]
