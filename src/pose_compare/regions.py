"""Detección de regiones corporales observables en una pose normalizada."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .constants import (
    LEFT_ELBOW,
    LEFT_HIP,
    LEFT_SHOULDER,
    LEFT_WRIST,
    REGION_LANDMARKS,
    RIGHT_ELBOW,
    RIGHT_HIP,
    RIGHT_SHOULDER,
    RIGHT_WRIST,
)
from .metrics.distances import DistanceFeatures
from .types import BodyRegion, NormalizedPose


def detect_regions(pose: NormalizedPose) -> Tuple[BodyRegion, ...]:
    """Clasifica qué regiones gruesas son visibles; solo se usa para diagnóstico."""

    seen = pose.is_visible
    regions = []
    if seen(LEFT_SHOULDER) or seen(RIGHT_SHOULDER):
        regions.append(BodyRegion.UPPER)
    if seen(LEFT_HIP) or seen(RIGHT_HIP):
        regions.append(BodyRegion.LOWER)
    if seen(LEFT_SHOULDER) and (seen(LEFT_ELBOW) or seen(LEFT_WRIST)):
        regions.append(BodyRegion.LEFT_ARM)
    if seen(RIGHT_SHOULDER) and (seen(RIGHT_ELBOW) or seen(RIGHT_WRIST)):
        regions.append(BodyRegion.RIGHT_ARM)
    return tuple(regions)


def shared_regions(reference: NormalizedPose, live: NormalizedPose) -> Tuple[BodyRegion, ...]:
    """Regiones visibles en ambas poses, en el orden de la referencia."""

    live_regions = set(detect_regions(live))
    return tuple(region for region in detect_regions(reference) if region in live_regions)


def region_distances(
    regions: Sequence[BodyRegion], features: DistanceFeatures
) -> Dict[BodyRegion, float]:
    """Distancia media por región usando solo los puntos comunes de ``features``.

    Las regiones sin ningún punto común se omiten del desglose.
    """

    breakdown: Dict[BodyRegion, float] = {}
    for region in regions:
        mean: Optional[float] = features.mean_for(REGION_LANDMARKS[region])
        if mean is not None:
            breakdown[region] = mean
    return breakdown


__all__ = ["detect_regions", "region_distances", "shared_regions"]
