"""Command-line runner that compares two poses stored as JSON files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List

import yaml

from . import config
from .comparator import compare
from .errors import PoseComparisonError
from .extraction import extract_landmarks_from_result, landmarks_from_proto
from .types import Landmark

LOGGER = logging.getLogger(__name__)


def _unit_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} no es un número válido") from exc
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError("El valor debe estar entre 0 y 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compara una pose en vivo con una pose de referencia guardadas en JSON.",
    )
    parser.add_argument("reference", help="JSON con los landmarks de la pose de referencia")
    parser.add_argument("live", help="JSON con los landmarks de la pose en vivo")
    parser.add_argument("--config", default=None, help="YAML con opciones de comparación.")
    parser.add_argument(
        "--visibility_threshold",
        type=_unit_float,
        default=None,
        help="Visibilidad mínima para usar un landmark.",
    )
    parser.add_argument(
        "--similarity_threshold",
        type=_unit_float,
        default=None,
        help="Similitud mínima para declarar coincidencia.",
    )
    parser.add_argument(
        "--use_angles",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Mezcla la similitud de ángulos articulares.",
    )
    parser.add_argument(
        "--angle_weight",
        type=_unit_float,
        default=None,
        help="Peso de la similitud angular cuando se usa --use_angles.",
    )
    parser.add_argument(
        "--per_limb",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Normaliza cada punto por la longitud de su extremidad.",
    )
    parser.add_argument(
        "--angle_only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Puntúa solo por ángulos articulares.",
    )
    parser.add_argument("--verbose", action="store_true", help="Muestra mensajes de log detallados.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")


def load_pose_file(path: Path) -> List[Landmark]:
    """Lee una lista de landmarks o un resultado de detección serializado en JSON."""

    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return landmarks_from_proto(data)
    return extract_landmarks_from_result(data)


def _build_config(args: argparse.Namespace) -> config.ComparisonConfig:
    cfg = config.from_yaml(args.config) if args.config else config.load_default()
    overrides: dict[str, Any] = {}
    if args.visibility_threshold is not None:
        overrides["visibility_threshold"] = args.visibility_threshold
    if args.similarity_threshold is not None:
        overrides["similarity_threshold"] = args.similarity_threshold
    if args.angle_weight is not None:
        overrides["angle_weight"] = args.angle_weight
    # Los flags booleanos solo sobrescriben el YAML cuando se indican (--x / --no-x).
    if args.use_angles is not None:
        overrides["use_angles"] = args.use_angles
    if args.per_limb is not None:
        overrides["per_limb_normalization"] = args.per_limb
    if args.angle_only is not None:
        overrides["angle_only"] = args.angle_only
    return cfg.replace(**overrides)


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    paths = [Path(args.reference).expanduser(), Path(args.live).expanduser()]
    for path in paths:
        if not path.is_file():
            parser.error(f"No se encontró el archivo: {path}")

    try:
        cfg = _build_config(args)
        reference, live = (load_pose_file(path) for path in paths)
        result = compare(reference, live, cfg)
    except (OSError, ValueError, yaml.YAMLError, PoseComparisonError) as exc:
        LOGGER.error("No se pudo comparar las poses: %s", exc)
        return 1

    LOGGER.info("CONFIG_SHA1=%s", cfg.fingerprint())
    print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
