"""Utilidades auxiliares compartidas por el paquete."""

from .json_safety import json_safe

__all__ = ["json_safe"]
