"""Valores por defecto de la configuración de comparación de poses."""

from __future__ import annotations

# --- FILTRADO ---
# Visibilidad mínima de un landmark para considerarlo válido en la comparación
# (distancias, ángulos y detección de regiones).
DEFAULT_VISIBILITY_THRESHOLD = 0.5

# --- VEREDICTO ---
# Similitud mínima para declarar que la pose en vivo coincide con la referencia.
DEFAULT_SIMILARITY_THRESHOLD = 0.5

# Distancia normalizada máxima de una coincidencia. Se expone por compatibilidad
# con la superficie de configuración pero ninguna ruta de puntuación la consulta.
DEFAULT_DISTANCE_THRESHOLD = 0.5

# --- RASGOS ANGULARES ---
# Mezcla la concordancia de ángulos articulares con la puntuación por distancia.
DEFAULT_USE_ANGLES = False

# Peso de la similitud angular cuando ``use_angles`` está activo.
DEFAULT_ANGLE_WEIGHT = 0.3

# Puntúa únicamente por ángulos, ignorando posición y escala.
DEFAULT_ANGLE_ONLY = False

# --- NORMALIZACIÓN ---
# Escala cada punto por la longitud de su extremidad en lugar de una escala global,
# tolerando proporciones corporales distintas.
DEFAULT_PER_LIMB_NORMALIZATION = False
