"""Utilities to guarantee strict JSON-serializable payloads."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

import numpy as np


def _safe_key(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def json_safe(value: Any) -> Any:
    """Recursively convert ``value`` into a JSON-serializable structure.

    - NumPy scalars/arrays are converted to Python types/lists.
    - ``Enum`` members become their values, also when used as mapping keys.
    - Non-finite floats (NaN/Inf) are converted to ``None``.
    """

    if isinstance(value, Enum):
        return json_safe(value.value)

    if value is None or isinstance(value, (str, bool)):
        return value

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    if isinstance(value, np.generic):
        return json_safe(value.item())

    if isinstance(value, np.ndarray):
        return [json_safe(v) for v in value.tolist()]

    if isinstance(value, dict):
        return {_safe_key(k): json_safe(v) for k, v in value.items()}

    if isinstance(value, (list, tuple, set)):
        return [json_safe(v) for v in value]

    return value


__all__ = ["json_safe"]
