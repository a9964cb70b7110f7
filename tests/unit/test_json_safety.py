import json
import math

import numpy as np

from pose_compare.types import BodyRegion, ComparisonStatus
from pose_compare.utils.json_safety import json_safe


def test_json_safe_handles_numpy_and_non_finite_values():
    payload = {
        "scalar": np.float32(0.25),
        "count": np.int64(3),
        "array": np.array([1.0, np.nan]),
        "inf": math.inf,
        "nested": ({"flag": np.bool_(True)},),
    }

    safe = json_safe(payload)

    assert safe == {
        "scalar": 0.25,
        "count": 3,
        "array": [1.0, None],
        "inf": None,
        "nested": [{"flag": True}],
    }
    json.dumps(safe, allow_nan=False)


def test_json_safe_uses_enum_values_for_keys_and_values():
    safe = json_safe({BodyRegion.LEFT_ARM: 0.1, "status": ComparisonStatus.NO_COMMON_FEATURES})

    assert safe == {"left_arm": 0.1, "status": "no_common_features"}
