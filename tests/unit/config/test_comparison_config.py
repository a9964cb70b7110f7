from __future__ import annotations

import dataclasses

import pytest

from pose_compare import compare, config
from pose_compare.config import ComparisonConfig
from pose_compare.errors import InvalidConfigError


def test_defaults() -> None:
    cfg = config.load_default()

    assert cfg.visibility_threshold == 0.5
    assert cfg.similarity_threshold == 0.5
    assert cfg.distance_threshold == 0.5
    assert cfg.use_angles is False
    assert cfg.angle_weight == pytest.approx(0.3)
    assert cfg.per_limb_normalization is False
    assert cfg.angle_only is False


def test_config_is_immutable() -> None:
    cfg = ComparisonConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.angle_weight = 0.9  # type: ignore[misc]


@pytest.mark.parametrize(
    "field, value",
    [
        ("visibility_threshold", -0.1),
        ("similarity_threshold", 1.2),
        ("distance_threshold", float("nan")),
        ("angle_weight", "mucho"),
    ],
)
def test_out_of_range_values_are_rejected(field, value) -> None:
    with pytest.raises(InvalidConfigError):
        ComparisonConfig(**{field: value})


def test_invalid_config_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ComparisonConfig(angle_weight=2.0)


def test_from_mapping_accepts_camel_case_and_ignores_unknown_keys() -> None:
    cfg = config.from_mapping(
        {"visibilityThreshold": 0.7, "use_angles": True, "angleWeight": "0.25", "mirror": True}
    )

    assert cfg.visibility_threshold == pytest.approx(0.7)
    assert cfg.use_angles is True
    assert cfg.angle_weight == pytest.approx(0.25)
    assert cfg.similarity_threshold == 0.5


@pytest.mark.parametrize("key", ["angleOnly", "useAngles", "per_limb_normalization"])
@pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
def test_boolean_options_reject_non_bool_values(key, value) -> None:
    with pytest.raises(InvalidConfigError):
        config.from_mapping({key: value})


def test_string_false_does_not_switch_on_angle_only(standing_pose) -> None:
    with pytest.raises(InvalidConfigError):
        compare(standing_pose, standing_pose, {"angleOnly": "false"})
    assert compare(standing_pose, standing_pose, {"angleOnly": False}).landmarks_compared == 33


def test_from_yaml(tmp_path) -> None:
    path = tmp_path / "compare.yaml"
    path.write_text("similarity_threshold: 0.8\nperLimbNormalization: true\n", encoding="utf-8")

    cfg = config.from_yaml(path)

    assert cfg.similarity_threshold == pytest.approx(0.8)
    assert cfg.per_limb_normalization is True


def test_from_yaml_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert config.from_yaml(path) == ComparisonConfig()


def test_from_yaml_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 0.5\n- 0.7\n", encoding="utf-8")

    with pytest.raises(InvalidConfigError):
        config.from_yaml(path)


def test_fingerprint_tracks_parameters() -> None:
    base = ComparisonConfig()

    assert base.fingerprint() == ComparisonConfig().fingerprint()
    assert base.fingerprint() != base.replace(angle_only=True).fingerprint()
    assert len(base.fingerprint()) == 40
