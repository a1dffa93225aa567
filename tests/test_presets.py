"""Tests for presets — name resolution and beta classification."""

import pytest

from seirsim.core.model_spec import InvalidParameter
from seirsim.core.presets import PRESET_LABELS, PRESETS, classify_beta, preset_beta


def test_preset_values():
    assert preset_beta("high") == 0.7
    assert preset_beta("medium") == 0.3
    assert preset_beta("low") == 0.1


def test_preset_name_is_case_insensitive():
    assert preset_beta(" High ") == 0.7


def test_unknown_preset_raises():
    with pytest.raises(InvalidParameter, match="extreme"):
        preset_beta("extreme")


@pytest.mark.parametrize(
    "beta, expected",
    [
        (0.0, "low"),
        (0.19, "low"),
        (0.2, "medium"),
        (0.5, "medium"),
        (0.51, "high"),
        (1.0, "high"),
    ],
)
def test_classify_beta(beta, expected):
    assert classify_beta(beta) == expected


def test_presets_classify_as_themselves():
    for name, beta in PRESETS.items():
        assert classify_beta(beta) == name


def test_every_preset_has_a_label():
    assert set(PRESET_LABELS) == set(PRESETS)
