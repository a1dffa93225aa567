"""Transmissibility presets — named shortcuts for common beta values."""

from __future__ import annotations

from seirsim.core.model_spec import InvalidParameter

PRESETS: dict[str, float] = {
    "high": 0.7,
    "medium": 0.3,
    "low": 0.1,
}

PRESET_LABELS: dict[str, str] = {
    "high": "highly contagious virus",
    "medium": "moderately contagious virus",
    "low": "slow-spreading virus",
}


def preset_beta(name: str) -> float:
    """Resolve a preset name to its beta value."""
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise InvalidParameter(
            f"Unknown preset {name!r}; expected one of {', '.join(PRESETS)}"
        ) from None


def classify_beta(beta: float) -> str:
    """Map a numeric beta back onto the nearest preset bucket."""
    if beta > 0.5:
        return "high"
    if beta < 0.2:
        return "low"
    return "medium"
