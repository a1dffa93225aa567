"""Plain-English rendering of simulation results."""

from __future__ import annotations

from seirsim.core.model_spec import ModelParameters, PlateauResult
from seirsim.core.presets import PRESET_LABELS, classify_beta


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_plateau_time(day: int) -> str:
    """Render a day count as "Y years, M months, and D days".

    Months are 30 days and years 365; the day remainder is taken modulo 30
    of the whole count, not of the leftover after years.
    """
    years = day // 365
    months = (day % 365) // 30
    days = day % 30
    return f"{_plural(years, 'year')}, {_plural(months, 'month')}, and {_plural(days, 'day')}"


def describe_plateau(plateau: PlateauResult, horizon: int) -> str:
    if plateau.day is None:
        return f"more than {horizon} days"
    return format_plateau_time(plateau.day)


def _number(value: float) -> str:
    return f"{value:g}"


def describe_scenario(params: ModelParameters, plateau: PlateauResult | None = None) -> str:
    """One-sentence narrative of the scenario, with the plateau time if known."""
    label = PRESET_LABELS[classify_beta(params.beta)]
    sentence = (
        f"A {label} in an initial population of {_number(params.S0)} susceptible "
        f"individuals, which already has {_number(params.E0)} exposed individuals, "
        f"and the disease's transmissibility is {_number(params.beta)}."
    )
    if plateau is not None:
        sentence += f" It will take {describe_plateau(plateau, params.days)} to plateau."
    return sentence
