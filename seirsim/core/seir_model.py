"""SEIR model — explicit Euler integration plus plateau detection.

The state is recorded at the start of every step, so index 0 holds the
initial condition and the post-update state of the final step is dropped.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from seirsim.core.model_spec import (
    DegenerateState,
    InvalidParameter,
    ModelParameters,
    OutbreakSummary,
    PlateauResult,
    SimulationResult,
    Trajectory,
)

PLATEAU_WARMUP = 5
PLATEAU_THRESHOLD = 0.01


def _check_parameters(params: ModelParameters) -> None:
    """Raise InvalidParameter if any field is out of its valid range."""
    values = params.model_dump()
    bad = [name for name, v in values.items() if not math.isfinite(v)]
    if bad:
        raise InvalidParameter(f"Non-finite parameter(s): {', '.join(bad)}")

    if not 0.0 <= params.beta <= 1.0:
        raise InvalidParameter(f"beta must be within [0, 1], got {params.beta}")

    for name in ("S0", "E0", "I0", "R0"):
        if values[name] < 0:
            raise InvalidParameter(f"{name} must be non-negative, got {values[name]}")

    for name in ("gamma", "sigma", "dt"):
        if values[name] <= 0:
            raise InvalidParameter(f"{name} must be positive, got {values[name]}")

    if params.days < 1:
        raise InvalidParameter(f"days must be at least 1, got {params.days}")


def detect_plateau(
    infectious: Sequence[float],
    warmup: int = PLATEAU_WARMUP,
    threshold: float = PLATEAU_THRESHOLD,
) -> PlateauResult:
    """Find the first index after the warm-up where I barely moves.

    A day t qualifies when t > warmup and |I[t] - I[t-1]| < threshold.
    Returns an empty PlateauResult when no day qualifies.
    """
    for t in range(warmup + 1, len(infectious)):
        if abs(infectious[t] - infectious[t - 1]) < threshold:
            return PlateauResult(day=t, value=float(infectious[t]))
    return PlateauResult()


def simulate(params: ModelParameters) -> tuple[Trajectory, PlateauResult]:
    """Integrate the SEIR system over ``params.days`` steps of size ``params.dt``.

    Raises InvalidParameter for out-of-range inputs and DegenerateState if
    the total population is not strictly positive at any step.
    """
    _check_parameters(params)

    days, dt = params.days, params.dt
    beta, sigma, gamma = params.beta, params.sigma, params.gamma

    S = np.empty(days, dtype=float)
    E = np.empty(days, dtype=float)
    I = np.empty(days, dtype=float)
    R = np.empty(days, dtype=float)

    s, e, i, r = float(params.S0), float(params.E0), float(params.I0), float(params.R0)

    for t in range(days):
        S[t], E[t], I[t], R[t] = s, e, i, r

        N = s + e + i + r
        # NaN and overflow to inf both fail this test
        if not (N > 0 and math.isfinite(N)):
            raise DegenerateState(f"Total population is {N} at step {t}")

        force = beta * s * i / N
        s, e, i, r = (
            s - force * dt,
            e + (force - sigma * e) * dt,
            i + (sigma * e - gamma * i) * dt,
            r + gamma * i * dt,
        )

    trajectory = Trajectory(S=S.tolist(), E=E.tolist(), I=I.tolist(), R=R.tolist())
    return trajectory, detect_plateau(trajectory.I)


def summarize(trajectory: Trajectory, population: float | None = None) -> OutbreakSummary:
    """Peak day/size, attack rate and final recovered count of a trajectory.

    ``population`` defaults to the total of the first recorded sample.
    """
    if population is None:
        population = trajectory.S[0] + trajectory.E[0] + trajectory.I[0] + trajectory.R[0]
    I = trajectory.I
    peak_idx = int(np.argmax(I))
    return OutbreakSummary(
        peak_day=peak_idx,
        peak_infectious=I[peak_idx],
        attack_rate=1.0 - trajectory.S[-1] / population,
        final_recovered=trajectory.R[-1],
    )


def run(params: ModelParameters) -> SimulationResult:
    """Simulate and bundle trajectory, plateau and summary into one result."""
    trajectory, plateau = simulate(params)
    return SimulationResult(
        params=params,
        trajectory=trajectory,
        plateau=plateau,
        summary=summarize(trajectory, params.population),
    )
