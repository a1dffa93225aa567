"""Orchestrator — wires parameters, simulation and reporting; provides CLI entry point."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from seirsim.core.formatting import describe_plateau, describe_scenario
from seirsim.core.model_spec import ModelParameters, SimulationError, SimulationResult
from seirsim.core.presets import PRESETS, preset_beta
from seirsim.core.seir_model import run

DEFAULT_OUTPUT_DIR = os.environ.get("SEIRSIM_OUTPUT_DIR", "output")


def _log(msg: str) -> None:
    print(f"[seirsim] {msg}", flush=True)


def save_result(result: SimulationResult, output_dir: Path) -> Path:
    """Write the full result (params, series, plateau, summary) as result.json."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "result.json"
    path.write_text(result.model_dump_json(indent=2))
    return path


def write_report(result: SimulationResult, output_dir: Path) -> Path:
    """Write a simulation_report.md to the output directory."""
    p, plateau, summary = result.params, result.plateau, result.summary
    lines = [
        "# SEIR Simulation Report",
        "",
        describe_scenario(p, plateau),
        "",
        "## Parameters",
        "",
        "| Parameter | Value |",
        "|-----------|-------|",
    ]
    for name, value in p.model_dump().items():
        lines.append(f"| {name} | {value:g} |")

    lines.extend([
        "",
        "## Outcome",
        "",
        f"- **Plateau:** {describe_plateau(plateau, p.days)}",
    ])
    if plateau.reached:
        lines.append(f"- **Plateau day / infectious:** {plateau.day} / {plateau.value:.4g}")
    lines.extend([
        f"- **Peak day:** {summary.peak_day}",
        f"- **Peak infectious:** {summary.peak_infectious:.4g}",
        f"- **Attack rate:** {summary.attack_rate * 100:.1f}%",
        f"- **Final recovered:** {summary.final_recovered:.4g}",
    ])

    path = Path(output_dir) / "simulation_report.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n")
    return path


def run_pipeline(params: ModelParameters, output_dir: str | None = None) -> SimulationResult:
    """Run one simulation, log its outcome, and optionally persist it."""
    _log(f"Simulating {params.days} days: S0={params.S0:g}, E0={params.E0:g}, beta={params.beta:g}")
    result = run(params)

    if result.plateau.reached:
        _log(f"Plateau at day {result.plateau.day} (I={result.plateau.value:.4g})")
    else:
        _log(f"No plateau within {params.days} days")

    if output_dir is not None:
        save_result(result, output_dir)
        write_report(result, output_dir)
        _log(f"Results written to {output_dir}/")

    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="SEIRSim — deterministic SEIR epidemic simulator with plateau detection",
    )
    parser.add_argument("--S0", type=float, default=990.0, help="Initial susceptible (default: 990)")
    parser.add_argument("--E0", type=float, default=5.0, help="Initial exposed (default: 5)")
    parser.add_argument("--beta", type=float, default=0.3, help="Transmission rate in [0, 1] (default: 0.3)")
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Named transmissibility; overrides --beta",
    )
    parser.add_argument(
        "--output-dir",
        nargs="?",
        const=DEFAULT_OUTPUT_DIR,
        default=None,
        help=f"Write result.json and simulation_report.md (default dir: {DEFAULT_OUTPUT_DIR}/)",
    )
    args = parser.parse_args(argv)

    beta = preset_beta(args.preset) if args.preset else args.beta

    try:
        params = ModelParameters(S0=args.S0, E0=args.E0, beta=beta)
        result = run_pipeline(params, args.output_dir)
    except SimulationError as e:
        print(f"\n[seirsim] ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"\n{describe_scenario(result.params, result.plateau)}")
    print(
        f"Peak day {result.summary.peak_day}, "
        f"peak infectious {result.summary.peak_infectious:,.0f}, "
        f"attack rate {result.summary.attack_rate * 100:.1f}%"
    )


if __name__ == "__main__":
    main()
