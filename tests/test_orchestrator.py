"""Tests for orchestrator — pipeline wiring, report files and CLI."""

import json
from unittest.mock import patch

import pytest

from seirsim.core.model_spec import ModelParameters, SimulationResult
from seirsim.core.orchestrator import main, run_pipeline, save_result, write_report
from seirsim.core.seir_model import run


def _result(**overrides) -> SimulationResult:
    values = {"S0": 990, "E0": 5, "beta": 0.3}
    values.update(overrides)
    return run(ModelParameters(**values))


class TestSaveResult:
    def test_writes_json(self, tmp_path):
        path = save_result(_result(), tmp_path / "out")
        data = json.loads(path.read_text())
        assert data["params"]["beta"] == 0.3
        assert len(data["trajectory"]["I"]) == 100
        assert "plateau" in data
        assert "summary" in data


class TestWriteReport:
    def test_writes_markdown_file(self, tmp_path):
        write_report(_result(), tmp_path)
        md = (tmp_path / "simulation_report.md").read_text()
        assert "# SEIR Simulation Report" in md
        assert "| beta | 0.3 |" in md
        assert "**Peak day:**" in md
        assert "moderately contagious virus" in md

    def test_plateau_details_when_reached(self, tmp_path):
        write_report(_result(E0=0, beta=0.0), tmp_path)
        md = (tmp_path / "simulation_report.md").read_text()
        assert "**Plateau day / infectious:** 39 /" in md
        assert "0 years, 1 month, and 9 days" in md


class TestRunPipeline:
    def test_without_output_dir_writes_nothing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = run_pipeline(ModelParameters(S0=990, E0=5, beta=0.3))
        assert len(result.trajectory.I) == 100
        assert list(tmp_path.iterdir()) == []

    def test_with_output_dir(self, tmp_path):
        run_pipeline(ModelParameters(S0=990, E0=5, beta=0.3), str(tmp_path))
        assert (tmp_path / "result.json").exists()
        assert (tmp_path / "simulation_report.md").exists()

    def test_logs_progress(self, capsys):
        run_pipeline(ModelParameters(S0=990, E0=0, beta=0.0))
        out = capsys.readouterr().out
        assert "[seirsim] Simulating 100 days" in out
        assert "[seirsim] Plateau at day 39" in out


class TestMain:
    def test_default_run_prints_narrative(self, capsys):
        main([])
        out = capsys.readouterr().out
        assert "A moderately contagious virus" in out
        assert "to plateau." in out
        assert "Peak day" in out

    def test_preset_overrides_beta(self, tmp_path):
        main(["--beta", "0.05", "--preset", "high", "--output-dir", str(tmp_path)])
        data = json.loads((tmp_path / "result.json").read_text())
        assert data["params"]["beta"] == 0.7

    def test_passes_parsed_parameters(self):
        with patch("seirsim.core.orchestrator.run_pipeline", wraps=run_pipeline) as mock:
            main(["--S0", "500", "--E0", "2", "--beta", "0.4"])
        params = mock.call_args.args[0]
        assert params == ModelParameters(S0=500, E0=2, beta=0.4)

    def test_invalid_beta_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--beta", "2"])
        assert exc.value.code == 1
        assert "[seirsim] ERROR: beta must be within [0, 1]" in capsys.readouterr().err

    def test_degenerate_population_exits_with_error(self, capsys):
        with patch(
            "seirsim.core.orchestrator.ModelParameters",
            side_effect=lambda **kw: ModelParameters(**kw, I0=0),
        ):
            with pytest.raises(SystemExit) as exc:
                main(["--S0", "0", "--E0", "0"])
        assert exc.value.code == 1
        assert "Total population" in capsys.readouterr().err
