"""End-to-end tests for the ``bsdelta`` command line."""

import numpy as np
import pytest
from bsdelta import cli

ARGS = ["--S", "100", "--K", "100", "--sigma", "0.2", "--T", "1.0", "--r", "0.05"]


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


class TestCommandLine:
    def test_table_output(self, capsys):
        assert cli.main(ARGS + ["--kind", "c", "--steps", "10"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 12
        t, px, delta = (float(x) for x in lines[-1].split())
        assert t == 1.0
        assert abs(px - 10.4506) < 1e-3
        assert 0.6 < delta < 0.7

    def test_data_file(self, tmp_path, capsys):
        out = tmp_path / "bs.dat"
        assert cli.main(ARGS + ["--kind", "put", "--data-file", str(out), "--no-table"]) == 0
        assert capsys.readouterr().out == ""
        data = np.loadtxt(out)
        assert data.shape == (101, 3)
        assert abs(data[-1, 1] - 5.5735) < 1e-3

    def test_plot(self, tmp_path):
        out = tmp_path / "grid.png"
        assert cli.main(ARGS + ["--kind", "c", "--steps", "5", "--plot", str(out), "--no-table"]) == 0
        assert out.exists()

    def test_gnuplot_writes_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        launched = []
        monkeypatch.setattr(cli, "run_gnuplot", lambda script: launched.append(script) or False)
        assert cli.main(ARGS + ["--kind", "c", "--steps", "5", "--gnuplot", "--no-table"]) == 0
        assert (tmp_path / "black_scholes_data.dat").exists()
        assert (tmp_path / "plot_script.gnu").exists()
        assert len(launched) == 1

    def test_invalid_kind_flag(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(ARGS + ["--kind", "x"])
        assert exc.value.code == 2
        assert "Invalid option type" in capsys.readouterr().err

    def test_non_positive_input(self, capsys):
        argv = ["--S", "-5", "--K", "100", "--sigma", "0.2", "--T", "1.0", "--r", "0.05", "--kind", "c"]
        assert cli.main(argv) == 2
        assert "S must be positive" in capsys.readouterr().err

    def test_zero_maturity(self, capsys):
        argv = ["--S", "100", "--K", "100", "--sigma", "0.2", "--T", "0", "--r", "0.05", "--kind", "c"]
        assert cli.main(argv) == 2
        assert "T = 0" in capsys.readouterr().err

    def test_bad_steps(self, capsys):
        assert cli.main(ARGS + ["--kind", "c", "--steps", "0"]) == 2


class TestInteractive:
    def test_prompts_for_everything(self, capsys):
        code = cli.main([], input_func=_answers("100", "100", "0.2", "1.0", "0.05", "p"))
        assert code == 0
        last = capsys.readouterr().out.splitlines()[-1].split()
        assert abs(float(last[1]) - 5.5735) < 1e-3

    def test_prompts_only_missing(self, capsys):
        asked = []

        def ask(prompt):
            asked.append(prompt)
            return "c"

        assert cli.main(ARGS + ["--steps", "2"], input_func=ask) == 0
        assert asked == [cli.KIND_PROMPT]

    def test_invalid_kind_answer(self, capsys):
        code = cli.main(ARGS, input_func=_answers("z"))
        assert code == 2
        assert "Invalid option type" in capsys.readouterr().err

    def test_non_numeric_answer(self, capsys):
        code = cli.main([], input_func=_answers("abc"))
        assert code == 2
        assert "Not a number" in capsys.readouterr().err

    def test_nan_answer_rejected(self, capsys):
        code = cli.main(["--steps", "2"],
                        input_func=_answers("nan", "100", "0.2", "1", "0.05", "c"))
        assert code == 2
        captured = capsys.readouterr()
        assert "S must be positive and finite" in captured.err
        assert captured.out == ""

    def test_infinite_maturity_flag(self, capsys):
        argv = ["--S", "100", "--K", "100", "--sigma", "0.2", "--T", "inf", "--r", "0.05", "--kind", "c"]
        assert cli.main(argv) == 2
        assert "T must be non-negative and finite" in capsys.readouterr().err

    def test_input_ends_early(self, capsys):
        def closed(prompt):
            raise EOFError

        assert cli.main(ARGS, input_func=closed) == 2
        assert "Input ended" in capsys.readouterr().err


def test_logger_is_module_scoped():
    assert cli.logger.name == "bsdelta.cli"
