from __future__ import annotations
import io
import json

from matrixgame.cli import USAGE, main


def test_stdin_matrix(capsys):
    rc = main(["2", "2"], stdin=io.StringIO("1 -1\n-1 1\n"))
    out = capsys.readouterr().out
    assert rc == 0
    assert "Final Tableau:" in out
    assert "Player 1 Optimal Strategy: ( 1/2, 1/2 )" in out


def test_json_file(tmp_path, capsys):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"payoff": [[5]]}))
    rc = main(["--json", str(path), "--no-verbose", "--format", "decimal"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Initial Tableau:" not in out
    assert "Value: 5.00" in out


def test_bad_dimensions_print_usage(capsys):
    assert main(["0", "2"], stdin=io.StringIO("")) == 2
    assert USAGE in capsys.readouterr().out


def test_missing_dimensions_print_usage(capsys):
    assert main([]) == 2
    assert USAGE in capsys.readouterr().out


def test_bad_row(capsys):
    rc = main(["2", "2"], stdin=io.StringIO("1 -1\n-1 oops\n"))
    assert rc == 2
    assert "Please enter 2 valid numbers on each line." in capsys.readouterr().out


def test_bad_json(tmp_path, capsys):
    path = tmp_path / "game.json"
    path.write_text('{"payoff": [[1, 2], [3]]}')
    assert main(["--json", str(path)]) == 2
    assert "Invalid payoff file" in capsys.readouterr().out


def test_solver_failure(capsys):
    rc = main(["2", "2", "--max-iterations", "1"], stdin=io.StringIO("1 -1\n-1 1\n"))
    assert rc == 1
    assert "Solver failed" in capsys.readouterr().out


def test_missing_json_file(tmp_path, capsys):
    assert main(["--json", str(tmp_path / "nope.json")]) == 2
    assert "Invalid payoff file" in capsys.readouterr().out


def test_infeasible_game_reports_failure(capsys):
    rc = main(["3", "5"], stdin=io.StringIO("1 0 0 1 0\n0 1 1 1 1\n1 1 1 1 1\n"))
    assert rc == 1
    assert "Solver failed" in capsys.readouterr().out
