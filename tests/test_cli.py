# tests/test_cli.py
import json

from apps.cli.solve_cli import main


def test_solves_file(tmp_path, classic, capsys):
    path = tmp_path / "classic.txt"
    path.write_text(classic, encoding="utf-8")
    assert main([str(path), "--quiet"]) == 0
    out = capsys.readouterr().out
    before, after = out.split("FINISHED!\n======\n")
    assert before.splitlines()[0] == "5 3 ? ? 7 ? ? ? ? "
    assert "5 3 4 6 7 8 9 1 2 " in after
    assert "Failed" not in after


def test_unsolvable_prints_failed(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("55", encoding="utf-8")
    assert main([str(path), "--quiet", "--sequential"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Failed")


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    out = capsys.readouterr().out
    assert f"Error finding file '{missing}'!" in out
    assert "FINISHED!" not in out


def test_default_puzzle_and_json_report(tmp_path, capsys):
    report = tmp_path / "report.json"
    assert main(["--quiet", "--stats", "--json", str(report)]) == 0
    out = capsys.readouterr().out
    assert "FINISHED!" in out
    assert "nodes=" in out
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["solved"] is True
    assert payload["issues"] == []
    assert payload["grid"][0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
    assert payload["initial"][0][0] == 0


def test_config_file(tmp_path, classic, capsys):
    cfg = tmp_path / "solver.yaml"
    cfg.write_text(f"quiet: true\nparallel: false\ndefault_puzzle: {tmp_path / 'p.txt'}\n", encoding="utf-8")
    (tmp_path / "p.txt").write_text(classic, encoding="utf-8")
    assert main(["--config", str(cfg)]) == 0
    out = capsys.readouterr().out
    assert "[" not in out  # no timestamped log lines
    assert "Failed" not in out
