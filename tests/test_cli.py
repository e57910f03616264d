from pathlib import Path

import pytest

from process_scheduler.cli import main


def _workload(tmp_path: Path) -> Path:
    p = tmp_path / "processes.csv"
    p.write_text("1,5,0\n2,3,1\n3,2,2\n")
    return p


def test_run_prints_every_algorithm(tmp_path: Path, capsys):
    assert main(["run", str(_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    for title in (
        "First-come, first-serve",
        "Shortest Job First (preemptive)",
        "Shortest Job First Priority (preemptive)",
        "Round-Robin (non-preemptive)",
    ):
        assert title in out


def test_run_selected_algorithm(tmp_path: Path, capsys):
    assert main(["run", str(_workload(tmp_path)), "-a", "sjf", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Shortest Job First (preemptive)" in out
    assert "Round-Robin" not in out


def test_compare(tmp_path: Path, capsys):
    assert main(["compare", str(_workload(tmp_path))]) == 0
    assert "Algorithm comparison" in capsys.readouterr().out


def test_bad_workload_exits_nonzero(tmp_path: Path, capsys):
    p = tmp_path / "bad.csv"
    p.write_text("1,x,0\n")
    assert main(["run", str(p)]) == 1
    assert "Schedule table" not in capsys.readouterr().out


def test_missing_workload_exits_nonzero(tmp_path: Path):
    assert main(["run", str(tmp_path / "missing.csv")]) == 1


def test_missing_argument_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["run"])
    assert exc_info.value.code == 2


def test_undecodable_workload_exits_nonzero(tmp_path: Path):
    p = tmp_path / "binary.csv"
    p.write_bytes(b"1,5,0\n\xff\xfe,3,1\n")
    assert main(["run", str(p)]) == 1


def test_verbose_after_subcommand(tmp_path: Path, capsys):
    assert main(["run", str(_workload(tmp_path)), "-a", "rr", "-v"]) == 0
    assert "Round-Robin (non-preemptive)" in capsys.readouterr().out
    assert main(["compare", str(_workload(tmp_path)), "--verbose"]) == 0


def test_unknown_algorithm_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["run", str(_workload(tmp_path)), "-a", "mlfq"])
    assert exc_info.value.code == 2
