from pathlib import Path

import pytest

from process_scheduler.models import Process
from process_scheduler.workload_io import LoadError, load_workload


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0\n2, 3, 1, 4\n\n3,2,2\n")
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert [pr.pid for pr in procs] == [1, 2, 3]
    assert procs[0].burst_time == 5
    assert procs[0].arrival_time == 0
    assert procs[0].priority == 0
    assert procs[1].priority == 4


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id": 1, "burst": 5, "arrival": 0, "priority": 2},'
                 '{"id": 2, "burst": 3, "arrival": 1},'
                 '[3, 2, 2, 1]]')
    procs = load_workload(p)
    assert procs[0].priority == 2
    assert procs[1].priority == 0
    assert procs[2] == Process(3, arrival_time=2, burst_time=2, priority=1)


@pytest.mark.parametrize(
    "content",
    [
        "1,5\n",
        "1,5,0,1,9\n",
        "1,five,0\n",
        "1,0,0\n",
        "1,5,-2\n",
    ],
)
def test_load_csv_rejects_bad_rows(tmp_path: Path, content):
    p = tmp_path / "w.csv"
    p.write_text(content)
    with pytest.raises(LoadError):
        load_workload(p)


def test_load_json_missing_field(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id": 1, "arrival": 0}]')
    with pytest.raises(LoadError, match="burst"):
        load_workload(p)


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("1,5,0\n")
    with pytest.raises(LoadError, match="Unsupported"):
        load_workload(p)


def test_load_csv_rejects_underscore_digits(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1_0,5,0\n")
    with pytest.raises(LoadError, match="base-10"):
        load_workload(p)


def test_load_csv_accepts_signed_priority(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0,-3\n2,+4,1\n")
    procs = load_workload(p)
    assert procs[0].priority == -3
    assert procs[1].burst_time == 4


def test_load_csv_not_utf8(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_bytes(b"1,5,0\n\xff\xfe,3,1\n")
    with pytest.raises(LoadError, match="UTF-8"):
        load_workload(p)


def test_load_csv_oversized_field(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1," + "9" * 200_000 + ",0\n")
    with pytest.raises(LoadError, match="invalid CSV"):
        load_workload(p)


def test_load_json_not_utf8(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_bytes(b"[[1,5,0]]\xff")
    with pytest.raises(LoadError, match="UTF-8"):
        load_workload(p)
