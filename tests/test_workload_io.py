from pathlib import Path

import pytest

from batch_scheduler.errors import EmptyWorkload, InvalidRecord, LoadError
from batch_scheduler.models import Process
from batch_scheduler.workload_io import clone_workload, load_workload, sort_by_arrival


def test_load_text(tmp_path: Path):
    p = tmp_path / "procesos.txt"
    p.write_text("id arrival burst\n1 0 5\n2 1 3\n3 2 8\n")
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert [(q.id, q.arrival, q.burst) for q in procs] == [(1, 0, 5), (2, 1, 3), (3, 2, 8)]
    assert all(q.remaining == q.burst for q in procs)
    assert all(q.start_time is None and q.finish_time is None for q in procs)


def test_header_is_always_discarded(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("9 9 9\n1 0 2\n")
    procs = load_workload(p)
    assert [q.id for q in procs] == [1]


def test_keeps_input_order(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("header\n1 7 2\n2 0 1\n3 3 4\n")
    assert [q.id for q in load_workload(p)] == [1, 2, 3]


def test_skips_blank_and_malformed_lines(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("id arrival burst\n\n1 0 5\nnot a record\n2 1\n3 2 x\n4 1 2 9\n   \n5 3 1\n")
    procs = load_workload(p)
    assert [q.id for q in procs] == [1, 5]


def test_strict_rejects_malformed_lines(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("id arrival burst\n1 0 5\n\n2 1\n")
    with pytest.raises(InvalidRecord) as excinfo:
        load_workload(p, strict=True)
    assert excinfo.value.line_number == 4


@pytest.mark.parametrize(
    "record",
    ["2 1 0", "2 1 -3", "2 -1 3", "-2 1 3"],
)
def test_invalid_record_reports_line(tmp_path: Path, record):
    p = tmp_path / "w.txt"
    p.write_text(f"id arrival burst\n1 0 5\n{record}\n")
    with pytest.raises(InvalidRecord) as excinfo:
        load_workload(p)
    assert excinfo.value.line_number == 3
    assert excinfo.value.path == p
    assert ":3:" in str(excinfo.value)


def test_duplicate_id_is_invalid(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("id arrival burst\n1 0 5\n1 2 3\n")
    with pytest.raises(InvalidRecord) as excinfo:
        load_workload(p)
    assert excinfo.value.line_number == 3


def test_missing_file(tmp_path: Path):
    p = tmp_path / "missing.txt"
    with pytest.raises(LoadError) as excinfo:
        load_workload(p)
    assert excinfo.value.path == p
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_undecodable_file(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_bytes(b"id arrival burst\n1 0 \xff\xfe\n")
    with pytest.raises(LoadError):
        load_workload(p)


@pytest.mark.parametrize("content", ["", "id arrival burst\n", "id arrival burst\n\nfoo bar baz\n"])
def test_empty_workload(tmp_path: Path, content):
    p = tmp_path / "w.txt"
    p.write_text(content)
    with pytest.raises(EmptyWorkload):
        load_workload(p)


def test_clone_workload_resets_state():
    original = [Process(id=1, arrival=0, burst=3, remaining=0, start_time=0, finish_time=3)]
    copy = clone_workload(original)
    assert copy[0] is not original[0]
    assert (copy[0].remaining, copy[0].start_time, copy[0].finish_time) == (3, None, None)
    assert original[0].finish_time == 3


def test_sort_by_arrival_is_stable():
    procs = [
        Process(id=1, arrival=4, burst=1),
        Process(id=2, arrival=0, burst=1),
        Process(id=3, arrival=4, burst=1),
        Process(id=4, arrival=0, burst=1),
    ]
    assert [p.id for p in sort_by_arrival(procs)] == [2, 4, 1, 3]


@pytest.mark.parametrize("record", ["2 1 1_0", "2 1 ٣", "2 １ 3", "2 1 3.0"])
def test_only_ascii_integers_are_fields(tmp_path: Path, record):
    p = tmp_path / "w.txt"
    p.write_text(f"id arrival burst\n1 0 5\n{record}\n", encoding="utf-8")
    assert [q.id for q in load_workload(p)] == [1]
    with pytest.raises(InvalidRecord) as excinfo:
        load_workload(p, strict=True)
    assert excinfo.value.line_number == 3


def test_signed_integers_are_accepted(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("id arrival burst\n+1 +0 +5\n")
    procs = load_workload(p)
    assert [(q.id, q.arrival, q.burst) for q in procs] == [(1, 0, 5)]
