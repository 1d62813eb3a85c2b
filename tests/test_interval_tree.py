import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolabs.interval_tree import Interval, IntervalTree, main, read_intervals

_endpoint = st.integers(min_value=-50, max_value=50)
_interval = st.builds(Interval.normalized, _endpoint, _endpoint)


def _build(intervals):
    tree = IntervalTree()
    for interval in intervals:
        tree.insert(interval)
    return tree


def test_normalized_swaps_endpoints():
    assert Interval.normalized(9, 4) == Interval(4, 9)


def test_touching_endpoints_overlap():
    tree = _build([Interval(1, 5), Interval(10, 20)])
    assert tree.search_overlapping(Interval(5, 9)) == [Interval(1, 5)]


def test_no_overlap_gives_empty_list():
    tree = _build([Interval(1, 5), Interval(10, 20)])
    assert tree.search_overlapping(Interval(6, 9)) == []


def test_empty_tree_search():
    assert IntervalTree().search_overlapping(Interval(0, 100)) == []


def test_duplicates_are_kept():
    tree = _build([Interval(3, 4), Interval(3, 4)])
    assert tree.search_overlapping(Interval(4, 4)) == [Interval(3, 4), Interval(3, 4)]
    assert len(tree) == 2


@given(st.lists(_interval, max_size=60), _interval)
def test_search_matches_brute_force(intervals, query):
    tree = _build(intervals)
    expected = sorted(
        iv for iv in intervals if iv.low <= query.high and query.low <= iv.high
    )
    assert tree.search_overlapping(query) == expected


@given(st.lists(_interval, max_size=60))
def test_iteration_is_sorted(intervals):
    tree = _build(intervals)
    assert list(tree) == sorted(intervals)
    assert len(tree) == len(intervals)


def test_read_intervals_normalizes(tmp_path):
    path = tmp_path / "insert.txt"
    path.write_text("3\n1 2\n9 4\n5 5\n", encoding="utf-8")
    assert read_intervals(path) == [Interval(1, 2), Interval(4, 9), Interval(5, 5)]


def test_read_intervals_missing_count(tmp_path):
    path = tmp_path / "insert.txt"
    path.write_text("abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_intervals(path)


def test_read_intervals_truncated(tmp_path):
    path = tmp_path / "insert.txt"
    path.write_text("2\n1 2\n3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="第 2"):
        read_intervals(path)


def test_main_with_query_argument(tmp_path, capsys):
    path = tmp_path / "insert.txt"
    path.write_text("2\n1 5\n10 20\n", encoding="utf-8")
    assert main([str(path), "--query", "4", "12"]) == 0
    out = capsys.readouterr().out
    assert "[1, 5]" in out
    assert "[10, 20]" in out


def test_main_reads_query_from_stdin(tmp_path, capsys, monkeypatch):
    path = tmp_path / "insert.txt"
    path.write_text("2\n1 5\n10 20\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("20 15\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "[10, 20]" in out
    assert "[1, 5]" not in out


def test_main_bad_stdin_query(tmp_path, monkeypatch):
    path = tmp_path / "insert.txt"
    path.write_text("1\n1 5\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main([str(path)]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt"), "-q", "1", "2"]) == 1