import math

from hypothesis import given, settings
from hypothesis import strategies as st

from algolabs.closest_pair import (
    PairResult,
    Point,
    closest_pair,
    distance_squared,
    main,
    naive_closest_pair,
    read_points,
)

coords = st.lists(
    st.tuples(st.integers(-1000, 1000), st.integers(-1000, 1000)), min_size=2, max_size=60
)


def _points(pairs):
    return [Point(i + 1, float(x), float(y)) for i, (x, y) in enumerate(pairs)]


def test_three_point_example():
    pts = [Point(1, 0.0, 0.0), Point(2, 3.0, 4.0), Point(3, 10.0, 10.0)]
    result = naive_closest_pair(pts)
    assert result.distance == 5.0
    assert (result.a, result.b) == (pts[0], pts[1])
    assert closest_pair(pts) == result


def test_fewer_than_two_points():
    assert closest_pair([]).dist2 == math.inf
    assert closest_pair([Point(1, 2.0, 3.0)]) == PairResult()


def test_ids_are_ordered():
    pts = [Point(9, 0.0, 0.0), Point(4, 0.0, 1.0), Point(7, 50.0, 50.0)]
    for result in (naive_closest_pair(pts), closest_pair(pts)):
        assert result.a.id < result.b.id
        assert {result.a, result.b} == {pts[0], pts[1]}


def test_duplicate_points_give_zero():
    pts = _points([(5, 5), (1, 1), (5, 5), (9, 2), (3, 8)])
    assert closest_pair(pts).dist2 == 0.0
    assert naive_closest_pair(pts).dist2 == 0.0


@settings(max_examples=200)
@given(coords)
def test_divide_and_conquer_matches_naive(pairs):
    pts = _points(pairs)
    fast = closest_pair(pts)
    slow = naive_closest_pair(pts)
    assert fast.dist2 == slow.dist2
    assert distance_squared(fast.a, fast.b) == fast.dist2
    assert fast.a in pts and fast.b in pts
    assert fast.a.id < fast.b.id


@given(coords)
def test_input_order_does_not_matter(pairs):
    pts = _points(pairs)
    assert closest_pair(pts).dist2 == closest_pair(list(reversed(pts))).dist2


def test_read_points(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 0.5 2\n2 -3 4.25\n3 bad 1\n4 1 1\n", encoding="utf-8")
    assert read_points(path) == [Point(1, 0.5, 2.0), Point(2, -3.0, 4.25)]


def test_main_insufficient(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("1 0 0\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Insufficient points" in capsys.readouterr().out


def test_main_reports_pair(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("1 0 0\n2 3 4\n3 10 10\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Naive Distance: 5.000000" in out
    assert "Divide and conquer: (1, 0.000000, 0.000000) and (2, 3.000000, 4.000000)" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1