"""Closest pair of points in the plane: brute force and divide and conquer."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Point:
    """A numbered point in the plane."""

    id: int = 0
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class PairResult:
    """The squared distance of the closest pair and the two points."""

    dist2: float = math.inf
    a: Point | None = None
    b: Point | None = None

    @property
    def distance(self) -> float:
        return math.sqrt(self.dist2)

    def ordered(self) -> PairResult:
        """Return the result with the lower-numbered point first."""
        if self.a is not None and self.b is not None and self.a.id > self.b.id:
            return PairResult(self.dist2, self.b, self.a)
        return self


def distance_squared(p: Point, q: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = p.x - q.x
    dy = p.y - q.y
    return dx * dx + dy * dy


def _by_x(p: Point) -> tuple[float, float]:
    return (p.x, p.y)


def _by_y(p: Point) -> tuple[float, float]:
    return (p.y, p.x)


def _brute_force(points: Iterable[Point]) -> PairResult:
    best = PairResult()
    for p, q in combinations(points, 2):
        d2 = distance_squared(p, q)
        if d2 < best.dist2:
            best = PairResult(d2, p, q)
    return best


def naive_closest_pair(points: Sequence[Point]) -> PairResult:
    """Compare every pair of points; O(n^2)."""
    return _brute_force(points).ordered()


def _merge_by_y(left: list[Point], right: list[Point]) -> list[Point]:
    merged: list[Point] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if _by_y(left[i]) < _by_y(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _closest(by_x: list[Point]) -> tuple[PairResult, list[Point]]:
    """Solve a slice sorted by x; return the best pair and the slice sorted by y."""
    n = len(by_x)
    if n <= 3:
        return _brute_force(by_x), sorted(by_x, key=_by_y)

    mid = n // 2
    mid_x = by_x[mid].x
    left_best, left_y = _closest(by_x[:mid])
    right_best, right_y = _closest(by_x[mid:])
    best = left_best if left_best.dist2 <= right_best.dist2 else right_best

    by_y = _merge_by_y(left_y, right_y)

    delta = math.sqrt(best.dist2)
    strip = [p for p in by_y if abs(p.x - mid_x) < delta]
    for i, p in enumerate(strip):
        for q in strip[i + 1 :]:
            if q.y - p.y >= delta:
                break
            d2 = distance_squared(p, q)
            if d2 < best.dist2:
                best = PairResult(d2, p, q)
                delta = math.sqrt(d2)
    return best, by_y


def closest_pair(points: Iterable[Point]) -> PairResult:
    """Divide-and-conquer closest pair; O(n log n)."""
    pts = sorted(points, key=_by_x)
    if len(pts) < 2:
        return PairResult()
    best, _ = _closest(pts)
    return best.ordered()


def read_points(path: str | os.PathLike) -> list[Point]:
    """Read whitespace-separated `id x y` triples until the first malformed one."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    points = []
    for start in range(0, len(tokens) - 2, 3):
        try:
            point = Point(int(tokens[start]), float(tokens[start + 1]), float(tokens[start + 2]))
        except ValueError:
            break
        points.append(point)
    return points


def _describe(p: Point | None) -> str:
    p = p or Point()
    return f"({p.id}, {p.x:.6f}, {p.y:.6f})"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the closest pair of points.")
    parser.add_argument("data", nargs="?", default="data.txt", help="file of `id x y` lines")
    args = parser.parse_args(argv)

    try:
        points = read_points(args.data)
    except OSError:
        print(f"Failed to open {args.data}", file=sys.stderr)
        return 1

    if len(points) < 2:
        print("Insufficient points")
        return 0

    start = time.perf_counter_ns()
    naive = naive_closest_pair(points)
    naive_us = (time.perf_counter_ns() - start) // 1000

    start = time.perf_counter_ns()
    best = closest_pair(points)
    dc_us = (time.perf_counter_ns() - start) // 1000

    print(f"Naive algorithm: {_describe(naive.a)} and {_describe(naive.b)}")
    print(f"Naive Distance: {naive.distance:.6f}")
    print(f"Divide and conquer: {_describe(best.a)} and {_describe(best.b)}")
    print(f"Divide and conquer Distance: {best.distance:.6f}")
    print(f"Naive algorithm time: {naive_us} microseconds ")
    print(f"Divide and conquer time: {dc_us} microseconds")
    return 0