"""Interval tree built on a red-black tree, with overlap queries."""

from __future__ import annotations

import argparse
import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from .rbtree import Color


@dataclass(frozen=True, order=True)
class Interval:
    """A closed interval [low, high]; ordered by low, then high."""

    low: int
    high: int

    @classmethod
    def normalized(cls, a: int, b: int) -> Interval:
        """Build an interval from two endpoints in either order."""
        return cls(min(a, b), max(a, b))

    def overlaps(self, other: Interval) -> bool:
        """True when the two closed intervals share at least one point."""
        return self.low <= other.high and other.low <= self.high


class _Node:
    __slots__ = ("interval", "max_high", "color", "left", "right", "parent")

    def __init__(self, interval: Interval | None, color: Color) -> None:
        self.interval = interval
        self.max_high: float = interval.high if interval is not None else -math.inf
        self.color = color
        self.left: _Node = self
        self.right: _Node = self
        self.parent: _Node = self


class IntervalTree:
    """Red-black tree of intervals keyed by (low, high), each node keeping
    the highest endpoint found in its subtree."""

    def __init__(self) -> None:
        self._nil = _Node(None, Color.BLACK)
        self._root = self._nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Interval]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.interval
            node = node.right

    def insert(self, interval: Interval) -> None:
        """Insert an interval; equal intervals are kept as separate entries."""
        nil = self._nil
        z = _Node(interval, Color.RED)
        z.left = z.right = z.parent = nil
        parent = nil
        x = self._root
        while x is not nil:
            parent = x
            x = x.left if interval < x.interval else x.right
        z.parent = parent
        if parent is nil:
            self._root = z
        elif interval < parent.interval:
            parent.left = z
        else:
            parent.right = z
        self._size += 1
        self._insert_fixup(z)
        self._update_upwards(z)

    def search_overlapping(self, query: Interval) -> list[Interval]:
        """All stored intervals overlapping the query, in sorted order."""
        result: list[Interval] = []
        self._search(self._root, query, result)
        return result

    def _search(self, node: _Node, query: Interval, result: list[Interval]) -> None:
        nil = self._nil
        if node is nil:
            return
        if node.left is not nil and node.left.max_high >= query.low:
            self._search(node.left, query, result)
        if node.interval.overlaps(query):
            result.append(node.interval)
        if node.interval.low <= query.high:
            self._search(node.right, query, result)

    def _update_node(self, node: _Node) -> None:
        if node is not self._nil:
            node.max_high = max(node.interval.high, node.left.max_high, node.right.max_high)

    def _update_upwards(self, node: _Node) -> None:
        while node is not self._nil:
            self._update_node(node)
            node = node.parent

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        if parent is self._nil:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent

    def _left_rotate(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y
        self._update_node(x)
        self._update_node(y)

    def _right_rotate(self, y: _Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        self._replace_child(y, x)
        x.right = y
        y.parent = x
        self._update_node(y)
        self._update_node(x)

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._left_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._right_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._left_rotate(z.parent.parent)
        self._root.color = Color.BLACK


def read_intervals(path: str | os.PathLike) -> list[Interval]:
    """Read a count followed by that many `low high` pairs; endpoints may be swapped."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        raise ValueError("文件格式错误，未找到待插入数据个数。") from None
    intervals = []
    for i in range(count):
        try:
            low = int(tokens[1 + 2 * i])
            high = int(tokens[2 + 2 * i])
        except (IndexError, ValueError):
            raise ValueError(f"读取第 {i + 1} 个区间失败。") from None
        intervals.append(Interval.normalized(low, high))
    return intervals


def _read_query() -> Interval:
    tokens = sys.stdin.read().split()
    try:
        return Interval.normalized(int(tokens[0]), int(tokens[1]))
    except (IndexError, ValueError):
        raise ValueError("输入格式错误，期望两个整数。") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build an interval tree and query overlaps.")
    parser.add_argument("input", nargs="?", default="insert.txt", help="file of intervals")
    parser.add_argument(
        "-q", "--query", nargs=2, type=int, metavar=("LOW", "HIGH"), help="query interval"
    )
    args = parser.parse_args(argv)

    try:
        intervals = read_intervals(args.input)
    except OSError:
        print(f"无法打开文件: {args.input}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    tree = IntervalTree()
    for interval in intervals:
        tree.insert(interval)

    print(f"已从 {args.input} 插入 {len(intervals)} 个区间生成区间树。")
    if args.query is not None:
        query = Interval.normalized(*args.query)
    else:
        print("请输入待查询区间（low high），例如：10 20\n> ", end="", flush=True)
        try:
            query = _read_query()
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1

    result = tree.search_overlapping(query)
    if not result:
        print("未找到重叠区间。")
    else:
        print(f"找到 {len(result)} 个重叠区间：")
        for interval in result:
            print(f"[{interval.low}, {interval.high}]")
    return 0