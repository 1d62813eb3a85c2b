"""Red-black tree insertion that records which fix-up cases were applied."""

from __future__ import annotations

import argparse
import enum
import os
import sys
from collections import deque
from pathlib import Path
from typing import Iterator, Sequence


class Color(enum.Enum):
    RED = "red"
    BLACK = "black"


class _Node:
    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key: int, color: Color) -> None:
        self.key = key
        self.color = color
        self.left: _Node = self
        self.right: _Node = self
        self.parent: _Node = self


class RedBlackTree:
    """A red-black tree of integer keys; equal keys go to the right."""

    def __init__(self) -> None:
        self._nil = _Node(0, Color.BLACK)
        self._root = self._nil
        self._size = 0
        self.case_log: list[str] = []

    def __len__(self) -> int:
        return self._size

    def insert(self, key: int) -> str:
        """Insert a key; return the fix-up cases ('1'..'6') applied, in order."""
        nil = self._nil
        z = _Node(key, Color.RED)
        z.left = z.right = nil
        parent = nil
        x = self._root
        while x is not nil:
            parent = x
            x = x.left if key < x.key else x.right
        z.parent = parent
        if parent is nil:
            self._root = z
        elif key < parent.key:
            parent.left = z
        else:
            parent.right = z
        self._size += 1
        cases = self._fixup(z)
        self.case_log.extend(cases)
        return "".join(cases)

    def _fixup(self, z: _Node) -> list[str]:
        cases: list[str] = []
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    cases.append("1")
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        cases.append("2")
                        z = z.parent
                        self._left_rotate(z)
                    cases.append("3")
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    cases.append("4")
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        cases.append("5")
                        z = z.parent
                        self._right_rotate(z)
                    cases.append("6")
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._left_rotate(z.parent.parent)
        self._root.color = Color.BLACK
        return cases

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

    def _right_rotate(self, x: _Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _preorder_nodes(self) -> Iterator[_Node]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is self._nil:
                continue
            yield node
            stack.append(node.right)
            stack.append(node.left)

    def _inorder_nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _level_nodes(self) -> Iterator[_Node]:
        if self._root is self._nil:
            return
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            for child in (node.left, node.right):
                if child is not self._nil:
                    queue.append(child)

    def preorder(self) -> list[tuple[int, Color]]:
        """Keys and colours in root-left-right order."""
        return [(n.key, n.color) for n in self._preorder_nodes()]

    def inorder(self) -> list[tuple[int, Color]]:
        """Keys and colours in left-root-right (sorted) order."""
        return [(n.key, n.color) for n in self._inorder_nodes()]

    def level_order(self) -> list[tuple[int, Color]]:
        """Keys and colours level by level, left to right."""
        return [(n.key, n.color) for n in self._level_nodes()]


def read_keys(path: str | os.PathLike) -> list[int]:
    """Read a key count followed by that many integer keys."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        raise ValueError("Failed to read number of keys") from None
    keys = []
    for i in range(count):
        try:
            keys.append(int(tokens[i + 1]))
        except (IndexError, ValueError):
            raise ValueError(f"Failed to read key {i + 1}") from None
    return keys


def _write_traversal(path: Path, items: list[tuple[int, Color]]) -> None:
    path.write_text("".join(f"{key} {color.value}\n" for key, color in items), encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a red-black tree and dump traversals.")
    parser.add_argument("input", nargs="?", default="insert.txt", help="file of keys")
    parser.add_argument("-d", "--output-dir", default=".", help="directory for traversal files")
    args = parser.parse_args(argv)

    try:
        keys = read_keys(args.input)
    except OSError:
        print(f"Failed to open {args.input}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)

    if tree.case_log:
        print(
            "Fixup case sequence (CLRS cases 1-6, mirrored as 4/5/6): "
            + " ".join(tree.case_log)
        )
    else:
        print("Fixup case sequence: <empty>")

    out_dir = Path(args.output_dir)
    try:
        _write_traversal(out_dir / "NLR.txt", tree.preorder())
        _write_traversal(out_dir / "LNR.txt", tree.inorder())
        _write_traversal(out_dir / "LOT.txt", tree.level_order())
    except OSError:
        print("Failed to open output files", file=sys.stderr)
        return 1
    print(
        "Traversal output files generated: "
        "NLR.txt (preorder), LNR.txt (inorder), LOT.txt (level-order)"
    )
    return 0