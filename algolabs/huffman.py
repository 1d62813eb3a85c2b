"""Huffman coding of the non-whitespace bytes of a file."""

from __future__ import annotations

import argparse
import heapq
import itertools
import os
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

_WHITESPACE = frozenset(b" \t\n\v\f\r")
_HEADER_CHAR = "字符"
_HEADER_FREQ = "出现频率"
_HEADER_CODE = "编码"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry symbol 0."""

    symbol: int
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _signed(byte: int) -> int:
    """Byte value as a signed char, which fixes the tie-break order."""
    return byte - 256 if byte >= 128 else byte


def count_frequencies(data: bytes) -> dict[int, int]:
    """Count each byte value, skipping ASCII whitespace."""
    return dict(Counter(b for b in data if b not in _WHITESPACE))


def build_tree(frequencies: Mapping[int, int]) -> HuffmanNode:
    """Merge the two least frequent nodes until one root remains."""
    if not frequencies:
        raise ValueError("no symbols to encode")
    counter = itertools.count()
    heap = [
        (freq, _signed(symbol), next(counter), HuffmanNode(symbol, freq))
        for symbol, freq in sorted(frequencies.items())
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        a = heapq.heappop(heap)[3]
        b = heapq.heappop(heap)[3]
        parent = HuffmanNode(0, a.freq + b.freq, a, b)
        heapq.heappush(heap, (parent.freq, 0, next(counter), parent))
    return heap[0][3]


def build_codes(root: HuffmanNode) -> dict[int, str]:
    """Map each leaf symbol to its bit string; a lone leaf gets "0"."""
    codes: dict[int, str] = {}
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path or "0"
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))
    return codes


def display_width(text: str | bytes) -> int:
    """Terminal width of UTF-8 text: multi-byte characters count as two columns."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    width = 0
    i = 0
    size = len(data)
    while i < size:
        byte = data[i]
        if byte < 0x80:
            width += 1
            i += 1
        elif byte >> 5 == 0x6 and i + 1 < size:
            width += 2
            i += 2
        elif byte >> 4 == 0xE and i + 2 < size:
            width += 2
            i += 3
        elif byte >> 3 == 0x1E and i + 3 < size:
            width += 2
            i += 4
        else:
            width += 1
            i += 1
    return width


def pad_field(text: str | bytes, width: int, left_align: bool) -> str | bytes:
    """Pad text with spaces to the given display width."""
    padding = max(0, width - display_width(text))
    space = b" " if isinstance(text, bytes) else " "
    return text + space * padding if left_align else space * padding + text


def format_table(frequencies: Mapping[int, int], codes: Mapping[int, str]) -> bytes:
    """The code table: most frequent symbols first, as UTF-8 bytes."""
    rows = sorted(codes.items(), key=lambda item: (-frequencies[item[0]], _signed(item[0])))
    header = tuple(h.encode("utf-8") for h in (_HEADER_CHAR, _HEADER_FREQ, _HEADER_CODE))
    cells = [
        (bytes([symbol]), str(frequencies[symbol]).encode(), code.encode())
        for symbol, code in rows
    ]
    table = [header, *cells]
    widths = [max(display_width(row[k]) for row in table) for k in range(3)]
    lines = [
        pad_field(ch, widths[0], True)
        + b" "
        + pad_field(freq, widths[1], False)
        + b" "
        + pad_field(code, widths[2], True)
        + b"\n"
        for ch, freq, code in table
    ]
    return b"".join(lines)


def encode(data: bytes, codes: Mapping[int, str]) -> str:
    """Concatenate the codes of the non-whitespace bytes of data."""
    return "".join(codes[b] for b in data if b not in _WHITESPACE)


def fixed_length_bits(frequencies: Mapping[int, int]) -> tuple[int, int]:
    """Bits per symbol and total bits of a fixed-length code for these counts."""
    symbols = len(frequencies)
    per_char = 1 if symbols <= 1 else (symbols - 1).bit_length()
    return per_char, per_char * sum(frequencies.values())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Huffman-encode a text file.")
    parser.add_argument("input", nargs="?", default="orignal.txt", help="file to encode")
    parser.add_argument("-t", "--table", default="table.txt", help="code table output")
    parser.add_argument("-e", "--encoded", default="encoded.txt", help="bit string output")
    args = parser.parse_args(argv)

    try:
        data = Path(args.input).read_bytes()
    except OSError:
        print(f"无法打开输入文件: {args.input}", file=sys.stderr)
        return 1

    frequencies = count_frequencies(data)
    if not frequencies:
        print("没有需要编码的字符（均为空白字符）。", file=sys.stderr)
        return 1

    codes = build_codes(build_tree(frequencies))
    try:
        Path(args.table).write_bytes(format_table(frequencies, codes))
    except OSError:
        print(f"无法写入表格文件: {args.table}", file=sys.stderr)
        return 1

    bits = encode(data, codes)
    try:
        Path(args.encoded).write_text(bits, encoding="ascii")
    except OSError:
        print(f"无法写入编码文件: {args.encoded}", file=sys.stderr)
        return 1

    total = sum(frequencies.values())
    per_char, fixed_bits = fixed_length_bits(frequencies)
    ratio = len(bits) / fixed_bits if fixed_bits else 0.0
    print(f"有效字符数: {total}，不同字符数: {len(frequencies)}")
    print(f"Huffman编码总长度: {len(bits)} bit")
    print(f"定长编码长度: {fixed_bits} bit (每字符 {per_char} bit)")
    print(f"压缩率: {ratio * 100.0:.2f}%")
    print(f"编码表已写入: {args.table}，01序列已写入: {args.encoded}")
    return 0