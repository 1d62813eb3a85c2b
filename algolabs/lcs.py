"""Longest common subsequence with full, two-row and one-row tables."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class LcsResult:
    """A longest common subsequence and its length."""

    sequence: str
    length: int


def lcs_standard(a: str, b: str) -> LcsResult:
    """Full O(m*n) table, backtracked to recover one LCS."""
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i, ca in enumerate(a, 1):
        row, above = dp[i], dp[i - 1]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])

    chars: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return LcsResult("".join(reversed(chars)), dp[m][n])


def _longer_shorter(a: str, b: str) -> tuple[str, str]:
    return (b, a) if len(a) < len(b) else (a, b)


def lcs_length_two_rows(a: str, b: str) -> int:
    """LCS length keeping two rows of min(len(a), len(b)) + 1 cells."""
    longer, shorter = _longer_shorter(a, b)
    prev = [0] * (len(shorter) + 1)
    for cl in longer:
        curr = [0] * (len(shorter) + 1)
        for j, cs in enumerate(shorter, 1):
            if cl == cs:
                curr[j] = prev[j - 1] + 1
            else:
                curr[j] = max(prev[j], curr[j - 1])
        prev = curr
    return prev[-1]


def lcs_length_one_row(a: str, b: str) -> int:
    """LCS length keeping a single row plus the diagonal cell."""
    longer, shorter = _longer_shorter(a, b)
    dp = [0] * (len(shorter) + 1)
    for cl in longer:
        diagonal = 0
        for j, cs in enumerate(shorter, 1):
            above = dp[j]
            dp[j] = diagonal + 1 if cl == cs else max(above, dp[j - 1])
            diagonal = above
    return dp[-1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Longest common subsequence of two strings.")
    parser.add_argument("texts", nargs="*", help="two strings; read from stdin if omitted")
    args = parser.parse_args(argv)

    tokens = list(args.texts) if len(args.texts) >= 2 else sys.stdin.read().split()
    if len(tokens) < 2:
        return 0
    text1, text2 = tokens[0], tokens[1]

    result = lcs_standard(text1, text2)
    len_two = lcs_length_two_rows(text1, text2)
    len_one = lcs_length_one_row(text1, text2)

    print("\n---------------- 实验结果 ----------------")
    print(f'LCS: "{result.sequence}", 长度: {result.length}')
    print("---------------- 算法验证 ----------------")
    print(f"标准DP (O(mn) Space) 长度: {result.length}")
    print(f"两行DP (O(2n) Space) 长度: {len_two}")
    print(f"单行DP (O(n)  Space) 长度: {len_one}")
    if result.length == len_two == len_one:
        print(">> 所有算法结果一致，验证通过。")
    else:
        print(">> 警告：算法结果不一致！")
    return 0