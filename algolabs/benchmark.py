"""Time several sorting algorithms on the integers of a data file."""

from __future__ import annotations

import argparse
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from .sorting import (
    PivotStrategy,
    heap_sort,
    is_sorted,
    merge_sort,
    parallel_quicksort,
    simple_quicksort,
    strategy_name,
    write_sorted,
)

STRATEGY = PivotStrategy.MEDIAN_OF_THREE
DEFAULT_RUNS = 10


@dataclass(frozen=True)
class BenchmarkResult:
    """Average timing and validation outcome of one algorithm."""

    name: str
    average_ms: float
    all_ok: bool
    data_size: int


@dataclass(frozen=True)
class _Benchmark:
    name: str
    sorter: Callable[[list[int]], None]
    write_to_file: bool


def _builtin_sort(values: list[int]) -> None:
    values.sort()


_BENCHMARKS = (
    _Benchmark("手写快速排序", simple_quicksort, False),
    _Benchmark(
        "手写快速排序优化版",
        lambda values: parallel_quicksort(values, STRATEGY, 32),
        True,
    ),
    _Benchmark("归并排序", merge_sort, False),
    _Benchmark("堆排序", heap_sort, False),
    _Benchmark("标准库排序", _builtin_sort, False),
)


def _leading_ints(line: str) -> list[int]:
    numbers = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def read_data(path: str | os.PathLike) -> tuple[int, list[int]]:
    """Read the declared count (first line) and the values (second line)."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    declared = 0
    values: list[int] = []
    if lines:
        first = _leading_ints(lines[0])
        if first:
            declared = first[0]
    if len(lines) > 1:
        values = _leading_ints(lines[1])
    return declared, values


def run_benchmarks(
    values: Sequence[int],
    runs: int = DEFAULT_RUNS,
    output_path: str | os.PathLike = "sorted.txt",
) -> list[BenchmarkResult]:
    """Run every algorithm `runs` times on copies of the values."""
    if runs < 1:
        raise ValueError("runs must be at least 1")
    original = list(values)
    results = []
    for bench in _BENCHMARKS:
        total_ms = 0
        all_ok = True
        last_sorted: list[int] = []
        for run in range(runs):
            data = list(original)
            start = time.perf_counter_ns()
            bench.sorter(data)
            total_ms += (time.perf_counter_ns() - start) // 1_000_000
            ok = is_sorted(data)
            all_ok = all_ok and ok
            last_sorted = data
            if not ok:
                print(
                    f"{bench.name} 第 {run + 1} 次排序验证失败，结果可能不正确。",
                    file=sys.stderr,
                )
        results.append(BenchmarkResult(bench.name, total_ms / runs, all_ok, len(original)))
        if bench.write_to_file and all_ok:
            write_sorted(last_sorted, output_path)
            print(f"排序结果已保存到: {output_path}")
    return results


def format_report(results: Sequence[BenchmarkResult], runs: int) -> str:
    """Render the timing comparison table."""
    lines = [f"\n=== 排序算法耗时对比（{runs} 次平均）==="]
    for result in results:
        verdict = "成功" if result.all_ok else "失败"
        lines.append(
            f"{result.name}: {result.average_ms:.3f} 毫秒 | 数据规模: "
            f"{result.data_size} | 验证: {verdict}"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare sorting algorithms on a data file.")
    parser.add_argument("data", nargs="?", default="data.txt", help="input file")
    parser.add_argument("-o", "--output", default="sorted.txt", help="sorted output file")
    parser.add_argument("-r", "--runs", type=int, default=DEFAULT_RUNS, help="runs per algorithm")
    args = parser.parse_args(argv)

    try:
        declared, values = read_data(args.data)
    except OSError:
        print(f"无法打开输入文件 {args.data}", file=sys.stderr)
        return 1

    print(f"读取数据数量: {declared}")
    print(f"实际读取数据个数: {len(values)}")
    if declared != len(values):
        print("警告: 声明的数据数量与实际读取数量不一致")
        print(f"使用实际读取数量: {len(values)}")

    print(f"选择的策略: {strategy_name(STRATEGY)}")
    print(f"数据量: {len(values)} 个元素")

    try:
        results = run_benchmarks(values, args.runs, args.output)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_report(results, args.runs))
    print(f"排序结果已写入 {args.output} (快速排序结果)")
    return 0