"""Optimal assignment of jobs to identical machines by branch and bound."""

from __future__ import annotations

import argparse
import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

DEFAULT_FILES = ("test1.txt", "test2.txt", "test3.txt")


@dataclass(frozen=True)
class Schedule:
    """The minimal makespan and, per machine, the original job indices."""

    makespan: int
    plan: list[list[int]]


def schedule(jobs: Sequence[int], machines: int) -> Schedule:
    """Minimise the largest machine load over all assignments of jobs."""
    if machines < 1:
        raise ValueError("machines must be at least 1")
    order = sorted(range(len(jobs)), key=lambda i: (-jobs[i], i))
    durations = [jobs[i] for i in order]
    count = len(durations)
    lower_bound = -(-sum(durations) // machines)

    load = [0] * machines
    assign = [-1] * count
    best = math.inf
    best_assign = list(assign)

    def search(idx: int, current_max: int) -> None:
        nonlocal best, best_assign
        if idx == count:
            best = current_max
            best_assign = list(assign)
            return
        job = durations[idx]
        seen: set[int] = set()
        for m in range(machines):
            if load[m] in seen:
                continue
            seen.add(load[m])
            next_max = max(current_max, load[m] + job)
            if next_max >= best or max(next_max, lower_bound) >= best:
                continue
            load[m] += job
            assign[idx] = m
            search(idx + 1, next_max)
            load[m] -= job
            assign[idx] = -1
            if load[m] == 0:
                break

    search(0, 0)

    plan: list[list[int]] = [[] for _ in range(machines)]
    for machine, original in zip(best_assign, order):
        plan[machine].append(original)
    return Schedule(int(best), plan)


def read_input(path: str | os.PathLike) -> tuple[list[int], int]:
    """Read `n m` followed by n job durations; return (jobs, machines)."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    try:
        n, machines = int(tokens[0]), int(tokens[1])
        jobs = [int(tokens[2 + i]) for i in range(n)]
    except (IndexError, ValueError):
        raise ValueError(
            f"读取输入失败（{path}），格式应为：第一行 n m，第二行 n 个任务时间。"
        ) from None
    return jobs, machines


def format_plan(jobs: Sequence[int], result: Schedule) -> str:
    """Describe the schedule machine by machine."""
    lines = [f"最佳总时间: {result.makespan}（单位与输入一致）", "调度方案："]
    for number, tasks in enumerate(result.plan, 1):
        if not tasks:
            lines.append(f"  机器 {number}: 无任务")
            continue
        chain = " -> ".join(f"任务{idx + 1}({jobs[idx]})" for idx in tasks)
        total = sum(jobs[idx] for idx in tasks)
        lines.append(f"  机器 {number}: {chain} | 累计: {total}")
    return "\n".join(lines)


def _solve_file(path: str) -> bool:
    try:
        jobs, machines = read_input(path)
        result = schedule(jobs, machines)
    except OSError:
        print(f"无法打开文件: {path}", file=sys.stderr)
        return False
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return False
    print(f"===== {path} =====")
    print(format_plan(jobs, result))
    print()
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Schedule jobs on identical machines.")
    parser.add_argument("files", nargs="*", default=list(DEFAULT_FILES), help="input files")
    args = parser.parse_args(argv)

    results = [_solve_file(path) for path in args.files]
    if not any(results):
        print("三个测试文件均未能成功读取，请检查文件路径或格式。", file=sys.stderr)
        return 1
    return 0