# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Benchmark FlatTree construction with and without a capacity hint.

Two shapes are built, each also as a nested-object tree for reference:

- simple: ``nodes`` children directly under the root
- hierarchy: branches up to ten levels deep, each level carrying a
  growing fan of leaves

Usage:
    python benchmarks/build_tree.py --nodes 10000 --repeats 5
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Literal

from genro_flattree import FlatTree, TreeCursor

Shape = Literal["simple", "hierarchy"]


@dataclass(frozen=True)
class BenchmarkResult:
    shape: str
    variant: str
    nodes: int
    repeats: int
    best_seconds: float
    throughput_nodes_per_sec: float


class _PointerNode:
    """Nested-object baseline: every node owns a list of children."""

    __slots__ = ('value', 'children')

    def __init__(self, value: int) -> None:
        self.value = value
        self.children: list[_PointerNode] = []

    def push(self, value: int) -> _PointerNode:
        child = _PointerNode(value)
        self.children.append(child)
        return child


def _hierarchy_plan(nodes: int) -> list[tuple[int, int]]:
    """Return (level, value) pairs in pre-order for the hierarchy shape."""
    plan: list[tuple[int, int]] = []
    fan = 0
    while len(plan) < nodes:
        for level in range(1, 11):
            plan.append((level, len(plan) + 1))
            for _ in range(fan):
                plan.append((level + 1, len(plan) + 1))
        fan += 1
    return plan[:nodes]


def _build_flat(shape: Shape, nodes: int, capacity: int | None) -> int:
    tree = FlatTree(0, capacity=capacity)
    if shape == "simple":
        root = tree.root_cursor()
        for i in range(1, nodes + 1):
            root.push(i)
    else:
        for level, value in _hierarchy_plan(nodes):
            tree.push_level(level, value)
    return len(tree)


def _build_cursor_hierarchy(nodes: int, capacity: int | None) -> int:
    # Same shape as push_level, driven through cursors.
    tree = FlatTree(0, capacity=capacity)
    open_path: list[TreeCursor] = [tree.root_cursor()]
    for level, value in _hierarchy_plan(nodes):
        child = open_path[level - 1].push(value)
        del open_path[level:]
        open_path.append(child)
    return len(tree)


def _build_pointer(shape: Shape, nodes: int) -> int:
    root = _PointerNode(0)
    if shape == "simple":
        for i in range(1, nodes + 1):
            root.push(i)
    else:
        open_path = [root]
        for level, value in _hierarchy_plan(nodes):
            child = open_path[level - 1].push(value)
            del open_path[level:]
            open_path.append(child)
    return nodes + 1


def _time_best(build: Callable[[], int], repeats: int) -> float:
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        build()
        best = min(best, time.perf_counter() - start)
    return best


def benchmark_shape(shape: Shape, *, nodes: int, repeats: int) -> list[BenchmarkResult]:
    variants: dict[str, Callable[[], int]] = {
        "flat": lambda: _build_flat(shape, nodes, None),
        "flat+capacity": lambda: _build_flat(shape, nodes, nodes + 1),
        "pointer": lambda: _build_pointer(shape, nodes),
    }
    if shape == "hierarchy":
        variants["flat-cursors"] = lambda: _build_cursor_hierarchy(nodes, None)

    results = []
    for variant, build in variants.items():
        elapsed = _time_best(build, repeats)
        throughput = nodes / elapsed if elapsed > 0 else float("inf")
        results.append(
            BenchmarkResult(
                shape=shape,
                variant=variant,
                nodes=nodes,
                repeats=repeats,
                best_seconds=elapsed,
                throughput_nodes_per_sec=throughput,
            )
        )
    return results


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark FlatTree construction with and without a capacity hint."
    )
    parser.add_argument("--nodes", type=int, default=10_000, help="Nodes below the root.")
    parser.add_argument("--repeats", type=int, default=5, help="Runs per variant; the best is kept.")
    parser.add_argument(
        "--shape",
        choices=("simple", "hierarchy", "both"),
        default="both",
        help="Tree shape to build.",
    )
    parser.add_argument("--log-json", type=Path, default=None, help="Write results to this JSON file.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    shapes: list[Shape] = ["simple", "hierarchy"] if args.shape == "both" else [args.shape]

    results: list[BenchmarkResult] = []
    for shape in shapes:
        results.extend(benchmark_shape(shape, nodes=args.nodes, repeats=args.repeats))

    for result in results:
        print(
            f"{result.shape:<9} | {result.variant:<13} "
            f"nodes={result.nodes} "
            f"best={result.best_seconds:.4f}s "
            f"throughput={result.throughput_nodes_per_sec:,.0f} nodes/s"
        )
    if args.log_json:
        payload = {"timestamp": time.time(), "results": [asdict(r) for r in results]}
        args.log_json.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        print(f"[build_tree] wrote summary to {args.log_json}")


if __name__ == "__main__":
    main()
