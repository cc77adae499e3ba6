"""Micro-benchmark comparing frontier implementations.

Run this module as a script to time the heap and sorted-list frontiers on
random graphs and check every run against the Bellman-Ford reference.

Example:
```bash
python -m dijkstrax.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .frontier import FRONTIERS
from .graph import Edge, Graph
from .reference import bellman_ford_reference
from .solver import DijkstraSolver, SolverConfig, SolverMetrics


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    metrics: SolverMetrics
    reference_ms: float
    max_abs_err: float


def random_edges(n: int, m: int, seed: int, max_weight: float = 10.0) -> List[Edge]:
    """Generate ``m`` random edges over ``n`` vertices, weights in ``[0, max_weight)``."""
    rnd = random.Random(seed)
    edges: List[Edge] = []
    for _ in range(m):
        edges.append((rnd.randrange(n), rnd.randrange(n), rnd.random() * max_weight))
    return edges


def _max_abs_err(a: List[float], b: List[float]) -> float:
    err = 0.0
    for x, y in zip(a, b):
        if x == y:
            continue
        xx = x if x < float("inf") else 1e18
        yy = y if y < float("inf") else 1e18
        err = max(err, abs(xx - yy))
    return err


def run_once(n: int, m: int, frontier: str, seed: int = 0) -> BenchResult:
    """Run the solver once and compare against the reference.

    Args:
        n: Number of vertices.
        m: Number of edges.
        frontier: Frontier implementation name.
        seed: Seed for the random graph generator.

    Returns:
        Solver metrics, reference timing and maximum absolute distance error.
    """
    G = Graph.from_edges(n, random_edges(n, m, seed))
    solver = DijkstraSolver(G, 0, config=SolverConfig(frontier=frontier))
    t0 = time.perf_counter()
    res = solver.solve()
    t1 = time.perf_counter()
    ref = bellman_ford_reference(G, 0)
    t2 = time.perf_counter()
    return BenchResult(
        metrics=solver.metrics(wall_ms=(t1 - t0) * 1000.0),
        reference_ms=(t2 - t1) * 1000.0,
        max_abs_err=_max_abs_err(res.distance, ref.distance),
    )


def _p95(values: List[float]) -> float:
    if len(values) < 2:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,20", "20,40"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for pair in args.sizes:
        try:
            n_str, m_str = pair.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size pair '{pair}'")

    rows: List[List[object]] = []
    aggregates: Dict[Tuple[int, int, str], Tuple[List[float], List[float], List[int]]] = {}
    worst_err = 0.0

    for n, m in sizes:
        for frontier in sorted(FRONTIERS):
            s_times: List[float] = []
            r_times: List[float] = []
            pushes: List[int] = []
            for trial in range(args.trials):
                res = run_once(n=n, m=m, frontier=frontier, seed=args.seed_base + trial)
                mtx = res.metrics
                worst_err = max(worst_err, res.max_abs_err)
                rows.append(
                    [
                        mtx.n,
                        mtx.m,
                        mtx.frontier,
                        trial,
                        f"{mtx.wall_ms:.6f}",
                        f"{res.reference_ms:.6f}",
                        mtx.counters["edges_relaxed"],
                        mtx.counters["pushes"],
                        mtx.counters["stale_pops"],
                        mtx.counters["max_frontier_size"],
                        f"{res.max_abs_err:.3g}",
                    ]
                )
                s_times.append(mtx.wall_ms)
                r_times.append(res.reference_ms)
                pushes.append(mtx.counters["pushes"])
            aggregates[(n, m, frontier)] = (s_times, r_times, pushes)

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                [
                    "n",
                    "m",
                    "frontier",
                    "trial",
                    "solver_ms",
                    "reference_ms",
                    "edges_relaxed",
                    "pushes",
                    "stale_pops",
                    "max_frontier_size",
                    "max_abs_err",
                ]
            )
            writer.writerows(rows)

    print(
        f"{'n':>6} {'m':>7} {'frontier':>8} {'pushes':>9}"
        f" {'solve_med':>11} {'solve_p95':>11} {'ref_med':>11} {'ref_p95':>11}"
    )
    for (n, m, frontier), (s_times, r_times, pushes) in aggregates.items():
        print(
            f"{n:6d} {m:7d} {frontier:>8} {int(statistics.median(pushes)):9d}"
            f" {statistics.median(s_times):11.2f} {_p95(s_times):11.2f}"
            f" {statistics.median(r_times):11.2f} {_p95(r_times):11.2f}"
        )
    print(f"max abs error vs reference: {worst_err:.3g}")


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
