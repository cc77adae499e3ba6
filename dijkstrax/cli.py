"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from typing import List, Optional, Tuple

from .bench import random_edges
from .exceptions import ConfigError, DijkstraXError, InputError
from .export import export_tree_graphml, export_tree_json
from .frontier import FRONTIERS
from .graph import Edge, Graph, GraphLike
from .graph_numpy import NumpyGraph
from .logger import StdLogger
from .path import Unreachable
from .solver import DijkstraSolver, ShortestPathResult, SolverConfig

# 5-vertex graph from the classic worked example
EXAMPLE_N = 5
EXAMPLE_EDGES: List[Edge] = [
    (0, 1, 6),
    (0, 3, 1),
    (1, 2, 5),
    (1, 3, 2),
    (1, 4, 2),
    (2, 1, 1),
    (3, 2, 1),
    (3, 4, 4),
    (4, 0, 2),
    (4, 2, 8),
]

BACKENDS = {"dict": Graph, "numpy": NumpyGraph}


def _parse_edge(text: str) -> Edge:
    """Parse ``"u,v,w"`` into an edge tuple."""
    parts = text.split(",")
    if len(parts) != 3:
        raise InputError(f"invalid edge '{text}': expected U,V,W")
    try:
        return int(parts[0]), int(parts[1]), float(parts[2])
    except ValueError as exc:
        raise InputError(f"invalid edge '{text}': {exc}") from exc


def _format_distance(d: float) -> str:
    if d.is_integer():
        return str(int(d))
    return str(d)


def format_line(result: ShortestPathResult, target: int) -> str:
    """Render the report line for one target vertex."""
    s = result.source
    path = result.path_to(target)
    if isinstance(path, Unreachable):
        return f"Vertex {s} to {target}: unreachable"
    route = " -> ".join(str(v) for v in path)
    dist = _format_distance(result.distance[target])
    return f"Vertex {s} to {target}: Distance: {dist}, Path: {route}"


def format_report(result: ShortestPathResult) -> List[str]:
    """Render a header and one line per vertex other than the source."""
    lines = [f"Shortest paths from vertex {result.source}:"]
    for v in range(len(result.distance)):
        if v != result.source:
            lines.append(format_line(result, v))
    return lines


def _build_graph(args: argparse.Namespace) -> GraphLike:
    """Build the graph selected on the command line."""
    cls = BACKENDS[args.backend]
    if args.example:
        n, edges = EXAMPLE_N, EXAMPLE_EDGES
    elif args.random:
        if args.n <= 0:
            raise InputError("--n must be positive with --random")
        n, edges = args.n, random_edges(args.n, args.m, args.seed, args.max_weight)
    else:
        if args.n is None:
            raise InputError("--n is required with --edge")
        n, edges = args.n, [_parse_edge(e) for e in args.edge]
    return cls.from_edges(n, edges, strict=args.strict)


def _summary(G: GraphLike) -> Tuple[int, int]:
    return G.n, sum(1 for u in range(G.n) for _ in G.neighbors(u))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``dijkstrax`` command-line tool."""
    examples = (
        "Examples:\n"
        "  dijkstrax --example --source 0\n"
        "  dijkstrax --n 3 --edge 0,1,2 --edge 1,2,3 --target 2\n"
        "  dijkstrax --random --n 100 --m 500 --json\n"
    )
    p = argparse.ArgumentParser(
        prog="dijkstrax",
        description="Single-source shortest paths (Dijkstra) runner",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--example", action="store_true", help="Use the built-in 5-vertex graph")
    src.add_argument("--edge", action="append", metavar="U,V,W", help="Add a directed edge")
    src.add_argument("--random", action="store_true", help="Use a random graph")

    p.add_argument("--n", type=int, default=None, help="Vertices (--edge and --random modes)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")
    p.add_argument("--max-weight", type=float, default=10.0, help="Upper weight bound (random mode)")
    p.add_argument("--backend", choices=sorted(BACKENDS), default="dict", help="Graph storage")
    p.add_argument("--strict", action="store_true", help="Reject out-of-range edge endpoints")

    p.add_argument("--source", type=int, default=0, help="Source vertex id")
    p.add_argument("--target", type=int, default=None, help="Only report this target vertex")
    p.add_argument("--frontier", choices=sorted(FRONTIERS), default="heap")
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.add_argument("--export-json", type=str, default=None, help="Write shortest-path tree as JSON")
    p.add_argument(
        "--export-graphml",
        type=str,
        default=None,
        help="Write shortest-path tree as GraphML",
    )

    args = p.parse_args(argv)
    if args.random and args.n is None:
        args.n = 10

    try:
        G = _build_graph(args)
        n, m = _summary(G)
        cfg = SolverConfig(frontier=args.frontier)
        logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)
        logger.info("graph", n=n, m=m, backend=args.backend, strict=args.strict)

        solver = DijkstraSolver(G, args.source, config=cfg, logger=logger)
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0
        logger.info("timing", wall_ms=round(wall_ms, 3))

        if args.target is not None and not (0 <= args.target < n):
            raise InputError(f"target {args.target} is not a vertex id in [0, {n})")

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_tree_json(res))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(res))

        if args.json:
            out = res.as_dict()
            out["frontier"] = args.frontier
            if args.target is not None:
                path = res.path_to(args.target)
                out["target"] = args.target
                out["path"] = path if not isinstance(path, Unreachable) else None
            print(json.dumps(out))
        elif args.target is not None:
            print(format_line(res, args.target))
        else:
            print("\n".join(format_report(res)))
        return 0

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except DijkstraXError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
