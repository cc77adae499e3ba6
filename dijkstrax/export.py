"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .graph import GraphLike, Vertex
from .solver import ShortestPathResult

if TYPE_CHECKING:  # pragma: no cover
    import networkx as nx


def shortest_path_tree(result: ShortestPathResult) -> List[Tuple[Vertex, Vertex]]:
    """Return the tree edges ``(previous[v], v)`` for every reached ``v``."""
    return [(u, v) for v, u in enumerate(result.previous) if u is not None]


def export_tree_json(result: ShortestPathResult) -> str:
    """Return a JSON string with per-vertex distances and tree edges.

    Unreachable vertices get a ``null`` distance.
    """
    data = {
        "source": result.source,
        "nodes": [
            {"id": v, "distance": d if d < math.inf else None}
            for v, d in enumerate(result.distance)
        ],
        "edges": [{"source": u, "target": v} for (u, v) in shortest_path_tree(result)],
    }
    return json.dumps(data)


def export_tree_graphml(result: ShortestPathResult) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="double"/>')
    lines.append('  <graph id="G" edgedefault="directed">')
    for v, d in enumerate(result.distance):
        if d < math.inf:
            lines.append(f'    <node id="n{v}"><data key="d">{d}</data></node>')
        else:
            lines.append(f'    <node id="n{v}"/>')
    for u, v in shortest_path_tree(result):
        lines.append(f'    <edge source="n{u}" target="n{v}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def to_networkx(graph: GraphLike, result: Optional[ShortestPathResult] = None) -> "nx.DiGraph":
    """Convert ``graph`` to a NetworkX ``DiGraph`` with ``weight`` edge data.

    When ``result`` is given, nodes carry a ``distance`` attribute (``inf``
    when unreachable) and edges carry an ``in_tree`` flag marking the
    shortest-path tree.
    """
    import networkx as nx

    g = nx.DiGraph()
    g.add_nodes_from(range(graph.n))
    for u in range(graph.n):
        for v, w in graph.neighbors(u):
            g.add_edge(u, v, weight=w)
    if result is not None:
        attrs: Dict[int, Dict[str, Any]] = {
            v: {"distance": d} for v, d in enumerate(result.distance)
        }
        nx.set_node_attributes(g, attrs)
        nx.set_edge_attributes(g, False, "in_tree")
        for u, v in shortest_path_tree(result):
            g.edges[u, v]["in_tree"] = True
    return g


__all__ = [
    "export_tree_graphml",
    "export_tree_json",
    "shortest_path_tree",
    "to_networkx",
]
