"""
Reading graphs from edge list files
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from xopen import xopen

from .error import BrooksError
from .graph import Graph

logger = logging.getLogger(__name__)


class EdgeListError(BrooksError):
    pass


def parse_edge_list(lines, vertices: Optional[int] = None) -> Graph:
    """
    Build a graph from lines of the form "u v" (an edge) or "u" (a vertex
    without edges). Blank lines and everything after a "#" are ignored.

    If vertices is None, the number of vertices is the largest id plus one.
    """
    edges: List[Tuple[int, int]] = []
    seen = set()
    largest = -1
    for line_number, line in enumerate(lines, start=1):
        fields = line.split("#", maxsplit=1)[0].split()
        if not fields:
            continue
        if len(fields) > 2:
            raise EdgeListError(
                f"Line {line_number}: expected one or two vertex ids, found {len(fields)} fields"
            )
        try:
            ids = [int(field) for field in fields]
        except ValueError:
            raise EdgeListError(
                f"Line {line_number}: vertex ids must be integers, found {line.strip()!r}"
            ) from None
        if any(node < 0 for node in ids):
            raise EdgeListError(f"Line {line_number}: vertex ids must not be negative")
        if vertices is not None and any(node >= vertices for node in ids):
            raise EdgeListError(
                f"Line {line_number}: vertex ids must be less than {vertices}"
            )
        largest = max(largest, *ids)
        if len(ids) == 1:
            continue
        node1, node2 = ids
        if node1 == node2:
            raise EdgeListError(f"Line {line_number}: self-loop at vertex {node1}")
        key = frozenset(ids)
        if key in seen:
            raise EdgeListError(
                f"Line {line_number}: duplicate edge between {node1} and {node2}"
            )
        seen.add(key)
        edges.append((node1, node2))

    graph = Graph(vertices if vertices is not None else largest + 1)
    for node1, node2 in edges:
        graph.add_edge(node1, node2)
    return graph


def read_edge_list(path: Union[Path, str], vertices: Optional[int] = None) -> Graph:
    """Read an edge list file, which may be compressed"""
    with xopen(path) as f:
        graph = parse_edge_list(f, vertices)
    logger.debug(
        "Read graph with %d vertices and %d edges from %s",
        graph.n,
        graph.count_edges(),
        path,
    )
    return graph
