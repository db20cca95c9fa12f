"""
Vertex coloring with at most max-degree colors, following the constructive
proof of Brooks' theorem.

A connected graph that is neither a complete graph nor an odd cycle can be
colored with max_degree colors. The graph is classified into one of the
following cases, each of which has its own way of finding a vertex order in
which greedy coloring stays within the bound:

- complete graphs and odd cycles are colored greedily in id order and need
  max_degree + 1 colors,
- graphs with maximum degree below 3 (paths and even cycles) are colored along
  a DFS preorder,
- if some vertex has a degree below the maximum, it becomes the root of a DFS
  spanning tree and the vertices are colored in post-order,
- otherwise the graph is regular. If it has a cut vertex, both sides of the
  cut vertex are colored separately and the colorings are merged,
- otherwise the graph is 2-connected and regular. Two non-adjacent neighbors
  y, z of a vertex x whose removal leaves the graph connected are both given
  color 0 and the rest is colored along a spanning tree rooted at x.
"""
import logging
from enum import Enum
from itertools import combinations
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

import numpy as np

from .cutvertex import find_cut_vertex
from .error import ColoringInvariantError, DisconnectedGraphError
from .graph import Graph
from .observer import ColoringObserver
from .ordering import NO_VERTEX, SpanningTreeOrdering, depth_first_preorder
from .subgraph import Subgraph

logger = logging.getLogger(__name__)

UNCOLORED = -1


class Strategy(Enum):
    CLIQUE = "The graph is a clique"
    ODD_CYCLE = "The graph is an odd cycle"
    SMALL_DEGREE = "The maximum degree is less than 3"
    SPANNING_TREE = "Coloring along a spanning tree rooted at a vertex of low degree"
    CUT_VERTEX = "Coloring both sides of a cut vertex"
    PAIR_REMOVAL = "Coloring after removing two non-adjacent neighbors of a vertex"


class ColoringResult(NamedTuple):
    colors: np.ndarray
    # Vertices in the order in which they received their final color
    order: List[int]
    strategy: Strategy

    @property
    def n_colors(self) -> int:
        return count_colors(self.colors)


def count_colors(colors: np.ndarray) -> int:
    """Return the largest assigned color plus one (0 if nothing is colored)"""
    assigned = colors[colors != UNCOLORED]
    if len(assigned) == 0:
        return 0
    return int(assigned.max()) + 1


def is_proper_coloring(graph: Graph, colors: np.ndarray) -> bool:
    """
    Return True if every active vertex is colored and no edge joins two
    vertices of the same color.
    """
    if any(colors[node] == UNCOLORED for node in graph.active_vertices()):
        return False
    return all(colors[node1] != colors[node2] for node1, node2 in graph.edges())


def classify(graph: Graph) -> Strategy:
    """Decide which coloring strategy applies to a connected graph"""
    if graph.is_clique():
        return Strategy.CLIQUE
    if graph.is_odd_cycle():
        return Strategy.ODD_CYCLE
    if graph.max_degree() < 3:
        return Strategy.SMALL_DEGREE
    if SpanningTreeOrdering(graph).root is not None:
        return Strategy.SPANNING_TREE
    if find_cut_vertex(graph) is not None:
        return Strategy.CUT_VERTEX
    return Strategy.PAIR_REMOVAL


def greedy_coloring(
    graph: Graph,
    order: List[int],
    max_degree: int,
    colors: Optional[np.ndarray] = None,
    observer: Optional[ColoringObserver] = None,
    message: str = "Coloring greedily",
    base: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Color the vertices in the given order, each with the smallest color in
    0..max_degree that none of its neighbors has.

    NO_VERTEX entries and vertices that already have a color are skipped.
    If base is given, the snapshots sent to the observer show its colors for
    the vertices that are uncolored in colors. base itself is not read for
    coloring decisions.
    """
    if colors is None:
        colors = np.full(graph.n, UNCOLORED, dtype=int)
    for node in order:
        if node == NO_VERTEX or colors[node] != UNCOLORED:
            continue
        used = {int(colors[neighbor]) for neighbor in graph.active_neighbors(node)}
        for color in range(max_degree + 1):
            if color not in used:
                break
        else:
            raise ColoringInvariantError(
                f"All colors 0..{max_degree} are used by the neighbors of vertex {node}"
            )
        colors[node] = color
        if observer is not None:
            if base is None:
                snapshot = colors.copy()
            else:
                snapshot = np.where(colors != UNCOLORED, colors, base)
            observer.on_color_assigned(
                snapshot, f"{message}: vertex {node} gets color {color}"
            )
    return colors


def reconcile(
    first: np.ndarray,
    second: np.ndarray,
    cut_vertex: int,
    observer: Optional[ColoringObserver] = None,
) -> np.ndarray:
    """
    Merge the colorings of the two sides of a cut vertex.

    The sides must not share any colored vertex except the cut vertex. The
    side with the smaller maximum color is shifted cyclically modulo
    (maximum color of the other side + 1) so that the cut vertex gets the
    same color on both sides. The shift is a permutation of the colors of the
    other side, so each side stays properly colored.
    """
    overlap = np.flatnonzero((first != UNCOLORED) & (second != UNCOLORED))
    if list(overlap) != [cut_vertex]:
        raise ColoringInvariantError(
            f"Sides of cut vertex {cut_vertex} overlap in vertices {list(overlap)}"
        )
    if first.max() <= second.max():
        lower, other = first, second
    else:
        lower, other = second, first
    shift = int(other[cut_vertex] - lower[cut_vertex])
    modulus = int(other.max()) + 1
    if shift:
        logger.debug(
            "Cut vertex %d has colors %d and %d, shifting colors by %d modulo %d",
            cut_vertex,
            lower[cut_vertex],
            other[cut_vertex],
            shift,
            modulus,
        )

    # Start from both sides so that no snapshot loses an assigned color
    merged = np.where(other != UNCOLORED, other, lower)
    for node in np.flatnonzero(lower != UNCOLORED):
        if node == cut_vertex:
            continue
        old_color = int(lower[node])
        color = (old_color + shift) % modulus
        merged[node] = color
        if observer is not None:
            observer.on_color_assigned(
                merged.copy(),
                f"Merging the sides of cut vertex {cut_vertex}: "
                f"vertex {node} changes color {old_color} to {color}",
            )
    return merged


def find_removable_pair(graph: Graph) -> Tuple[int, int, int]:
    """
    Find vertices x, y, z such that y and z are non-adjacent neighbors of x
    and the graph stays connected when y and z are removed.

    Such a triple exists in every 2-connected regular graph of degree at least
    3 that is not complete.
    """
    for x in graph.active_vertices():
        for y, z in combinations(graph.active_neighbors(x), 2):
            if graph.has_edge(y, z):
                continue
            reduced = graph.copy()
            reduced.remove_vertex(y)
            reduced.remove_vertex(z)
            if reduced.is_connected():
                return x, y, z
    raise ColoringInvariantError(
        "No vertex has two non-adjacent neighbors whose removal keeps the graph connected"
    )


class BrooksColoring:
    """
    Color a connected graph with at most max_degree colors, or max_degree + 1
    colors if it is a complete graph or an odd cycle.
    """

    def __init__(self, graph: Graph, observer: Optional[ColoringObserver] = None):
        self._graph = graph
        self._observer = observer if observer is not None else ColoringObserver()
        self._max_degree = graph.max_degree()

    def run(self) -> ColoringResult:
        if not self._graph.is_connected():
            raise DisconnectedGraphError(
                "Brooks coloring is only defined for connected graphs"
            )
        strategy = classify(self._graph)
        logger.debug(
            "Graph with %d vertices, %d edges and maximum degree %d: %s",
            self._graph.n,
            self._graph.count_edges(),
            self._max_degree,
            strategy.name,
        )
        color_functions: Dict[Strategy, Callable] = {
            Strategy.CLIQUE: self._color_in_id_order,
            Strategy.ODD_CYCLE: self._color_in_id_order,
            Strategy.SMALL_DEGREE: self._color_small_degree,
            Strategy.SPANNING_TREE: self._color_spanning_tree,
            Strategy.CUT_VERTEX: self._color_cut_vertex,
            Strategy.PAIR_REMOVAL: self._color_pair_removal,
        }
        colors, order = color_functions[strategy](strategy.value)
        if not is_proper_coloring(self._graph, colors):
            raise ColoringInvariantError(f"{strategy.name} produced an improper coloring")

        result = ColoringResult(colors=colors, order=order, strategy=strategy)
        self._observer.on_complete(result.n_colors)
        return result

    def _greedy(self, graph, order, message, colors=None, base=None):
        return greedy_coloring(
            graph, order, self._max_degree, colors, self._observer, message, base
        )

    def _color_in_id_order(self, message):
        order = self._graph.active_vertices()
        return self._greedy(self._graph, order, message), order

    def _color_small_degree(self, message):
        # Along a path or cycle, a preorder colors the vertices alternately
        order = depth_first_preorder(self._graph, self._graph.active_vertices()[0])
        return self._greedy(self._graph, order, message), order

    def _color_spanning_tree(self, message):
        ordering = SpanningTreeOrdering(self._graph)
        order = ordering.find_ordering()
        logger.debug("Spanning tree root: %d", ordering.root)
        colors = self._greedy(self._graph, order, message)
        return colors, [node for node in order if node != NO_VERTEX]

    def _color_side(self, side: Subgraph, message, base=None):
        order = SpanningTreeOrdering(side.graph, root=side.cut_vertex).find_ordering()
        colors = self._greedy(side.graph, order, message, base=base)
        return colors, [node for node in order if node != NO_VERTEX]

    def _color_cut_vertex(self, message):
        cut_vertex = find_cut_vertex(self._graph)
        neighbors = self._graph.active_neighbors(cut_vertex)
        first = Subgraph(self._graph, cut_vertex, neighbors[0])
        first_side = first.neighbors_of_cut_vertex()
        second_side = [node for node in neighbors if not first.contains_node(node)]
        if not first_side or not second_side:
            raise ColoringInvariantError(
                f"Vertex {cut_vertex} does not separate its neighbors {neighbors}"
            )
        second = Subgraph(self._graph, cut_vertex, *first_side)
        logger.debug(
            "Cut vertex %d splits the graph into %s and %s",
            cut_vertex,
            sorted(first.nodes),
            sorted(second.nodes),
        )

        first_colors, first_order = self._color_side(first, message + " (first side)")
        second_colors, second_order = self._color_side(
            second, message + " (second side)", base=first_colors
        )
        colors = reconcile(first_colors, second_colors, cut_vertex, self._observer)
        order = list(dict.fromkeys(first_order + second_order))
        return colors, order

    def _color_pair_removal(self, message):
        x, y, z = find_removable_pair(self._graph)
        logger.debug(
            "Vertices %d and %d are non-adjacent neighbors of %d; removing them "
            "keeps the graph connected",
            y,
            z,
            x,
        )
        reduced = self._graph.copy()
        reduced.remove_vertex(y)
        reduced.remove_vertex(z)
        order = SpanningTreeOrdering(reduced, root=x).find_ordering()

        colors = np.full(self._graph.n, UNCOLORED, dtype=int)
        for node in (y, z):
            colors[node] = 0
            self._observer.on_color_assigned(
                colors.copy(), f"{message}: vertex {node} gets color 0"
            )
        # Both removed neighbors share color 0, so x always has a free color
        colors = self._greedy(self._graph, order, message, colors)
        return colors, [y, z] + [node for node in order if node != NO_VERTEX]


def color_graph(
    graph: Graph, observer: Optional[ColoringObserver] = None
) -> ColoringResult:
    return BrooksColoring(graph, observer).run()
