"""
Vertex orderings derived from a DFS spanning tree
"""
import logging
from typing import List, Optional

from .graph import Graph

logger = logging.getLogger(__name__)

# Marks a position in an ordering that does not hold a vertex
NO_VERTEX = -1


class SpanningTreeOrdering:
    """
    DFS spanning tree of a graph together with its post-order.

    In the post-order, every vertex comes before its parent in the tree. When
    the vertices are colored in this order, the parent of a vertex is still
    uncolored, so at most max_degree - 1 neighbors of a non-root vertex
    already carry a color.

    If no root is given, the first active vertex with a degree smaller than
    the maximum degree is used. If there is no such vertex (the graph is
    regular), root is None and find_ordering() returns None.
    """

    def __init__(self, graph: Graph, root: Optional[int] = None):
        self._graph = graph
        self.root = root if root is not None else self._find_low_degree_vertex()
        self.tree = Graph(graph.n)
        self.parents = [NO_VERTEX] * graph.n

    def _find_low_degree_vertex(self) -> Optional[int]:
        max_degree = self._graph.max_degree()
        for node in self._graph.active_vertices():
            if self._graph.degree(node) < max_degree:
                return node
        return None

    def find_ordering(self) -> Optional[List[int]]:
        """
        Return the DFS post-order starting at the root as a list of length n.

        Removed vertices that the search runs into are recorded as NO_VERTEX
        and not explored further. Unused positions at the end are NO_VERTEX.
        """
        if self.root is None:
            return None
        graph = self._graph
        self.tree = Graph(graph.n)
        self.parents = [NO_VERTEX] * graph.n
        order = []
        visited = [False] * graph.n
        visited[self.root] = True
        if not graph.is_active(self.root):
            order.append(NO_VERTEX)
            stack = []
        else:
            stack = [(self.root, iter(graph.neighbors(self.root)))]
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if visited[neighbor]:
                    continue
                visited[neighbor] = True
                if not graph.is_active(neighbor):
                    order.append(NO_VERTEX)
                    continue
                self.tree.add_edge(node, neighbor)
                self.parents[neighbor] = node
                stack.append((neighbor, iter(graph.neighbors(neighbor))))
                break
            else:
                stack.pop()
                order.append(node)
        order.extend([NO_VERTEX] * (graph.n - len(order)))
        logger.debug("Spanning tree ordering from root %s: %s", self.root, order)
        return order


def depth_first_preorder(graph: Graph, root: int) -> List[int]:
    """Return the active vertices reachable from root in DFS preorder"""
    order = [root]
    visited = {root}
    stack = [iter(graph.active_neighbors(root))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.active_neighbors(neighbor)))
                break
        else:
            stack.pop()
    return order
