"""
One side of a graph around a cut vertex
"""
from typing import List, Set

from .graph import Graph


class Subgraph:
    """
    The part of a graph that is reachable from a cut vertex without entering
    the branches of the excluded neighbors.

    A branch of the cut vertex c is a connected component of the graph with c
    removed. The subgraph contains c, every branch that holds none of the
    excluded neighbors and all edges between these vertices. Vertex ids are
    those of the original graph; vertices outside the subgraph are removed
    from self.graph.
    """

    def __init__(self, original: Graph, cut_vertex: int, *excluded_neighbors: int):
        if not excluded_neighbors:
            raise ValueError("At least one neighbor to exclude is required")
        self._original = original
        self.cut_vertex = cut_vertex
        excluded = self._excluded_branches(excluded_neighbors)
        self.nodes: Set[int] = self._collect_nodes(excluded)
        self.graph: Graph = original.induced_subgraph(self.nodes)

    def _excluded_branches(self, excluded_neighbors) -> Set[int]:
        """Vertices reachable from the excluded neighbors without passing the cut vertex"""
        excluded = set(excluded_neighbors)
        to_visit = list(excluded)
        while to_visit:
            node = to_visit.pop()
            for neighbor in self._original.active_neighbors(node):
                if neighbor != self.cut_vertex and neighbor not in excluded:
                    excluded.add(neighbor)
                    to_visit.append(neighbor)
        return excluded

    def _collect_nodes(self, excluded: Set[int]) -> Set[int]:
        nodes = {self.cut_vertex}
        to_visit = [self.cut_vertex]
        while to_visit:
            node = to_visit.pop()
            for neighbor in self._original.active_neighbors(node):
                if neighbor not in nodes and neighbor not in excluded:
                    nodes.add(neighbor)
                    to_visit.append(neighbor)
        return nodes

    def contains_node(self, node: int) -> bool:
        return node in self.nodes

    def neighbors_of_cut_vertex(self) -> List[int]:
        return self.graph.neighbors(self.cut_vertex)
