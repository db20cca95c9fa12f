"""
Articulation points (cut vertices) of a connected graph
"""
from typing import List, Optional

from .graph import Graph


class CutVertexFinder:
    """
    Tarjan's low-link DFS. A non-root vertex u is a cut vertex if some DFS tree
    child c has low[c] >= disc[u]; the root is a cut vertex if it has more
    than one DFS tree child.
    """

    def __init__(self, graph: Graph):
        self._graph = graph

    def cut_vertices(self) -> List[int]:
        """Return all cut vertices in increasing order"""
        graph = self._graph
        active = graph.active_vertices()
        if not active:
            return []
        root = active[0]
        disc = [-1] * graph.n
        low = [0] * graph.n
        is_cut_vertex = [False] * graph.n
        disc[root] = low[root] = 0
        time = 1
        root_children = 0

        stack = [(root, -1, iter(graph.active_neighbors(root)))]
        while stack:
            node, parent, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor == parent:
                    continue
                if disc[neighbor] == -1:
                    disc[neighbor] = low[neighbor] = time
                    time += 1
                    stack.append(
                        (neighbor, node, iter(graph.active_neighbors(neighbor)))
                    )
                    break
                # back edge
                low[node] = min(low[node], disc[neighbor])
            else:
                stack.pop()
                if parent == -1:
                    continue
                low[parent] = min(low[parent], low[node])
                if parent == root:
                    root_children += 1
                elif low[node] >= disc[parent]:
                    is_cut_vertex[parent] = True

        if root_children > 1:
            is_cut_vertex[root] = True
        return [node for node in range(graph.n) if is_cut_vertex[node]]

    def find_cut_vertex(self) -> Optional[int]:
        """Return the cut vertex with the smallest id or None if there is none"""
        cut_vertices = self.cut_vertices()
        return cut_vertices[0] if cut_vertices else None


def find_cut_vertex(graph: Graph) -> Optional[int]:
    return CutVertexFinder(graph).find_cut_vertex()
