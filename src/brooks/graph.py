from typing import Iterable, List, Optional


class Graph:
    """
    Simple undirected graph over the vertices 0..n-1.

    Removing a vertex only clears its own adjacency list (the vertex is
    "tombstoned"). Other vertices keep listing it, so every traversal must
    check is_active() before looking at the adjacency list of a neighbor.
    """

    def __init__(self, n: int):
        # None marks a removed vertex
        self._adjacency: List[Optional[List[int]]] = [[] for _ in range(n)]

    def __len__(self):
        return len(self._adjacency)

    def __repr__(self):
        return f"Graph(n={len(self)}, edges={list(self.edges())!r})"

    @property
    def n(self) -> int:
        return len(self._adjacency)

    def add_edge(self, node1: int, node2: int):
        # Duplicates are not detected
        self._adjacency[node1].append(node2)
        self._adjacency[node2].append(node1)

    def remove_vertex(self, node: int):
        self._adjacency[node] = None

    def is_active(self, node: int) -> bool:
        return self._adjacency[node] is not None

    def active_vertices(self) -> List[int]:
        """Return all vertices that have not been removed"""
        return [node for node in range(self.n) if self._adjacency[node] is not None]

    def copy(self) -> "Graph":
        graph = Graph(0)
        graph._adjacency = [
            list(neighbors) if neighbors is not None else []
            for neighbors in self._adjacency
        ]
        return graph

    def has_edge(self, node1: int, node2: int) -> bool:
        return node2 in self._adjacency[node1]

    def neighbors(self, node: int) -> List[int]:
        """
        Return the adjacency list of a vertex, which may still list removed
        vertices. The vertex itself must not have been removed.
        """
        return self._adjacency[node]

    def active_neighbors(self, node: int) -> List[int]:
        """Return the neighbors of a vertex that have not been removed"""
        return [
            neighbor
            for neighbor in self._adjacency[node]
            if self._adjacency[neighbor] is not None
        ]

    def degree(self, node: int) -> int:
        return len(self._adjacency[node])

    def max_degree(self) -> int:
        return max(
            (len(neighbors) for neighbors in self._adjacency if neighbors is not None),
            default=0,
        )

    def edges(self):
        """Yield all edges between active vertices as pairs (node1, node2)"""
        for node1 in self.active_vertices():
            for node2 in self.active_neighbors(node1):
                if node1 < node2:
                    yield node1, node2

    def count_edges(self) -> int:
        """Return number of edges"""
        return sum(1 for _ in self.edges())

    def induced_subgraph(self, nodes: Iterable[int]) -> "Graph":
        """
        Return the subgraph induced by the given vertices. Vertex ids are kept;
        all other vertices are removed from the returned graph.
        """
        nodes_set = set(nodes)
        subgraph = Graph(0)
        subgraph._adjacency = [
            [neighbor for neighbor in self._adjacency[node] if neighbor in nodes_set]
            if node in nodes_set and self._adjacency[node] is not None
            else None
            for node in range(self.n)
        ]
        return subgraph

    def _reachable(self, start: int) -> List[int]:
        """Return active vertices reachable from start, in the order found"""
        visited = {start}
        found = []
        to_visit = [start]
        while to_visit:
            node = to_visit.pop()
            found.append(node)
            for neighbor in self.active_neighbors(node):
                if neighbor not in visited:
                    visited.add(neighbor)
                    to_visit.append(neighbor)
        return found

    def connected_components(self) -> List[List[int]]:
        """Return a list of connected components (lists of vertices)."""
        visited = set()
        components = []
        for node in self.active_vertices():
            if node in visited:
                continue
            component = self._reachable(node)
            visited.update(component)
            components.append(component)
        return components

    def is_connected(self) -> bool:
        active = self.active_vertices()
        if not active:
            return True
        return len(self._reachable(active[0])) == len(active)

    def is_clique(self) -> bool:
        active = self.active_vertices()
        return all(len(self.active_neighbors(node)) == len(active) - 1 for node in active)

    def is_odd_cycle(self) -> bool:
        """
        Return True if the graph is a single cycle of odd length.

        Vertices are given levels along a spanning tree. An edge that joins two
        vertices whose levels have the same parity closes an odd cycle.
        """
        active = self.active_vertices()
        if not active or self.max_degree() != 2:
            return False
        if any(len(self.active_neighbors(node)) != 2 for node in active):
            return False
        levels = {active[0]: 0}
        to_visit = [active[0]]
        while to_visit:
            node = to_visit.pop()
            for neighbor in self.active_neighbors(node):
                if neighbor not in levels:
                    levels[neighbor] = levels[node] + 1
                    to_visit.append(neighbor)
        if len(levels) != len(active):
            return False
        return any(
            (levels[node1] - levels[node2]) % 2 == 0 for node1, node2 in self.edges()
        )
