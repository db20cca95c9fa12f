from brooks.graph import Graph

import pytest

from graphs import complete, cycle, make_graph


@pytest.fixture
def graph():
    #
    # (0) -- (1) -- (2)
    #  |    /  \
    #  |  /     \
    # (3)       (4)
    #
    # (5) -- (6)
    #
    return make_graph(7, [(0, 1), (1, 2), (0, 3), (3, 1), (1, 4), (5, 6)])


def test_edges(graph):
    assert sorted(graph.edges()) == [(0, 1), (0, 3), (1, 2), (1, 3), (1, 4), (5, 6)]
    assert graph.count_edges() == 6


def test_neighbors(graph):
    assert graph.neighbors(1) == [0, 2, 3, 4]
    assert graph.degree(1) == 4
    assert graph.max_degree() == 4


def test_has_edge(graph):
    assert graph.has_edge(0, 3)
    assert graph.has_edge(3, 0)
    assert not graph.has_edge(0, 2)


def test_connected_components(graph):
    components = graph.connected_components()
    assert len(components) == 2
    assert sorted(components[0]) == [0, 1, 2, 3, 4]
    assert sorted(components[1]) == [5, 6]
    assert not graph.is_connected()


def test_remove_vertex_is_soft(graph):
    graph.remove_vertex(1)
    assert not graph.is_active(1)
    assert graph.active_vertices() == [0, 2, 3, 4, 5, 6]
    # The other side still lists the removed vertex
    assert graph.neighbors(0) == [1, 3]
    assert graph.active_neighbors(0) == [3]
    assert sorted(graph.edges()) == [(0, 3), (5, 6)]


def test_max_degree_ignores_removed_vertices(graph):
    graph.remove_vertex(1)
    # Adjacency lists of active vertices still count the removed vertex
    assert graph.max_degree() == 2


def test_copy_is_independent(graph):
    copy = graph.copy()
    copy.add_edge(2, 4)
    assert not graph.has_edge(2, 4)
    assert sorted(copy.edges()) == sorted(list(graph.edges()) + [(2, 4)])


def test_copy_of_removed_vertex_is_empty(graph):
    graph.remove_vertex(6)
    copy = graph.copy()
    assert copy.is_active(6)
    assert copy.neighbors(6) == []
    assert copy.neighbors(5) == [6]


def test_induced_subgraph(graph):
    subgraph = graph.induced_subgraph([0, 1, 3])
    assert len(subgraph) == 7
    assert subgraph.active_vertices() == [0, 1, 3]
    assert sorted(subgraph.edges()) == [(0, 1), (0, 3), (1, 3)]
    assert subgraph.is_connected()
    assert subgraph.is_clique()


def test_is_connected():
    assert make_graph(4, [(0, 1), (1, 2), (2, 3)]).is_connected()
    assert not make_graph(4, [(0, 1), (2, 3)]).is_connected()
    assert Graph(1).is_connected()


def test_is_connected_skips_removed_vertices():
    graph = make_graph(4, [(0, 1), (1, 2), (2, 3)])
    graph.remove_vertex(0)
    assert graph.is_connected()
    graph.remove_vertex(2)
    assert not graph.is_connected()


def test_is_clique():
    assert complete(1).is_clique()
    assert complete(2).is_clique()
    assert complete(5).is_clique()
    assert not cycle(4).is_clique()
    assert not make_graph(3, [(0, 1), (1, 2)]).is_clique()


@pytest.mark.parametrize("n", [3, 5, 7, 11])
def test_is_odd_cycle(n):
    assert cycle(n).is_odd_cycle()


@pytest.mark.parametrize("n", [4, 6, 10])
def test_even_cycle_is_not_odd_cycle(n):
    assert not cycle(n).is_odd_cycle()


def test_odd_cycle_with_shuffled_labels():
    graph = make_graph(5, [(0, 3), (3, 1), (1, 4), (4, 2), (2, 0)])
    assert graph.is_odd_cycle()


def test_path_is_not_odd_cycle():
    assert not make_graph(4, [(0, 1), (1, 2), (2, 3)]).is_odd_cycle()


def test_triangle_with_pendant_is_not_odd_cycle():
    assert not make_graph(4, [(0, 1), (1, 2), (2, 0), (2, 3)]).is_odd_cycle()


def test_two_triangles_are_not_an_odd_cycle():
    graph = make_graph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert not graph.is_odd_cycle()
