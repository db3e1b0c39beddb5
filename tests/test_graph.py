import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.graph import Graph, bfs_matrix, dfs_matrix

SAMPLE_MATRIX = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]

SAMPLE_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5)]


def _sample_graph():
    graph = Graph(6)
    for src, dest in SAMPLE_EDGES:
        graph.add_edge(src, dest)
    return graph


@st.composite
def graph_specs(draw):
    n = draw(st.integers(min_value=1, max_value=8))
    vertex = st.integers(min_value=0, max_value=n - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex), max_size=20))
    start = draw(vertex)
    return n, edges, start


def _assert_component_order(graph, start, order):
    assert order[0] == start
    assert len(order) == len(set(order))
    seen = set(order)
    for position, vertex in enumerate(order[1:], start=1):
        assert set(graph.neighbors(vertex)) & set(order[:position])
    for vertex in order:
        assert set(graph.neighbors(vertex)) <= seen


def test_sample_graph_bfs():
    assert _sample_graph().bfs(0) == [0, 2, 1, 4, 3, 5]


def test_sample_graph_dfs():
    assert _sample_graph().dfs(0) == [0, 2, 4, 5, 3, 1]


def test_sample_matrix_bfs():
    assert bfs_matrix(SAMPLE_MATRIX, 1) == [1, 0, 2, 3, 4, 5, 6]


def test_sample_matrix_dfs_covers_component():
    order = dfs_matrix(SAMPLE_MATRIX, 4)
    assert order[0] == 4
    assert sorted(order) == list(range(7))
    for position, vertex in enumerate(order[1:], start=1):
        assert any(SAMPLE_MATRIX[vertex][earlier] for earlier in order[:position])


def test_neighbors_most_recent_first():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.neighbors(0) == [2, 1]
    assert graph.neighbors(1) == [0]
    assert graph.neighbors(2) == [0]


def test_isolated_vertex_traversal():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.bfs(2) == [2]
    assert graph.dfs(2) == [2]


def test_num_vertices():
    assert Graph(5).num_vertices == 5


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_add_edge_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).add_edge(0, 2)


def test_traversal_start_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.bfs(5)
    with pytest.raises(IndexError):
        graph.dfs(-1)


def test_neighbors_out_of_range():
    with pytest.raises(IndexError):
        Graph(1).neighbors(1)


def test_matrix_not_square():
    with pytest.raises(ValueError):
        bfs_matrix([[0, 1], [1]], 0)
    with pytest.raises(ValueError):
        dfs_matrix([[0, 1, 0], [1, 0, 0]], 0)


def test_matrix_start_out_of_range():
    with pytest.raises(IndexError):
        bfs_matrix(SAMPLE_MATRIX, 7)


@given(graph_specs())
def test_bfs_is_connected_component(spec):
    n, edges, start = spec
    graph = Graph(n)
    for src, dest in edges:
        graph.add_edge(src, dest)
    _assert_component_order(graph, start, graph.bfs(start))


@given(graph_specs())
def test_dfs_is_connected_component(spec):
    n, edges, start = spec
    graph = Graph(n)
    for src, dest in edges:
        graph.add_edge(src, dest)
    _assert_component_order(graph, start, graph.dfs(start))


@given(graph_specs())
def test_bfs_and_dfs_reach_same_vertices(spec):
    n, edges, start = spec
    graph = Graph(n)
    for src, dest in edges:
        graph.add_edge(src, dest)
    assert sorted(graph.bfs(start)) == sorted(graph.dfs(start))


@given(
    st.integers(min_value=1, max_value=7).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.sets(
                st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)).filter(
                    lambda e: e[0] < e[1]
                )
            ),
            st.integers(0, n - 1),
        )
    )
)
def test_matrix_traversals_match_graph_with_ascending_neighbors(case):
    n, edges, start = case
    matrix = [[0] * n for _ in range(n)]
    for i, j in edges:
        matrix[i][j] = matrix[j][i] = 1
    graph = Graph(n)
    # Prepending in reverse order leaves every adjacency list ascending.
    for i, j in sorted(edges, reverse=True):
        graph.add_edge(i, j)
    for vertex in range(n):
        assert graph.neighbors(vertex) == sorted(graph.neighbors(vertex))
    assert bfs_matrix(matrix, start) == graph.bfs(start)
    assert dfs_matrix(matrix, start) == graph.dfs(start)