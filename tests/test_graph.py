import pytest

from structlab.graph import AdjacencyList, AdjacencyMatrix, main

SAMPLE_EDGES = [(1, 2), (1, 3), (1, 4), (2, 4), (2, 5), (3, 6), (5, 7)]


@pytest.fixture
def sample() -> AdjacencyList:
    graph = AdjacencyList()
    for source, target in SAMPLE_EDGES:
        graph.insert_edge(source, target)
    return graph


def test_matrix_grows_to_largest_vertex():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(0, 4)
    assert len(matrix) == 5
    matrix.insert_edge(1, 2)
    assert len(matrix) == 5


def test_matrix_edges_are_symmetric():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(3, 1)
    assert matrix.has_edge(3, 1)
    assert matrix.has_edge(1, 3)
    assert not matrix.has_edge(0, 1)


def test_matrix_delete_edge():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(0, 2)
    matrix.delete_edge(2, 0)
    assert not matrix.has_edge(0, 2)
    assert not matrix.has_edge(2, 0)
    assert len(matrix) == 3


def test_matrix_has_edge_outside_is_false():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(0, 1)
    assert matrix.has_edge(5, 0) is False


def test_matrix_delete_outside_raises():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(0, 1)
    with pytest.raises(IndexError):
        matrix.delete_edge(0, 9)


def test_matrix_negative_vertex_raises():
    matrix = AdjacencyMatrix()
    with pytest.raises(IndexError):
        matrix.insert_edge(-1, 2)


def test_matrix_render():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(0, 1)
    assert matrix.render() == "   0 1 \n   - - \n0| 0 1 \n1| 1 0 \n"


def test_matrix_render_has_row_per_vertex():
    matrix = AdjacencyMatrix()
    matrix.insert_edge(2, 3)
    lines = matrix.render().splitlines()
    assert len(lines) == len(matrix) + 2
    assert lines[5].split()[1:] == ["0", "0", "1", "0"]


def test_list_neighbours_sorted():
    graph = AdjacencyList()
    graph.insert_edge(1, 3)
    graph.insert_edge(1, 2)
    assert graph.neighbours(1) == [2, 3]
    assert graph.neighbours(3) == [1]


def test_list_unknown_vertex_has_no_neighbours():
    assert AdjacencyList().neighbours(42) == []


def test_list_delete_edge_keeps_vertices(sample):
    sample.delete_edge(3, 6)
    assert 6 not in sample.neighbours(3)
    assert sample.neighbours(6) == []
    assert "6: \n" in sample.render()


def test_list_delete_missing_edge_is_harmless(sample):
    before = sample.render()
    sample.delete_edge(100, 200)
    assert sample.render() == before


def test_list_delete_vertex(sample):
    sample.delete_vertex(2)
    for vertex in (1, 4, 5):
        assert 2 not in sample.neighbours(vertex)
    assert not any(line.startswith("2:") for line in sample.render().splitlines())


def test_list_render_matches_neighbours(sample):
    lines = sample.render().splitlines()
    assert len(lines) == 7
    for line in lines:
        head, _, tail = line.partition(": ")
        assert [int(n) for n in tail.split()] == sample.neighbours(int(head))


def test_bfs_sample(sample):
    assert sample.bfs(1) == [1, 2, 3, 4, 5, 6, 7]


def test_dfs_sample(sample):
    assert sample.dfs(1) == [1, 4, 3, 6, 2, 5, 7]


def test_traversals_visit_component_once(sample):
    sample.insert_edge(10, 11)
    for order in (sample.bfs(1), sample.dfs(1)):
        assert sorted(order) == [1, 2, 3, 4, 5, 6, 7]
    assert sorted(sample.dfs(10)) == [10, 11]


def test_traversal_from_isolated_start():
    graph = AdjacencyList()
    assert graph.bfs(5) == [5]
    assert graph.dfs(5) == [5]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Adjacency List:"
    assert sorted(int(v) for v in lines[1].split()) == [1, 2, 3, 4, 5, 6, 7]