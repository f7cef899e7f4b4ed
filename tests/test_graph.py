import networkx as nx
import numpy as np
import pytest
from loguru import logger

import disjoint_set as ds


@pytest.fixture(name="weighted_graph")
def fixture_weighted_graph():
    g = nx.gnm_random_graph(40, 120, seed=13)
    rng = np.random.RandomState(13)
    for u, v in g.edges():
        g.edges[u, v]['weight'] = float(np.round(rng.uniform(1, 100), 2))
    return g


@pytest.fixture(name="log_records")
def fixture_log_records():
    records = []
    logger.enable('disjoint_set')
    handler_id = logger.add(records.append, level='DEBUG', format='{message}')
    yield records
    logger.remove(handler_id)
    logger.disable('disjoint_set')


class TestConnectivity:
    @staticmethod
    def test_connected_components_matches_networkx():
        g = nx.gnp_random_graph(80, 0.02, seed=5)
        ans = ds.connected_components(g)
        expected = [frozenset(c) for c in nx.connected_components(g)]

        assert len(ans) == len(expected)
        assert set(ans) == set(expected)

    @staticmethod
    def test_connected_components_order_and_labels():
        adj = {'a': ['b'], 'c': ['d'], 'e': [], 'b': ['f']}
        ans = ds.connected_components(adj)
        assert ans == [
            frozenset({'a', 'b', 'f'}),
            frozenset({'c', 'd'}),
            frozenset({'e'})
        ]

    @staticmethod
    def test_connected_components_directed_and_empty():
        g = nx.DiGraph([(0, 1), (2, 1), (3, 4)])
        ans = ds.connected_components(g)
        assert ans == [frozenset({0, 1, 2}), frozenset({3, 4})]
        assert ds.connected_components(nx.Graph()) == []

    @staticmethod
    def test_connected_components_typeerror():
        with pytest.raises(TypeError):
            ds.connected_components(1)

    @staticmethod
    def test_component_labels():
        labels = ds.component_labels(6, [(0, 1), (1, 2), (4, 5)])
        assert isinstance(labels, np.ndarray)
        assert labels[0] == labels[1] == labels[2]
        assert labels[4] == labels[5]
        assert len(np.unique(labels)) == 3

        labels = ds.component_labels(3, [])
        assert np.array_equal(labels, np.arange(3))

    @staticmethod
    def test_has_cycle():
        path = [(k, k + 1) for k in range(9)]
        assert not ds.has_cycle(10, path)
        assert ds.has_cycle(10, path + [(9, 0)])
        assert ds.has_cycle(3, [(1, 1)])
        assert ds.has_cycle(3, [(0, 1), (1, 0)])
        assert not ds.has_cycle(1, [])

    @staticmethod
    def test_edge_errors():
        with pytest.raises(ds.IndexOutOfRange):
            ds.has_cycle(5, [(0, 5)])
        with pytest.raises(ds.IndexOutOfRange):
            ds.component_labels(5, [(-1, 2)])
        with pytest.raises(ds.IndexOutOfRange):
            ds.minimum_spanning_edges(5, [(0, 1.5, 2.0)])
        with pytest.raises(TypeError):
            ds.minimum_spanning_edges(5, [(0, 1)])
        with pytest.raises(ds.InvalidSize):
            ds.has_cycle(0, [])


class TestMinimumSpanningTree:
    @staticmethod
    def test_minimum_spanning_edges_matches_networkx(weighted_graph):
        g = weighted_graph
        edges = [(u, v, d['weight']) for u, v, d in g.edges(data=True)]
        forest = ds.minimum_spanning_edges(g.number_of_nodes(), edges)

        expected = nx.minimum_spanning_tree(g).size(weight='weight')
        ans = sum(w for u, v, w in forest)
        assert np.isclose(ans, expected)

        n_comp = nx.number_connected_components(g)
        assert len(forest) == g.number_of_nodes() - n_comp
        assert not ds.has_cycle(g.number_of_nodes(), [(u, v) for u, v, w in forest])

        weights = [w for u, v, w in forest]
        assert weights == sorted(weights)

    @staticmethod
    def test_minimum_spanning_edges_forest():
        edges = [(0, 1, 3.0), (1, 2, 1.0), (0, 2, 2.0), (3, 4, 5.0)]
        forest = ds.minimum_spanning_edges(6, edges)
        assert forest == [(1, 2, 1.0), (0, 2, 2.0), (3, 4, 5.0)]

    @staticmethod
    def test_minimum_spanning_tree(weighted_graph):
        g = weighted_graph
        nx.set_node_attributes(g, 'blue', 'color')
        tree = ds.minimum_spanning_tree(g)
        expected = nx.minimum_spanning_tree(g)

        assert np.isclose(tree.size(weight='weight'), expected.size(weight='weight'))
        assert set(tree.nodes()) == set(g.nodes())
        assert all(c == 'blue' for c in nx.get_node_attributes(tree, 'color').values())
        assert nx.is_forest(tree)

    @staticmethod
    def test_minimum_spanning_tree_default_weight():
        g = nx.cycle_graph(8)
        tree = ds.minimum_spanning_tree(g, weight='cost')
        assert tree.number_of_edges() == 7
        assert nx.is_tree(tree)
        assert ds.minimum_spanning_tree(nx.Graph()).number_of_nodes() == 0

    @staticmethod
    def test_minimum_spanning_tree_multigraph():
        g = nx.MultiGraph([
            (0, 1, {'weight': 5, 'name': 'heavy'}),
            (0, 1, {'weight': 1, 'name': 'light'}),
            (1, 2, {'weight': 2}),
            (0, 2, {'weight': 4}),
            (0, 2, {'weight': 9})
        ])
        tree = ds.minimum_spanning_tree(g)
        expected = nx.minimum_spanning_tree(g)

        assert tree.size(weight='weight') == 3
        assert np.isclose(tree.size(weight='weight'), expected.size(weight='weight'))
        assert tree.edges[0, 1]['name'] == 'light'
        assert set(map(frozenset, tree.edges())) == {frozenset({0, 1}), frozenset({1, 2})}

        h = nx.MultiDiGraph([(0, 1, {'weight': 7}), (1, 0, {'weight': 2})])
        assert ds.minimum_spanning_tree(h).size(weight='weight') == 2

    @staticmethod
    def test_kruskal_logs(log_records):
        ds.minimum_spanning_edges(3, [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 1.0)])
        messages = [str(r) for r in log_records]
        assert any('Kruskal kept 2 of 3 edges' in m for m in messages)


class TestGraphGeneration:
    @staticmethod
    def test_minimal_random_graph():
        n = np.random.randint(10, 40)
        g = ds.minimal_random_graph(n)

        assert g.number_of_nodes() == n
        assert nx.is_connected(g)
        pos = nx.get_node_attributes(g, 'pos')
        assert len(pos) == n

    @staticmethod
    def test_minimal_random_graph_seed():
        g1 = ds.minimal_random_graph(25, seed=10)
        g2 = ds.minimal_random_graph(25, seed=10)
        assert set(g1.edges()) == set(g2.edges())

    @staticmethod
    def test_minimal_random_graph_leaves_global_state():
        np.random.seed(21)
        expected = np.random.random(3)

        np.random.seed(21)
        ds.minimal_random_graph(15, seed=2)
        assert np.array_equal(np.random.random(3), expected)

    @staticmethod
    def test_minimal_random_graph_has_no_extra_arguments():
        with pytest.raises(TypeError):
            ds.minimal_random_graph(5, prob_loop=0.5)

    @staticmethod
    def test_minimal_random_graph_is_minimal():
        g = ds.minimal_random_graph(30, seed=4)
        pos = nx.get_node_attributes(g, 'pos')
        dist = {e: np.sum((pos[e[0]] - pos[e[1]])**2) for e in g.edges()}
        longest = max(dist, key=dist.get)
        g.remove_edge(*longest)
        assert not nx.is_connected(g)

    @staticmethod
    def test_minimal_random_graph_single_vertex():
        g = ds.minimal_random_graph(1)
        assert g.number_of_nodes() == 1
        assert g.number_of_edges() == 0

        with pytest.raises(ds.InvalidSize):
            ds.minimal_random_graph(0)
