import networkx as nx
import numpy as np
from loguru import logger

from disjoint_set.graph.graph_functions import (
    _lightest_edges,
    _test_edges,
    _test_graph
)
from disjoint_set.union_find import DisjointSet


def connected_components(g):
    """Returns the connected components of an undirected graph.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, list, etc.
        Any object that networkx can turn into a
        :any:`Graph<networkx.Graph>`. Directed graphs are treated as
        undirected.

    Returns
    -------
    list
        A list of :class:`frozensets<.frozenset>`, one per component.
        Components are ordered by the position of their first vertex
        in ``g.nodes()``.

    Raises
    ------
    TypeError
        Raised when ``g`` cannot be turned into a graph.

    Examples
    --------
    >>> import disjoint_set as ds
    >>> ds.connected_components({0: [1], 2: [3], 4: []})
    [frozenset({0, 1}), frozenset({2, 3}), frozenset({4})]
    """
    g = _test_graph(g)
    nodes = list(g.nodes())
    if len(nodes) == 0:
        return []

    index = {v: k for k, v in enumerate(nodes)}
    uf = DisjointSet(len(nodes))

    for u, v in g.edges():
        uf.union(index[u], index[v])

    groups = {}
    for k, v in enumerate(nodes):
        groups.setdefault(uf.find(k), []).append(v)

    logger.debug("Found {} components among {} vertices", uf.count(), len(nodes))
    return [frozenset(members) for members in groups.values()]


def component_labels(num_vertices, edges):
    """Labels every vertex with the root of its component.

    Parameters
    ----------
    num_vertices : int
        The number of vertices, labelled ``0`` through
        ``num_vertices - 1``.
    edges : iterable of pairs
        Undirected edges ``(u, v)``.

    Returns
    -------
    labels : :class:`~numpy.ndarray`
        An integer array where ``labels[i] == labels[j]`` if and only
        if ``i`` and ``j`` are connected.

    Raises
    ------
    InvalidSize
        Raised when ``num_vertices`` is not positive.
    IndexOutOfRange
        Raised when an edge has an endpoint outside
        ``[0, num_vertices)``.
    """
    uf = DisjointSet(num_vertices)
    for u, v in _test_edges(num_vertices, edges):
        uf.union(u, v)

    return np.array([uf.find(k) for k in range(num_vertices)], dtype=int)


def has_cycle(num_vertices, edges):
    """Returns ``True`` if the undirected graph given by ``edges``
    contains a cycle.

    A self-loop, or a repeated edge, counts as a cycle.

    Parameters
    ----------
    num_vertices : int
        The number of vertices, labelled ``0`` through
        ``num_vertices - 1``.
    edges : iterable of pairs
        Undirected edges ``(u, v)``.
    """
    uf = DisjointSet(num_vertices)
    for u, v in _test_edges(num_vertices, edges):
        if uf.connected(u, v):
            return True
        uf.union(u, v)

    return False


def minimum_spanning_edges(num_vertices, edges):
    """Finds a minimum spanning forest using Kruskal's algorithm.

    Edges are visited in order of increasing weight, and an edge is
    kept whenever its endpoints are in different components.

    Parameters
    ----------
    num_vertices : int
        The number of vertices, labelled ``0`` through
        ``num_vertices - 1``.
    edges : iterable of triples
        Undirected, weighted edges ``(u, v, weight)``.

    Returns
    -------
    list
        The ``(u, v, weight)`` triples in the forest, in the order they
        were added. If the graph is connected there are exactly
        ``num_vertices - 1`` of them.

    Raises
    ------
    InvalidSize
        Raised when ``num_vertices`` is not positive.
    IndexOutOfRange
        Raised when an edge has an endpoint outside
        ``[0, num_vertices)``.
    TypeError
        Raised when an edge is not a triple.
    """
    uf = DisjointSet(num_vertices)
    edges = _test_edges(num_vertices, edges, weighted=True)

    mytype = [('n1', int), ('n2', int), ('weight', float)]
    edges = np.array(edges, dtype=mytype)
    edges = np.sort(edges, order='weight', kind='stable')

    forest = []
    for n1, n2, weight in edges:
        if uf.connected(n1, n2):
            continue
        uf.union(n1, n2)
        forest.append((int(n1), int(n2), float(weight)))
        if uf.count() == 1:
            break

    logger.debug(
        "Kruskal kept {} of {} edges, {} components remain",
        len(forest), len(edges), uf.count()
    )
    return forest


def minimum_spanning_tree(g, weight='weight'):
    """Returns a minimum spanning forest of ``g`` as a new graph.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, list, etc.
        Any object that networkx can turn into a
        :any:`Graph<networkx.Graph>`. For a multigraph only the
        lightest of each set of parallel edges is considered.
    weight : str (optional, default: ``'weight'``)
        The edge attribute holding the edge weight. Edges without it
        have weight 1.

    Returns
    -------
    :any:`networkx.Graph`
        A graph with every vertex of ``g`` (and its attributes) and the
        edges of a minimum spanning forest (with their attributes).

    Raises
    ------
    TypeError
        Raised when ``g`` cannot be turned into a graph.
    """
    if isinstance(g, nx.Graph) and g.is_multigraph():
        g = _lightest_edges(g, weight)

    g = _test_graph(g)
    tree = nx.Graph()
    tree.add_nodes_from(g.nodes(data=True))

    nodes = list(g.nodes())
    if len(nodes) == 0:
        return tree

    index = {v: k for k, v in enumerate(nodes)}
    edges = [
        (index[u], index[v], d.get(weight, 1))
        for u, v, d in g.edges(data=True)
    ]

    for n1, n2, dummy in minimum_spanning_edges(len(nodes), edges):
        u, v = nodes[n1], nodes[n2]
        tree.add_edge(u, v, **g.edges[u, v])

    return tree
