import numbers

import networkx as nx

from disjoint_set.union_find import IndexOutOfRange


def _test_graph(g):
    """A function that makes sure ``g`` is an undirected, simple
    :any:`networkx.Graph`.

    Parameters
    ----------
    g : :any:`networkx.Graph`, :any:`networkx.DiGraph`, dict, list, etc.
        Any object that networkx can turn into a
        :any:`Graph<networkx.Graph>`.

    Returns
    -------
    :any:`networkx.Graph`

    Raises
    ------
    TypeError
        Raises a :exc:`~TypeError` if ``g`` cannot be turned into a
        :any:`networkx.Graph`.
    """
    if not isinstance(g, nx.Graph) or g.is_directed() or g.is_multigraph():
        try:
            g = nx.Graph(g)
        except (nx.NetworkXError, TypeError):
            raise TypeError("Couldn't turn graph into a Graph.")
    return g


def _test_edges(num_vertices, edges, weighted=False):
    """Checks an edge list against the vertex range ``[0, num_vertices)``.

    Returns the edges as a list of tuples. Raises
    :exc:`.IndexOutOfRange` for an endpoint outside the range and
    :exc:`~TypeError` for an edge of the wrong length.
    """
    width = 3 if weighted else 2
    checked = []

    for e in edges:
        e = tuple(e)
        if len(e) != width:
            msg = "Expected edges with {0} entries, got {1!r}."
            raise TypeError(msg.format(width, e))

        for v in e[:2]:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                msg = "Vertex ids must be integers, got {0!r}.".format(v)
                raise IndexOutOfRange(msg)
            if not 0 <= v < num_vertices:
                msg = "Vertex {0} is not in [0, {1}).".format(v, num_vertices)
                raise IndexOutOfRange(msg)

        checked.append(e)

    return checked


def _lightest_edges(g, weight='weight'):
    """Collapses a multigraph into a :any:`networkx.Graph` that keeps,
    for every pair of adjacent vertices, only the lightest parallel
    edge (and its attributes).

    Edges without the ``weight`` attribute have weight 1. Direction is
    ignored.
    """
    h = nx.Graph()
    h.add_nodes_from(g.nodes(data=True))

    for u, v, d in g.edges(data=True):
        if h.has_edge(u, v):
            if h.edges[u, v].get(weight, 1) <= d.get(weight, 1):
                continue
            h.remove_edge(u, v)
        h.add_edge(u, v, **d)

    return h
