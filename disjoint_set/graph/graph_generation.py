import networkx as nx
import numpy as np
from loguru import logger

from disjoint_set.union_find import DisjointSet


def minimal_random_graph(num_vertices, seed=None):
    """Creates a connected graph with random vertex locations.

    Vertices are scattered uniformly over the square ``[0, 10)^2``.
    Pairs of vertices are then joined in order of increasing distance,
    and joining stops as soon as a :class:`.DisjointSet` tracking the
    components reports a single group. The result holds every edge no
    longer than the shortest radius that makes the graph connected.

    Parameters
    ----------
    num_vertices : int
        The number of vertices in the graph.
    seed : int (optional)
        Seeds a private :class:`~numpy.random.RandomState`; numpy's
        global random state is left alone.

    Returns
    -------
    :any:`networkx.Graph`
        A connected graph with a ``pos`` vertex attribute for each
        vertex's position.

    Raises
    ------
    InvalidSize
        Raised when ``num_vertices`` is not a positive integer.
    """
    components = DisjointSet(num_vertices)
    rng = np.random.RandomState(seed)
    points = rng.uniform(0, 10, size=(num_vertices, 2))

    rows, cols = np.triu_indices(num_vertices, k=1)
    dist2 = np.sum((points[rows] - points[cols])**2, axis=1)
    order = np.argsort(dist2, kind='stable')

    g = nx.Graph()
    g.add_nodes_from(range(num_vertices))

    for k in order:
        if components.count() == 1:
            break
        u, v = int(rows[k]), int(cols[k])
        components.union(u, v)
        g.add_edge(u, v)

    nx.set_node_attributes(g, dict(enumerate(points)), 'pos')
    logger.debug(
        "Generated a connected graph with {} vertices and {} edges",
        g.number_of_nodes(), g.number_of_edges()
    )
    return g
