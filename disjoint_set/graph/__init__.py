"""
.. autosummary::
    :nosignatures:

    component_labels
    connected_components
    has_cycle
    minimal_random_graph
    minimum_spanning_edges
    minimum_spanning_tree
"""

from disjoint_set.graph.connectivity import (
    component_labels,
    connected_components,
    has_cycle,
    minimum_spanning_edges,
    minimum_spanning_tree
)
from disjoint_set.graph.graph_generation import (
    minimal_random_graph
)

__all__ = [
    'component_labels',
    'connected_components',
    'has_cycle',
    'minimal_random_graph',
    'minimum_spanning_edges',
    'minimum_spanning_tree'
]
