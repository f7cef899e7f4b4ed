from importlib.metadata import version

from loguru import logger

from disjoint_set.union_find import (
    DisjointSet,
    DisjointSetError,
    IndexOutOfRange,
    InvalidSize
)

from disjoint_set.graph import *
import disjoint_set.graph as graph

__version__ = version(__package__ or __name__)

__all__ = [
    '__version__',
    'DisjointSet',
    'DisjointSetError',
    'IndexOutOfRange',
    'InvalidSize'
]
__all__.extend(graph.__all__)

logger.disable(__name__)
