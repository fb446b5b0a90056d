# compgraph/__init__.py
# Expression graphs with forward evaluation and symbolic differentiation

from .config import GraphConfig
from .core.handle import NodeHandle
from .core.node import Node, Constant, Variable, Sum
from .core.subgraph import Subgraph
from .core.graph import Graph
from .core.engine import evaluate, differentiate

# Extension kinds and builders
from . import ops
from .ops import Product, Power, Polynomial, Exp, Log

# Graph inspection
from .core.graph_utils import (
    get_graph_stats,
    print_graph_summary,
    print_computation_graph,
    analyze_graph_complexity,
    count_paths,
)

__all__ = [
    # Core
    'GraphConfig',
    'NodeHandle',
    'Node',
    'Constant',
    'Variable',
    'Sum',
    'Subgraph',
    'Graph',
    # Engine
    'evaluate',
    'differentiate',
    # Extension kinds
    'ops',
    'Product',
    'Power',
    'Polynomial',
    'Exp',
    'Log',
    # Inspection
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    'analyze_graph_complexity',
    'count_paths',
]
