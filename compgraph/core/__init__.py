# compgraph/core/__init__.py

"""
Core public API for the compgraph package.

Exports:
    NodeHandle    : Position of a node inside one Graph.
    Node          : Abstract node-kind contract (value + derivative).
    Constant      : A fixed scalar.
    Variable      : An external input bound at evaluation time.
    Sum           : Sum of child nodes.
    Graph         : Append-only node store.
    Subgraph      : Ascending, deduplicated set of handles.
    evaluate      : Forward pass computing node values.
    differentiate : Append derivative nodes for a target w.r.t. variables.
"""

from .handle import NodeHandle
from .node import Node, Constant, Variable, Sum
from .subgraph import Subgraph
from .graph import Graph
from .engine import evaluate, differentiate

__all__ = [
    "NodeHandle",
    "Node", "Constant", "Variable", "Sum",
    "Subgraph", "Graph",
    "evaluate", "differentiate",
]
