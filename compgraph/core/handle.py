# compgraph/core/handle.py
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class NodeHandle:
    """
    Position of a node inside one Graph.

    Attributes
    ----------
    index : int
        Position in the graph's node list (construction order).
    graph_id : int
        Identity of the Graph that produced the handle. Not part of equality,
        ordering or hashing; only read by the graph's optional handle check.

    Handles are created by `Graph.append`. Using a handle with a different
    graph than the one that produced it is a caller error.
    """
    index: int
    graph_id: int = field(default=0, compare=False, repr=False)

    def __repr__(self):
        return f"NodeHandle({self.index})"

    # Construction sugar: returns an unattached node, append it to a graph.
    def __add__(self, other):
        if not isinstance(other, NodeHandle):
            return NotImplemented
        from .node import Sum
        return Sum((self, other))

    def __mul__(self, other):
        if not isinstance(other, NodeHandle):
            return NotImplemented
        from ..ops.arithmetic import Product
        return Product((self, other))
