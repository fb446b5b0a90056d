# compgraph/core/graph.py
from __future__ import annotations
import itertools
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..config import GraphConfig
from .handle import NodeHandle
from .node import Constant, Node, Sum, Variable
from .subgraph import Subgraph

_graph_ids = itertools.count(1)


class Graph:
    """
    Append-only store of nodes, addressed by NodeHandle.

    Nodes are never removed or replaced, so a handle stays valid for as long
    as the graph lives. A node may only reference handles that already exist,
    which keeps the graph acyclic and makes construction order a topological
    order.

    Parameters
    ----------
    check_handles : bool, optional
        Reject foreign or not-yet-existing handles on append/lookup.
        Defaults to GraphConfig.check_handles.
    """
    def __init__(self, check_handles: Optional[bool] = None):
        self._nodes: List[Node] = []
        self._id = next(_graph_ids)
        self.check_handles = GraphConfig.check_handles if check_handles is None else check_handles

    def __len__(self):
        return len(self._nodes)

    def __iter__(self) -> Iterator[Tuple[NodeHandle, Node]]:
        for i, node in enumerate(self._nodes):
            yield NodeHandle(i, self._id), node

    def __getitem__(self, handle: NodeHandle) -> Node:
        if self.check_handles:
            self.check_handle(handle)
        return self._nodes[handle.index]

    def append(self, node: Node) -> NodeHandle:
        """Append `node` at the next position and return its handle."""
        if not isinstance(node, Node):
            raise TypeError(f"Graph only stores Node instances, but got {type(node)}")
        if self.check_handles:
            for child in node.children:
                self.check_handle(child)
        self._nodes.append(node)
        return NodeHandle(len(self._nodes) - 1, self._id)

    def append_constant(self, c: float) -> NodeHandle:
        return self.append(Constant(float(c)))

    def append_variable(self, name: Optional[str] = None) -> NodeHandle:
        return self.append(Variable(name))

    def append_sum(self, children: Iterable[NodeHandle]) -> NodeHandle:
        return self.append(Sum(tuple(children)))

    def full_subgraph(self) -> Subgraph:
        """All current handles, in ascending order."""
        return Subgraph(NodeHandle(i, self._id) for i in range(len(self._nodes)))

    def check_handle(self, handle: NodeHandle):
        """Raise if `handle` is not an existing handle of this graph."""
        if not isinstance(handle, NodeHandle):
            raise TypeError(f"expected a NodeHandle, but got {type(handle)}")
        if handle.graph_id != self._id:
            raise ValueError(f"{handle!r} belongs to a different graph")
        if not 0 <= handle.index < len(self._nodes):
            raise IndexError(f"{handle!r} is out of range for a graph of {len(self._nodes)} nodes")

    # ---------------- engine shortcuts ---------------- #
    def evaluate_subgraph(self, subgraph: Subgraph,
                          bindings: Optional[Mapping[NodeHandle, float]] = None) -> Dict[NodeHandle, float]:
        from .engine import evaluate
        return evaluate(self, subgraph, bindings)

    def evaluate(self, bindings: Optional[Mapping[NodeHandle, float]] = None) -> Dict[NodeHandle, float]:
        """Evaluate every node of the graph."""
        return self.evaluate_subgraph(self.full_subgraph(), bindings)

    def derivative(self, of: NodeHandle, wrt: Iterable[NodeHandle],
                   verbose: bool = False) -> Tuple[NodeHandle, Subgraph]:
        from .engine import differentiate
        return differentiate(self, of, wrt, verbose=verbose)
