# compgraph/core/node.py
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import AbstractSet, Mapping, Optional, Tuple

import numpy as np

from .handle import NodeHandle


class Node(ABC):
    """
    Contract shared by every node kind stored in a Graph.

    Subclasses implement `value` and `derivative`; both are pure. The graph
    never inspects a node beyond this interface, so new kinds can be added
    without touching Graph or the engine.

    Attributes
    ----------
    op_tag : str
        Short name of the kind (e.g., "sum", "const"), used in summaries.
    children : Tuple[NodeHandle, ...]
        Handles whose values this node reads. Every child must already exist
        in the graph when the node is appended.
    """
    op_tag = "node"
    children: Tuple[NodeHandle, ...] = ()

    @abstractmethod
    def value(self, my_handle: NodeHandle, values: Mapping[NodeHandle, float]) -> float:
        """
        Compute this node's value. `values` must already hold every child
        (and, for a Variable, the node's own handle).
        """

    @abstractmethod
    def derivative(self,
                   my_handle: NodeHandle,
                   wrt: AbstractSet[NodeHandle],
                   derivatives: Mapping[NodeHandle, NodeHandle]) -> "Node":
        """
        Return a new, unattached node for d(self)/d(wrt).

        `derivatives` maps every handle below `my_handle` to the handle of its
        derivative node. The returned node may reference those derivative
        handles and any original handle up to `my_handle`.

        A node that references original handles (product rule, chain rule)
        reads their values when evaluated, so the derivative subgraph can no
        longer be evaluated on its own with empty bindings: pass the values
        of the original graph as bindings, or evaluate the whole graph.
        """


@dataclass(frozen=True)
class Constant(Node):
    c: float
    op_tag = "const"

    def value(self, my_handle, values):
        return np.float64(self.c)

    def derivative(self, my_handle, wrt, derivatives):
        return Constant(0.0)


@dataclass(frozen=True)
class Variable(Node):
    """An external input; its value comes from the bindings."""
    name: Optional[str] = field(default=None, compare=False)
    op_tag = "var"

    def value(self, my_handle, values):
        try:
            return values[my_handle]
        except KeyError:
            label = f" {self.name!r}" if self.name else ""
            raise KeyError(f"Variable{label} at {my_handle!r} has no bound value") from None

    def derivative(self, my_handle, wrt, derivatives):
        return Constant(1.0) if my_handle in wrt else Constant(0.0)


@dataclass(frozen=True)
class Sum(Node):
    children: Tuple[NodeHandle, ...]
    op_tag = "sum"

    def __post_init__(self):
        # accept any iterable of handles
        object.__setattr__(self, "children", tuple(self.children))

    def value(self, my_handle, values):
        return np.float64(np.sum([values[c] for c in self.children]))

    def derivative(self, my_handle, wrt, derivatives):
        return Sum(tuple(derivatives[c] for c in self.children))
