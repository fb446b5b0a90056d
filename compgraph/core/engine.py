# compgraph/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..config import GraphConfig
from .handle import NodeHandle
from .subgraph import Subgraph


def _as_scalar(handle: NodeHandle, v) -> float:
    """Coerce a bound value to the configured scalar type; reject tensors."""
    if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, float, np.number, np.ndarray)):
        raise TypeError(
            f"bindings only accept numeric scalars, but got {type(v)} for {handle!r}"
        )
    if np.ndim(v) != 0:
        raise TypeError(f"bindings only accept scalars, but got shape {np.shape(v)} for {handle!r}")
    return GraphConfig.dtype(v)


def evaluate(graph, subgraph: Subgraph,
             bindings: Optional[Mapping[NodeHandle, float]] = None) -> Dict[NodeHandle, float]:
    """
    Forward pass over `subgraph`.

    Args:
        graph: the Graph holding the nodes.
        subgraph: handles to compute, in ascending (topological) order.
        bindings: initial values, typically for Variable nodes. Copied, not
                  mutated.

    Returns:
        dict handle -> value holding the bindings plus every subgraph handle.
        A computed value replaces a binding for the same handle.

    Notes:
        Each node reads only the values of earlier handles, so one pass in
        ascending order computes every node exactly once.
    """
    values: Dict[NodeHandle, float] = {
        h: _as_scalar(h, v) for h, v in (bindings or {}).items()
    }
    for handle in subgraph:
        values[handle] = GraphConfig.dtype(graph[handle].value(handle, values))
    return values


def differentiate(graph, of: NodeHandle, wrt: Iterable[NodeHandle],
                  verbose: bool = False) -> Tuple[NodeHandle, Subgraph]:
    """
    Append the derivative of every node in `graph` w.r.t. the handles in `wrt`.

    Args:
        graph: the Graph to extend; one derivative node per existing node is
               appended to it.
        of: the handle whose derivative is wanted.
        wrt: variable handles to differentiate with respect to (summed).
        verbose: print a one-line report of the pass.

    Returns:
        (derivative handle of `of`, Subgraph of all appended nodes)

    Notes:
        - Nodes are visited in ascending order, so a node's children already
          have derivative handles when its own rule runs. Shared children are
          differentiated once and reused by every parent.
        - Every node is differentiated, not only the ancestors of `of`.
        - Derivative nodes of some kinds read values of original nodes: to
          evaluate the returned subgraph, pass the original values as
          bindings (or evaluate the whole graph again).
    """
    wrt = frozenset(wrt)
    if graph.check_handles:
        # reject bad handles before anything is appended
        graph.check_handle(of)
        for h in wrt:
            graph.check_handle(h)
    derivatives: Dict[NodeHandle, NodeHandle] = {}

    # snapshot: the loop appends to the graph it walks
    original = list(graph)
    n_original = len(original)
    for old, node in original:
        derivatives[old] = graph.append(node.derivative(old, wrt, derivatives))

    if verbose:
        print(f"[differentiate] {n_original} derivative nodes appended "
              f"(graph now {len(graph)} nodes, wrt={sorted(h.index for h in wrt)})")

    return derivatives[of], Subgraph(derivatives.values())
