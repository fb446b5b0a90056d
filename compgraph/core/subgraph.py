# compgraph/core/subgraph.py
from __future__ import annotations
from typing import Iterable, Iterator, Tuple

from .handle import NodeHandle


class Subgraph:
    """
    Ordered set of handles relevant to one computation.

    Handles are deduplicated and sorted ascending on construction. Since a
    node only references earlier handles, ascending order places every child
    before its parents.
    """
    __slots__ = ("handles",)

    def __init__(self, handles: Iterable[NodeHandle] = ()):
        self.handles: Tuple[NodeHandle, ...] = tuple(sorted(set(handles)))

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(self.handles)

    def __len__(self):
        return len(self.handles)

    def __contains__(self, handle):
        return handle in self.handles

    def __eq__(self, other):
        if not isinstance(other, Subgraph):
            return NotImplemented
        return self.handles == other.handles

    def __hash__(self):
        return hash(self.handles)

    def __repr__(self):
        return f"Subgraph({[h.index for h in self.handles]})"
