# compgraph/ops/transcendental.py
import numpy as np
from dataclasses import dataclass

from ..core.handle import NodeHandle
from ..core.node import Node
from .arithmetic import Polynomial, Power, _as_handle


@dataclass(frozen=True)
class Exp(Node):
    child: NodeHandle
    op_tag = "exp"

    @property
    def children(self):
        return (self.child,)

    def value(self, my_handle, values):
        return np.exp(values[self.child])

    def derivative(self, my_handle, wrt, derivatives):
        # d e^x = e^x * dx, reusing this node's own value
        return Polynomial(((1.0, ((my_handle, 1.0), (derivatives[self.child], 1.0))),))


@dataclass(frozen=True)
class Log(Node):
    child: NodeHandle
    op_tag = "log"

    @property
    def children(self):
        return (self.child,)

    def value(self, my_handle, values):
        return np.log(values[self.child])

    def derivative(self, my_handle, wrt, derivatives):
        return Polynomial(((1.0, ((self.child, -1.0), (derivatives[self.child], 1.0))),))


def exp(graph, x) -> NodeHandle:
    return graph.append(Exp(_as_handle(graph, x)))


def log(graph, x) -> NodeHandle:
    return graph.append(Log(_as_handle(graph, x)))


def sqrt(graph, x) -> NodeHandle:
    return graph.append(Power(_as_handle(graph, x), 0.5))
